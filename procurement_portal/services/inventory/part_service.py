"""
Part Service
Query building for part list views.
"""

from typing import Optional
from sqlalchemy import or_
from sqlalchemy.orm import selectinload
from procurement_portal.data.inventory.part import Part


class PartService:

    @staticmethod
    def build_filtered_query(search: Optional[str] = None, category: Optional[str] = None):
        """Parts with models and stock loaded, ordered by part number"""
        query = Part.query.options(selectinload(Part.models), selectinload(Part.stock))

        if search:
            query = query.filter(or_(
                Part.part_no.contains(search, autoescape=True),
                Part.description.contains(search, autoescape=True),
            ))

        if category:
            query = query.filter(Part.category == category)

        return query.order_by(Part.part_no.asc())
