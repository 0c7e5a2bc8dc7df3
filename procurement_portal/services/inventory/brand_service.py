"""
Brand Service
Query building for brand list views.
"""

from typing import Optional
from procurement_portal.data.inventory.brand import Brand


class BrandService:
    """Read-side helpers for brands"""

    @staticmethod
    def build_filtered_query(search: Optional[str] = None, status: Optional[str] = None):
        """
        Build a filtered brand query, ordered by name ascending.

        Args:
            search: substring the brand name must contain
            status: exact status code (A/I)
        """
        query = Brand.query

        if search:
            query = query.filter(Brand.name.contains(search, autoescape=True))

        if status:
            query = query.filter(Brand.status == status)

        return query.order_by(Brand.name.asc())
