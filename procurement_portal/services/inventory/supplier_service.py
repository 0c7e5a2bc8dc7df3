from typing import Optional
from procurement_portal.data.inventory.supplier import Supplier


class SupplierService:

    @staticmethod
    def build_filtered_query(search: Optional[str] = None):
        query = Supplier.query
        if search:
            query = query.filter(Supplier.name.contains(search, autoescape=True))
        return query.order_by(Supplier.name.asc())
