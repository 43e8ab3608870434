from typing import List

from sqlalchemy import func

from catalog_api.models.legacy_order import LegacyOrder, LegacyOrderLine
from catalog_api.repositories.base_repo import TableRepository


class ReportRepository(TableRepository):
    model = LegacyOrderLine
    fetch_error = "Database error"

    def order_totals(self) -> List:
        """
        One row per (product code, distributor): product_code, product_description,
        distributor_name, total_ordered. Ordered by code then distributor.
        """
        with self.guarded(self.fetch_error):
            return (
                self.db.query(
                    LegacyOrderLine.code.label("product_code"),
                    LegacyOrderLine.description.label("product_description"),
                    LegacyOrder.distributor_name.label("distributor_name"),
                    func.sum(LegacyOrderLine.quantity_ordered).label("total_ordered"),
                )
                .join(LegacyOrder, LegacyOrderLine.order_id == LegacyOrder.id)
                .group_by(
                    LegacyOrderLine.code,
                    LegacyOrderLine.description,
                    LegacyOrder.distributor_name,
                )
                .order_by(LegacyOrderLine.code, LegacyOrder.distributor_name)
                .all()
            )
