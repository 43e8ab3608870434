from typing import Dict, Iterable

from sqlalchemy.orm import Session

from catalog_api.repositories.report_repo import ReportRepository
from catalog_api.utils.serialization import to_number


def consolidate(rows: Iterable) -> Dict[str, Dict]:
    """
    Reshape (product_code, product_description, distributor_name, total_ordered)
    rows into {code: {"description": ..., "totals": {distributor: qty}}}.
    """
    out: Dict[str, Dict] = {}
    for row in rows:
        entry = out.get(row.product_code)
        if entry is None:
            entry = out[row.product_code] = {
                "description": row.product_description,
                "totals": {},
            }
        entry["totals"][row.distributor_name] = to_number(row.total_ordered)
    return out


class ReportService:
    def __init__(self, db: Session):
        self.repo = ReportRepository(db)

    def consolidated_orders(self) -> Dict[str, Dict]:
        return consolidate(self.repo.order_totals())
