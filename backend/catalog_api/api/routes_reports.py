from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from catalog_api.api.deps import require_central_admin
from catalog_api.db import get_db
from catalog_api.services.report_service import ReportService

router = APIRouter(prefix="/api", tags=["reports"])


@router.get(
    "/consolidated-orders",
    summary="Ordered quantity per product code and distributor",
    dependencies=[Depends(require_central_admin)],
)
def consolidated_orders(db: Session = Depends(get_db)):
    return ReportService(db).consolidated_orders()
