from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from catalog_api.db import get_db
from catalog_api.errors import NotFoundError
from catalog_api.repositories.account_repo import DistributorRepository

router = APIRouter(prefix="/api/distributors", tags=["distributors"])


@router.get("/{distributor_id}", summary="Distributor name and country")
def get_distributor(distributor_id: int, db: Session = Depends(get_db)):
    d = DistributorRepository(db).get(distributor_id)
    if not d:
        raise NotFoundError("Distributor not found")
    return {"DistributorName": d.name, "CountryName": d.country_name}
