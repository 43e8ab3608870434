import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from catalog_api.api.deps import admin_write_guard
from catalog_api.db import get_db
from catalog_api.errors import ValidationError
from catalog_api.repositories.catalogue_repo import CountryProductRepository, CountryRepository
from catalog_api.schemas.catalogue_schema import CountryProductIn
from catalog_api.utils.serialization import row_to_dict

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["countries"])


@router.get("/countries", summary="List countries")
def list_countries(db: Session = Depends(get_db)):
    countries = CountryRepository(db).list_all()
    log.debug("Fetched %d countries", len(countries))
    return [row_to_dict(c) for c in countries]


@router.get("/country-products", summary="List per-country prices")
def list_country_products(db: Session = Depends(get_db)):
    return [row_to_dict(cp) for cp in CountryProductRepository(db).list_all()]


@router.post("/country-products", status_code=201, dependencies=[Depends(admin_write_guard)])
def create_country_product(payload: CountryProductIn, db: Session = Depends(get_db)):
    payload.require("CountryID", "ProductID", "Price")
    cp = CountryProductRepository(db).create(
        country_id=payload.CountryID, product_id=payload.ProductID, price=payload.Price
    )
    return {"message": "Country-Product record added successfully", "countryProductId": cp.id}


@router.get("/products-by-country", summary="Products priced in a country")
def products_by_country(
    countryName: Optional[str] = Query(None, description="country name, exact match"),
    db: Session = Depends(get_db),
):
    if not countryName:
        raise ValidationError("Country name is required")
    return CountryProductRepository(db).products_for_country(countryName)
