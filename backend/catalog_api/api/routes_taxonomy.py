from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from catalog_api.api.deps import admin_write_guard
from catalog_api.db import get_db
from catalog_api.repositories.catalogue_repo import (
    BrandRepository,
    CategoryRepository,
    SubCategoryRepository,
)
from catalog_api.schemas.catalogue_schema import BrandIn, CategoryIn, SubCategoryIn
from catalog_api.utils.serialization import row_to_dict

router = APIRouter(prefix="/api", tags=["taxonomy"])


@router.get("/brands", summary="List brands")
def list_brands(db: Session = Depends(get_db)):
    return [row_to_dict(b) for b in BrandRepository(db).list_all()]


@router.post("/brands", status_code=201, dependencies=[Depends(admin_write_guard)])
def create_brand(payload: BrandIn, db: Session = Depends(get_db)):
    payload.require("BrandName", message="Brand name is required")
    b = BrandRepository(db).create(name=payload.BrandName)
    return {"message": "Brand added successfully", "brandId": b.id}


@router.get("/categories", summary="List categories")
def list_categories(db: Session = Depends(get_db)):
    return [row_to_dict(c) for c in CategoryRepository(db).list_all()]


@router.post("/categories", status_code=201, dependencies=[Depends(admin_write_guard)])
def create_category(payload: CategoryIn, db: Session = Depends(get_db)):
    payload.require("CategoryName", message="Category name is required")
    c = CategoryRepository(db).create(name=payload.CategoryName)
    return {"message": "Category added successfully", "categoryId": c.id}


@router.get("/subcategories", summary="List subcategories")
def list_subcategories(db: Session = Depends(get_db)):
    return [row_to_dict(s) for s in SubCategoryRepository(db).list_all()]


@router.post("/subcategories", status_code=201, dependencies=[Depends(admin_write_guard)])
def create_subcategory(payload: SubCategoryIn, db: Session = Depends(get_db)):
    payload.require(
        "SubCategoryName", "CategoryID", message="Subcategory name and CategoryID are required"
    )
    s = SubCategoryRepository(db).create(name=payload.SubCategoryName, category_id=payload.CategoryID)
    return {"message": "Subcategory added successfully", "subcategoryId": s.id}
