from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from catalog_api.api.deps import admin_write_guard
from catalog_api.db import get_db
from catalog_api.errors import NotFoundError
from catalog_api.repositories.catalogue_repo import ProductRepository
from catalog_api.schemas.catalogue_schema import ProductIn
from catalog_api.utils.serialization import row_to_dict

router = APIRouter(prefix="/api/products", tags=["catalogue"])


@router.get("", summary="List products")
def list_products(db: Session = Depends(get_db)):
    return [row_to_dict(p) for p in ProductRepository(db).list_all()]


@router.post("", status_code=201, summary="Add a product", dependencies=[Depends(admin_write_guard)])
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    p = ProductRepository(db).create(**payload.validated().columns())
    return {"message": "Product added successfully", "productId": p.id}


@router.put("/{product_id}", summary="Update a product", dependencies=[Depends(admin_write_guard)])
def update_product(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    if not ProductRepository(db).update(product_id, payload.validated().columns()):
        raise NotFoundError("Product not found")
    return {"message": "Product updated successfully"}


@router.delete("/{product_id}", summary="Delete a product", dependencies=[Depends(admin_write_guard)])
def delete_product(product_id: int, db: Session = Depends(get_db)):
    if not ProductRepository(db).delete(product_id):
        raise NotFoundError("Product not found")
    return {"message": "Product deleted successfully"}
