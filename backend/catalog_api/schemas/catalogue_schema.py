from decimal import Decimal
from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from catalog_api.errors import ValidationError


class Payload(BaseModel):
    # fields are optional here so absent values produce our own 400 message
    model_config = ConfigDict(coerce_numbers_to_str=True)

    def require(self, *fields: str, message: str = "Missing required fields"):
        """Raise ValidationError if any field is absent, null, empty or zero."""
        if any(not getattr(self, f) for f in fields):
            raise ValidationError(message)
        return self


class ProductIn(Payload):
    BrandID: Optional[int] = None
    CategoryID: Optional[int] = None
    SubCategoryID: Optional[int] = None
    ItemCode: Optional[str] = None
    PartCode: Optional[str] = None
    ProductDescription: Optional[str] = None
    Warranty: Optional[str] = None
    MOQ: Optional[int] = None

    REQUIRED: ClassVar[Tuple[str, ...]] = ("BrandID", "CategoryID", "SubCategoryID", "ItemCode", "ProductDescription", "MOQ")

    def validated(self) -> "ProductIn":
        return self.require(*self.REQUIRED)

    def columns(self) -> dict:
        return {
            "brand_id": self.BrandID,
            "category_id": self.CategoryID,
            "subcategory_id": self.SubCategoryID,
            "item_code": self.ItemCode,
            "part_code": self.PartCode,
            "description": self.ProductDescription,
            "warranty": self.Warranty,
            "moq": self.MOQ,
        }


class BrandIn(Payload):
    BrandName: Optional[str] = None


class CategoryIn(Payload):
    CategoryName: Optional[str] = None


class SubCategoryIn(Payload):
    SubCategoryName: Optional[str] = None
    CategoryID: Optional[int] = None


class CountryProductIn(Payload):
    CountryID: Optional[int] = None
    ProductID: Optional[int] = None
    Price: Optional[Decimal] = None
