from sqlalchemy import Column, ForeignKey, Integer, String, Text
from catalog_api.db import Base

class Product(Base):
    __tablename__ = "Product"

    id = Column("ProductID", Integer, primary_key=True, autoincrement=True)
    brand_id = Column("BrandID", Integer, ForeignKey("Brand.BrandID"), nullable=False, index=True)
    category_id = Column("CategoryID", Integer, ForeignKey("Category.CategoryID"), nullable=False, index=True)
    subcategory_id = Column(
        "SubCategoryID", Integer, ForeignKey("SubCategory.SubCategoryID"), nullable=False, index=True
    )
    item_code = Column("ItemCode", String(64), nullable=False, index=True)
    part_code = Column("PartCode", String(64), nullable=True)
    description = Column("ProductDescription", Text, nullable=False)
    warranty = Column("Warranty", String(64), nullable=True)
    moq = Column("MOQ", Integer, nullable=False)

    def __repr__(self):
        return f"<Product item_code={self.item_code}>"
