from sqlalchemy import Column, ForeignKey, Integer, String
from catalog_api.db import Base

class Category(Base):
    __tablename__ = "Category"

    id = Column("CategoryID", Integer, primary_key=True, autoincrement=True)
    name = Column("CategoryName", String(255), nullable=False)


class SubCategory(Base):
    __tablename__ = "SubCategory"

    id = Column("SubCategoryID", Integer, primary_key=True, autoincrement=True)
    name = Column("SubCategoryName", String(255), nullable=False)
    category_id = Column("CategoryID", Integer, ForeignKey("Category.CategoryID"), nullable=False, index=True)
