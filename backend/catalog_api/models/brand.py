from sqlalchemy import Column, Integer, String
from catalog_api.db import Base

class Brand(Base):
    __tablename__ = "Brand"

    id = Column("BrandID", Integer, primary_key=True, autoincrement=True)
    name = Column("BrandName", String(255), nullable=False)
