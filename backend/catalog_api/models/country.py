from sqlalchemy import Column, Integer, String
from catalog_api.db import Base

class Country(Base):
    __tablename__ = "Country"

    id = Column("CountryID", Integer, primary_key=True, autoincrement=True)
    name = Column("CountryName", String(255), nullable=False, index=True)
