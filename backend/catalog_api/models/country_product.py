from sqlalchemy import Column, ForeignKey, Integer, Numeric
from catalog_api.db import Base

class CountryProduct(Base):
    """Price of one product within one country."""

    __tablename__ = "Country_Product"

    id = Column("CountryProductID", Integer, primary_key=True, autoincrement=True)
    country_id = Column("CountryID", Integer, ForeignKey("Country.CountryID"), nullable=False, index=True)
    product_id = Column("ProductID", Integer, ForeignKey("Product.ProductID"), nullable=False, index=True)
    price = Column("Price", Numeric(12, 2), nullable=False)
