from sqlalchemy import Column, Integer, String
from catalog_api.db import Base

class Distributor(Base):
    __tablename__ = "Distributor"

    id = Column("DistributorID", Integer, primary_key=True, autoincrement=True)
    name = Column("DistributorName", String(255), nullable=False)
    email = Column("Email", String(255), unique=True, nullable=False, index=True)
    password = Column("Password", String(255), nullable=False)  # bcrypt hash
    country_name = Column("CountryName", String(255), nullable=False)

    def __repr__(self):
        return f"<Distributor email={self.email} country={self.country_name}>"
