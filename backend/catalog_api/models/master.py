from sqlalchemy import Column, Integer, String
from catalog_api.db import Base

class Master(Base):
    """Central admin account."""

    __tablename__ = "Master"

    id = Column("MasterID", Integer, primary_key=True, autoincrement=True)
    email = Column("EmailID", String(255), unique=True, nullable=False, index=True)
    password = Column("Password", String(255), nullable=False)

    def __repr__(self):
        return f"<Master email={self.email}>"
