from sqlalchemy import Column, DateTime, Integer, String
from catalog_api.db import Base

class UserSession(Base):
    """Server-side session row for the database session backend."""

    __tablename__ = "user_sessions"
    token = Column(String(128), primary_key=True)
    user_id = Column(Integer, nullable=False)
    user_role = Column(String(32), nullable=False)  # central-admin, distributor
    distributor_name = Column(String(255), nullable=True)
    country_name = Column(String(255), nullable=True)
    expires_at = Column(DateTime, nullable=False, index=True)
