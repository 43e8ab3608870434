from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from catalog_api.db import Base


# Legacy ordering schema used only by the consolidated-orders report. It is
# separate from the Product/Distributor catalogue tables above.
class LegacyOrder(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, autoincrement=True)
    distributor_name = Column(String(255), nullable=False, index=True)

    lines = relationship(
        "LegacyOrderLine", back_populates="order", cascade="all, delete-orphan"
    )


class LegacyOrderLine(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    code = Column(String(64), nullable=False, index=True)
    description = Column(Text, nullable=True)
    quantity_ordered = Column(Integer, nullable=False, default=0)

    order = relationship("LegacyOrder", back_populates="lines")
