"""
Modelos de tiendas, personal y stock
"""
from sqlalchemy import Column, Integer, SmallInteger, String, ForeignKey
from sqlalchemy.orm import relationship
from bikestore.core.database import Base


# Encoding of staffs.active
ACTIVE = 1
INACTIVE = 0


class Store(Base):
    """
    Tiendas físicas
    """
    __tablename__ = "stores"

    store_id = Column(Integer, primary_key=True)
    store_name = Column(String(255))

    # Relationships
    orders = relationship("Order", back_populates="store")
    stocks = relationship("Stock", back_populates="store")


class Staff(Base):
    """
    Personal de ventas que procesa órdenes
    """
    __tablename__ = "staffs"

    staff_id = Column(Integer, primary_key=True)

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    phone = Column(String(25))
    active = Column(SmallInteger, nullable=False, default=ACTIVE)

    # Relationships
    orders = relationship("Order", back_populates="staff")

    @property
    def is_active(self) -> bool:
        return self.active == ACTIVE


class Stock(Base):
    """
    Stock de un producto en una tienda (quantity NULL = desconocido)
    """
    __tablename__ = "stocks"

    store_id = Column(Integer, ForeignKey("stores.store_id"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), primary_key=True)
    quantity = Column(Integer, nullable=True)

    # Relationships
    store = relationship("Store", back_populates="stocks")
    product = relationship("Product", back_populates="stocks")
