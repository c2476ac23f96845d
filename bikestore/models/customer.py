"""
Modelo de clientes
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from bikestore.core.database import Base


class Customer(Base):
    """
    Clientes de la tienda
    """
    __tablename__ = "customers"

    customer_id = Column(Integer, primary_key=True)

    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)

    # Relationships
    orders = relationship("Order", back_populates="customer")
