"""
Modelos relacionados con órdenes/pedidos
"""
from sqlalchemy import Column, Integer, SmallInteger, Date, DECIMAL, ForeignKey
from sqlalchemy.orm import relationship
from bikestore.core.database import Base


class Order(Base):
    """
    Tabla principal de órdenes
    """
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True)

    # Relaciones
    customer_id = Column(Integer, ForeignKey("customers.customer_id"), index=True)
    staff_id = Column(Integer, ForeignKey("staffs.staff_id"), nullable=False, index=True)
    store_id = Column(Integer, ForeignKey("stores.store_id"), nullable=False, index=True)

    # Estado (código entero, ver domain.order.OrderStatus)
    order_status = Column(SmallInteger, nullable=False, index=True)

    # Fechas
    order_date = Column(Date)
    shipped_date = Column(Date)

    # Relationships
    customer = relationship("Customer", back_populates="orders")
    staff = relationship("Staff", back_populates="orders")
    store = relationship("Store", back_populates="orders")
    items = relationship("OrderItem", back_populates="order")


class OrderItem(Base):
    """
    Items/productos de cada orden
    """
    __tablename__ = "order_items"

    order_id = Column(Integer, ForeignKey("orders.order_id"), primary_key=True)
    item_id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False, index=True)

    # Cantidades
    quantity = Column(Integer, nullable=False)
    list_price = Column(DECIMAL(10, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")
    product = relationship("Product", back_populates="order_items")
