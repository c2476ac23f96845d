"""
Modelos del catálogo de productos
"""
from sqlalchemy import Column, Integer, SmallInteger, String, DECIMAL, ForeignKey
from sqlalchemy.orm import relationship
from bikestore.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    category_id = Column(Integer, primary_key=True)
    category_name = Column(String(255), nullable=False)

    products = relationship("Product", back_populates="category")


class Brand(Base):
    __tablename__ = "brands"

    brand_id = Column(Integer, primary_key=True)
    brand_name = Column(String(255), nullable=False)

    products = relationship("Product", back_populates="brand")


class Product(Base):
    """
    Productos (bicicletas y accesorios)
    """
    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True)
    product_name = Column(String(255), nullable=False)

    # Clasificación
    brand_id = Column(Integer, ForeignKey("brands.brand_id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.category_id"), nullable=False, index=True)

    model_year = Column(SmallInteger, nullable=False)
    list_price = Column(DECIMAL(10, 2), nullable=False)

    # Relationships
    brand = relationship("Brand", back_populates="products")
    category = relationship("Category", back_populates="products")
    order_items = relationship("OrderItem", back_populates="product")
    stocks = relationship("Stock", back_populates="product")
