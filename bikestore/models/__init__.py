"""
Modelos de base de datos
"""
from .customer import Customer
from .store import Store, Staff, Stock
from .order import Order, OrderItem
from .product import Product, Category, Brand

__all__ = [
    "Customer",
    "Store",
    "Staff",
    "Stock",
    "Order",
    "OrderItem",
    "Product",
    "Category",
    "Brand",
]
