"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from the report catalog.

Author: TM3
Date: 2025-10-17
"""
from bikestore.repositories.customer_repository import CustomerRepository
from bikestore.repositories.staff_repository import StaffRepository
from bikestore.repositories.order_repository import OrderRepository
from bikestore.repositories.product_repository import ProductRepository

__all__ = [
    'CustomerRepository',
    'StaffRepository',
    'OrderRepository',
    'ProductRepository'
]
