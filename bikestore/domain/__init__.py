"""
Domain Layer - Report Rows

This layer contains Pydantic models for the rows each report returns.
Repositories build these from query results; the report catalog and the
API render them.

Author: TM3
Date: 2025-10-17
"""
from bikestore.domain.customer import CustomerContact, CustomerOrderCount
from bikestore.domain.staff import StaffContact, StaffOrderCount
from bikestore.domain.order import OrderStatus, OrderSummary, StoreOrderCount
from bikestore.domain.product import (
    ProductSummary,
    ProductOrderCount,
    ProductQuantitySold,
    ProductClassification,
)

__all__ = [
    'CustomerContact',
    'CustomerOrderCount',
    'StaffContact',
    'StaffOrderCount',
    'OrderStatus',
    'OrderSummary',
    'StoreOrderCount',
    'ProductSummary',
    'ProductOrderCount',
    'ProductQuantitySold',
    'ProductClassification',
]
