"""
Order Domain Models

Represents order rows returned by the order reports.

Author: TM3
Date: 2025-10-17
"""
from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class OrderStatus(IntEnum):
    """
    Known values of orders.order_status

    Only the completed code is known; other codes are reported as raw integers.
    """
    COMPLETED = 5


class OrderSummary(BaseModel):
    """
    Order row with optional customer name

    Fields:
        order_id: Order ID
        order_status: Raw status code
        customer_first_name: Customer first name (None if no customer is linked)
        customer_last_name: Customer last name (None if no customer is linked)
    """

    order_id: int = Field(..., description="Order ID")
    order_status: int = Field(..., description="Order status code")
    customer_first_name: Optional[str] = Field(None, description="Customer first name")
    customer_last_name: Optional[str] = Field(None, description="Customer last name")

    model_config = ConfigDict(from_attributes=True)

    @property
    def customer_name(self) -> str:
        """Customer full name, missing parts rendered as empty"""
        return f"{self.customer_first_name or ''} {self.customer_last_name or ''}"

    @property
    def is_completed(self) -> bool:
        return self.order_status == OrderStatus.COMPLETED


class StoreOrderCount(BaseModel):
    """Number of orders placed at a store"""

    store_id: int = Field(..., description="Store ID")
    order_count: int = Field(..., description="Number of orders", ge=1)

    model_config = ConfigDict(from_attributes=True)
