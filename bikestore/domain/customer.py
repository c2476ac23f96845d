"""
Customer Domain Models

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict


class CustomerContact(BaseModel):
    """Customer name and email"""

    first_name: str = Field(..., description="Customer first name")
    last_name: str = Field(..., description="Customer last name")
    email: str = Field(..., description="Customer email")

    model_config = ConfigDict(from_attributes=True)


class CustomerOrderCount(BaseModel):
    """Customer full name with the number of orders placed (0 if none)"""

    customer_id: int = Field(..., description="Customer ID")
    full_name: str = Field(..., description="First and last name")
    order_count: int = Field(0, description="Number of orders placed", ge=0)

    model_config = ConfigDict(from_attributes=True)
