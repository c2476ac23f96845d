"""
Staff Domain Models

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class StaffContact(BaseModel):
    """Active staff member with phone number"""

    first_name: str = Field(..., description="Staff first name")
    last_name: str = Field(..., description="Staff last name")
    phone: Optional[str] = Field(None, description="Phone number")

    model_config = ConfigDict(from_attributes=True)


class StaffOrderCount(BaseModel):
    """Staff full name with the number of orders processed (0 if none)"""

    staff_id: int = Field(..., description="Staff ID")
    full_name: str = Field(..., description="First and last name")
    order_count: int = Field(0, description="Number of orders processed", ge=0)

    model_config = ConfigDict(from_attributes=True)
