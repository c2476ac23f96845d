"""
Product Domain Models

Represents product rows returned by the product reports.
ProductSummary is the base shape (id + name); the other models add the
aggregate or the joined names each report needs.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict


class ProductSummary(BaseModel):
    """
    Product identity and name

    Fields:
        product_id: Product ID (primary key)
        product_name: Product name
    """

    product_id: int = Field(..., description="Product ID")
    product_name: str = Field(..., description="Product name")

    model_config = ConfigDict(from_attributes=True)


class ProductOrderCount(ProductSummary):
    """Product with the number of order items referencing it"""

    times_ordered: int = Field(0, description="Number of order items", ge=0)


class ProductQuantitySold(ProductSummary):
    """Product with total quantity sold across all order items (0 if never ordered)"""

    total_sold: int = Field(0, description="Sum of order item quantities (returns may make it negative)")


class ProductClassification(ProductSummary):
    """Product with its brand and category names"""

    brand_name: str = Field(..., description="Brand name")
    category_name: str = Field(..., description="Category name")
