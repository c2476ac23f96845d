"""
Product Repository - Data Access Layer for Products

Handles all product queries and returns Product domain models.

Author: TM3
Date: 2025-10-17
"""
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bikestore.domain.product import (
    ProductClassification,
    ProductOrderCount,
    ProductQuantitySold,
    ProductSummary,
)
from bikestore.models import Brand, Category, OrderItem, Product, Stock


class ProductRepository:
    """
    Repository for Product data access

    All product queries are centralized here. Lists are ordered by
    product ID; "first product" means the lowest product ID.
    """

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def _map_row_to_summary(row) -> ProductSummary:
        """Map a (product_id, product_name) row or a Product entity to ProductSummary"""
        return ProductSummary(product_id=row.product_id, product_name=row.product_name)

    def _find_summaries(self, *conditions) -> List[ProductSummary]:
        stmt = (
            select(Product.product_id, Product.product_name)
            .where(*conditions)
            .order_by(Product.product_id)
        )
        return [self._map_row_to_summary(row) for row in self.session.execute(stmt)]

    def find_by_id(self, product_id: int) -> Optional[ProductSummary]:
        """
        Find product by ID

        Args:
            product_id: Product ID

        Returns:
            ProductSummary or None if not found
        """
        product = self.session.get(Product, product_id)
        if product is None:
            return None

        return self._map_row_to_summary(product)

    def find_first(self) -> Optional[ProductSummary]:
        """
        Find the product with the lowest ID

        Returns:
            ProductSummary or None if the table is empty
        """
        stmt = (
            select(Product.product_id, Product.product_name)
            .order_by(Product.product_id)
            .limit(1)
        )
        row = self.session.execute(stmt).first()
        if row is None:
            return None

        return self._map_row_to_summary(row)

    def find_by_category_name(self, category_name: str) -> List[ProductSummary]:
        """
        Find products whose category name matches exactly

        Args:
            category_name: Category name (e.g. "Mountain Bikes")
        """
        return self._find_summaries(
            Product.category.has(Category.category_name == category_name)
        )

    def find_by_model_year(self, model_year: int) -> List[ProductSummary]:
        """Find products of a model year"""
        return self._find_summaries(Product.model_year == model_year)

    def find_never_ordered(self) -> List[ProductSummary]:
        """
        Find products not referenced by any order item (anti-join)
        """
        return self._find_summaries(~Product.order_items.any())

    def find_low_stock(self, threshold: int = 5) -> List[ProductSummary]:
        """
        Find products with a known stock quantity below threshold in any store

        NULL quantities are unknown and never count as low stock. Each product
        appears once no matter how many stores match.

        Args:
            threshold: Exclusive upper bound on quantity
        """
        return self._find_summaries(
            Product.stocks.any(
                Stock.quantity.is_not(None) & (Stock.quantity < threshold)
            )
        )

    def find_ordered_in_quantity_over(self, quantity: int = 3) -> List[ProductSummary]:
        """
        Find products ordered with more than `quantity` units on any order item

        Args:
            quantity: Exclusive lower bound on order item quantity
        """
        return self._find_summaries(
            Product.order_items.any(OrderItem.quantity > quantity)
        )

    def count_by_category(self, category_id: int) -> int:
        """
        Count products in a category

        Args:
            category_id: Category ID

        Returns:
            Number of products (0 if none)
        """
        stmt = (
            select(func.count(Product.product_id))
            .where(Product.category_id == category_id)
        )
        return self.session.scalar(stmt) or 0

    def average_list_price(self) -> Optional[Decimal]:
        """
        Average list price over all products

        Returns:
            Decimal average or None if there are no products
        """
        value = self.session.scalar(select(func.avg(Product.list_price)))
        if value is None:
            return None

        # PostgreSQL returns Decimal, SQLite returns float
        return Decimal(str(value))

    def order_counts(self) -> List[ProductOrderCount]:
        """
        Count order items per product, including products never ordered
        """
        stmt = (
            select(
                Product.product_id,
                Product.product_name,
                func.count(OrderItem.item_id).label("times_ordered"),
            )
            .outerjoin(Product.order_items)
            .group_by(Product.product_id, Product.product_name)
            .order_by(Product.product_id)
        )
        return [ProductOrderCount(**row._mapping) for row in self.session.execute(stmt)]

    def quantity_sold(self) -> List[ProductQuantitySold]:
        """
        Sum order item quantities per product

        Products never ordered report 0, never NULL.
        """
        stmt = (
            select(
                Product.product_id,
                Product.product_name,
                func.coalesce(func.sum(OrderItem.quantity), 0).label("total_sold"),
            )
            .outerjoin(Product.order_items)
            .group_by(Product.product_id, Product.product_name)
            .order_by(Product.product_id)
        )
        return [ProductQuantitySold(**row._mapping) for row in self.session.execute(stmt)]

    def find_with_brand_and_category(self) -> List[ProductClassification]:
        """
        List products with brand name and category name
        """
        stmt = (
            select(
                Product.product_id,
                Product.product_name,
                Brand.brand_name,
                Category.category_name,
            )
            .join(Product.brand)
            .join(Product.category)
            .order_by(Product.product_id)
        )
        return [ProductClassification(**row._mapping) for row in self.session.execute(stmt)]
