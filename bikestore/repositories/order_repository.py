"""
Order Repository - Data Access Layer for Orders

Handles all order queries and returns Order domain models.
Customer names come from a LEFT JOIN so orders without a customer are kept.

Author: TM3
Date: 2025-10-17
"""
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bikestore.domain.order import OrderStatus, OrderSummary, StoreOrderCount
from bikestore.models import Customer, Order


class OrderRepository:
    """
    Repository for Order data access

    All order queries are centralized here. Every list is ordered by
    order ID so repeated runs return identical results.
    """

    def __init__(self, session: Session):
        self.session = session

    def _select_with_customer(self):
        return (
            select(
                Order.order_id,
                Order.order_status,
                Customer.first_name.label("customer_first_name"),
                Customer.last_name.label("customer_last_name"),
            )
            .outerjoin(Order.customer)
        )

    def find_by_staff(self, staff_id: int) -> List[OrderSummary]:
        """
        Find orders processed by a staff member

        Args:
            staff_id: Staff ID

        Returns:
            Orders with customer name and status
        """
        stmt = (
            self._select_with_customer()
            .where(Order.staff_id == staff_id)
            .order_by(Order.order_id)
        )
        return [OrderSummary(**row._mapping) for row in self.session.execute(stmt)]

    def find_not_shipped(self) -> List[OrderSummary]:
        """
        Find orders without a shipped date
        """
        stmt = (
            self._select_with_customer()
            .where(Order.shipped_date.is_(None))
            .order_by(Order.order_id)
        )
        return [OrderSummary(**row._mapping) for row in self.session.execute(stmt)]

    def find_by_status(self, status: OrderStatus) -> List[OrderSummary]:
        """
        Find orders with the given status code

        Args:
            status: Order status (e.g. OrderStatus.COMPLETED)
        """
        stmt = (
            select(Order.order_id, Order.order_status)
            .where(Order.order_status == int(status))
            .order_by(Order.order_id)
        )
        return [OrderSummary(**row._mapping) for row in self.session.execute(stmt)]

    def count_by_store(self) -> List[StoreOrderCount]:
        """
        Count orders per store

        Only stores with at least one order appear (plain GROUP BY).
        """
        stmt = (
            select(Order.store_id, func.count(Order.order_id).label("order_count"))
            .group_by(Order.store_id)
            .order_by(Order.store_id)
        )
        return [StoreOrderCount(**row._mapping) for row in self.session.execute(stmt)]
