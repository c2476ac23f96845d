"""
Customer Repository - Data Access Layer for Customers

Author: TM3
Date: 2025-10-17
"""
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bikestore.domain.customer import CustomerContact, CustomerOrderCount
from bikestore.models import Customer, Order


class CustomerRepository:
    """
    Repository for Customer data access

    Returns CustomerContact / CustomerOrderCount domain models.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_contacts(self) -> List[CustomerContact]:
        """
        List every customer's first name, last name and email

        Returns:
            One row per customer, ordered by customer ID
        """
        stmt = (
            select(Customer.first_name, Customer.last_name, Customer.email)
            .order_by(Customer.customer_id)
        )
        return [CustomerContact(**row._mapping) for row in self.session.execute(stmt)]

    def order_counts(self) -> List[CustomerOrderCount]:
        """
        Count orders per customer, including customers without orders

        Returns:
            One row per customer with order_count (0 if none)
        """
        stmt = (
            select(
                Customer.customer_id,
                Customer.first_name,
                Customer.last_name,
                func.count(Order.order_id).label("order_count"),
            )
            .outerjoin(Customer.orders)
            .group_by(Customer.customer_id, Customer.first_name, Customer.last_name)
            .order_by(Customer.customer_id)
        )

        return [
            CustomerOrderCount(
                customer_id=row.customer_id,
                full_name=f"{row.first_name} {row.last_name}",
                order_count=row.order_count,
            )
            for row in self.session.execute(stmt)
        ]
