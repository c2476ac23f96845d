"""
Staff Repository - Data Access Layer for Staff

Author: TM3
Date: 2025-10-17
"""
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bikestore.domain.staff import StaffContact, StaffOrderCount
from bikestore.models import Order, Staff
from bikestore.models.store import ACTIVE


class StaffRepository:
    """Repository for Staff data access"""

    def __init__(self, session: Session):
        self.session = session

    def order_counts(self) -> List[StaffOrderCount]:
        """
        Count orders processed per staff member (0 if none)
        """
        stmt = (
            select(
                Staff.staff_id,
                Staff.first_name,
                Staff.last_name,
                func.count(Order.order_id).label("order_count"),
            )
            .outerjoin(Staff.orders)
            .group_by(Staff.staff_id, Staff.first_name, Staff.last_name)
            .order_by(Staff.staff_id)
        )

        return [
            StaffOrderCount(
                staff_id=row.staff_id,
                full_name=f"{row.first_name} {row.last_name}",
                order_count=row.order_count,
            )
            for row in self.session.execute(stmt)
        ]

    def find_active_contacts(self) -> List[StaffContact]:
        """
        List active staff members with their phone numbers
        """
        stmt = (
            select(Staff.first_name, Staff.last_name, Staff.phone)
            .where(Staff.active == ACTIVE)
            .order_by(Staff.staff_id)
        )
        return [StaffContact(**row._mapping) for row in self.session.execute(stmt)]
