"""
Report Catalog - the twenty bikestore reports

Each report section runs one repository query and renders it as a numbered
header followed by one line per row. Sections share the session but no
other state, so any of them can be run on its own (the API does exactly
that); the CLI runs all twenty in order.

Output format (blank line between sections):

    1. Customers (First, Last, Email):
    Debra Burks - debra.burks@yahoo.com
    ...

    2. Orders processed by staff 3:
    OrderId: 1, Customer: Johnathan Velazquez, Status: 4

Author: TM3
Date: 2025-10-17
"""
import io
import logging
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Dict, Iterator, List, Optional, TextIO

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bikestore.core.config import settings
from bikestore.core.exceptions import QueryExecutionFailure
from bikestore.domain.order import OrderStatus
from bikestore.repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
    StaffRepository,
)

logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD = 5
LARGE_ORDER_QUANTITY = 3

SECTION_TITLES: Dict[int, str] = {
    1: "Customers (First, Last, Email)",
    2: "Orders processed by staff",
    3: "Mountain Bikes Products",
    4: "Orders per store",
    5: "Orders not shipped",
    6: "Customer order counts",
    7: "Products never ordered",
    8: f"Products with stock < {LOW_STOCK_THRESHOLD} in any store",
    9: "First product",
    10: "Products with model year",
    11: "Product times ordered",
    12: "Number of products in category",
    13: "Average list price",
    14: "Specific product by ID",
    15: f"Products ordered with quantity > {LARGE_ORDER_QUANTITY}",
    16: "Staff order counts",
    17: "Active staff with phone",
    18: "Products with brand and category",
    19: "Completed orders",
    20: "Total quantity sold per product",
}


def format_currency(amount: Optional[Decimal], symbol: str = "$") -> str:
    """
    Format an amount the en-US way: $1,234.57

    None is treated as zero.
    """
    value = Decimal(amount if amount is not None else 0)
    value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


@dataclass(frozen=True)
class ReportParameters:
    """Inputs of the parameterized sections"""

    staff_id: int = 3
    category_name: str = "Mountain Bikes"
    model_year: int = 2020
    category_id: int = 1
    product_id: int = 1
    currency_symbol: str = "$"

    @classmethod
    def from_settings(cls) -> "ReportParameters":
        return cls(
            staff_id=settings.REPORT_STAFF_ID,
            category_name=settings.REPORT_CATEGORY_NAME,
            model_year=settings.REPORT_MODEL_YEAR,
            category_id=settings.REPORT_CATEGORY_ID,
            product_id=settings.REPORT_PRODUCT_ID,
            currency_symbol=settings.CURRENCY_SYMBOL,
        )


@dataclass
class SectionResult:
    """Rendered section plus the rows it was rendered from"""

    number: int
    header: str
    lines: List[str] = field(default_factory=list)
    data: Any = None

    def render(self) -> str:
        return "\n".join([self.header] + self.lines)


class ReportCatalog:
    """
    Runs the bikestore report sections against one open session

    Usage:
        with get_session() as session:
            ReportCatalog(session).write(sys.stdout)
    """

    def __init__(self, session: Session, parameters: Optional[ReportParameters] = None):
        self.parameters = parameters or ReportParameters.from_settings()

        self.customers = CustomerRepository(session)
        self.staff = StaffRepository(session)
        self.orders = OrderRepository(session)
        self.products = ProductRepository(session)

        self._sections: Dict[int, Callable[[], SectionResult]] = {
            1: self.customer_contacts,
            2: self.orders_by_staff,
            3: self.products_in_category,
            4: self.orders_per_store,
            5: self.orders_not_shipped,
            6: self.customer_order_counts,
            7: self.products_never_ordered,
            8: self.products_low_stock,
            9: self.first_product,
            10: self.products_by_model_year,
            11: self.product_order_counts,
            12: self.category_product_count,
            13: self.average_list_price,
            14: self.product_by_id,
            15: self.products_ordered_in_bulk,
            16: self.staff_order_counts,
            17: self.active_staff,
            18: self.products_with_brand_and_category,
            19: self.completed_orders,
            20: self.product_quantity_sold,
        }

    @property
    def numbers(self) -> List[int]:
        return sorted(self._sections)

    def run_section(self, number: int) -> SectionResult:
        """
        Run one section

        Raises:
            KeyError: Unknown section number
            QueryExecutionFailure: The section's query or row mapping failed
        """
        section = self._sections.get(number)
        if section is None:
            raise KeyError(f"Unknown report section: {number}")

        try:
            result = section()
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Report section {number} failed: {e}")
            raise QueryExecutionFailure(
                f"Report section {number} failed: {e}", section=number, cause=e
            ) from e

        logger.debug(f"Report section {number}: {len(result.lines)} rows")
        return result

    def run_all(self) -> Iterator[SectionResult]:
        """Run every section in order; the first failure stops the run"""
        for number in self.numbers:
            yield self.run_section(number)

    def write(self, stream: TextIO) -> None:
        """Write each section to stream as soon as it has run"""
        for index, result in enumerate(self.run_all()):
            if index:
                stream.write("\n")
            stream.write(result.render() + "\n")

    def render(self) -> str:
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    @staticmethod
    def _header(number: int, title: str) -> str:
        return f"{number}. {title}:"

    @staticmethod
    def _product_line(product) -> str:
        return f"{product.product_id}: {product.product_name}"

    def _product_list(self, number: int, title: str, products) -> SectionResult:
        return SectionResult(
            number,
            self._header(number, title),
            [self._product_line(p) for p in products],
            products,
        )

    def customer_contacts(self) -> SectionResult:
        rows = self.customers.find_contacts()
        return SectionResult(
            1,
            self._header(1, SECTION_TITLES[1]),
            [f"{c.first_name} {c.last_name} - {c.email}" for c in rows],
            rows,
        )

    def orders_by_staff(self) -> SectionResult:
        staff_id = self.parameters.staff_id
        rows = self.orders.find_by_staff(staff_id)
        return SectionResult(
            2,
            self._header(2, f"{SECTION_TITLES[2]} {staff_id}"),
            [
                f"OrderId: {o.order_id}, Customer: {o.customer_name}, Status: {o.order_status}"
                for o in rows
            ],
            rows,
        )

    def products_in_category(self) -> SectionResult:
        category_name = self.parameters.category_name
        rows = self.products.find_by_category_name(category_name)
        return self._product_list(3, f"{category_name} Products", rows)

    def orders_per_store(self) -> SectionResult:
        rows = self.orders.count_by_store()
        return SectionResult(
            4,
            self._header(4, SECTION_TITLES[4]),
            [f"Store {s.store_id}: {s.order_count}" for s in rows],
            rows,
        )

    def orders_not_shipped(self) -> SectionResult:
        rows = self.orders.find_not_shipped()
        return SectionResult(
            5,
            self._header(5, SECTION_TITLES[5]),
            [f"OrderId: {o.order_id}, Customer: {o.customer_name}" for o in rows],
            rows,
        )

    def customer_order_counts(self) -> SectionResult:
        rows = self.customers.order_counts()
        return SectionResult(
            6,
            self._header(6, SECTION_TITLES[6]),
            [f"{c.full_name}: {c.order_count}" for c in rows],
            rows,
        )

    def products_never_ordered(self) -> SectionResult:
        return self._product_list(7, SECTION_TITLES[7], self.products.find_never_ordered())

    def products_low_stock(self) -> SectionResult:
        rows = self.products.find_low_stock(LOW_STOCK_THRESHOLD)
        return self._product_list(8, SECTION_TITLES[8], rows)

    def first_product(self) -> SectionResult:
        product = self.products.find_first()
        lines = [self._product_line(product)] if product else []
        return SectionResult(9, self._header(9, SECTION_TITLES[9]), lines, product)

    def products_by_model_year(self) -> SectionResult:
        model_year = self.parameters.model_year
        rows = self.products.find_by_model_year(model_year)
        return self._product_list(10, f"{SECTION_TITLES[10]} {model_year}", rows)

    def product_order_counts(self) -> SectionResult:
        rows = self.products.order_counts()
        return SectionResult(
            11,
            self._header(11, SECTION_TITLES[11]),
            [f"{p.product_id}: {p.product_name} - {p.times_ordered}" for p in rows],
            rows,
        )

    def category_product_count(self) -> SectionResult:
        category_id = self.parameters.category_id
        count = self.products.count_by_category(category_id)
        header = f"12. {SECTION_TITLES[12]} {category_id}: {count}"
        return SectionResult(12, header, [], count)

    def average_list_price(self) -> SectionResult:
        average = self.products.average_list_price()
        formatted = format_currency(average, self.parameters.currency_symbol)
        return SectionResult(13, f"13. {SECTION_TITLES[13]}: {formatted}", [], average)

    def product_by_id(self) -> SectionResult:
        product = self.products.find_by_id(self.parameters.product_id)
        lines = [self._product_line(product)] if product else []
        return SectionResult(14, self._header(14, SECTION_TITLES[14]), lines, product)

    def products_ordered_in_bulk(self) -> SectionResult:
        rows = self.products.find_ordered_in_quantity_over(LARGE_ORDER_QUANTITY)
        return self._product_list(15, SECTION_TITLES[15], rows)

    def staff_order_counts(self) -> SectionResult:
        rows = self.staff.order_counts()
        return SectionResult(
            16,
            self._header(16, SECTION_TITLES[16]),
            [f"{s.full_name}: {s.order_count}" for s in rows],
            rows,
        )

    def active_staff(self) -> SectionResult:
        rows = self.staff.find_active_contacts()
        return SectionResult(
            17,
            self._header(17, SECTION_TITLES[17]),
            [f"{s.first_name} {s.last_name}: {s.phone or ''}" for s in rows],
            rows,
        )

    def products_with_brand_and_category(self) -> SectionResult:
        rows = self.products.find_with_brand_and_category()
        return SectionResult(
            18,
            self._header(18, SECTION_TITLES[18]),
            [
                f"{p.product_id}: {p.product_name} - {p.brand_name} / {p.category_name}"
                for p in rows
            ],
            rows,
        )

    def completed_orders(self) -> SectionResult:
        rows = self.orders.find_by_status(OrderStatus.COMPLETED)
        return SectionResult(
            19,
            self._header(19, SECTION_TITLES[19]),
            [f"OrderId: {o.order_id}, Status: {o.order_status}" for o in rows],
            rows,
        )

    def product_quantity_sold(self) -> SectionResult:
        rows = self.products.quantity_sold()
        return SectionResult(
            20,
            self._header(20, SECTION_TITLES[20]),
            [f"{p.product_id}: {p.product_name} - {p.total_sold}" for p in rows],
            rows,
        )
