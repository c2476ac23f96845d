"""
Pytest fixtures and configuration for Bikestore Reports tests

Tests run against SQLite with a small seeded dataset:

    products   1 Trek 820 (Mountain, 2016)          ordered 3x, qty 4, stock 2/10/0
               2 Ritchey Timberwolf (Mountain, 2016) ordered 2x, qty 6 (one line of 4), stock exactly 5
               3 Electra Townie (Children, 2020)     ordered 1x, qty 5, stock NULL
               4 Trek Domane (Road, 2020)            ordered 1x, qty 3 (boundary), stock 7
               5 Electra Cruiser (Children, 2020)    never ordered, stock 4
    customers  Debra Burks (3 orders), Kasha Todd (2), Tameka Fisher (0)
    staff      Fabiola (1), Mireya (1), Genna (3), Virgie (0, inactive)
    stores     1 (3 orders), 2 (2 orders), 3 (no orders)
    orders     5 total; 2 and 4 not shipped; 1 and 3 completed (status 5)

Author: TM3
Date: 2025-10-17
"""
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bikestore.core.database import Base
from bikestore.models import (
    Brand,
    Category,
    Customer,
    Order,
    OrderItem,
    Product,
    Staff,
    Stock,
    Store,
)
from bikestore.models.store import ACTIVE, INACTIVE
from bikestore.services.report_catalog import ReportParameters


def seed_bikestore(session):
    """Insert the fixture dataset described in the module docstring"""
    session.add_all([
        Category(category_id=1, category_name="Children Bicycles"),
        Category(category_id=2, category_name="Mountain Bikes"),
        Category(category_id=3, category_name="Road Bikes"),
        Brand(brand_id=1, brand_name="Electra"),
        Brand(brand_id=2, brand_name="Trek"),
        Brand(brand_id=3, brand_name="Ritchey"),
    ])
    session.add_all([
        Product(product_id=1, product_name="Trek 820 - 2016", brand_id=2, category_id=2,
                model_year=2016, list_price=Decimal("379.99")),
        Product(product_id=2, product_name="Ritchey Timberwolf Frameset - 2016", brand_id=3,
                category_id=2, model_year=2016, list_price=Decimal("749.99")),
        Product(product_id=3, product_name="Electra Townie Original 7D - 2020", brand_id=1,
                category_id=1, model_year=2020, list_price=Decimal("499.99")),
        Product(product_id=4, product_name="Trek Domane SL 6 - 2020", brand_id=2, category_id=3,
                model_year=2020, list_price=Decimal("3499.99")),
        Product(product_id=5, product_name="Electra Cruiser 1 - 2020", brand_id=1, category_id=1,
                model_year=2020, list_price=Decimal("269.99")),
    ])
    session.add_all([
        Store(store_id=1, store_name="Santa Cruz Bikes"),
        Store(store_id=2, store_name="Baldwin Bikes"),
        Store(store_id=3, store_name="Rowlett Bikes"),
    ])
    session.add_all([
        Stock(store_id=1, product_id=1, quantity=2),
        Stock(store_id=2, product_id=1, quantity=10),
        Stock(store_id=3, product_id=1, quantity=0),
        Stock(store_id=1, product_id=2, quantity=5),
        Stock(store_id=1, product_id=3, quantity=None),
        Stock(store_id=2, product_id=4, quantity=7),
        Stock(store_id=1, product_id=5, quantity=4),
    ])
    session.add_all([
        Customer(customer_id=1, first_name="Debra", last_name="Burks",
                 email="debra.burks@yahoo.com"),
        Customer(customer_id=2, first_name="Kasha", last_name="Todd",
                 email="kasha.todd@yahoo.com"),
        Customer(customer_id=3, first_name="Tameka", last_name="Fisher",
                 email="tameka.fisher@aol.com"),
    ])
    session.add_all([
        Staff(staff_id=1, first_name="Fabiola", last_name="Jackson",
              phone="(831) 555-5554", active=ACTIVE),
        Staff(staff_id=2, first_name="Mireya", last_name="Copeland",
              phone="(831) 555-5555", active=ACTIVE),
        Staff(staff_id=3, first_name="Genna", last_name="Serrano",
              phone="(831) 555-5556", active=ACTIVE),
        Staff(staff_id=4, first_name="Virgie", last_name="Wiggins",
              phone="(831) 555-5557", active=INACTIVE),
    ])
    session.add_all([
        Order(order_id=1, customer_id=1, staff_id=3, store_id=1, order_status=5,
              order_date=date(2016, 1, 1), shipped_date=date(2016, 1, 3)),
        Order(order_id=2, customer_id=2, staff_id=3, store_id=2, order_status=1,
              order_date=date(2016, 1, 1), shipped_date=None),
        Order(order_id=3, customer_id=1, staff_id=2, store_id=1, order_status=5,
              order_date=date(2016, 1, 2), shipped_date=date(2016, 1, 5)),
        Order(order_id=4, customer_id=2, staff_id=1, store_id=2, order_status=3,
              order_date=date(2016, 1, 3), shipped_date=None),
        Order(order_id=5, customer_id=1, staff_id=3, store_id=1, order_status=4,
              order_date=date(2016, 1, 4), shipped_date=date(2016, 1, 10)),
    ])
    session.add_all([
        OrderItem(order_id=1, item_id=1, product_id=1, quantity=1, list_price=Decimal("379.99")),
        OrderItem(order_id=1, item_id=2, product_id=2, quantity=4, list_price=Decimal("749.99")),
        OrderItem(order_id=2, item_id=1, product_id=1, quantity=2, list_price=Decimal("379.99")),
        OrderItem(order_id=3, item_id=1, product_id=3, quantity=5, list_price=Decimal("499.99")),
        OrderItem(order_id=4, item_id=1, product_id=4, quantity=3, list_price=Decimal("3499.99")),
        OrderItem(order_id=5, item_id=1, product_id=1, quantity=1, list_price=Decimal("379.99")),
        OrderItem(order_id=5, item_id=2, product_id=2, quantity=2, list_price=Decimal("749.99")),
    ])
    session.commit()


@pytest.fixture(scope="function")
def engine():
    """
    Provides an in-memory SQLite engine with the schema created

    Scope: function (fresh database per test)
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def empty_session(engine):
    """Session on the schema with no rows"""
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


@pytest.fixture(scope="function")
def db_session(empty_session):
    """Session on the seeded fixture dataset"""
    seed_bikestore(empty_session)
    yield empty_session


@pytest.fixture
def sqlite_file_url(tmp_path):
    """
    Provides a seeded SQLite file database URL (for the CLI, which opens
    its own engine)
    """
    url = f"sqlite:///{tmp_path / 'bikestores.db'}"
    file_engine = create_engine(url)
    Base.metadata.create_all(file_engine)
    session = sessionmaker(bind=file_engine)()
    try:
        seed_bikestore(session)
    finally:
        session.close()
        file_engine.dispose()
    return url


@pytest.fixture
def report_parameters():
    """Default report parameters, independent of any local .env"""
    return ReportParameters()
