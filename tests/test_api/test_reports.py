"""
Tests for the reports API routes

Tests cover:
- Section listing
- Single section JSON payloads
- Full text report
- Database failures mapped to HTTP errors
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from bikestore.core.database import Base, get_db
from bikestore.core.exceptions import ConnectionFailure
from bikestore.main import app


@pytest.fixture
def client(db_session):
    """Test client bound to the seeded session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestReportRoutes:
    """Test the /api/v1/reports routes on the seeded dataset"""

    def test_list_reports(self, client):
        """Test the listing returns the twenty section titles"""
        # Act
        response = client.get("/api/v1/reports/")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 20
        assert body["sections"][0] == {"number": 1, "title": "Customers (First, Last, Email)"}

    def test_get_report_rows(self, client):
        """Test a single section returns its header and rows"""
        # Act
        response = client.get("/api/v1/reports/7")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["header"] == "7. Products never ordered:"
        assert body["data"] == [{"product_id": 5, "product_name": "Electra Cruiser 1 - 2020"}]

    def test_get_report_query_override(self, client):
        """Test a query parameter overrides the section parameter"""
        # Act
        response = client.get("/api/v1/reports/2", params={"staff_id": 1})

        # Assert
        body = response.json()
        assert body["header"] == "2. Orders processed by staff 1:"
        assert [row["order_id"] for row in body["data"]] == [4]

    def test_scalar_sections(self, client):
        """Test the count and average sections return scalar data"""
        # Act
        count = client.get("/api/v1/reports/12").json()
        average = client.get("/api/v1/reports/13").json()

        # Assert
        assert count["data"] == 2
        assert average["header"] == "13. Average list price: $1,079.99"

    def test_product_not_found_returns_null_data(self, client):
        """Test a missing product returns null data and no lines"""
        # Act
        body = client.get("/api/v1/reports/14", params={"product_id": 999}).json()

        # Assert
        assert body["data"] is None
        assert body["lines"] == []

    def test_unknown_report(self, client):
        """Test an unknown section number returns 404"""
        # Act
        response = client.get("/api/v1/reports/21")

        # Assert
        assert response.status_code == 404

    def test_text_report(self, client):
        """Test the text route returns the full report as plain text"""
        # Act
        response = client.get("/api/v1/reports/text")

        # Assert
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("1. Customers (First, Last, Email):\n")
        assert "\n\n20. Total quantity sold per product:\n" in response.text


class TestDatabaseFailures:
    """Test database failures are mapped to HTTP errors"""

    @pytest.fixture
    def unavailable_client(self):
        """Test client whose database dependency always fails to connect"""
        def failing_get_db():
            raise ConnectionFailure("Cannot connect to database")
            yield

        app.dependency_overrides[get_db] = failing_get_db
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_connection_failure_returns_503(self, unavailable_client):
        """Test ConnectionFailure is returned as 503"""
        # Act
        response = unavailable_client.get("/api/v1/reports/1")

        # Assert
        assert response.status_code == 503
        assert response.json()["detail"] == "Database unavailable"

    def test_unknown_report_checked_before_database(self, unavailable_client):
        """Test an unknown section returns 404 even when the database is down"""
        # Act
        response = unavailable_client.get("/api/v1/reports/21")

        # Assert
        assert response.status_code == 404
        assert response.json()["detail"] == "Report 21 not found"

    def test_query_failure_returns_500(self, empty_session, engine):
        """Test QueryExecutionFailure is returned as 500 with the section number"""
        # Arrange: Drop the schema so the first query fails
        Base.metadata.drop_all(engine)

        def override_get_db():
            yield empty_session

        app.dependency_overrides[get_db] = override_get_db

        try:
            # Act
            response = TestClient(app).get("/api/v1/reports/1")
        finally:
            app.dependency_overrides.clear()

        # Assert
        assert response.status_code == 500
        assert "Report section 1 failed" in response.json()["detail"]


class TestHealth:
    """Test the root and health endpoints"""

    def test_root(self):
        """Test the root endpoint reports the API as online"""
        # Act
        body = TestClient(app).get("/").json()

        # Assert
        assert body["status"] == "online"

    @patch("bikestore.main.get_session")
    def test_health_connected(self, mock_get_session):
        """Test /health reports healthy when a session can be opened"""
        # Arrange
        mock_get_session.return_value = MagicMock()

        # Act
        body = TestClient(app).get("/health").json()

        # Assert
        assert body["status"] == "healthy"
        assert body["database"]["status"] == "connected"

    @patch("bikestore.main.get_session")
    def test_health_disconnected(self, mock_get_session):
        """Test /health reports degraded with the connection error"""
        # Arrange
        mock_get_session.side_effect = ConnectionFailure("Cannot connect to database: refused")

        # Act
        body = TestClient(app).get("/health").json()

        # Assert
        assert body["status"] == "degraded"
        assert body["database"]["error"] == "Cannot connect to database: refused"
