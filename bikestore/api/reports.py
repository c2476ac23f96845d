"""
Reports API Endpoints
Exposes each bikestore report section as JSON, plus the full text report

Author: TM3
Date: 2025-10-17
"""
import dataclasses
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from bikestore.core.database import get_db
from bikestore.core.exceptions import QueryExecutionFailure
from bikestore.services.report_catalog import (
    SECTION_TITLES,
    ReportCatalog,
    ReportParameters,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_catalog(
    db: Session = Depends(get_db),
    staff_id: Optional[int] = Query(None, description="Staff ID for report 2"),
    model_year: Optional[int] = Query(None, description="Model year for report 10"),
    category_id: Optional[int] = Query(None, description="Category ID for report 12"),
    product_id: Optional[int] = Query(None, description="Product ID for report 14"),
) -> ReportCatalog:
    """Build a ReportCatalog with any query-string overrides applied"""
    overrides = {
        "staff_id": staff_id,
        "model_year": model_year,
        "category_id": category_id,
        "product_id": product_id,
    }
    parameters = dataclasses.replace(
        ReportParameters.from_settings(),
        **{key: value for key, value in overrides.items() if value is not None}
    )
    return ReportCatalog(db, parameters)


@router.get("/")
async def list_reports():
    """List the available report sections"""
    return {
        "status": "success",
        "count": len(SECTION_TITLES),
        "sections": [
            {"number": number, "title": title}
            for number, title in sorted(SECTION_TITLES.items())
        ],
    }


@router.get("/text", response_class=PlainTextResponse)
def get_text_report(catalog: ReportCatalog = Depends(get_catalog)):
    """Full report, exactly as the CLI prints it"""
    try:
        return catalog.render()
    except QueryExecutionFailure as e:
        raise HTTPException(status_code=500, detail=e.message)


def valid_section_number(
    number: int = Path(..., description="Report section number (1-20)"),
) -> int:
    """Reject unknown section numbers before a database session is opened"""
    if number not in SECTION_TITLES:
        raise HTTPException(status_code=404, detail=f"Report {number} not found")
    return number


@router.get("/{number}")
def get_report(
    number: int = Depends(valid_section_number),
    catalog: ReportCatalog = Depends(get_catalog),
):
    """
    Run a single report section

    Returns the header, rendered lines and the underlying rows.
    """
    try:
        result = catalog.run_section(number)
    except QueryExecutionFailure as e:
        raise HTTPException(status_code=500, detail=e.message)

    return {
        "status": "success",
        "number": result.number,
        "title": SECTION_TITLES[number],
        "header": result.header,
        "lines": result.lines,
        "data": result.data,
    }
