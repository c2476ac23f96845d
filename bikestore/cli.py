#!/usr/bin/env python3
"""
Bikestore Reports - command line runner

Prints the twenty report sections to stdout. Logs go to stderr so the
report output stays clean.

Usage:
    bikestore-reports
    bikestore-reports --staff-id 6 --model-year 2018
    bikestore-reports --database-url sqlite:///bikestores.db --verbose

Author: TM3
Date: 2025-10-17
"""
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from bikestore.core.database import create_db_engine, get_session
from bikestore.core.exceptions import BikestoreError
from bikestore.services.report_catalog import ReportCatalog, ReportParameters

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bikestore-reports',
        description='Run the bikestore read-only reports'
    )
    parser.add_argument(
        '--database-url',
        help='SQLAlchemy database URL (default: DATABASE_URL from environment)'
    )
    parser.add_argument('--staff-id', type=int, help='Staff ID for report 2')
    parser.add_argument('--model-year', type=int, help='Model year for report 10')
    parser.add_argument('--category-id', type=int, help='Category ID for report 12')
    parser.add_argument('--product-id', type=int, help='Product ID for report 14')
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log each report section as it runs'
    )
    return parser


def parameters_from_args(args: argparse.Namespace) -> ReportParameters:
    overrides = {
        'staff_id': args.staff_id,
        'model_year': args.model_year,
        'category_id': args.category_id,
        'product_id': args.product_id,
    }
    return dataclasses.replace(
        ReportParameters.from_settings(),
        **{key: value for key, value in overrides.items() if value is not None}
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    parameters = parameters_from_args(args)
    bind = create_db_engine(args.database_url) if args.database_url else None

    try:
        with get_session(bind) as session:
            ReportCatalog(session, parameters).write(sys.stdout)
    except BikestoreError as e:
        logger.error(e.message)
        return 1
    finally:
        if bind is not None:
            bind.dispose()

    return 0


if __name__ == "__main__":
    sys.exit(main())
