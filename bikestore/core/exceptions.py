"""
Bikestore Exceptions

Custom exception classes for database access and report execution.
"""
from typing import Optional


class BikestoreError(Exception):
    """Base exception for bikestore reports"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConnectionFailure(BikestoreError):
    """The database could not be reached; no report section runs"""
    pass


class QueryExecutionFailure(BikestoreError):
    """A report section failed while executing its query"""

    def __init__(self, message: str, section: Optional[int] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.section = section
