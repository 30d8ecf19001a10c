"""Utility modules for the Blog Header Image Service."""
from .validators import URLValidator, parse_timestamp
from .data_uri import is_data_uri, parse_data_uri, build_data_uri
from .response_helpers import ResponseHelper
from .logging import LoggerSetup, CorrelatedLogger, MetricsLogger

__all__ = [
    "URLValidator", "parse_timestamp",
    "is_data_uri", "parse_data_uri", "build_data_uri",
    "ResponseHelper",
    "LoggerSetup", "CorrelatedLogger", "MetricsLogger"
]
