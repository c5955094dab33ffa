"""
Utility helpers shared across schemastate packages.
"""

from .logging import configure_logging, get_correlation_id, get_logger, set_correlation_id
from .naming import generate_identifier_name

__all__ = [
    "configure_logging",
    "generate_identifier_name",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
]
