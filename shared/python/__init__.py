"""
Geographic Converter — Shared Python Package
=============================================
Re-exports the shared base class, exception hierarchy, and validator
utilities so tools can import from a single location::

    from shared.python import GeoTool, Validators
    from shared.python.exceptions import OutOfRangeError
"""

from shared.python.base_tool import GeoTool, configure_logging
from shared.python.exceptions import (
    ColumnNotFoundError,
    GeoConverterError,
    InputValidationError,
    OutOfRangeError,
    OutputWriteError,
)
from shared.python.validators import Validators

__all__ = [
    "GeoTool",
    "Validators",
    "configure_logging",
    "GeoConverterError",
    "InputValidationError",
    "ColumnNotFoundError",
    "OutOfRangeError",
    "OutputWriteError",
]
