from __future__ import annotations

"""Package metadata."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("earlReport")
except PackageNotFoundError:  # pragma: no cover - package not installed
    __version__ = "0.1.0"

from .errors import (
    CoercionError,
    ConfigurationError,
    EarlReportError,
    SerializationError,
)
from .report import DEFAULT_ASSERTOR, EarlReport

__all__ = [
    "__version__",
    "EarlReport",
    "DEFAULT_ASSERTOR",
    "EarlReportError",
    "ConfigurationError",
    "CoercionError",
    "SerializationError",
]
