"""Exceptions raised while building and rendering EARL reports."""
from __future__ import annotations


class EarlReportError(Exception):
    """Base class for all report errors."""


class ConfigurationError(EarlReportError, ValueError):
    """Raised when a report is constructed without a subject or with bad config."""


class CoercionError(EarlReportError, ValueError):
    """Raised when an input cannot be turned into an RDF node or outcome."""


class SerializationError(EarlReportError, RuntimeError):
    """Raised when rdflib refuses to render the report graph."""


__all__ = [
    "EarlReportError",
    "ConfigurationError",
    "CoercionError",
    "SerializationError",
]
