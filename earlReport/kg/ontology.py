"""Minimal ontology helpers for EARL report graphs."""

from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Optional

import rdflib
from rdflib import Graph, Literal
from rdflib.namespace import XSD

from .namespaces import REPORT_PREFIXES


def graph_with_prefixes(
    namespaces: Optional[Mapping[str, str]] = None,
    *,
    identifier: rdflib.term.Identifier | None = None,
) -> Graph:
    """Return an empty graph bound with the report prefixes.

    Parameters
    ----------
    namespaces:
        Prefix map to bind. Defaults to :data:`REPORT_PREFIXES`.
    identifier:
        Optional identifier for the graph. When provided the returned
        :class:`~rdflib.Graph` will use this value as its named graph IRI.
    """

    g = Graph(identifier=identifier, bind_namespaces="none")
    for prefix, ns in (namespaces or REPORT_PREFIXES).items():
        g.bind(prefix, ns, override=True, replace=True)
    return g


def safe_literal(
    value: object,
    datatype: Optional[rdflib.term.Identifier] = None,
) -> Literal:
    """Create a literal for ``value`` with sensible defaults.

    ``datetime`` and ``date`` values are converted to ISO format with the
    appropriate XSD datatype unless one is explicitly provided.
    """

    if isinstance(value, datetime):
        dt = datatype or XSD.dateTime
        return Literal(value.isoformat(), datatype=dt)
    if isinstance(value, date):
        dt = datatype or XSD.date
        return Literal(value.isoformat(), datatype=dt)
    return Literal(value, datatype=datatype)


__all__ = ["graph_with_prefixes", "safe_literal"]
