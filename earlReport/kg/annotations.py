from __future__ import annotations

"""Helpers for the supplementary data EARL reports usually carry."""

from datetime import datetime, timezone
from typing import Optional

from rdflib import Graph, URIRef
from rdflib.namespace import DCTERMS, RDF, XSD
from rdflib.term import Node

from ..errors import CoercionError
from .iri import IdentifierLike, coerce_node
from .namespaces import ASSERTION_MODES, DOAP, EARL
from .ontology import safe_literal


def _mode_term(mode: str) -> URIRef:
    if mode not in ASSERTION_MODES:
        raise CoercionError(
            f"unknown EARL mode {mode!r}; expected one of {', '.join(ASSERTION_MODES)}"
        )
    return EARL[mode]


def describe_project(
    g: Graph,
    project: IdentifierLike,
    *,
    name: Optional[str] = None,
    homepage: Optional[str] = None,
    description: Optional[str] = None,
    language: Optional[str] = None,
    validate: bool = True,
) -> Node:
    """Type ``project`` as a ``doap:Project`` and attach the given details.

    Returns the project node so it can be passed as a report subject.
    ``validate`` controls IRI checking as in
    :func:`~earlReport.kg.iri.coerce_node`; pass the report's
    ``validate_iris`` setting to keep both in step.
    """

    node = coerce_node(project, validate=validate)
    home = coerce_node(homepage, validate=validate) if homepage else None
    g.add((node, RDF.type, DOAP.Project))
    if name:
        g.add((node, DOAP.name, safe_literal(name)))
    if home is not None:
        g.add((node, DOAP.homepage, home))
    if description:
        g.add((node, DOAP.description, safe_literal(description)))
    if language:
        g.add((node, DOAP["programming-language"], safe_literal(language)))
    return node


def annotate_assertion(
    g: Graph,
    assertion: Node,
    *,
    mode: Optional[str] = None,
    date: Optional[datetime | str] = None,
) -> None:
    """Add ``earl:mode`` and ``dcterms:date`` to an assertion node."""

    if mode is not None:
        g.add((assertion, EARL.mode, _mode_term(mode)))
    if date is not None:
        if isinstance(date, str):
            ts = date
        else:
            ts = date.astimezone(timezone.utc).isoformat(timespec="seconds").replace(
                "+00:00", "Z"
            )
        g.add((assertion, DCTERMS.date, safe_literal(ts, datatype=XSD.dateTime)))


__all__ = ["describe_project", "annotate_assertion"]
