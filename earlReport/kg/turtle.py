"""Deterministic Turtle rendering for report graphs."""

from __future__ import annotations

import logging
import re
from typing import Mapping

from rdflib import Graph, Literal, URIRef
from rdflib.namespace import NamespaceManager
from rdflib.term import Node

from ..errors import SerializationError
from .namespaces import REPORT_PREFIXES
from .ontology import graph_with_prefixes

logger = logging.getLogger(__name__)

TURTLE_FORMATS = frozenset({"turtle", "ttl"})

# Conservative ASCII subset of PN_LOCAL: no leading "-" or ".", no trailing ".",
# nothing that would need a backslash escape.
_PN_LOCAL_RE = re.compile(r"^(?:[A-Za-z0-9_](?:[A-Za-z0-9_.\-]*[A-Za-z0-9_\-])?)?$")


def _prefix_map(namespaces: Mapping[str, str] | None) -> dict[str, str]:
    merged = {
        prefix: ns
        for prefix, ns in (namespaces or {}).items()
        if prefix not in REPORT_PREFIXES
    }
    # bound last so they win when another prefix shares their namespace
    merged.update(REPORT_PREFIXES)
    return merged


def _term_n3(term: Node, nm: NamespaceManager) -> str:
    if isinstance(term, URIRef):
        full = term.n3()
        try:
            prefix, _, local = nm.compute_qname(term, generate=False)
        except (KeyError, ValueError):
            return full
        if _PN_LOCAL_RE.match(local):
            return f"{prefix}:{local}"
        return full
    if isinstance(term, Literal):
        return term.n3()
    return term.n3(nm)


def sorted_ttl_lines(graph: Graph, namespaces: Mapping[str, str] | None = None) -> list[str]:
    """Return one ``s p o .`` line per triple, abbreviated and sorted.

    IRIs are written as prefixed names only when the local part is a legal
    Turtle name; otherwise the full ``<iri>`` form is used.
    """

    nm = graph_with_prefixes(_prefix_map(namespaces)).namespace_manager
    lines: list[str] = []
    for s, p, o in graph:
        try:
            lines.append(f"{_term_n3(s, nm)} {_term_n3(p, nm)} {_term_n3(o, nm)} .")
        except Exception as exc:
            raise SerializationError(
                f"cannot render triple ({s!r}, {p!r}, {o!r}) as Turtle: {exc}"
            ) from exc
    lines.sort()
    return lines


def render_turtle(graph: Graph, namespaces: Mapping[str, str] | None = None) -> str:
    """Render ``graph`` as Turtle with a fixed prefix block.

    The prefix block always lists the report prefixes, even for an empty
    graph, so consumers can rely on it. Triples follow in sorted order.
    """

    prefixes = sorted(_prefix_map(namespaces).items())
    lines = sorted_ttl_lines(graph, namespaces)
    out = [f"@prefix {prefix}: <{ns}> ." for prefix, ns in prefixes]
    if lines:
        out.append("")
        out.extend(lines)
    logger.debug("rendered %d triples as turtle", len(lines))
    return "\n".join(out) + "\n"


def render_graph(
    graph: Graph,
    fmt: str = "turtle",
    namespaces: Mapping[str, str] | None = None,
) -> str:
    """Render ``graph`` in any rdflib output format.

    Turtle goes through :func:`render_turtle`; other formats are handed to
    :meth:`rdflib.Graph.serialize` on a copy bound with the report prefixes.
    """

    if fmt.lower() in TURTLE_FORMATS:
        return render_turtle(graph, namespaces)
    out = graph_with_prefixes(_prefix_map(namespaces))
    for triple in graph:
        out.add(triple)
    try:
        data = out.serialize(format=fmt)
    except Exception as exc:
        raise SerializationError(f"cannot serialize report as {fmt!r}: {exc}") from exc
    logger.debug("rendered %d triples as %s", len(out), fmt)
    return data


__all__ = ["TURTLE_FORMATS", "sorted_ttl_lines", "render_turtle", "render_graph"]
