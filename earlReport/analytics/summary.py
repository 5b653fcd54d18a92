from __future__ import annotations

"""Read recorded assertions back out of a report graph."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from rdflib import Graph
from rdflib.namespace import RDF, RDFS
from rdflib.term import Node
from tabulate import tabulate

from ..kg.namespaces import EARL, EARL_NS, OUTCOME_NAMES


@dataclass
class AssertionRecord:
    node: Node
    test: Optional[Node]
    subject: Optional[Node]
    assertor: Optional[Node]
    outcome: Optional[str]
    comments: List[str] = field(default_factory=list)


def _graph(source) -> Graph:
    return source if isinstance(source, Graph) else source.model


def _local_name(term: Optional[Node]) -> Optional[str]:
    if term is None:
        return None
    text = str(term)
    if text.startswith(EARL_NS):
        return text[len(EARL_NS):]
    return text


def iter_assertions(source) -> Iterator[AssertionRecord]:
    """Yield one record per ``earl:Assertion`` in ``source``.

    ``source`` is a graph or anything exposing one as ``.model``.
    """
    g = _graph(source)
    for a in g.subjects(RDF.type, EARL.Assertion):
        result = g.value(a, EARL.result)
        outcome = g.value(result, EARL.outcome) if result is not None else None
        comments = (
            sorted(str(c) for c in g.objects(result, RDFS.comment))
            if result is not None
            else []
        )
        yield AssertionRecord(
            node=a,
            test=g.value(a, EARL.test),
            subject=g.value(a, EARL.subject),
            assertor=g.value(a, EARL.assertedBy),
            outcome=_local_name(outcome),
            comments=comments,
        )


def outcome_counts(source) -> Dict[str, int]:
    """Count assertions per outcome; every EARL outcome is present."""
    counter = Counter(rec.outcome for rec in iter_assertions(source))
    return {name: counter.get(name, 0) for name in OUTCOME_NAMES}


def summary_table(source, tablefmt: str = "simple") -> str:
    """Render :func:`outcome_counts` as a text table."""
    rows = list(outcome_counts(source).items())
    rows.append(("total", sum(count for _, count in rows)))
    return tabulate(rows, headers=["Outcome", "Count"], tablefmt=tablefmt)
