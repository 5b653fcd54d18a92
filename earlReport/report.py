"""Build W3C Evaluation and Report Language (EARL 1.0) test reports.

A report is made for one *subject* (the code, project, etc. being tested) by
one *assertor* (the thing doing the testing). Each recorded outcome adds an
``earl:Assertion`` and its ``earl:TestResult`` to an in-memory
:class:`rdflib.Graph`::

    report = EarlReport("http://thing-being-tested.example/")
    report.pass_("http://example.org/test1")
    report.fail("http://example.org/test3", "failure explanation")
    text = report.as_string()

The graph is exposed as :attr:`EarlReport.model` so callers can add
supplementary data about the subject, the assertor, or the test setup.
"""

from __future__ import annotations

import logging
from typing import Optional

from rdflib import BNode, Graph, URIRef
from rdflib.namespace import RDF, RDFS
from rdflib.term import Node

from . import __version__
from .config import ReportConfig
from .errors import CoercionError, ConfigurationError
from .kg.iri import IdentifierLike, coerce_node
from .kg.namespaces import EARL, OUTCOMES, REPORT_PREFIXES
from .kg.ontology import graph_with_prefixes, safe_literal
from .kg.turtle import render_graph, render_turtle

logger = logging.getLogger(__name__)

DEFAULT_ASSERTOR = URIRef(
    "http://purl.org/NET/earlReport/v_" + __version__.replace(".", "-")
)


def _outcome_term(outcome: object) -> URIRef:
    if isinstance(outcome, URIRef) and outcome in OUTCOMES.values():
        return outcome
    if isinstance(outcome, str) and outcome in OUTCOMES:
        return OUTCOMES[outcome]
    raise CoercionError(
        f"unknown EARL outcome {outcome!r}; expected one of {', '.join(OUTCOMES)}"
    )


class EarlReport:
    """Accumulate EARL assertions about a single subject."""

    def __init__(
        self,
        subject: Optional[IdentifierLike] = None,
        assertor: Optional[IdentifierLike] = None,
        *,
        config: ReportConfig | None = None,
    ) -> None:
        if subject is None or (isinstance(subject, str) and not subject):
            raise ConfigurationError("EarlReport created without a subject IRI")
        self._config = config or ReportConfig()
        validate = self._config.validate_iris
        if assertor is None or assertor == "":
            assertor = self._config.assertor or DEFAULT_ASSERTOR
        self._subject = coerce_node(subject, validate=validate)
        self._assertor = coerce_node(assertor, validate=validate)
        self._namespaces = dict(REPORT_PREFIXES)
        self._namespaces.update(self._config.namespaces)
        self._model = graph_with_prefixes(self._namespaces)

    @classmethod
    def from_config(cls, subject: IdentifierLike, config: ReportConfig) -> "EarlReport":
        return cls(subject, config=config)

    @property
    def subject(self) -> Node:
        """The node for the thing being tested."""
        return self._subject

    @property
    def assertor(self) -> Node:
        """The node for the thing doing the testing.

        Either the value given to the constructor or :data:`DEFAULT_ASSERTOR`.
        """
        return self._assertor

    @property
    def model(self) -> Graph:
        """The live report graph. Triples added here are part of the report.

        Prefixes bound on it with ``model.bind()`` are declared in the rendered
        report as well, unless they would shadow one of the fixed prefixes.
        """
        return self._model

    @property
    def namespaces(self) -> dict[str, str]:
        """Prefix map used when rendering, including prefixes bound on the model."""
        merged = {
            prefix: str(ns) for prefix, ns in self._model.namespace_manager.namespaces()
        }
        merged.update(self._namespaces)
        return merged

    def __len__(self) -> int:
        return len(self._model)

    def bind(self, prefix: str, namespace: str) -> None:
        """Declare an extra prefix for the rendered report."""

        namespace = str(namespace)
        fixed = REPORT_PREFIXES.get(prefix)
        if fixed is not None and fixed != namespace:
            raise ConfigurationError(f"prefix {prefix!r} is reserved for <{fixed}>")
        self._namespaces[prefix] = namespace
        self._model.bind(prefix, namespace, override=True, replace=True)

    def record(self, test: IdentifierLike, outcome: object, *comments: object) -> BNode:
        """Assert ``outcome`` for ``test`` and return the new assertion node.

        ``outcome`` is an EARL outcome IRI or its local name (``"passed"``,
        ``"failed"``, ``"cantTell"``, ``"inapplicable"``, ``"untested"``).
        Each comment becomes an ``rdfs:comment`` on the result node; rdflib
        nodes are used as-is and anything else is wrapped in a literal.

        Recording the same test twice produces two separate assertions.
        """

        outcome_term = _outcome_term(outcome)
        test_node = coerce_node(test, validate=self._config.validate_iris)
        g = self._model
        a = BNode()
        r = BNode()
        g.add((a, RDF.type, EARL.Assertion))
        g.add((a, EARL.assertedBy, self._assertor))
        g.add((a, EARL.subject, self._subject))
        g.add((a, EARL.test, test_node))
        g.add((a, EARL.result, r))
        g.add((r, RDF.type, EARL.TestResult))
        g.add((r, EARL.outcome, outcome_term))
        for c in comments:
            comment = c if isinstance(c, Node) else safe_literal(c)
            g.add((r, RDFS.comment, comment))
        logger.debug(
            "recorded %s for %s (%d comments)",
            outcome_term.split("#")[-1],
            test_node,
            len(comments),
        )
        return a

    def pass_(self, test: IdentifierLike, *comments: object) -> BNode:
        """Assert that the subject passed ``test``."""
        return self.record(test, EARL.passed, *comments)

    def fail(self, test: IdentifierLike, *comments: object) -> BNode:
        """Assert that the subject failed ``test``."""
        return self.record(test, EARL.failed, *comments)

    def cant_tell(self, test: IdentifierLike, *comments: object) -> BNode:
        """Assert that it is unclear whether the subject passed or failed ``test``."""
        return self.record(test, EARL.cantTell, *comments)

    def inapplicable(self, test: IdentifierLike, *comments: object) -> BNode:
        """Assert that ``test`` does not apply to the subject."""
        return self.record(test, EARL.inapplicable, *comments)

    def untested(self, test: IdentifierLike, *comments: object) -> BNode:
        """Assert that ``test`` was not run against the subject.

        The result carries ``earl:outcome earl:untested`` like every other
        outcome.
        """
        return self.record(test, EARL.untested, *comments)

    def as_string(self) -> str:
        """Return the report as Turtle.

        Raises :class:`~earlReport.errors.SerializationError` if a node in the
        model cannot be written as Turtle.
        """
        return render_turtle(self._model, self.namespaces)

    def serialize(self, format: str = "turtle") -> str:
        """Return the report in any rdflib output format."""
        return render_graph(self._model, format, self.namespaces)

    def debug(self) -> None:
        """Log the Turtle rendering of the report at DEBUG level."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("EARL report for %s:\n%s", self._subject, self.as_string())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(subject={self._subject!r}, "
            f"assertor={self._assertor!r}, triples={len(self._model)})"
        )


__all__ = ["EarlReport", "DEFAULT_ASSERTOR"]
