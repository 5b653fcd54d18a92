from __future__ import annotations

import pytest
from rdflib import BNode, Literal, URIRef

from earlReport.errors import CoercionError
from earlReport.kg.iri import coerce_node, is_absolute_iri


@pytest.mark.parametrize(
    "value",
    ["http://example.org/test1", "urn:isbn:0451450523", "https://example.org/a#b"],
)
def test_absolute_iris_accepted(value: str) -> None:
    assert is_absolute_iri(value)
    assert coerce_node(value) == URIRef(value)


@pytest.mark.parametrize(
    "value",
    ["", "relative/path", "http://example.org/a b", "http://example.org/<x>"],
)
def test_invalid_iris_rejected(value: str) -> None:
    assert not is_absolute_iri(value)
    with pytest.raises(CoercionError):
        coerce_node(value)


def test_nodes_pass_through() -> None:
    blank = BNode()
    literal = Literal("x")
    assert coerce_node(blank) is blank
    assert coerce_node(literal) is literal


def test_validation_can_be_disabled() -> None:
    assert coerce_node("relative/path", validate=False) == URIRef("relative/path")


def test_unsupported_types_rejected() -> None:
    with pytest.raises(CoercionError):
        coerce_node(3.5)
    with pytest.raises(CoercionError):
        coerce_node(None)
