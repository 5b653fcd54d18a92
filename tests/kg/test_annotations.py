from __future__ import annotations

from datetime import datetime, timezone

import pytest
from rdflib import Literal, URIRef
from rdflib.namespace import DCTERMS, RDF, XSD

from earlReport import EarlReport
from earlReport.errors import CoercionError
from earlReport.kg.annotations import annotate_assertion, describe_project
from earlReport.kg.namespaces import DOAP, DOAP_NS, EARL


def test_describe_project(report: EarlReport) -> None:
    node = describe_project(
        report.model,
        report.subject,
        name="Example",
        homepage="http://example.org/",
        language="Python",
    )
    g = report.model
    assert node == report.subject
    assert (node, RDF.type, DOAP.Project) in g
    assert g.value(node, DOAP.name) == Literal("Example")
    assert g.value(node, DOAP.homepage) == URIRef("http://example.org/")
    assert g.value(node, DOAP["programming-language"]) == Literal("Python")
    assert g.value(node, DOAP.description) is None
    report.bind("doap", DOAP_NS)
    assert "rdf:type doap:Project" in report.as_string()


def test_annotate_assertion(report: EarlReport) -> None:
    a = report.pass_("http://example.org/test1")
    when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    annotate_assertion(report.model, a, mode="automatic", date=when)
    g = report.model
    assert g.value(a, EARL.mode) == EARL.automatic
    stamp = g.value(a, DCTERMS.date)
    assert str(stamp) == "2024-01-02T03:04:05Z"
    assert stamp.datatype == XSD.dateTime
    assert len(g) == 9


def test_annotate_assertion_rejects_unknown_mode(report: EarlReport) -> None:
    a = report.pass_("http://example.org/test1")
    with pytest.raises(CoercionError):
        annotate_assertion(report.model, a, mode="robotic")
    assert len(report.model) == 7


def test_describe_project_follows_validation_setting(report: EarlReport) -> None:
    with pytest.raises(CoercionError):
        describe_project(report.model, "urn:project", homepage="example.org")
    assert len(report.model) == 0
    node = describe_project(
        report.model, "urn:project", homepage="example.org", validate=False
    )
    assert report.model.value(node, DOAP.homepage) == URIRef("example.org")
