from __future__ import annotations

"""Canonical namespaces for EARL reports.

This module is the single source of truth for namespace strings used when
recording assertions and when rendering the report prefix block.
"""

from rdflib import Namespace
from rdflib.namespace import DCTERMS, RDF, RDFS

EARL_NS = "http://www.w3.org/ns/earl#"
DOAP_NS = "http://usefulinc.com/ns/doap#"

# rdflib Namespace helpers.
EARL = Namespace(EARL_NS)
DOAP = Namespace(DOAP_NS)

# Prefixes every report declares, whatever else gets bound.
REPORT_PREFIXES: dict[str, str] = {
    "rdf": str(RDF),
    "rdfs": str(RDFS),
    "dcterms": str(DCTERMS),
    "earl": EARL_NS,
}

# Outcome local names in the order EARL 1.0 lists them.
OUTCOME_NAMES: tuple[str, ...] = (
    "passed",
    "failed",
    "cantTell",
    "inapplicable",
    "untested",
)

OUTCOMES = {name: EARL[name] for name in OUTCOME_NAMES}

ASSERTION_MODES: tuple[str, ...] = (
    "automatic",
    "manual",
    "semiAuto",
    "undisclosed",
    "unknownMode",
)

__all__ = [
    "EARL_NS",
    "DOAP_NS",
    "EARL",
    "DOAP",
    "REPORT_PREFIXES",
    "OUTCOME_NAMES",
    "OUTCOMES",
    "ASSERTION_MODES",
]
