"""RDF graph utilities for EARL reports."""

__all__ = [
    "coerce_node",
    "render_turtle",
    "render_graph",
    "describe_project",
    "annotate_assertion",
    "export_report",
]

from .iri import coerce_node
from .turtle import render_turtle, render_graph
from .annotations import describe_project, annotate_assertion
from .export_profiles import export_report
