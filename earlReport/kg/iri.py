from __future__ import annotations

"""Coercion of caller-supplied identifiers into rdflib nodes."""

import re
from typing import Union

from rdflib import URIRef
from rdflib.term import Node

from ..errors import CoercionError

IdentifierLike = Union[str, Node]

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_INVALID_RE = re.compile(r'[<>"{}|\\^`\s]')


def is_absolute_iri(value: str) -> bool:
    """Return ``True`` when ``value`` has a scheme and no characters Turtle forbids."""

    return bool(_SCHEME_RE.match(value)) and not _INVALID_RE.search(value)


def coerce_node(value: object, *, validate: bool = True) -> Node:
    """Return ``value`` as an rdflib node.

    Nodes pass through untouched. Strings become :class:`~rdflib.URIRef`,
    checked with :func:`is_absolute_iri` unless ``validate`` is false.
    """

    if isinstance(value, Node):
        return value
    if isinstance(value, str):
        if validate and not is_absolute_iri(value):
            raise CoercionError(f"{value!r} is not an absolute IRI")
        return URIRef(value)
    raise CoercionError(
        f"expected an IRI string or rdflib node, got {type(value).__name__}"
    )


__all__ = ["IdentifierLike", "is_absolute_iri", "coerce_node"]
