"""Export report graphs into multiple profiles (TTL, NT, gz, manifest)."""
from __future__ import annotations

import gzip
import hashlib
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Union

import rdflib

from .turtle import render_graph, render_turtle

if TYPE_CHECKING:
    from ..report import EarlReport

logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.json"
CHECKSUMS_NAME = "checksums.sha256"


def export_report(
    report: Union["EarlReport", rdflib.Graph],
    out_dir: Path,
    *,
    stem: str = "earl",
    namespaces: Mapping[str, str] | None = None,
) -> dict:
    """Write ``<stem>.ttl`` and ``<stem>.nt``, each with a gzipped twin.

    ``report`` is either an :class:`~earlReport.report.EarlReport` (its prefix
    map is used) or a bare graph rendered with ``namespaces``. Returns the
    manifest, keyed by file name, that is also written to ``manifest.json``
    and, in ``sha256sum`` format, to ``checksums.sha256``.
    """

    if isinstance(report, rdflib.Graph):
        graph = report
    else:
        graph = report.model
        namespaces = namespaces or report.namespaces

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    profiles = {
        f"{stem}.ttl": render_turtle(graph, namespaces),
        f"{stem}.nt": _sorted_ntriples(graph),
    }
    manifest: dict[str, dict] = {}
    for name, text in profiles.items():
        manifest.update(_write_profile(out_dir / name, text.encode("utf-8")))

    _write_manifest(out_dir, manifest)
    logger.info("exported %d triples to %s (%s)", len(graph), out_dir, ", ".join(sorted(manifest)))
    return manifest


def _sorted_ntriples(graph: rdflib.Graph) -> str:
    lines = sorted(line for line in render_graph(graph, "nt").splitlines() if line.strip())
    return "\n".join(lines) + "\n" if lines else ""


def _write_profile(path: Path, data: bytes) -> dict[str, dict]:
    # mtime=0 keeps the gzip header, and so the digest, stable between runs
    packed = gzip.compress(data, mtime=0)
    gz_path = path.with_name(path.name + ".gz")
    path.write_bytes(data)
    gz_path.write_bytes(packed)
    return {path.name: _digest(data), gz_path.name: _digest(packed)}


def _digest(data: bytes) -> dict:
    return {"size": len(data), "sha256": hashlib.sha256(data).hexdigest()}


def _write_manifest(out_dir: Path, manifest: Mapping[str, dict]) -> None:
    (out_dir / MANIFEST_NAME).write_text(
        json.dumps(manifest, indent=2, sort_keys=True), encoding="utf-8"
    )
    (out_dir / CHECKSUMS_NAME).write_text(
        "".join(f"{entry['sha256']}  {name}\n" for name, entry in sorted(manifest.items())),
        encoding="utf-8",
    )


__all__ = ["export_report"]
