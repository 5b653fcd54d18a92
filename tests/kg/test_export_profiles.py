from pathlib import Path

import json

import rdflib

from earlReport import EarlReport
from earlReport.kg.export_profiles import export_report


def test_export_report(tmp_path: Path, report: EarlReport) -> None:
    report.pass_("http://example.org/test1")
    report.fail("http://example.org/test2", "timed out")
    out_dir = tmp_path / "out"
    manifest = export_report(report, out_dir, stem="sample")
    for name in ("sample.ttl", "sample.nt", "sample.ttl.gz", "sample.nt.gz"):
        assert (out_dir / name).exists()
        assert name in manifest
    assert (out_dir / "manifest.json").exists()
    assert (out_dir / "checksums.sha256").exists()
    assert json.loads((out_dir / "manifest.json").read_text(encoding="utf-8")) == manifest

    ttl = rdflib.Graph().parse(out_dir / "sample.ttl", format="turtle")
    assert len(ttl) == len(report.model)
    nt_lines = (out_dir / "sample.nt").read_text(encoding="utf-8").splitlines()
    assert len(nt_lines) == len(report.model)
    assert nt_lines == sorted(nt_lines)


def test_export_is_repeatable(tmp_path: Path, report: EarlReport) -> None:
    report.untested("http://example.org/test1")
    first = export_report(report, tmp_path / "a")
    second = export_report(report, tmp_path / "b")
    assert first == second


def test_export_bare_graph(tmp_path: Path) -> None:
    graph = rdflib.Graph()
    graph.parse(
        data="@prefix ex: <http://example.org/> . ex:s ex:p ex:o .", format="turtle"
    )
    manifest = export_report(graph, tmp_path, namespaces={"ex": "http://example.org/"})
    assert "earl.ttl" in manifest
    assert "ex:s ex:p ex:o ." in (tmp_path / "earl.ttl").read_text(encoding="utf-8")


def test_export_gzip_and_checksums_match(tmp_path: Path, report: EarlReport) -> None:
    import gzip
    import hashlib

    report.fail("http://example.org/test1", "timed out")
    manifest = export_report(report, tmp_path)
    ttl = (tmp_path / "earl.ttl").read_bytes()
    assert gzip.decompress((tmp_path / "earl.ttl.gz").read_bytes()) == ttl
    assert manifest["earl.ttl"] == {"size": len(ttl), "sha256": hashlib.sha256(ttl).hexdigest()}
    lines = (tmp_path / "checksums.sha256").read_text(encoding="utf-8").splitlines()
    assert lines == [f"{manifest[name]['sha256']}  {name}" for name in sorted(manifest)]
