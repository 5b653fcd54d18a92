from __future__ import annotations

"""Loader for report configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigurationError
from .kg.namespaces import REPORT_PREFIXES


@dataclass(slots=True)
class ReportConfig:
    """Defaults applied when a report is built from configuration."""

    assertor: str | None = None
    namespaces: dict[str, str] = field(default_factory=dict)
    validate_iris: bool = True


def _load_namespaces(data: Any) -> dict[str, str]:
    if not data:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationError("'namespaces' must map prefixes to namespace IRIs")
    namespaces: dict[str, str] = {}
    for prefix, ns in data.items():
        prefix, ns = str(prefix), str(ns)
        fixed = REPORT_PREFIXES.get(prefix)
        if fixed is not None and fixed != ns:
            raise ConfigurationError(f"prefix {prefix!r} is reserved for <{fixed}>")
        namespaces[prefix] = ns
    return namespaces


def config_from_mapping(raw: Mapping[str, Any]) -> ReportConfig:
    """Build a :class:`ReportConfig` from an already-parsed mapping."""

    assertor = raw.get("assertor")
    return ReportConfig(
        assertor=str(assertor) if assertor else None,
        namespaces=_load_namespaces(raw.get("namespaces")),
        validate_iris=bool(raw.get("validate_iris", True)),
    )


def load_report_config(path: Path | None = None) -> ReportConfig:
    """Load report settings from YAML with safe defaults."""

    if path is None or not Path(path).exists():
        return ReportConfig()
    try:
        raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"cannot parse {path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"{path} must contain a YAML mapping")
    return config_from_mapping(raw)


__all__ = ["ReportConfig", "config_from_mapping", "load_report_config"]
