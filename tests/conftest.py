from __future__ import annotations

import pytest

from earlReport import EarlReport

SUBJECT = "http://example.org/subject"


@pytest.fixture
def report() -> EarlReport:
    """A report about :data:`SUBJECT` with the default assertor."""

    return EarlReport(SUBJECT)
