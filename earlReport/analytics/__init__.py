"""Summaries of recorded EARL outcomes."""

from .summary import AssertionRecord, iter_assertions, outcome_counts, summary_table

__all__ = ["AssertionRecord", "iter_assertions", "outcome_counts", "summary_table"]
