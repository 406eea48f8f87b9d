"""
Session Package - Mutable Dashboard State.

    - FilingsDashboard: Owns the filter selection and re-applies the
      filter pipeline after each change
"""

from filings_dashboard.session.dashboard import FilingsDashboard

__all__ = ["FilingsDashboard"]
