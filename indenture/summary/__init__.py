from indenture.summary.models import NOT_SPECIFIED, BondIndentureSummary, RawSummary, Seniority
from indenture.summary.normalizer import normalize_summary

__all__ = [
    "NOT_SPECIFIED",
    "BondIndentureSummary",
    "RawSummary",
    "Seniority",
    "normalize_summary",
]
