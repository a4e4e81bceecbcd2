import re
from datetime import date
from enum import Enum

from indenture.summary.models import BondIndentureSummary


class ExportFormat(str, Enum):
    PDF = "pdf"
    WORD = "word"
    TEXT = "text"


_EXTENSIONS: dict[ExportFormat, str] = {
    ExportFormat.PDF: "pdf",
    ExportFormat.WORD: "docx",
    ExportFormat.TEXT: "txt",
}

_SLUG_UNSAFE_RE = re.compile(r"[^a-z0-9]+")
DEFAULT_SLUG = "summary"


def render_text(summary: BondIndentureSummary, generated_on: date | None = None) -> str:
    """Render the summary as the plain-text export used for every format."""
    generated_on = generated_on or date.today()
    return "\n".join(
        [
            "BOND INDENTURE SUMMARY",
            "",
            f"Issuer: {summary.issuer}",
            f"Bond Type: {summary.bond_type}",
            f"Principal Amount: {summary.principal_amount}",
            f"Interest Rate: {summary.interest_rate}",
            f"Maturity Date: {summary.maturity_date}",
            "",
            "SENIORITY",
            f"Bond Ranking: {summary.seniority.bond_ranking}",
            f"Security: {summary.seniority.security_details}",
            f"Capital Structure Position: {summary.seniority.cap_table_position}",
            f"Subordination: {summary.seniority.subordination_details}",
            f"Guarantees: {summary.seniority.guarantee_structure}",
            "",
            "EXECUTIVE SUMMARY",
            summary.executive_summary,
            "",
            "KEY TERMS",
            _bullets(summary.key_terms),
            "",
            "COVENANTS",
            _bullets(summary.covenants),
            "",
            "DEFAULT PROVISIONS",
            _bullets(summary.default_provisions),
            "",
            f"Generated on: {generated_on.isoformat()}",
            "",
        ]
    )


def export_file_name(summary: BondIndentureSummary, fmt: ExportFormat) -> str:
    """Build ``bond-summary-<issuer>.<ext>``, keeping only ``[a-z0-9-]`` from the issuer."""
    slug = _SLUG_UNSAFE_RE.sub("-", summary.issuer.lower()).strip("-") or DEFAULT_SLUG
    return f"bond-summary-{slug}.{_EXTENSIONS[fmt]}"


def _bullets(items: tuple[str, ...]) -> str:
    return "\n".join(f"• {item}" for item in items)
