"""Prompt construction for the analysis and structured-summary calls."""

import copy

from indenture.generation.prompt_loader import load_json_schema, load_prompt_template

ANALYSIS_MAX_CHARS = 8000
SUMMARY_EXCERPT_CHARS = 4000
TRUNCATION_MARKER = " ...[truncated]"

_ANALYSIS_TEMPLATE = load_prompt_template("analysis_prompt.txt")
_SUMMARY_TEMPLATE = load_prompt_template("summary_prompt.txt")
_SUMMARY_SCHEMA = load_json_schema()


def excerpt(text: str, limit: int) -> str:
    """Return the first ``limit`` characters, marked when anything was cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def build_analysis_prompt(text: str, max_chars: int = ANALYSIS_MAX_CHARS) -> str:
    return _ANALYSIS_TEMPLATE.format(document_text=excerpt(text, max_chars))


def build_summary_prompt(
    text: str,
    analysis: str,
    excerpt_chars: int = SUMMARY_EXCERPT_CHARS,
) -> str:
    return _SUMMARY_TEMPLATE.format(
        document_text=excerpt(text, excerpt_chars),
        analysis=analysis,
    )


def summary_json_schema() -> dict[str, object]:
    """Return a fresh copy of the structured summary schema."""
    return copy.deepcopy(_SUMMARY_SCHEMA)
