"""Turns an untrusted structured-generation response into a BondIndentureSummary.

A response that is not an object at all is rejected. Anything short of that
is repaired field by field: blank or mistyped strings become the
"Not specified" sentinel and mistyped lists become empty.
"""

from datetime import datetime
from typing import Any

from indenture.logging.logger import Log
from indenture.processor.exceptions import SummaryDataError
from indenture.summary.models import (
    LIST_FIELDS,
    NOT_SPECIFIED,
    SCALAR_FIELDS,
    SENIORITY_FIELDS,
    BondIndentureSummary,
    RawSummary,
    Seniority,
)


def normalize_summary(
    raw: RawSummary,
    *,
    document_id: str,
    created_at: datetime | None = None,
) -> BondIndentureSummary:
    """Validate and backfill a raw summary object.

    Raises:
        SummaryDataError: if ``raw`` is not an object.
    """
    if not isinstance(raw, dict):
        raise SummaryDataError("Invalid summary data structure")

    seniority_raw = raw.get("seniority")
    if not isinstance(seniority_raw, dict):
        seniority_raw = {}

    seniority = Seniority(
        **{attr: _text_or_sentinel(seniority_raw, wire) for wire, attr in SENIORITY_FIELDS.items()}
    )
    scalars = {attr: _text_or_sentinel(raw, wire) for wire, attr in SCALAR_FIELDS.items()}
    lists = {attr: _list_or_empty(raw, wire) for wire, attr in LIST_FIELDS.items()}

    defaulted = [wire for wire, attr in SCALAR_FIELDS.items() if scalars[attr] == NOT_SPECIFIED]
    if defaulted:
        Log.debug(f"Summary fields defaulted to sentinel: {defaulted}")

    summary_kwargs: dict[str, Any] = {**scalars, **lists}
    if created_at is not None:
        summary_kwargs["created_at"] = created_at
    return BondIndentureSummary(
        id=BondIndentureSummary.id_for(document_id),
        document_id=document_id,
        seniority=seniority,
        **summary_kwargs,
    )


def _text_or_sentinel(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        return NOT_SPECIFIED
    return value


def _list_or_empty(data: dict[str, Any], key: str) -> tuple[Any, ...]:
    value = data.get(key)
    if not isinstance(value, list):
        return ()
    return tuple(value)
