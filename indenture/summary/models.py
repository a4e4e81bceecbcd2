import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import NewType

NOT_SPECIFIED = "Not specified"

# Untrusted structured-generation output; only normalize_summary() may consume it.
RawSummary = NewType("RawSummary", object)

SENIORITY_FIELDS: dict[str, str] = {
    "bondRanking": "bond_ranking",
    "securityDetails": "security_details",
    "capTablePosition": "cap_table_position",
    "subordinationDetails": "subordination_details",
    "guaranteeStructure": "guarantee_structure",
}

SCALAR_FIELDS: dict[str, str] = {
    "issuer": "issuer",
    "bondType": "bond_type",
    "principalAmount": "principal_amount",
    "interestRate": "interest_rate",
    "maturityDate": "maturity_date",
    "executiveSummary": "executive_summary",
}

LIST_FIELDS: dict[str, str] = {
    "keyTerms": "key_terms",
    "covenants": "covenants",
    "defaultProvisions": "default_provisions",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Seniority:
    """Where the bonds rank in the issuer's capital structure."""

    bond_ranking: str = NOT_SPECIFIED
    security_details: str = NOT_SPECIFIED
    cap_table_position: str = NOT_SPECIFIED
    subordination_details: str = NOT_SPECIFIED
    guarantee_structure: str = NOT_SPECIFIED

    def to_dict(self) -> dict[str, str]:
        return {wire: getattr(self, attr) for wire, attr in SENIORITY_FIELDS.items()}


@dataclass(frozen=True)
class BondIndentureSummary:
    """Validated structured summary of one bond indenture."""

    id: str
    document_id: str
    seniority: Seniority = field(default_factory=Seniority)
    issuer: str = NOT_SPECIFIED
    bond_type: str = NOT_SPECIFIED
    principal_amount: str = NOT_SPECIFIED
    interest_rate: str = NOT_SPECIFIED
    maturity_date: str = NOT_SPECIFIED
    key_terms: tuple[str, ...] = ()
    covenants: tuple[str, ...] = ()
    default_provisions: tuple[str, ...] = ()
    executive_summary: str = NOT_SPECIFIED
    created_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def id_for(document_id: str) -> str:
        return f"summary_{document_id}"

    def to_dict(self) -> dict[str, object]:
        """Serialize with the camelCase keys used on the wire and in storage."""
        data: dict[str, object] = {
            "id": self.id,
            "documentId": self.document_id,
            "seniority": self.seniority.to_dict(),
        }
        for wire, attr in SCALAR_FIELDS.items():
            data[wire] = getattr(self, attr)
        for wire, attr in LIST_FIELDS.items():
            data[wire] = list(getattr(self, attr))
        data["createdAt"] = self.created_at.isoformat()
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "BondIndentureSummary":
        """Rebuild a summary previously produced by ``to_dict``."""
        seniority_data = data.get("seniority") or {}
        if not isinstance(seniority_data, dict):
            raise ValueError("'seniority' must be an object")
        kwargs: dict[str, object] = {
            attr: data[wire] for wire, attr in SCALAR_FIELDS.items() if wire in data
        }
        for wire, attr in LIST_FIELDS.items():
            kwargs[attr] = tuple(data.get(wire) or ())  # type: ignore[arg-type]
        created_at = data.get("createdAt")
        if isinstance(created_at, str):
            kwargs["created_at"] = datetime.fromisoformat(created_at)
        return cls(
            id=str(data["id"]),
            document_id=str(data["documentId"]),
            seniority=Seniority(
                **{
                    attr: seniority_data[wire]
                    for wire, attr in SENIORITY_FIELDS.items()
                    if wire in seniority_data
                }
            ),
            **kwargs,  # type: ignore[arg-type]
        )

    @classmethod
    def from_json(cls, payload: str) -> "BondIndentureSummary":
        data = json.loads(payload)
        if not isinstance(data, dict):
            raise ValueError("Summary JSON must be an object")
        return cls.from_dict(data)
