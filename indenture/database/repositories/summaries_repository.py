import json
from typing import Any

import psycopg
from psycopg.rows import dict_row

from indenture.database.connection import get_connection
from indenture.summary.models import BondIndentureSummary, Seniority


class SummariesRepository:
    """Database operations for the summaries table.

    List fields and the seniority block are stored as JSON text.
    """

    def create(self, summary: BondIndentureSummary, user_id: str) -> None:
        with get_connection() as conn:
            self.insert(conn, summary, user_id)
            conn.commit()

    def insert(
        self,
        conn: psycopg.Connection[Any],
        summary: BondIndentureSummary,
        user_id: str,
    ) -> None:
        """Insert one summary row on ``conn``. The caller commits."""
        conn.execute(
            """
            INSERT INTO summaries
            (id, document_id, user_id, issuer, bond_type, principal_amount,
             interest_rate, maturity_date, seniority, key_terms, covenants,
             default_provisions, executive_summary, created_at)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            """,
            (
                summary.id,
                summary.document_id,
                user_id,
                summary.issuer,
                summary.bond_type,
                summary.principal_amount,
                summary.interest_rate,
                summary.maturity_date,
                json.dumps(summary.seniority.to_dict()),
                json.dumps(list(summary.key_terms)),
                json.dumps(list(summary.covenants)),
                json.dumps(list(summary.default_provisions)),
                summary.executive_summary,
                summary.created_at,
            ),
        )

    def find_by_document(self, document_id: str, user_id: str) -> BondIndentureSummary | None:
        """Return the summary stored for an owner's document, if any."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, document_id, issuer, bond_type, principal_amount,
                           interest_rate, maturity_date, seniority, key_terms,
                           covenants, default_provisions, executive_summary,
                           created_at
                    FROM summaries
                    WHERE document_id = %s AND user_id = %s
                    LIMIT 1
                    """,
                    (document_id, user_id),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return self._to_summary(row)

    @staticmethod
    def _to_summary(row: dict[str, Any]) -> BondIndentureSummary:
        seniority = json.loads(row["seniority"])
        return BondIndentureSummary(
            id=row["id"],
            document_id=row["document_id"],
            seniority=Seniority(
                bond_ranking=seniority["bondRanking"],
                security_details=seniority["securityDetails"],
                cap_table_position=seniority["capTablePosition"],
                subordination_details=seniority["subordinationDetails"],
                guarantee_structure=seniority["guaranteeStructure"],
            ),
            issuer=row["issuer"],
            bond_type=row["bond_type"],
            principal_amount=row["principal_amount"],
            interest_rate=row["interest_rate"],
            maturity_date=row["maturity_date"],
            key_terms=tuple(json.loads(row["key_terms"])),
            covenants=tuple(json.loads(row["covenants"])),
            default_provisions=tuple(json.loads(row["default_provisions"])),
            executive_summary=row["executive_summary"],
            created_at=row["created_at"],
        )
