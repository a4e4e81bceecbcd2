from typing import Any

import psycopg
from psycopg.rows import dict_row

from indenture.database.connection import get_connection
from indenture.database.models import DocumentRecord
from indenture.database.repositories.summaries_repository import SummariesRepository
from indenture.processor.exceptions import DocumentNotFoundError
from indenture.summary.models import BondIndentureSummary

_COLUMNS = """
    id, user_id, file_name, file_size, status,
    extracted_text, error_message, uploaded_at, created_at
"""


class DocumentsRepository:
    """Database operations for the documents table."""

    def create(self, record: DocumentRecord) -> None:
        """Insert one document row; created_at is set by the database."""
        with get_connection() as conn:
            self._insert(conn, record)
            conn.commit()

    def create_with_summary(
        self,
        record: DocumentRecord,
        summary: BondIndentureSummary,
        summaries: SummariesRepository,
    ) -> None:
        """Insert a document row and its summary row in one transaction."""
        with get_connection() as conn:
            self._insert(conn, record)
            summaries.insert(conn, summary, record.user_id)
            conn.commit()

    @staticmethod
    def _insert(conn: psycopg.Connection[Any], record: DocumentRecord) -> None:
        conn.execute(
            """
            INSERT INTO documents
            (id, user_id, file_name, file_size, status,
             extracted_text, error_message, uploaded_at)
            VALUES (%s, %s, %s, %s, %s, %s, %s, COALESCE(%s, NOW()))
            """,
            (
                record.id,
                record.user_id,
                record.file_name,
                record.file_size,
                record.status,
                record.extracted_text,
                record.error_message,
                record.uploaded_at,
            ),
        )

    def list_by_owner(self, user_id: str, limit: int = 20) -> list[DocumentRecord]:
        """Return the owner's most recent documents, newest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM documents
                    WHERE user_id = %s
                    ORDER BY created_at DESC
                    LIMIT %s
                    """,  # noqa: S608
                    (user_id, limit),
                )
                rows = cur.fetchall()
        return [self._to_record(row) for row in rows]

    def find_by_id(self, document_id: str, user_id: str) -> DocumentRecord:
        """Find one of the owner's documents.

        Raises:
            DocumentNotFoundError: if the owner has no document with this ID.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM documents
                    WHERE id = %s AND user_id = %s
                    """,  # noqa: S608
                    (document_id, user_id),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return self._to_record(row)

    @staticmethod
    def _to_record(row: dict[str, Any]) -> DocumentRecord:
        return DocumentRecord(
            id=row["id"],
            user_id=row["user_id"],
            file_name=row["file_name"],
            file_size=row["file_size"],
            status=row["status"],
            extracted_text=row["extracted_text"],
            error_message=row["error_message"],
            uploaded_at=row["uploaded_at"],
            created_at=row["created_at"],
        )
