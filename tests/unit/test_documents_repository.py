from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from indenture.database.models import DocumentRecord
from indenture.database.repositories.documents_repository import DocumentsRepository
from indenture.database.repositories.summaries_repository import SummariesRepository
from indenture.processor.exceptions import DocumentNotFoundError
from indenture.summary.models import BondIndentureSummary

UPLOADED_AT = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _make_row(**overrides: object) -> dict:
    row = {
        "id": "doc_1717243200000_abc123xyz",
        "user_id": "user-1",
        "file_name": "indenture.pdf",
        "file_size": 2048,
        "status": "completed",
        "extracted_text": "INDENTURE dated as of June 1, 2024",
        "error_message": None,
        "uploaded_at": UPLOADED_AT,
        "created_at": UPLOADED_AT,
    }
    row.update(overrides)
    return row


def _mock_connection(mock_get_conn: MagicMock) -> tuple[MagicMock, MagicMock]:
    """Wire up a mock connection + cursor and return (mock_conn, mock_cursor)."""
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
    mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)
    return mock_conn, mock_cursor


def _record() -> DocumentRecord:
    return DocumentRecord(
        id="doc_1",
        user_id="user-1",
        file_name="indenture.pdf",
        file_size=10,
        status="completed",
        extracted_text="INDENTURE",
    )


class TestCreate:
    @patch("indenture.database.repositories.documents_repository.get_connection")
    def test_inserts_and_commits(self, mock_get_conn: MagicMock) -> None:
        mock_conn, _cursor = _mock_connection(mock_get_conn)
        record = DocumentRecord(
            id="doc_1",
            user_id="user-1",
            file_name="indenture.pdf",
            file_size=10,
            status="error",
            error_message="Invalid PDF file format",
        )

        DocumentsRepository().create(record)

        sql, params = mock_conn.execute.call_args.args
        assert "INSERT INTO documents" in sql
        assert params == (
            "doc_1",
            "user-1",
            "indenture.pdf",
            10,
            "error",
            None,
            "Invalid PDF file format",
            None,
        )
        mock_conn.commit.assert_called_once()


class TestCreateWithSummary:
    @patch("indenture.database.repositories.documents_repository.get_connection")
    def test_writes_both_rows_in_one_commit(self, mock_get_conn: MagicMock) -> None:
        mock_conn, _cursor = _mock_connection(mock_get_conn)
        summaries = MagicMock(spec=SummariesRepository)
        summary = BondIndentureSummary(id="summary_doc_1", document_id="doc_1")

        DocumentsRepository().create_with_summary(_record(), summary, summaries)

        assert "INSERT INTO documents" in mock_conn.execute.call_args.args[0]
        summaries.insert.assert_called_once_with(mock_conn, summary, "user-1")
        mock_conn.commit.assert_called_once()

    @patch("indenture.database.repositories.documents_repository.get_connection")
    def test_does_not_commit_when_summary_insert_fails(self, mock_get_conn: MagicMock) -> None:
        mock_conn, _cursor = _mock_connection(mock_get_conn)
        summaries = MagicMock(spec=SummariesRepository)
        summaries.insert.side_effect = RuntimeError("constraint violation")
        summary = BondIndentureSummary(id="summary_doc_1", document_id="doc_1")

        with pytest.raises(RuntimeError, match="constraint violation"):
            DocumentsRepository().create_with_summary(_record(), summary, summaries)

        mock_conn.commit.assert_not_called()


class TestListByOwner:
    @patch("indenture.database.repositories.documents_repository.get_connection")
    def test_returns_records(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = [_make_row(), _make_row(id="doc_2", status="error")]

        result = DocumentsRepository().list_by_owner("user-1")

        assert [r.id for r in result] == ["doc_1717243200000_abc123xyz", "doc_2"]
        assert result[0].uploaded_at == UPLOADED_AT
        assert result[1].status == "error"

    @patch("indenture.database.repositories.documents_repository.get_connection")
    def test_filters_by_owner_newest_first_with_limit(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = []

        DocumentsRepository().list_by_owner("user-1", limit=5)

        sql, params = mock_cursor.execute.call_args.args
        assert "ORDER BY created_at DESC" in sql
        assert params == ("user-1", 5)


class TestFindById:
    @patch("indenture.database.repositories.documents_repository.get_connection")
    def test_returns_record_when_found(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row()

        result = DocumentsRepository().find_by_id("doc_1717243200000_abc123xyz", "user-1")

        assert isinstance(result, DocumentRecord)
        assert result.file_name == "indenture.pdf"
        assert result.file_size == 2048

    @patch("indenture.database.repositories.documents_repository.get_connection")
    def test_raises_document_not_found_when_missing(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = None

        with pytest.raises(DocumentNotFoundError, match="Document doc_x not found"):
            DocumentsRepository().find_by_id("doc_x", "user-1")
