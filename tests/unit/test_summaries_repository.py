import json
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from indenture.database.repositories.summaries_repository import SummariesRepository
from indenture.summary.models import BondIndentureSummary, Seniority

CREATED_AT = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _summary() -> BondIndentureSummary:
    return BondIndentureSummary(
        id="summary_doc_1",
        document_id="doc_1",
        seniority=Seniority(bond_ranking="Senior Secured"),
        issuer="Example Corp.",
        bond_type="Corporate Bond",
        principal_amount="$100,000,000",
        interest_rate="4.25%",
        maturity_date="2030",
        key_terms=("Optional redemption",),
        covenants=("Limitation on liens", "Reporting"),
        default_provisions=(),
        executive_summary="Senior secured notes.",
        created_at=CREATED_AT,
    )


def _mock_connection(mock_get_conn: MagicMock) -> tuple[MagicMock, MagicMock]:
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
    mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)
    return mock_conn, mock_cursor


class TestCreate:
    @patch("indenture.database.repositories.summaries_repository.get_connection")
    def test_stores_lists_and_seniority_as_json(self, mock_get_conn: MagicMock) -> None:
        mock_conn, _cursor = _mock_connection(mock_get_conn)

        SummariesRepository().create(_summary(), "user-1")

        _sql, params = mock_conn.execute.call_args.args
        assert params[0] == "summary_doc_1"
        assert params[2] == "user-1"
        assert json.loads(params[8])["bondRanking"] == "Senior Secured"
        assert json.loads(params[9]) == ["Optional redemption"]
        assert json.loads(params[10]) == ["Limitation on liens", "Reporting"]
        assert json.loads(params[11]) == []
        mock_conn.commit.assert_called_once()


class TestFindByDocument:
    @patch("indenture.database.repositories.summaries_repository.get_connection")
    def test_returns_none_when_missing(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = None

        assert SummariesRepository().find_by_document("doc_1", "user-1") is None

    @patch("indenture.database.repositories.summaries_repository.get_connection")
    def test_rebuilds_summary_from_row(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        original = _summary()
        mock_cursor.fetchone.return_value = {
            "id": original.id,
            "document_id": original.document_id,
            "issuer": original.issuer,
            "bond_type": original.bond_type,
            "principal_amount": original.principal_amount,
            "interest_rate": original.interest_rate,
            "maturity_date": original.maturity_date,
            "seniority": json.dumps(original.seniority.to_dict()),
            "key_terms": json.dumps(list(original.key_terms)),
            "covenants": json.dumps(list(original.covenants)),
            "default_provisions": json.dumps(list(original.default_provisions)),
            "executive_summary": original.executive_summary,
            "created_at": CREATED_AT,
        }

        result = SummariesRepository().find_by_document("doc_1", "user-1")

        assert result == original
