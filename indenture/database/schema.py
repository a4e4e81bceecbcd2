from indenture.database.connection import get_connection

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS documents (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    file_name TEXT NOT NULL,
    file_size BIGINT NOT NULL,
    status TEXT NOT NULL,
    extracted_text TEXT,
    error_message TEXT,
    uploaded_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE INDEX IF NOT EXISTS documents_user_created_idx
    ON documents (user_id, created_at DESC);

CREATE TABLE IF NOT EXISTS summaries (
    id TEXT PRIMARY KEY,
    document_id TEXT NOT NULL,
    user_id TEXT NOT NULL,
    issuer TEXT NOT NULL,
    bond_type TEXT NOT NULL,
    principal_amount TEXT NOT NULL,
    interest_rate TEXT NOT NULL,
    maturity_date TEXT NOT NULL,
    seniority TEXT NOT NULL,
    key_terms TEXT NOT NULL,
    covenants TEXT NOT NULL,
    default_provisions TEXT NOT NULL,
    executive_summary TEXT NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE INDEX IF NOT EXISTS summaries_document_idx
    ON summaries (document_id, user_id);
"""


def ensure_schema() -> None:
    """Create the documents and summaries tables if they do not exist."""
    with get_connection() as conn:
        conn.execute(SCHEMA_SQL)  # type: ignore[arg-type]
        conn.commit()
