from dataclasses import dataclass
from datetime import datetime


@dataclass
class DocumentRecord:
    """Represents a row from the documents table."""

    id: str
    user_id: str
    file_name: str
    file_size: int
    status: str
    extracted_text: str | None = None
    error_message: str | None = None
    uploaded_at: datetime | None = None
    created_at: datetime | None = None
