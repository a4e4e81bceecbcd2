from collections.abc import Callable
from dataclasses import dataclass

from indenture.database.models import DocumentRecord
from indenture.database.repositories.documents_repository import DocumentsRepository
from indenture.database.repositories.summaries_repository import SummariesRepository
from indenture.identity.provider import BaseIdentityProvider
from indenture.logging.logger import Log
from indenture.processor.models import DocumentProcessing, DocumentStatus, UploadedFile
from indenture.processor.processor import ProcessingObserver, Processor
from indenture.summary.models import BondIndentureSummary

ProcessorFactory = Callable[[ProcessingObserver | None], Processor]

HISTORY_LIMIT = 20


@dataclass(frozen=True)
class DocumentOutcome:
    document_id: str
    processing: DocumentProcessing
    summary: BondIndentureSummary | None


class DocumentService:
    """Runs uploads through the pipeline and keeps the owner's record history."""

    def __init__(
        self,
        processor_factory: ProcessorFactory,
        documents: DocumentsRepository,
        summaries: SummariesRepository,
        identity: BaseIdentityProvider,
    ) -> None:
        self._processor_factory = processor_factory
        self._documents = documents
        self._summaries = summaries
        self._identity = identity

    def upload(
        self,
        file: UploadedFile,
        observer: ProcessingObserver | None = None,
    ) -> DocumentOutcome:
        """Process ``file`` and persist the run, successful or not.

        Raises:
            NotAuthenticatedError: if nobody is signed in.
            ProcessorError: re-raised from the pipeline after the failed run
                has been stored.
        """
        owner_id = self._identity.current_user_id()
        processor = self._processor_factory(observer)
        try:
            document_id = processor.process_document(file)
        except Exception as exc:
            self._store_failure(processor.last_processing, file, owner_id, str(exc))
            raise

        processing = processor.last_processing
        if processing is None:
            raise RuntimeError("Processor finished without a processing record")
        record = DocumentRecord(
            id=document_id,
            user_id=owner_id,
            file_name=file.file_name,
            file_size=file.size,
            status=DocumentStatus.COMPLETED.value,
            extracted_text=processing.extracted_text or "",
            uploaded_at=processing.uploaded_at,
        )
        summary = None
        if processing.summary:
            summary = BondIndentureSummary.from_json(processing.summary)
            self._documents.create_with_summary(record, summary, self._summaries)
        else:
            self._documents.create(record)
        Log.info(f"Stored document {document_id} for user {owner_id}")
        return DocumentOutcome(document_id=document_id, processing=processing, summary=summary)

    def history(self, limit: int = HISTORY_LIMIT) -> list[DocumentProcessing]:
        """Return the signed-in user's recent documents, newest first, without steps."""
        owner_id = self._identity.current_user_id()
        records = self._documents.list_by_owner(owner_id, limit=limit)
        return [self._to_processing(record) for record in records]

    def view_summary(self, document_id: str) -> BondIndentureSummary | None:
        owner_id = self._identity.current_user_id()
        return self._summaries.find_by_document(document_id, owner_id)

    def _store_failure(
        self,
        processing: DocumentProcessing | None,
        file: UploadedFile,
        owner_id: str,
        message: str,
    ) -> None:
        if processing is None:
            return
        try:
            self._documents.create(
                DocumentRecord(
                    id=processing.id,
                    user_id=owner_id,
                    file_name=file.file_name,
                    file_size=file.size,
                    status=DocumentStatus.ERROR.value,
                    error_message=processing.error_message or message,
                    uploaded_at=processing.uploaded_at,
                )
            )
        except Exception:
            Log.exception(f"Failed to store errored document {processing.id}")

    @staticmethod
    def _to_processing(record: DocumentRecord) -> DocumentProcessing:
        processing = DocumentProcessing(
            id=record.id,
            file_name=record.file_name,
            file_size=record.file_size,
            status=DocumentStatus(record.status),
            steps=[],
            extracted_text=record.extracted_text,
            error_message=record.error_message,
        )
        if record.uploaded_at is not None:
            processing.uploaded_at = record.uploaded_at
        return processing
