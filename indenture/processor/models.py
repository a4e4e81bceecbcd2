import copy
import random
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from indenture.processor.exceptions import StepTransitionError


class StepStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class DocumentStatus(str, Enum):
    UPLOADING = "uploading"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


# Allowed forward moves; COMPLETED and ERROR are final.
_TRANSITIONS: dict[StepStatus, frozenset[StepStatus]] = {
    StepStatus.PENDING: frozenset({StepStatus.PROCESSING, StepStatus.COMPLETED}),
    StepStatus.PROCESSING: frozenset(
        {StepStatus.PROCESSING, StepStatus.COMPLETED, StepStatus.ERROR}
    ),
    StepStatus.COMPLETED: frozenset(),
    StepStatus.ERROR: frozenset(),
}

# (id, display name) in execution order.
PIPELINE_STEPS: tuple[tuple[str, str], ...] = (
    ("upload", "File Upload"),
    ("validation", "Document Validation"),
    ("extraction", "Text Extraction"),
    ("preprocessing", "Text Preprocessing"),
    ("ai_analysis", "AI Analysis"),
    ("summary_generation", "Summary Generation"),
)


@dataclass(frozen=True)
class UploadedFile:
    """A file handed to the pipeline by the upload surface."""

    file_name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class ProcessingStep:
    id: str
    name: str
    status: StepStatus = StepStatus.PENDING
    message: str | None = None
    progress: int | None = None

    def update(
        self,
        status: StepStatus,
        message: str | None = None,
        progress: int | None = None,
    ) -> None:
        """Move the step forward.

        Raises:
            StepTransitionError: if the step is already completed or errored.
        """
        if status not in _TRANSITIONS[self.status]:
            raise StepTransitionError(
                f"Step '{self.id}' cannot move from {self.status.value} to {status.value}"
            )
        self.status = status
        if message is not None:
            self.message = message
        if progress is not None:
            self.progress = max(0, min(100, progress))


def new_document_id() -> str:
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"doc_{int(time.time() * 1000)}_{suffix}"


@dataclass
class DocumentProcessing:
    """State of one upload attempt as it moves through the pipeline."""

    id: str
    file_name: str
    file_size: int
    uploaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status: DocumentStatus = DocumentStatus.UPLOADING
    steps: list[ProcessingStep] = field(default_factory=list)
    extracted_text: str | None = None
    summary: str | None = None
    error_message: str | None = None

    @classmethod
    def create(cls, file: UploadedFile, document_id: str | None = None) -> "DocumentProcessing":
        """Build a fresh aggregate with every step pending."""
        return cls(
            id=document_id or new_document_id(),
            file_name=file.file_name,
            file_size=file.size,
            status=DocumentStatus.PROCESSING,
            steps=[ProcessingStep(id=step_id, name=name) for step_id, name in PIPELINE_STEPS],
        )

    def find_step(self, step_id: str) -> ProcessingStep:
        for step in self.steps:
            if step.id == step_id:
                return step
        raise KeyError(f"Unknown step '{step_id}'")

    def current_step(self) -> ProcessingStep | None:
        return next((s for s in self.steps if s.status is StepStatus.PROCESSING), None)

    def overall_progress(self) -> float:
        if not self.steps:
            return 0.0
        done = sum(1 for s in self.steps if s.status is StepStatus.COMPLETED)
        return done / len(self.steps) * 100

    def snapshot(self) -> "DocumentProcessing":
        return copy.deepcopy(self)
