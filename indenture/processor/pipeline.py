from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from indenture.processor.models import DocumentProcessing, UploadedFile
from indenture.summary.models import BondIndentureSummary, RawSummary

StepReporter = Callable[[str, int], None]


def _no_report(message: str, progress: int) -> None:
    _ = message, progress


@dataclass(slots=True)
class PipelineContext:
    file: UploadedFile
    processing: DocumentProcessing
    report: StepReporter = _no_report
    extracted_text: str = ""
    cleaned_text: str = ""
    analysis: str = ""
    raw_summary: RawSummary | None = None
    summary: BondIndentureSummary | None = None


class PipelineStep(ABC):
    """One stage of the pipeline, bound to a fixed step id."""

    step_id: str
    start_message: str
    start_progress: int = 0

    @abstractmethod
    def run(self, context: PipelineContext) -> str:
        """Do the step's work and return its completion message."""
        raise NotImplementedError
