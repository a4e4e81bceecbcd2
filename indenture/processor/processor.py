import time
from collections.abc import Callable, Sequence
from functools import partial

from indenture.config.settings import Settings
from indenture.extraction.adapter import ExtractionAdapter
from indenture.extraction.factory import TextExtractionServiceFactory
from indenture.generation.client_base import BaseGenerationClient
from indenture.generation.factory import GenerationClientFactory
from indenture.logging.logger import Log
from indenture.processor.models import (
    DocumentProcessing,
    DocumentStatus,
    StepStatus,
    UploadedFile,
)
from indenture.processor.pipeline import PipelineContext, PipelineStep
from indenture.processor.steps import (
    AnalyzeStep,
    ExtractTextStep,
    GenerateSummaryStep,
    PreprocessStep,
    ValidateStep,
)

ProcessingObserver = Callable[[DocumentProcessing], None]


class Processor:
    """Runs one document through the pipeline steps in order.

    Pipeline: upload -> validation -> extraction -> preprocessing ->
    ai_analysis -> summary_generation. A snapshot of the aggregate is pushed
    to the observer after every state change.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        observer: ProcessingObserver | None = None,
        step_delay_seconds: float = 0.0,
    ) -> None:
        self._steps = list(steps)
        self._observer = observer
        self._step_delay_seconds = step_delay_seconds
        self.last_processing: DocumentProcessing | None = None

    def process_document(self, file: UploadedFile) -> str:
        """Run the full pipeline for ``file`` and return the document id.

        Raises:
            ProcessorError: (or any other step failure) after the failing step
                and the aggregate have been marked as errored.
        """
        processing = DocumentProcessing.create(file)
        self.last_processing = processing
        Log.info(f"Processing {file.file_name!r} ({file.size} bytes) as {processing.id}")

        self._update_step(processing, "upload", StepStatus.COMPLETED, "File uploaded", 100)
        context = PipelineContext(file=file, processing=processing)

        try:
            for step in self._steps:
                context.report = partial(
                    self._update_step, processing, step.step_id, StepStatus.PROCESSING
                )
                self._update_step(
                    processing,
                    step.step_id,
                    StepStatus.PROCESSING,
                    step.start_message,
                    step.start_progress,
                )
                message = step.run(context)
                self._update_step(processing, step.step_id, StepStatus.COMPLETED, message, 100)
        except Exception as exc:
            self._fail(processing, exc)
            raise

        if context.summary is not None:
            processing.summary = context.summary.to_json()
        processing.status = DocumentStatus.COMPLETED
        self._emit(processing)
        Log.info(f"Document {processing.id} processed successfully")
        return processing.id

    def _update_step(
        self,
        processing: DocumentProcessing,
        step_id: str,
        status: StepStatus,
        message: str,
        progress: int | None = None,
    ) -> None:
        processing.find_step(step_id).update(status, message, progress)
        Log.debug(f"[{processing.id}] {step_id}: {status.value} - {message}")
        self._emit(processing)
        if self._step_delay_seconds > 0:
            time.sleep(self._step_delay_seconds)

    def _fail(self, processing: DocumentProcessing, exc: Exception) -> None:
        message = str(exc) or "Unknown error occurred"
        processing.status = DocumentStatus.ERROR
        processing.error_message = message
        current = processing.current_step()
        if current is not None:
            current.update(StepStatus.ERROR, message)
        Log.error(
            f"Document {processing.id} failed at "
            f"{current.id if current else 'unknown step'}: {message}"
        )
        self._emit(processing)

    def _emit(self, processing: DocumentProcessing) -> None:
        if self._observer is None:
            return
        try:
            self._observer(processing.snapshot())
        except Exception as exc:
            Log.warning(f"Processing observer failed: {exc}")


def build_steps(
    settings: Settings,
    client: BaseGenerationClient | None = None,
) -> list[PipelineStep]:
    """Build the production step list from settings."""
    client = client or GenerationClientFactory.create(settings)
    adapter = ExtractionAdapter(
        TextExtractionServiceFactory.create(settings),
        chunk_size=settings.extraction_chunk_size,
    )
    return [
        ValidateStep(max_file_size_bytes=settings.max_file_size_bytes),
        ExtractTextStep(adapter, min_chars=settings.min_extracted_chars),
        PreprocessStep(),
        AnalyzeStep(
            client,
            model=settings.analysis_model,
            max_output_tokens=settings.analysis_max_output_tokens,
            max_chars=settings.analysis_max_chars,
        ),
        GenerateSummaryStep(
            client,
            model=settings.summary_model,
            excerpt_chars=settings.summary_excerpt_chars,
        ),
    ]


def build_processor(
    settings: Settings,
    observer: ProcessingObserver | None = None,
    client: BaseGenerationClient | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    return Processor(
        steps=build_steps(settings, client=client),
        observer=observer,
        step_delay_seconds=settings.step_delay_seconds,
    )
