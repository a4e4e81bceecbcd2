from indenture.extraction.adapter import ExtractionAdapter
from indenture.generation.client_base import BaseGenerationClient
from indenture.generation.prompts import (
    ANALYSIS_MAX_CHARS,
    SUMMARY_EXCERPT_CHARS,
    build_analysis_prompt,
    build_summary_prompt,
    summary_json_schema,
)
from indenture.logging.logger import Log
from indenture.processor.exceptions import (
    AnalysisError,
    InsufficientContentError,
    InvalidFileFormatError,
    SummaryDataError,
    SummaryGenerationError,
)
from indenture.processor.pipeline import PipelineContext, PipelineStep
from indenture.processor.text_cleaner import clean_text
from indenture.summary.models import RawSummary
from indenture.summary.normalizer import normalize_summary

PDF_CONTENT_TYPE = "application/pdf"
MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_EXTRACTED_CHARS = 100


class ValidateStep(PipelineStep):
    step_id = "validation"
    start_message = "Validating PDF structure..."
    start_progress = 25

    def __init__(self, max_file_size_bytes: int = MAX_FILE_SIZE_BYTES) -> None:
        self._max_file_size_bytes = max_file_size_bytes

    def run(self, context: PipelineContext) -> str:
        file = context.file
        if (
            file.content_type != PDF_CONTENT_TYPE
            or file.size <= 0
            or file.size > self._max_file_size_bytes
        ):
            Log.warning(
                f"Rejected {file.file_name!r}: type={file.content_type} size={file.size}"
            )
            raise InvalidFileFormatError("Invalid PDF file format")
        return "Document validated successfully"


class ExtractTextStep(PipelineStep):
    step_id = "extraction"
    start_message = "Extracting text from PDF..."

    def __init__(
        self,
        adapter: ExtractionAdapter,
        min_chars: int = MIN_EXTRACTED_CHARS,
    ) -> None:
        self._adapter = adapter
        self._min_chars = min_chars

    def run(self, context: PipelineContext) -> str:
        text = self._adapter.extract(context.file.data, on_progress=context.report)
        if not text or len(text.strip()) < self._min_chars:
            raise InsufficientContentError(
                "Insufficient text extracted from document. "
                "Please ensure the PDF contains readable text."
            )
        context.extracted_text = text
        context.processing.extracted_text = text
        Log.info(f"Extracted {len(text)} chars from document {context.processing.id}")
        return f"Extracted {len(text)} characters"


class PreprocessStep(PipelineStep):
    step_id = "preprocessing"
    start_message = "Cleaning and structuring text..."

    def run(self, context: PipelineContext) -> str:
        context.cleaned_text = clean_text(context.extracted_text)
        return "Text preprocessed and structured"


class AnalyzeStep(PipelineStep):
    step_id = "ai_analysis"
    start_message = "Analyzing document with AI..."

    def __init__(
        self,
        client: BaseGenerationClient,
        *,
        model: str,
        max_output_tokens: int,
        max_chars: int = ANALYSIS_MAX_CHARS,
    ) -> None:
        self._client = client
        self._model = model
        self._max_output_tokens = max_output_tokens
        self._max_chars = max_chars

    def run(self, context: PipelineContext) -> str:
        prompt = build_analysis_prompt(context.cleaned_text, self._max_chars)
        Log.debug(f"Analysis prompt:\n{prompt}")
        try:
            analysis = self._client.generate_text(
                prompt=prompt,
                model=self._model,
                max_output_tokens=self._max_output_tokens,
            ) or ""
            if not analysis.strip():
                raise AnalysisError("AI analysis returned empty result")
        except Exception as exc:
            raise AnalysisError(f"AI analysis failed: {exc}. Please try again.") from exc
        Log.debug(f"AI analysis response:\n{analysis}")
        context.analysis = analysis
        return "Document analysis completed"


class GenerateSummaryStep(PipelineStep):
    step_id = "summary_generation"
    start_message = "Generating structured summary..."

    def __init__(
        self,
        client: BaseGenerationClient,
        *,
        model: str,
        excerpt_chars: int = SUMMARY_EXCERPT_CHARS,
    ) -> None:
        self._client = client
        self._model = model
        self._excerpt_chars = excerpt_chars

    def run(self, context: PipelineContext) -> str:
        prompt = build_summary_prompt(context.cleaned_text, context.analysis, self._excerpt_chars)
        Log.debug(f"Summary prompt:\n{prompt}")
        try:
            response = self._client.generate_object(
                prompt=prompt,
                model=self._model,
                json_schema=summary_json_schema(),
            )
        except Exception as exc:
            raise SummaryGenerationError(
                f"Summary generation failed: {exc}. Please try again."
            ) from exc
        context.raw_summary = RawSummary(response)
        Log.debug(f"AI summary response:\n{context.raw_summary!r}")

        try:
            context.summary = normalize_summary(
                context.raw_summary, document_id=context.processing.id
            )
        except SummaryDataError as exc:
            raise SummaryDataError(f"Summary generation failed: {exc}. Please try again.") from exc
        return "Summary generated successfully"
