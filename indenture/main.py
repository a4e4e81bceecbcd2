"""
Command-line entry point: summarize one bond indenture PDF.

Examples:
  python -m indenture.main indenture.pdf
  python -m indenture.main indenture.pdf --export word --output-dir out/
  OWNER_ID=alice python -m indenture.main indenture.pdf --persist
"""

import argparse
import mimetypes
import sys
from functools import partial
from pathlib import Path

import psycopg

from indenture.config.settings import Settings
from indenture.database.connection import close_pool, init_pool
from indenture.database.repositories.documents_repository import DocumentsRepository
from indenture.database.repositories.summaries_repository import SummariesRepository
from indenture.database.schema import ensure_schema
from indenture.identity.exceptions import NotAuthenticatedError
from indenture.identity.provider import StaticIdentityProvider
from indenture.logging.logger import Log
from indenture.processor.exceptions import ProcessorError
from indenture.processor.models import DocumentProcessing, StepStatus, UploadedFile
from indenture.processor.processor import build_processor
from indenture.service.document_service import DocumentService
from indenture.summary.export import ExportFormat, export_file_name, render_text
from indenture.summary.models import BondIndentureSummary

EXIT_SUCCESS = 0
EXIT_PIPELINE_ERROR = 1
EXIT_USAGE_ERROR = 2


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="indenture",
        description="Generate a structured summary of a bond indenture PDF",
    )
    parser.add_argument("pdf", type=Path, help="Path to the indenture PDF")
    parser.add_argument(
        "--export",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.TEXT.value,
        help="Export format (default: text)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory to write the export file to (default: current directory)",
    )
    parser.add_argument(
        "--persist",
        action="store_true",
        help="Store the run in the database, owned by OWNER_ID",
    )
    return parser.parse_args(argv)


def load_upload(path: Path) -> UploadedFile:
    content_type, _ = mimetypes.guess_type(path.name)
    return UploadedFile(
        file_name=path.name,
        content_type=content_type or "application/octet-stream",
        data=path.read_bytes(),
    )


def print_snapshot(processing: DocumentProcessing) -> None:
    step = processing.current_step() or next(
        (s for s in reversed(processing.steps) if s.status is not StepStatus.PENDING),
        None,
    )
    if step is None:
        return
    progress = f"{step.progress:>3}%" if step.progress is not None else "    "
    print(
        f"[{processing.overall_progress():5.1f}%] {step.name:<20} "
        f"{step.status.value:<10} {progress} {step.message or ''}"
    )


def write_export(summary: BondIndentureSummary, fmt: ExportFormat, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / export_file_name(summary, fmt)
    path.write_text(render_text(summary), encoding="utf-8")
    return path


def run(args: argparse.Namespace, settings: Settings) -> int:
    if not args.pdf.is_file():
        print(f"File not found: {args.pdf}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    upload = load_upload(args.pdf)
    try:
        if args.persist:
            summary = _process_and_store(upload, settings)
        else:
            processor = build_processor(settings, observer=print_snapshot)
            processor.process_document(upload)
            processing = processor.last_processing
            summary = (
                BondIndentureSummary.from_json(processing.summary)
                if processing is not None and processing.summary
                else None
            )
    except NotAuthenticatedError as exc:
        print(f"{exc}. Set OWNER_ID to store runs.", file=sys.stderr)
        return EXIT_USAGE_ERROR
    except ProcessorError as exc:
        print(f"Processing failed: {exc}", file=sys.stderr)
        return EXIT_PIPELINE_ERROR
    except psycopg.Error as exc:
        Log.exception("Database error while storing the run")
        print(f"Database error: {exc}", file=sys.stderr)
        return EXIT_PIPELINE_ERROR

    if summary is None:
        print("Processing finished without a summary", file=sys.stderr)
        return EXIT_PIPELINE_ERROR
    path = write_export(summary, ExportFormat(args.export), args.output_dir)
    print(f"Summary written to {path}")
    return EXIT_SUCCESS


def _process_and_store(upload: UploadedFile, settings: Settings) -> BondIndentureSummary | None:
    identity = StaticIdentityProvider(settings.owner_id)
    # Raises NotAuthenticatedError before the pool is opened.
    identity.current_user_id()
    init_pool(settings)
    try:
        ensure_schema()
        service = DocumentService(
            processor_factory=partial(build_processor, settings),
            documents=DocumentsRepository(),
            summaries=SummariesRepository(),
            identity=identity,
        )
        return service.upload(upload, observer=print_snapshot).summary
    finally:
        close_pool()


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse arguments -> load settings -> process -> export."""
    args = parse_arguments(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())
