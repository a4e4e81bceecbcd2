from unittest.mock import MagicMock

import pytest

from indenture.extraction.adapter import ExtractionAdapter
from indenture.extraction.base import BaseTextExtractionService
from indenture.extraction.exceptions import PdfExtractionError
from indenture.processor.exceptions import TextExtractionError


def _make_adapter(*side_effect: object) -> tuple[ExtractionAdapter, MagicMock]:
    service = MagicMock(spec=BaseTextExtractionService)
    service.extract.side_effect = list(side_effect)
    return ExtractionAdapter(service, chunk_size=2000), service


class TestPrimaryExtraction:
    def test_returns_primary_text(self) -> None:
        adapter, service = _make_adapter("full document text")

        assert adapter.extract(b"%PDF") == "full document text"
        service.extract.assert_called_once_with(b"%PDF")

    def test_reports_progress(self) -> None:
        adapter, _service = _make_adapter("text")
        progress = MagicMock()

        adapter.extract(b"%PDF", on_progress=progress)

        progress.assert_any_call("Attempting direct text extraction...", 20)
        progress.assert_any_call("Text extracted successfully", 80)


class TestFallback:
    def test_falls_back_once_when_primary_raises(self) -> None:
        adapter, service = _make_adapter(PdfExtractionError("boom"), ["one", "two"])

        result = adapter.extract(b"%PDF")

        assert result == "one\n\ntwo"
        assert service.extract.call_count == 2
        service.extract.assert_called_with(b"%PDF", chunking=True, chunk_size=2000)

    def test_falls_back_when_primary_returns_non_text(self) -> None:
        adapter, service = _make_adapter(None, ("a", "b"))

        assert adapter.extract(b"%PDF") == "a\n\nb"
        assert service.extract.call_count == 2

    def test_coerces_non_sequence_fallback_result(self) -> None:
        adapter, _service = _make_adapter(RuntimeError("x"), 12345)

        assert adapter.extract(b"%PDF") == "12345"

    def test_fallback_reports_progress(self) -> None:
        adapter, _service = _make_adapter(RuntimeError("x"), ["chunk"])
        progress = MagicMock()

        adapter.extract(b"%PDF", on_progress=progress)

        progress.assert_any_call("Trying chunked extraction method...", 40)
        progress.assert_any_call("Text extracted using chunked method", 80)

    def test_raises_with_fallback_detail_when_both_fail(self) -> None:
        adapter, service = _make_adapter(
            PdfExtractionError("primary broke"),
            PdfExtractionError("fallback broke"),
        )

        with pytest.raises(TextExtractionError) as exc_info:
            adapter.extract(b"%PDF")

        message = str(exc_info.value)
        assert "fallback broke" in message
        assert "scanned, corrupted, or in an unsupported format" in message
        assert service.extract.call_count == 2

    def test_uses_exception_name_when_detail_is_empty(self) -> None:
        adapter, _service = _make_adapter(RuntimeError(), ValueError())

        with pytest.raises(TextExtractionError, match="ValueError"):
            adapter.extract(b"%PDF")
