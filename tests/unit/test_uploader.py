from unittest.mock import MagicMock

import pytest

from doccompare.storage.base import BaseDocumentStorage
from doccompare.storage.exceptions import (
    InvalidTypeError,
    MissingFileError,
    TooLargeError,
    UploadValidationError,
)
from doccompare.storage.uploader import DocumentUploader, UploadValidator

_ALLOWED = ["pdf", "docx", "png"]


def _make_uploader(now: int = 1000, max_bytes: int = 100) -> tuple[DocumentUploader, MagicMock]:
    storage = MagicMock(spec=BaseDocumentStorage)
    storage.save.side_effect = lambda name, data: len(data)
    validator = UploadValidator(_ALLOWED, max_bytes)
    return DocumentUploader(storage, validator, clock=lambda: now), storage


class TestUploadValidator:
    def test_accepts_allowed_extension(self) -> None:
        UploadValidator(_ALLOWED, 100).validate("report.pdf", 10)

    def test_extension_check_is_case_insensitive(self) -> None:
        UploadValidator(_ALLOWED, 100).validate("REPORT.PDF", 10)

    def test_accepts_extensions_given_with_dot(self) -> None:
        UploadValidator([".PDF"], 100).validate("report.pdf", 10)

    def test_rejects_empty_filename(self) -> None:
        with pytest.raises(MissingFileError, match="No file uploaded"):
            UploadValidator(_ALLOWED, 100).validate("", 10)

    def test_rejects_unknown_extension(self) -> None:
        with pytest.raises(InvalidTypeError, match="Invalid file type"):
            UploadValidator(_ALLOWED, 100).validate("payload.exe", 10)

    def test_rejects_extension_that_only_contains_allowed_one(self) -> None:
        with pytest.raises(InvalidTypeError):
            UploadValidator(_ALLOWED, 100).validate("notes.pdfx", 10)

    def test_rejects_missing_extension(self) -> None:
        with pytest.raises(InvalidTypeError):
            UploadValidator(_ALLOWED, 100).validate("pdf", 10)

    def test_size_at_limit_is_accepted(self) -> None:
        UploadValidator(_ALLOWED, 100).validate("a.pdf", 100)

    def test_rejects_size_over_limit(self) -> None:
        with pytest.raises(TooLargeError, match="101 bytes"):
            UploadValidator(_ALLOWED, 100).validate("a.pdf", 101)

    def test_errors_share_validation_base(self) -> None:
        with pytest.raises(UploadValidationError):
            UploadValidator(_ALLOWED, 100).validate("a.exe", 1)


class TestDocumentUploader:
    def test_stores_under_timestamped_name(self) -> None:
        uploader, storage = _make_uploader(now=1000)

        receipt = uploader.upload("report.pdf", b"%PDF data")

        storage.save.assert_called_once_with("report_1000.pdf", b"%PDF data")
        assert receipt.stored_name == "report_1000.pdf"
        assert receipt.original_name == "report.pdf"
        assert receipt.size_bytes == 9
        assert receipt.path == "/uploads/report_1000.pdf"

    def test_rejected_upload_writes_nothing(self) -> None:
        uploader, storage = _make_uploader()

        with pytest.raises(InvalidTypeError):
            uploader.upload("virus.exe", b"MZ")

        storage.save.assert_not_called()

    def test_declared_size_over_limit_is_rejected(self) -> None:
        uploader, storage = _make_uploader(max_bytes=10)

        with pytest.raises(TooLargeError):
            uploader.upload("a.pdf", b"small", declared_size=11)

        storage.save.assert_not_called()

    def test_actual_size_wins_over_smaller_declared_size(self) -> None:
        uploader, _ = _make_uploader(max_bytes=4)

        with pytest.raises(TooLargeError):
            uploader.upload("a.pdf", b"12345", declared_size=1)

    def test_same_name_same_millisecond_reuses_stored_name(self) -> None:
        uploader, storage = _make_uploader(now=77)

        first = uploader.upload("a.pdf", b"one")
        second = uploader.upload("a.pdf", b"two")

        assert first.stored_name == second.stored_name == "a_77.pdf"
        assert storage.save.call_count == 2
