import pytest

from doccompare.storage.naming import (
    assign_stored_name,
    current_millis,
    recover_original_name,
    split_extension,
)


class TestSplitExtension:
    def test_splits_at_last_dot(self) -> None:
        assert split_extension("archive.tar.gz") == ("archive.tar", ".gz")

    def test_name_without_extension(self) -> None:
        assert split_extension("README") == ("README", "")

    def test_leading_dot_is_not_an_extension(self) -> None:
        assert split_extension(".env") == (".env", "")

    def test_uses_final_path_component(self) -> None:
        assert split_extension("scans/2024.q1/report.pdf") == ("report", ".pdf")


class TestAssignStoredName:
    def test_appends_timestamp_before_extension(self) -> None:
        assert assign_stored_name("report.pdf", 1000) == "report_1000.pdf"

    def test_keeps_extension_case(self) -> None:
        assert assign_stored_name("Scan.PDF", 42) == "Scan_42.PDF"

    def test_name_without_extension(self) -> None:
        assert assign_stored_name("notes", 7) == "notes_7"

    def test_same_name_same_millisecond_collides(self) -> None:
        # No collision retry: the second upload overwrites the first.
        assert assign_stored_name("a.pdf", 5) == assign_stored_name("a.pdf", 5)

    def test_different_millisecond_differs(self) -> None:
        assert assign_stored_name("a.pdf", 5) != assign_stored_name("a.pdf", 6)


class TestRecoverOriginalName:
    def test_strips_timestamp(self) -> None:
        assert recover_original_name("report_1000.pdf") == "report.pdf"

    def test_returns_name_without_underscore_unchanged(self) -> None:
        assert recover_original_name("report.pdf") == "report.pdf"

    def test_returns_name_without_extension_unchanged(self) -> None:
        assert recover_original_name("README_1000") == "README_1000"

    def test_leading_underscore_is_not_a_separator(self) -> None:
        assert recover_original_name("_1000.pdf") == "_1000.pdf"

    def test_underscore_after_last_dot_is_ignored(self) -> None:
        assert recover_original_name("data.v1_final") == "data.v1_final"

    def test_manually_placed_name_with_underscore_is_shortened(self) -> None:
        # Best-effort inverse: names that never got a timestamp lose their suffix.
        assert recover_original_name("scan_final.pdf") == "scan.pdf"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "original",
        ["report.pdf", "my_report.pdf", "a.b.c.docx", "salary slip.PNG", "x_1.tar.gz"],
    )
    @pytest.mark.parametrize("now", [0, 1000, 1_700_000_000_123])
    def test_recover_inverts_assign(self, original: str, now: int) -> None:
        assert recover_original_name(assign_stored_name(original, now)) == original


class TestCurrentMillis:
    def test_is_epoch_milliseconds(self) -> None:
        assert current_millis() > 1_600_000_000_000
