"""Tests for fallback loading and table merging.

Uses an in-memory load_file callback so every path read can be asserted.
A small set of tests goes through JsonFileLoader and real files.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import event, given

from jsonmessages.diagnostics import InvalidLanguageCodeError
from jsonmessages.source import (
    FallbackMerger,
    JsonFileLoader,
    PathResolver,
    merge_tables,
)
from jsonmessages.source.fallback import describe_location
from tests.strategies.messages import message_tables

if TYPE_CHECKING:
    from tests.conftest import MessageTree


class RecordingSink:
    """DiagnosticsSink collecting messages by level."""

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class FakeFiles:
    """In-memory load_file callback recording every path read."""

    def __init__(self, files: dict[str, dict[str, str]] | None = None) -> None:
        self.files = files or {}
        self.reads: list[str] = []

    def __call__(self, path: str) -> dict[str, str] | None:
        self.reads.append(path)
        table = self.files.get(path)
        return None if table is None else dict(table)


def _merger(
    source_language: str = "en-US",
    file_map: dict[str, str | tuple[str, ...]] | None = None,
) -> tuple[FallbackMerger, RecordingSink]:
    sink = RecordingSink()
    merger = FallbackMerger(PathResolver("/m", file_map or {}), source_language, sink)
    return merger, sink


class TestMergeTables:
    """merge_tables fill rules."""

    def test_fills_absent_and_empty(self) -> None:
        merged = merge_tables({"x": "X", "y": ""}, {"x": "X2", "y": "Y2", "z": "Z2"})
        assert merged == {"x": "X", "y": "Y2", "z": "Z2"}

    def test_empty_fallback_values_not_copied(self) -> None:
        assert merge_tables({"a": "A"}, {"b": ""}) == {"a": "A"}

    def test_empty_primary_kept_when_fallback_empty(self) -> None:
        assert merge_tables({"a": ""}, {"a": ""}) == {"a": ""}

    def test_inputs_not_modified(self) -> None:
        primary = {"a": ""}
        fallback = {"a": "A"}
        merge_tables(primary, fallback)
        assert primary == {"a": ""}
        assert fallback == {"a": "A"}

    @given(primary=message_tables(), fallback=message_tables())
    def test_non_empty_primary_values_win(
        self, primary: dict[str, str], fallback: dict[str, str]
    ) -> None:
        merged = merge_tables(primary, fallback)
        for key, value in primary.items():
            if value:
                assert merged[key] == value
        if set(primary) & set(fallback):
            event("merge=overlapping_keys")

    @given(primary=message_tables(), fallback=message_tables())
    def test_keys_are_union_of_primary_and_non_empty_fallback(
        self, primary: dict[str, str], fallback: dict[str, str]
    ) -> None:
        merged = merge_tables(primary, fallback)
        expected = set(primary) | {key for key, value in fallback.items() if value}
        assert set(merged) == expected

    @given(primary=message_tables(), fallback=message_tables())
    def test_empty_primary_filled_from_fallback(
        self, primary: dict[str, str], fallback: dict[str, str]
    ) -> None:
        merged = merge_tables(primary, fallback)
        for key, value in fallback.items():
            if value and not primary.get(key):
                assert merged[key] == value


class TestDescribeLocation:
    def test_single_path(self) -> None:
        assert describe_location("/m/de/app.json") == "/m/de/app.json"

    def test_path_list(self) -> None:
        assert describe_location(["/a.json", "/b.json"]) == "/a.json, /b.json"


class TestSubtagFallback:
    """Specific languages are completed from their generic family."""

    def test_variant_completed_from_subtag(self) -> None:
        merger, sink = _merger()
        files = FakeFiles({
            "/m/de-AT/app.json": {"Hello": "Servus", "Bye": ""},
            "/m/de/app.json": {"Hello": "Hallo", "Bye": "Tschüss", "Yes": "Ja"},
        })
        table = merger.load_with_fallback("app", "de-AT", files)
        assert table == {"Hello": "Servus", "Bye": "Tschüss", "Yes": "Ja"}
        assert sink.warnings == []
        assert sink.errors == []

    def test_variant_missing_uses_subtag(self) -> None:
        merger, sink = _merger()
        files = FakeFiles({"/m/de/app.json": {"Hello": "Hallo"}})
        assert merger.load_with_fallback("app", "de-AT", files) == {"Hello": "Hallo"}
        assert sink.errors == []

    def test_subtag_missing_keeps_variant(self) -> None:
        merger, _ = _merger()
        files = FakeFiles({"/m/de-AT/app.json": {"Hello": "Servus"}})
        assert merger.load_with_fallback("app", "de-AT", files) == {"Hello": "Servus"}

    def test_both_missing_reports_missing_translation(self) -> None:
        merger, sink = _merger()
        table = merger.load_with_fallback("app", "de-AT", FakeFiles())
        assert table == {}
        assert len(sink.errors) == 1
        assert "MISSING_TRANSLATION" in sink.errors[0]
        assert "Fallback file does not exist as well: /m/de/app.json" in sink.errors[0]
        assert sink.warnings == []

    def test_primary_read_before_fallback(self) -> None:
        merger, _ = _merger()
        files = FakeFiles()
        merger.load_with_fallback("app", "de-AT", files)
        assert files.reads == ["/m/de-AT/app.json", "/m/de/app.json"]

    def test_underscore_variant(self) -> None:
        merger, _ = _merger()
        files = FakeFiles({"/m/pt/app.json": {"a": "b"}})
        assert merger.load_with_fallback("app", "pt_BR", files) == {"a": "b"}


class TestSourceLanguageFallback:
    """A generic language sharing the source language's family."""

    def test_generic_completed_from_source_language(self) -> None:
        merger, sink = _merger(source_language="en-GB")
        files = FakeFiles({
            "/m/en/app.json": {"colour": ""},
            "/m/en-GB/app.json": {"colour": "colour", "lift": "lift"},
        })
        table = merger.load_with_fallback("app", "en", files)
        assert table == {"colour": "colour", "lift": "lift"}
        assert sink.errors == []

    def test_source_language_missing_is_silent(self) -> None:
        merger, sink = _merger(source_language="en-GB")
        assert merger.load_with_fallback("app", "en", FakeFiles()) == {}
        assert sink.errors == []
        assert sink.warnings == []

    def test_chain_variant_generic_source(self) -> None:
        """en-US over en over en-GB."""
        merger, _ = _merger(source_language="en-GB")
        files = FakeFiles({
            "/m/en-US/app.json": {"a": "US"},
            "/m/en/app.json": {"a": "EN", "b": "EN"},
            "/m/en-GB/app.json": {"a": "GB", "b": "GB", "c": "GB"},
        })
        assert merger.load_with_fallback("app", "en-US", files) == {
            "a": "US",
            "b": "EN",
            "c": "GB",
        }

    def test_variant_absent_uses_generic_without_errors(self) -> None:
        """en-US absent, en present, source en-GB: the generic table, no error."""
        merger, sink = _merger(source_language="en-GB")
        files = FakeFiles({"/m/en/app.json": {"a": "1"}})
        assert merger.load_with_fallback("app", "en-US", files) == {"a": "1"}
        assert sink.errors == []

    def test_chain_terminates(self) -> None:
        """The source language file is read once, without recursing."""
        merger, _ = _merger(source_language="en-GB")
        files = FakeFiles()
        merger.load_with_fallback("app", "en-US", files)
        assert files.reads == ["/m/en-US/app.json", "/m/en/app.json", "/m/en-GB/app.json"]

    def test_source_language_itself_has_no_fallback(self) -> None:
        merger, sink = _merger(source_language="en")
        files = FakeFiles({"/m/en/app.json": {"a": "A"}})
        assert merger.load_with_fallback("app", "en", files) == {"a": "A"}
        assert files.reads == ["/m/en/app.json"]
        assert sink.errors == []

    def test_unrelated_generic_language_missing_warns(self) -> None:
        merger, sink = _merger(source_language="en-US")
        assert merger.load_with_fallback("app", "fr", FakeFiles()) == {}
        assert len(sink.warnings) == 1
        assert "MISSING_FILE" in sink.warnings[0]
        assert sink.errors == []


class TestDegenerateLanguages:
    def test_empty_language(self) -> None:
        merger, sink = _merger()
        files = FakeFiles()
        assert merger.load_with_fallback("app", "", files) == {}
        assert files.reads == ["/m//app.json"]
        assert len(sink.warnings) == 1

    def test_invalid_language_before_any_read(self) -> None:
        merger, _ = _merger()
        files = FakeFiles()
        with pytest.raises(InvalidLanguageCodeError):
            merger.load_with_fallback("app", "../etc", files)
        assert files.reads == []

    def test_injection_shaped_language_before_any_read(self) -> None:
        merger, _ = _merger()
        files = FakeFiles()
        with pytest.raises(InvalidLanguageCodeError):
            merger.load_with_fallback("app", "en;DROP", files)
        assert files.reads == []

    def test_invalid_source_language(self) -> None:
        with pytest.raises(InvalidLanguageCodeError):
            FallbackMerger(PathResolver("/m"), "en US")


class TestListLocations:
    """file_map lists combine their files."""

    def test_later_files_override_earlier(self) -> None:
        merger, _ = _merger(file_map={"app": ("a.json", "b.json")})
        files = FakeFiles({
            "/m/de/a.json": {"x": "A", "y": "A"},
            "/m/de/b.json": {"y": "B"},
        })
        assert merger.load_with_fallback("app", "de", files) == {"x": "A", "y": "B"}

    def test_partial_list_is_found(self) -> None:
        merger, sink = _merger(file_map={"app": ("a.json", "b.json")})
        files = FakeFiles({"/m/de/b.json": {"y": "B"}})
        assert merger.load_with_fallback("app", "de", files) == {"y": "B"}
        assert sink.warnings == []

    def test_all_missing_warns_with_every_path(self) -> None:
        merger, sink = _merger(file_map={"app": ("a.json", "b.json")})
        assert merger.load_with_fallback("app", "de", FakeFiles()) == {}
        assert "/m/de/a.json, /m/de/b.json" in sink.warnings[0]

    def test_load_location_none_when_empty_list(self) -> None:
        merger, _ = _merger()
        assert merger.load_location([], FakeFiles()) is None


class TestWithJsonFiles:
    """End-to-end through JsonFileLoader."""

    def test_fallback_from_files(self, message_tree: MessageTree) -> None:
        message_tree.write("de-AT", "app.json", {"Hello": "Servus"})
        message_tree.write("de", "app.json", {"Hello": "Hallo", "Bye": "Tschüss"})
        merger = FallbackMerger(PathResolver(message_tree.base_path), "en-US")
        table = merger.load_with_fallback("app", "de-AT", JsonFileLoader().load)
        assert table == {"Hello": "Servus", "Bye": "Tschüss"}

    def test_malformed_primary_still_merges_fallback(self, message_tree: MessageTree) -> None:
        message_tree.write_raw("de-AT", "app.json", b"{broken")
        message_tree.write("de", "app.json", {"Hello": "Hallo"})
        sink = RecordingSink()
        merger = FallbackMerger(PathResolver(message_tree.base_path), "en-US", sink)
        table = merger.load_with_fallback("app", "de-AT", JsonFileLoader(diagnostics=sink).load)
        assert table == {"Hello": "Hallo"}
        assert any("MALFORMED_FILE" in message for message in sink.errors)
