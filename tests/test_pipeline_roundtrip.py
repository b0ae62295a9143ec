"""End-to-end tests: configure, record, merge, sync, compile, load, format.

Uses BabelCatalogTool so every stage runs in-process.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from babel.messages.pofile import read_po, write_po

from potengine import (
    BabelCatalogTool,
    BuildLayout,
    ConfigMissingError,
    ConfigStore,
    LocalizationPipeline,
    MessageRecord,
    RecordStatus,
    SourceLocation,
    SyncAction,
    translate,
    translate_plural,
)
from potengine.diagnostics import CompileError
from tests.strategies.pipeline import RecordingCatalogTool


def _translate_source(path: Path, translations: dict[str, str | tuple[str, str]]) -> None:
    with path.open("rb") as fp:
        catalog = read_po(fp)
    for msgid, msgstr in translations.items():
        catalog[msgid].string = msgstr
    with path.open("wb") as fp:
        write_po(fp, catalog)


class TestRoundTrip:
    """Full pipeline round trips."""

    def test_plural_round_trip_selects_form_by_count(
        self, store: ConfigStore, layout: BuildLayout
    ) -> None:
        """An untranslated plural falls back to item/items by count."""
        store.write("app", ["fr"])
        pipeline = LocalizationPipeline.from_store(store, layout, BabelCatalogTool())

        pipeline.build([MessageRecord("item", plural="items")])
        catalogs = pipeline.load()

        catalog = catalogs.catalog("fr")
        assert translate_plural(catalog, "item", "items", 1) == ("item", ())
        assert translate_plural(catalog, "item", "items", 2) == ("items", ())

    def test_translations_survive_rebuild(self, store: ConfigStore, layout: BuildLayout) -> None:
        """Translator edits are kept by later builds and reach the runtime."""
        store.write("app", ["fr"])
        pipeline = LocalizationPipeline.from_store(store, layout, BabelCatalogTool())
        pipeline.build(
            [
                MessageRecord("Hello {}!", location=SourceLocation("src/main.rs", 3)),
                MessageRecord("{} file", plural="{} files"),
            ]
        )
        _translate_source(
            layout.catalog_source_path("fr"),
            {
                "Hello {}!": "Bonjour {} !",
                "{} file": ("{} fichier", "{} fichiers"),
            },
        )

        summary = pipeline.build([MessageRecord("Hello {}!"), MessageRecord("Bye")])
        catalogs = pipeline.load()

        assert summary.merge.appended_count == 1
        assert summary.synced == {"fr": SyncAction.MERGED}
        catalog = catalogs.catalog("fr")
        assert translate(catalog, "Hello {}!", ["Monde"]) == ("Bonjour Monde !", ())
        assert translate_plural(catalog, "{} file", "{} files", 1) == ("1 fichier", ())
        assert translate_plural(catalog, "{} file", "{} files", 5) == ("5 fichiers", ())
        assert translate(catalog, "Bye") == ("Bye", ())

    def test_two_languages(self, store: ConfigStore, layout: BuildLayout) -> None:
        """Each configured language gets its own compiled catalog."""
        store.write("app", ["fr", "en"])
        pipeline = LocalizationPipeline.from_store(store, layout, BabelCatalogTool())

        summary = pipeline.build([MessageRecord("Hello")])
        catalogs = pipeline.load()

        assert list(summary.compiled) == ["fr", "en"]
        assert catalogs.languages == ("fr", "en")
        assert all(path.is_file() for path in summary.compiled.values())


class TestLocalizationPipeline:
    """Test orchestration details."""

    def test_from_store_requires_config(self, store: ConfigStore, layout: BuildLayout) -> None:
        """A pipeline cannot start before the configuration is written."""
        with pytest.raises(ConfigMissingError):
            LocalizationPipeline.from_store(store, layout, BabelCatalogTool())

    def test_build_runs_stages_in_order(
        self,
        store: ConfigStore,
        layout: BuildLayout,
        recording_tool: RecordingCatalogTool,
    ) -> None:
        """Merge, then sync every language, then compile every language."""
        store.write("app", ["fr", "en"])
        pipeline = LocalizationPipeline.from_store(store, layout, recording_tool)

        summary = pipeline.build([MessageRecord("a"), MessageRecord("a"), MessageRecord("")])

        assert recording_tool.operations() == ["init", "init", "compile", "compile"]
        assert summary.records == {
            RecordStatus.PENDING: 1,
            RecordStatus.DUPLICATE: 1,
            RecordStatus.IGNORED: 1,
        }
        assert summary.merge.created
        assert summary.synced == {"fr": SyncAction.INITIALIZED, "en": SyncAction.INITIALIZED}

    def test_emit_flags_off_skip_sync_and_compile(
        self,
        store: ConfigStore,
        layout: BuildLayout,
        recording_tool: RecordingCatalogTool,
    ) -> None:
        """With both toggles off only the template is maintained."""
        store.write("app", ["fr"], emit_source=False, emit_binary=False)
        pipeline = LocalizationPipeline.from_store(store, layout, recording_tool)

        summary = pipeline.build([MessageRecord("Hello")])

        assert recording_tool.calls == []
        assert summary.synced == {}
        assert summary.compiled == {}
        assert layout.template_path("app").is_file()

    def test_emit_binary_without_sources_fails(
        self,
        store: ConfigStore,
        layout: BuildLayout,
        recording_tool: RecordingCatalogTool,
    ) -> None:
        """Compiling without synchronized sources reports the skipped step."""
        store.write("app", ["fr"], emit_source=False, emit_binary=True)
        pipeline = LocalizationPipeline.from_store(store, layout, recording_tool)

        with pytest.raises(CompileError) as exc_info:
            pipeline.build([MessageRecord("Hello")])

        assert exc_info.value.language == "fr"

    def test_stage_objects_share_config(
        self,
        store: ConfigStore,
        layout: BuildLayout,
        recording_tool: RecordingCatalogTool,
    ) -> None:
        """Stages act directly when called, regardless of the toggles."""
        store.write("app", ["fr"], emit_source=False, emit_binary=False)
        pipeline = LocalizationPipeline.from_store(store, layout, recording_tool)
        pipeline.build([MessageRecord("Hello")])

        assert pipeline.config.domain == "app"
        assert pipeline.synchronizer.sync("fr") == SyncAction.INITIALIZED
        assert pipeline.compiler.compile("fr") == layout.compiled_catalog_path("app", "fr")
        assert pipeline.registry.pending == ()

    def test_config_read_once(
        self,
        store: ConfigStore,
        layout: BuildLayout,
        recording_tool: RecordingCatalogTool,
    ) -> None:
        """Rewriting the stored configuration does not affect a running pipeline."""
        store.write("app", ["fr"])
        pipeline = LocalizationPipeline.from_store(store, layout, recording_tool)
        store.write("app", ["fr", "en"])

        summary = pipeline.build([MessageRecord("Hello")])

        assert list(summary.synced) == ["fr"]
