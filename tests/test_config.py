"""Tests for the domain configuration store and build layout.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from potengine.config import BuildLayout, ConfigStore, DomainConfig
from potengine.diagnostics import ConfigInvalidError, ConfigMissingError, DiagnosticCode


class TestBuildLayout:
    """Test deterministic artifact paths."""

    def test_paths(self) -> None:
        """Every artifact lives at a path derived from its key."""
        layout = BuildLayout(Path("build"), Path("po"))

        assert layout.config_path("app") == Path("build/potengine/app/domain.cfg")
        assert layout.template_path("app") == Path("po/app.pot")
        assert layout.catalog_source_path("fr") == Path("po/fr.po")
        assert layout.compiled_catalog_dir() == Path("build/locale")
        assert layout.compiled_catalog_path("app", "fr") == Path(
            "build/locale/fr/LC_MESSAGES/app.mo"
        )


class TestDomainConfig:
    """Test DomainConfig validation."""

    def test_languages_keep_configured_order(self) -> None:
        """Languages are kept in the order given."""
        config = DomainConfig("app", ("fr", "en", "de"))

        assert config.languages == ("fr", "en", "de")
        assert config.has_language("en")
        assert not config.has_language("lv")

    def test_duplicate_language_rejected(self) -> None:
        """A language configured twice raises ValueError."""
        with pytest.raises(ValueError, match="configured more than once"):
            DomainConfig("app", ("fr", "fr"))

    def test_unknown_language_rejected(self) -> None:
        """A code Babel does not know raises ValueError."""
        with pytest.raises(ValueError, match="Unknown language code 'xx'"):
            DomainConfig("app", ("xx",))

    @pytest.mark.parametrize(
        "domain",
        ["", " app", "../app", "a/b", "a\\b", "a\nb"],
    )
    def test_domain_must_be_path_component(self, domain: str) -> None:
        """Domains that are not a single safe path component are rejected."""
        with pytest.raises(ValueError, match="Domain name"):
            DomainConfig(domain, ("fr",))

    def test_require_language(self) -> None:
        """require_language raises for unconfigured languages only."""
        config = DomainConfig("app", ("fr",))

        config.require_language("fr")
        with pytest.raises(ValueError, match="Language 'en' not configured for domain 'app'"):
            config.require_language("en")


class TestConfigStore:
    """Test ConfigStore persistence."""

    def test_read_before_write_raises_config_missing(self, store: ConfigStore) -> None:
        """Reading before any write is a build-order violation."""
        assert not store.exists()

        with pytest.raises(ConfigMissingError) as exc_info:
            store.read()

        assert exc_info.value.build_unit == "app"
        assert exc_info.value.path == str(store.path)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONFIG_MISSING

    def test_write_then_read_round_trip(self, store: ConfigStore) -> None:
        """read() returns exactly what write() persisted."""
        written = store.write("app", ["fr", "en"], emit_source=True, emit_binary=False)

        assert store.exists()
        assert store.read() == written
        assert written == DomainConfig("app", ("fr", "en"), emit_source=True, emit_binary=False)

    def test_write_creates_parent_directories(self, layout: BuildLayout) -> None:
        """write() creates the per-build-unit artifact directory."""
        store = ConfigStore(layout, "unit-1")
        store.write("app", ["fr"])

        assert layout.config_path("unit-1").is_file()

    def test_file_format(self, store: ConfigStore) -> None:
        """One field per line: domain, flags, then languages."""
        store.write("app", ["fr", "en"], emit_source=False, emit_binary=True)

        assert store.path.read_text(encoding="utf-8") == "app\nfalse\ntrue\nfr\nen\n"

    def test_write_overwrites_and_is_idempotent(self, store: ConfigStore) -> None:
        """A second write replaces the first; repeating it changes nothing."""
        store.write("app", ["fr"])
        store.write("other", ["de", "en"])
        first = store.path.read_bytes()
        store.write("other", ["de", "en"])

        assert store.path.read_bytes() == first
        assert store.read().domain == "other"
        assert store.read().languages == ("de", "en")

    def test_build_units_are_independent(self, layout: BuildLayout) -> None:
        """Each build unit has its own configuration."""
        ConfigStore(layout, "a").write("alpha", ["fr"])

        with pytest.raises(ConfigMissingError):
            ConfigStore(layout, "b").read()

    def test_invalid_build_unit_rejected(self, layout: BuildLayout) -> None:
        """Build units become directory names and must be path-safe."""
        with pytest.raises(ValueError, match="Build unit"):
            ConfigStore(layout, "../escape")

    def test_no_languages_allowed(self, store: ConfigStore) -> None:
        """A configuration without languages round trips."""
        store.write("app", [])

        assert store.read().languages == ()

    def test_truncated_file_is_invalid(self, store: ConfigStore) -> None:
        """Fewer than three lines raises ConfigInvalidError."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("app\ntrue\n", encoding="utf-8")

        with pytest.raises(ConfigInvalidError, match="expected at least 3 lines"):
            store.read()

    def test_bad_flag_is_invalid(self, store: ConfigStore) -> None:
        """Flags other than true/false raise ConfigInvalidError."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("app\nyes\ntrue\nfr\n", encoding="utf-8")

        with pytest.raises(ConfigInvalidError, match="emit-source flag") as exc_info:
            store.read()
        assert exc_info.value.path == str(store.path)

    def test_bad_language_is_invalid(self, store: ConfigStore) -> None:
        """A hand-edited unknown language raises ConfigInvalidError."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("app\ntrue\ntrue\nxx\n", encoding="utf-8")

        with pytest.raises(ConfigInvalidError, match="Unknown language code") as exc_info:
            store.read()
        assert isinstance(exc_info.value.__cause__, ValueError)

    @settings(deadline=None)
    @given(
        languages=st.lists(
            st.sampled_from(["fr", "en", "de", "lv", "pt_BR", "ja", "ar"]),
            unique=True,
            max_size=7,
        ),
        emit_source=st.booleans(),
        emit_binary=st.booleans(),
    )
    def test_round_trip_property(
        self,
        tmp_path_factory: pytest.TempPathFactory,
        languages: list[str],
        emit_source: bool,
        emit_binary: bool,
    ) -> None:
        """Any valid configuration reads back unchanged."""
        event(f"config_languages={len(languages)}")
        root = tmp_path_factory.mktemp("cfg")
        store = ConfigStore(BuildLayout(root, root / "po"), "unit")

        written = store.write(
            "app", languages, emit_source=emit_source, emit_binary=emit_binary
        )

        assert store.read() == written
