"""
Tests for Config — Layered configuration for extension aliases and highlight names

These tests validate:
- Config hierarchy (project > user > env > defaults)
- Validation of language and highlight settings
- set/get round trips through YAML files

User config is redirected to a temp dir by the autouse isolated_config fixture.
"""

import pytest
from pathlib import Path

from codelens.config import (
    Config,
    ConfigManager,
    HighlightConfig,
    LanguagesConfig,
    get_config,
)
from codelens.core.parsing import DEFAULT_HIGHLIGHT_NAMES


class TestLanguagesConfig:
    """Extension alias validation."""

    def test_default_empty(self):
        """No aliases by default."""
        assert LanguagesConfig().extensions == {}

    def test_validate_known_language(self):
        """Aliases to known languages are valid."""
        config = LanguagesConfig(extensions={'pyi': 'python', 'mjs': 'javascript'})
        assert config.validate() is None

    def test_validate_unknown_language(self):
        """Aliases to unknown languages are reported."""
        config = LanguagesConfig(extensions={'cbl': 'cobol'})
        error = config.validate()
        assert error is not None
        assert "Unknown language 'cobol'" in error

    def test_validate_builtin_extension_clash(self):
        """Aliases cannot reroute a built-in extension to another language."""
        config = LanguagesConfig(extensions={'ts': 'python'})
        error = config.validate()
        assert error is not None
        assert "built in for typescript" in error

    def test_validate_builtin_extension_same_language(self):
        """Aliasing a built-in extension to its own language is valid."""
        assert LanguagesConfig(extensions={'go': 'go'}).validate() is None


class TestHighlightConfig:
    """Highlight name validation."""

    def test_defaults(self):
        """Defaults to the built-in highlight names."""
        assert HighlightConfig().names == DEFAULT_HIGHLIGHT_NAMES

    def test_defaults_not_shared(self):
        """Each config gets its own list."""
        config = HighlightConfig()
        config.names.append("custom")
        assert "custom" not in HighlightConfig().names

    def test_validate_empty(self):
        """An empty name list is invalid."""
        assert HighlightConfig(names=[]).validate() is not None

    def test_validate_blank_name(self):
        """Blank names are invalid."""
        assert HighlightConfig(names=["keyword", " "]).validate() is not None


class TestConfigSerialization:
    """to_dict / from_dict."""

    def test_round_trip(self):
        """A config survives to_dict/from_dict."""
        config = Config(
            languages=LanguagesConfig(extensions={'pyi': 'python'}),
            highlight=HighlightConfig(names=["keyword", "type"]),
        )

        restored = Config.from_dict(config.to_dict())

        assert restored == config

    def test_from_dict_strips_dots(self):
        """Extension keys may be written with a leading dot."""
        config = Config.from_dict({"languages": {"extensions": {".pyi": "python"}}})
        assert config.languages.extensions == {'pyi': 'python'}

    def test_from_dict_empty_sections(self):
        """Null sections fall back to defaults."""
        config = Config.from_dict({"languages": None, "highlight": None})
        assert config.languages.extensions == {}
        assert config.highlight.names == DEFAULT_HIGHLIGHT_NAMES

    def test_validate_reports_first_error(self):
        """Config.validate surfaces section errors."""
        config = Config(languages=LanguagesConfig(extensions={'x': 'nope'}))
        assert "Unknown language" in config.validate()


class TestConfigManager:
    """Configuration loading and saving."""

    def test_load_defaults(self, tmp_path):
        """Loads defaults when no config files exist."""
        config = ConfigManager(tmp_path).load()

        assert config.languages.extensions == {}
        assert config.highlight.names == DEFAULT_HIGHLIGHT_NAMES

    def test_load_cached(self, tmp_path):
        """load returns the same object until saved."""
        manager = ConfigManager(tmp_path)
        assert manager.load() is manager.load()

    def test_save_and_load_project(self, tmp_path):
        """Saves and loads project config."""
        manager = ConfigManager(tmp_path)
        manager.save_project(Config(languages=LanguagesConfig(extensions={'pyi': 'python'})))

        loaded = ConfigManager(tmp_path).load()

        assert loaded.languages.extensions == {'pyi': 'python'}
        assert (tmp_path / ".codelens" / "config.yaml").exists()

    def test_project_overrides_user(self, tmp_path, isolated_config):
        """Project config takes priority over user config."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.yaml").write_text(
            "languages:\n  extensions:\n    pyi: python\n    h: go\n"
        )
        project_dir = tmp_path / "project"
        (project_dir / ".codelens").mkdir(parents=True)
        (project_dir / ".codelens" / "config.yaml").write_text(
            "languages:\n  extensions:\n    h: rust\n"
        )

        config = ConfigManager(project_dir).load()

        assert config.languages.extensions == {'pyi': 'python', 'h': 'rust'}

    def test_environment_layer(self, tmp_path, monkeypatch):
        """Environment variables apply when no file overrides them."""
        monkeypatch.setenv("CODELENS_EXTENSIONS", "pyi=python, .mjs=javascript,broken")
        monkeypatch.setenv("CODELENS_HIGHLIGHT_NAMES", "keyword, type,,string")

        config = ConfigManager(tmp_path).load()

        assert config.languages.extensions == {'pyi': 'python', 'mjs': 'javascript'}
        assert config.highlight.names == ["keyword", "type", "string"]

    def test_file_overrides_environment(self, tmp_path, monkeypatch):
        """Config files take priority over environment variables."""
        monkeypatch.setenv("CODELENS_HIGHLIGHT_NAMES", "keyword")
        (tmp_path / ".codelens").mkdir()
        (tmp_path / ".codelens" / "config.yaml").write_text("highlight:\n  names: [type]\n")

        config = ConfigManager(tmp_path).load()

        assert config.highlight.names == ["type"]

    def test_malformed_file_skipped(self, tmp_path, caplog):
        """Unparseable YAML is skipped with a warning."""
        (tmp_path / ".codelens").mkdir()
        (tmp_path / ".codelens" / "config.yaml").write_text("languages: [unclosed\n")

        with caplog.at_level("WARNING", logger="codelens.config"):
            config = ConfigManager(tmp_path).load()

        assert config.languages.extensions == {}
        assert "Skipping config" in caplog.text

    def test_non_mapping_file_skipped(self, tmp_path):
        """A YAML file whose top level is not a mapping is skipped."""
        (tmp_path / ".codelens").mkdir()
        (tmp_path / ".codelens" / "config.yaml").write_text("- just\n- a list\n")

        config = ConfigManager(tmp_path).load()

        assert config.highlight.names == DEFAULT_HIGHLIGHT_NAMES

    def test_extensions_list_ignored(self, tmp_path, caplog):
        """An extensions list instead of a mapping is ignored with a warning."""
        (tmp_path / ".codelens").mkdir()
        (tmp_path / ".codelens" / "config.yaml").write_text(
            "languages:\n  extensions: [a, b]\nhighlight:\n  names: [type]\n"
        )

        with caplog.at_level("WARNING", logger="codelens.config"):
            config = ConfigManager(tmp_path).load()

        assert config.languages.extensions == {}
        assert config.highlight.names == ["type"]
        assert "languages.extensions" in caplog.text

    def test_scalar_highlight_names_ignored(self, tmp_path, caplog):
        """A scalar highlight.names is ignored, not split into characters."""
        (tmp_path / ".codelens").mkdir()
        (tmp_path / ".codelens" / "config.yaml").write_text("highlight:\n  names: keyword\n")

        with caplog.at_level("WARNING", logger="codelens.config"):
            config = ConfigManager(tmp_path).load()

        assert config.highlight.names == DEFAULT_HIGHLIGHT_NAMES
        assert "highlight.names" in caplog.text

    def test_non_mapping_section_ignored(self, tmp_path, caplog):
        """A section that is not a mapping is ignored with a warning."""
        (tmp_path / ".codelens").mkdir()
        (tmp_path / ".codelens" / "config.yaml").write_text("languages: python\n")

        with caplog.at_level("WARNING", logger="codelens.config"):
            config = ConfigManager(tmp_path).load()

        assert config.languages.extensions == {}
        assert "languages section" in caplog.text

    def test_set_extension_builtin_clash(self, tmp_path):
        """set rejects aliases that reroute a built-in extension."""
        manager = ConfigManager(tmp_path)

        assert manager.set("languages.extensions.ts", "python") is not None
        assert "ts" not in manager.load().languages.extensions

    def test_set_extension(self, tmp_path):
        """set stores an alias in the project config."""
        manager = ConfigManager(tmp_path)

        assert manager.set("languages.extensions.pyi", "python") is None
        assert ConfigManager(tmp_path).get("languages.extensions.pyi") == "python"

    def test_set_extension_unknown_language(self, tmp_path):
        """set rejects aliases to unknown languages and keeps the old state."""
        manager = ConfigManager(tmp_path)

        error = manager.set("languages.extensions.cbl", "cobol")

        assert error is not None
        assert "cbl" not in manager.load().languages.extensions
        assert not (tmp_path / ".codelens" / "config.yaml").exists()

    def test_set_highlight_names_user_scope(self, tmp_path, isolated_config):
        """set can write to the user config."""
        manager = ConfigManager(tmp_path)

        assert manager.set("highlight.names", "keyword, function", scope="user") is None
        assert (isolated_config / "config.yaml").exists()
        assert ConfigManager(tmp_path).get("highlight.names") == "keyword,function"

    def test_set_highlight_names_empty(self, tmp_path):
        """set rejects an empty highlight name list."""
        manager = ConfigManager(tmp_path)

        assert manager.set("highlight.names", " , ") is not None
        assert manager.load().highlight.names == DEFAULT_HIGHLIGHT_NAMES

    @pytest.mark.parametrize("key", [
        "display.symbols",
        "languages.pyi",
        "highlight.colors",
    ])
    def test_set_invalid_key(self, tmp_path, key):
        """Unknown keys are reported."""
        assert ConfigManager(tmp_path).set(key, "x") is not None

    def test_get_unknown_key(self, tmp_path):
        """Unknown keys read as None."""
        assert ConfigManager(tmp_path).get("display.symbols") is None

    def test_get_config(self, tmp_path):
        """get_config loads the project's config."""
        ConfigManager(tmp_path).save_project(
            Config(highlight=HighlightConfig(names=["comment"]))
        )

        assert get_config(Path(tmp_path)).highlight.names == ["comment"]
