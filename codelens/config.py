"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Project config (.codelens/config.yaml)
  2. User config (~/.codelens/config.yaml)
  3. Environment variables
  4. Defaults

Example config.yaml:

    languages:
      extensions:
        pyi: python
        mjs: javascript
    highlight:
      names: [keyword, function, type, string, comment]
"""

import logging
import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from .core.parsing.highlight import DEFAULT_HIGHLIGHT_NAMES
from .core.parsing.language import Language

logger = logging.getLogger(__name__)


@dataclass
class LanguagesConfig:
    """Extra extension routing on top of the built-in table."""
    extensions: Dict[str, str] = field(default_factory=dict)  # ext -> language value

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        from .core.parsing.languages import BUILTIN_CONFIGS

        builtin = {
            ext: config.language
            for config in BUILTIN_CONFIGS
            for ext in config.extensions
        }
        for ext, name in self.extensions.items():
            language = Language.from_name(name)
            if language is None:
                valid = ", ".join(lang.value for lang in Language)
                return f"Unknown language '{name}' for extension '{ext}'. Valid: {valid}"
            owner = builtin.get(ext)
            if owner is not None and owner != language:
                return f"Extension '{ext}' is built in for {owner.value}, cannot alias to {name}"
        return None


@dataclass
class HighlightConfig:
    """Highlight names the renderer can style."""
    names: List[str] = field(default_factory=lambda: list(DEFAULT_HIGHLIGHT_NAMES))

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if not self.names:
            return "highlight.names must not be empty"
        if any(not name.strip() for name in self.names):
            return "highlight.names must not contain blank names"
        return None


@dataclass
class Config:
    """Application configuration."""
    languages: LanguagesConfig = field(default_factory=LanguagesConfig)
    highlight: HighlightConfig = field(default_factory=HighlightConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "languages": {
                "extensions": dict(self.languages.extensions)
            },
            "highlight": {
                "names": list(self.highlight.names)
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        languages_data = _section(data, "languages")
        highlight_data = _section(data, "highlight")

        raw_extensions = languages_data.get("extensions") or {}
        if not isinstance(raw_extensions, dict):
            logger.warning(
                "Ignoring languages.extensions: expected a mapping, got %s",
                type(raw_extensions).__name__,
            )
            raw_extensions = {}
        extensions = {
            str(ext).lstrip('.'): str(name)
            for ext, name in raw_extensions.items()
        }

        names = highlight_data.get("names")
        if names is not None and not isinstance(names, list):
            logger.warning(
                "Ignoring highlight.names: expected a list, got %s",
                type(names).__name__,
            )
            names = None

        return cls(
            languages=LanguagesConfig(extensions=extensions),
            highlight=HighlightConfig(
                names=[str(n) for n in names] if names else list(DEFAULT_HIGHLIGHT_NAMES)
            )
        )

    def validate(self) -> Optional[str]:
        """Validate every section. Returns first error message or None."""
        return self.languages.validate() or self.highlight.validate()


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a top-level section, or {} with a warning if it is not a mapping."""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        logger.warning(
            "Ignoring %s section: expected a mapping, got %s",
            name, type(section).__name__,
        )
        return {}
    return section


def _parse_extension_list(value: str) -> Dict[str, str]:
    """Parse "pyi=python,mjs=javascript" into a dict."""
    result = {}
    for item in value.split(","):
        if "=" not in item:
            continue
        ext, name = item.split("=", 1)
        ext = ext.strip().lstrip('.')
        if ext:
            result[ext] = name.strip()
    return result


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Project config (.codelens/config.yaml)
      2. User config (~/.codelens/config.yaml)
      3. Environment (CODELENS_EXTENSIONS, CODELENS_HIGHLIGHT_NAMES)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".codelens"
    USER_CONFIG_FILE = USER_CONFIG_DIR / "config.yaml"
    PROJECT_CONFIG_DIR = ".codelens"
    PROJECT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.USER_CONFIG_FILE

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        # Layer 1: Environment
        config_data: Dict[str, Any] = {}
        if os.environ.get("CODELENS_EXTENSIONS"):
            config_data.setdefault("languages", {})["extensions"] = _parse_extension_list(
                os.environ["CODELENS_EXTENSIONS"]
            )
        if os.environ.get("CODELENS_HIGHLIGHT_NAMES"):
            config_data.setdefault("highlight", {})["names"] = [
                n.strip() for n in os.environ["CODELENS_HIGHLIGHT_NAMES"].split(",") if n.strip()
            ]

        # Layer 2: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 3: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        self._config = Config.from_dict(config_data)
        return self._config

    def _read(self, path: Path) -> Dict[str, Any]:
        """Read one YAML layer; unreadable files are skipped with a warning."""
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Skipping config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Skipping config %s: top level is not a mapping", path)
            return {}
        return data

    def save_project(self, config: Config):
        """Save configuration to project config file."""
        self.project_config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.project_config_path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False)

        self._config = config

    def save_user(self, config: Config):
        """Save configuration to user config file."""
        self.USER_CONFIG_DIR.mkdir(parents=True, exist_ok=True)

        with open(self.user_config_path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False)

        self._config = config

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "highlight.names",
                "languages.extensions.pyi")
            value: Value to set (comma list for highlight.names)
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        config = self.load()

        parts = key.split(".")
        if parts[0] == "languages":
            if len(parts) != 3 or parts[1] != "extensions":
                return f"Invalid key format: {key}. Use 'languages.extensions.<ext>'"
            config.languages.extensions[parts[2].lstrip('.')] = value.strip()
            error = config.languages.validate()
            if error:
                del config.languages.extensions[parts[2].lstrip('.')]
                return error

        elif parts[0] == "highlight":
            if len(parts) != 2 or parts[1] != "names":
                return f"Unknown highlight setting: {key}. Valid: highlight.names"
            previous = config.highlight.names
            config.highlight.names = [n.strip() for n in value.split(",") if n.strip()]
            error = config.highlight.validate()
            if error:
                config.highlight.names = previous
                return error
        else:
            return f"Unknown section: {parts[0]}. Valid: languages, highlight"

        if scope == "project":
            self.save_project(config)
        else:
            self.save_user(config)

        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value."""
        config = self.load()

        parts = key.split(".")
        if parts == ["highlight", "names"]:
            return ",".join(config.highlight.names)
        if len(parts) == 3 and parts[:2] == ["languages", "extensions"]:
            return config.languages.extensions.get(parts[2].lstrip('.'))

        return None

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result


# Convenience function
def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
