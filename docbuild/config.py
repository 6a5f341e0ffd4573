"""Configuration loading for docbuild (.docbuild.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".docbuild.yml"

DEFAULT_SOURCE_DIR = Path("..") / "docs"
DEFAULT_OUTPUT_DIR = Path("build")
DEFAULT_SOURCE_BASE_URL = "https://github.com/lenra-io/lenra_cli/blob/beta/"
DEFAULT_INDEX_NAME = "index"
DEFAULT_MARKDOWN_SUFFIX = ".md"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class BuildConfig:
    """Settings for one documentation build.

    Relative ``source_dir`` and ``output_dir`` values resolve against ``root``.
    ``source_dir`` as written is also the prefix of every ``sourceFile`` link,
    minus any leading ``../`` segments.
    """

    root: Path = field(default_factory=Path.cwd)
    source_dir: Path = DEFAULT_SOURCE_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    source_base_url: str = DEFAULT_SOURCE_BASE_URL
    index_name: str = DEFAULT_INDEX_NAME
    markdown_suffix: str = DEFAULT_MARKDOWN_SUFFIX

    def __post_init__(self) -> None:
        # sourceFile links are repository-relative, so an absolute source must sit under root.
        source_dir = Path(self.source_dir)
        if source_dir.is_absolute() and not source_dir.is_relative_to(self.root):
            raise ConfigError(
                f"Absolute source_dir {source_dir} must be inside the project root {self.root}"
            )

    @property
    def source_path(self) -> Path:
        return self.root / self.source_dir

    @property
    def output_path(self) -> Path:
        return self.root / self.output_dir

    def with_overrides(self, **overrides: Any) -> "BuildConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        for key in ("root", "source_dir", "output_dir"):
            if key in changes:
                changes[key] = Path(changes[key])
        return replace(self, **changes)


def load_config(config_path: Path) -> BuildConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BuildConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    build_data = _as_dict(data.get("build")) or data
    source_dir = _as_path(build_data.get("source_dir"))
    output_dir = _as_path(build_data.get("output_dir"))
    suffix = _as_str(build_data.get("markdown_suffix"))
    if suffix is not None and not suffix.startswith("."):
        suffix = f".{suffix}"

    return BuildConfig(
        root=root,
        source_dir=source_dir or DEFAULT_SOURCE_DIR,
        output_dir=output_dir or DEFAULT_OUTPUT_DIR,
        source_base_url=_as_str(build_data.get("source_base_url")) or DEFAULT_SOURCE_BASE_URL,
        index_name=_as_str(build_data.get("index_name")) or DEFAULT_INDEX_NAME,
        markdown_suffix=suffix or DEFAULT_MARKDOWN_SUFFIX,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) and str(value) else None


def _as_path(value: Any) -> Optional[Path]:
    text = _as_str(value)
    return Path(text) if text else None
