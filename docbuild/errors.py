"""Exceptions raised while building documentation pages."""

from __future__ import annotations

from pathlib import Path


class BuildError(RuntimeError):
    """Base class for failures that abort a documentation build."""


class StructuralError(BuildError):
    """Raised when a source tree entry is neither a regular file nor a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Error building {path}: not a regular file or directory")
        self.path = path


class PageError(BuildError):
    """Raised when one source page cannot be read or emitted."""

    def __init__(self, message: str, *, source: Path | None = None) -> None:
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)
        self.source = source


class FrontMatterError(PageError):
    """Raised when a front-matter block cannot be parsed."""


__all__ = ["BuildError", "FrontMatterError", "PageError", "StructuralError"]
