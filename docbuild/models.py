"""Core data models shared across docbuild components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class FrontMatter:
    """Attributes declared at the top of a Markdown file and the remaining body."""

    attributes: Dict[str, Any]
    body: str


@dataclass
class Document:
    """A single Markdown source file."""

    path: Path
    filename: str
    base_name: str
    text: str


@dataclass
class PageMetadata:
    """Sidecar metadata written next to a rendered page."""

    attributes: Dict[str, Any]
    title: Optional[Any]
    source_file: str

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON payload: attributes, then ``title`` (when set) and ``sourceFile``."""
        payload = dict(self.attributes)
        if self.title is None:
            payload.pop("title", None)
        else:
            payload["title"] = self.title
        payload["sourceFile"] = self.source_file
        return payload


@dataclass
class EmitResult:
    """Outcome of emitting one source file."""

    source: Path
    kind: str
    outputs: List[Path] = field(default_factory=list)


@dataclass
class BuildSummary:
    """Aggregated outcome of a whole build."""

    output_dir: Path
    results: List[EmitResult] = field(default_factory=list)

    @property
    def pages(self) -> int:
        return sum(1 for result in self.results if result.kind == "page")

    @property
    def assets(self) -> int:
        return sum(1 for result in self.results if result.kind == "asset")

    @property
    def outputs(self) -> List[Path]:
        return [path for result in self.results for path in result.outputs]
