"""Per-file output: rendered pages with JSON sidecars, or verbatim copies."""

from __future__ import annotations

import asyncio
import json
import re
import shutil
from datetime import date
from pathlib import Path
from typing import Any, Dict

from . import frontmatter
from .config import BuildConfig
from .errors import PageError
from .logging import get_logger
from .models import Document, EmitResult, PageMetadata
from .postproc.links import LinkRewriter
from .render import MarkdownRenderer

_PARENT_PREFIX = re.compile(r"^(?:\.\.?/)+")


def _json_default(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class PageEmitter:
    """Writes the outputs of one source file into a destination directory."""

    def __init__(
        self,
        config: BuildConfig,
        renderer: MarkdownRenderer | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or MarkdownRenderer(post_process=LinkRewriter())
        self.logger = get_logger("emitter")

    def is_markdown(self, filename: str) -> bool:
        return filename.endswith(self.config.markdown_suffix)

    async def emit(self, src_path: Path, filename: str, dest_dir: Path) -> EmitResult:
        """Emit ``src_path`` into ``dest_dir``: two artifacts for Markdown, a copy otherwise."""
        await asyncio.to_thread(dest_dir.mkdir, parents=True, exist_ok=True)
        if not self.is_markdown(filename):
            return await self._copy(src_path, filename, dest_dir)

        self.logger.info("building %s to %s", src_path, dest_dir)
        try:
            text = await asyncio.to_thread(src_path.read_text, encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PageError(f"not valid UTF-8: {exc}", source=src_path) from exc
        document = Document(
            path=src_path,
            filename=filename,
            base_name=filename[: -len(self.config.markdown_suffix)],
            text=text,
        )
        parsed = frontmatter.parse(document.text, source=src_path)
        metadata = self.build_metadata(document, parsed.attributes)
        payload = self.serialize_metadata(metadata, source=src_path)
        html = self.renderer.render(parsed.body)

        html_path = dest_dir / f"{document.base_name}.html"
        json_path = dest_dir / f"{document.base_name}.html.json"
        await asyncio.gather(
            asyncio.to_thread(html_path.write_text, html, encoding="utf-8"),
            asyncio.to_thread(json_path.write_text, payload, encoding="utf-8"),
        )
        return EmitResult(source=src_path, kind="page", outputs=[html_path, json_path])

    def build_metadata(self, document: Document, attributes: Dict[str, Any]) -> PageMetadata:
        """Derive sidecar metadata; index pages get no implicit title."""
        title = attributes.get("title")
        if title is None and document.base_name != self.config.index_name:
            title = document.base_name
        return PageMetadata(
            attributes=attributes,
            title=title,
            source_file=self.source_link(document.path),
        )

    def source_link(self, src_path: Path) -> str:
        """Return the external link to ``src_path`` under the configured base URL."""
        source_root = self.config.source_path
        display = src_path
        if src_path.is_relative_to(source_root):
            display = self.config.source_dir / src_path.relative_to(source_root)
        if display.is_absolute() and display.is_relative_to(self.config.root):
            display = display.relative_to(self.config.root)
        stripped = _PARENT_PREFIX.sub("", display.as_posix().lstrip("/"))
        return f"{self.config.source_base_url}{stripped}"

    @staticmethod
    def serialize_metadata(metadata: PageMetadata, *, source: Path | None = None) -> str:
        try:
            return json.dumps(
                metadata.to_dict(),
                ensure_ascii=False,
                separators=(",", ":"),
                default=_json_default,
            )
        except (TypeError, ValueError) as exc:
            raise PageError(f"metadata is not JSON serializable: {exc}", source=source) from exc

    async def _copy(self, src_path: Path, filename: str, dest_dir: Path) -> EmitResult:
        target = dest_dir / filename
        self.logger.debug("copying %s to %s", src_path, dest_dir)
        await asyncio.to_thread(shutil.copyfile, src_path, target)
        return EmitResult(source=src_path, kind="asset", outputs=[target])


__all__ = ["PageEmitter"]
