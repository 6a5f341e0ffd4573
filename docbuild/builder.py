"""Build driver wiring the tree walker to the page emitter."""

from __future__ import annotations

import asyncio

from .config import BuildConfig
from .emitter import PageEmitter
from .logging import get_logger
from .models import BuildSummary
from .walker import TreeWalker


class DocBuilder:
    """Builds every page of a source tree into the output tree."""

    def __init__(self, config: BuildConfig, walker: TreeWalker | None = None) -> None:
        self.config = config
        self.walker = walker or TreeWalker(PageEmitter(config))
        self.logger = get_logger("builder")

    async def build(self) -> BuildSummary:
        """Run one full build; outputs of earlier builds are overwritten, never pruned."""
        source = self.config.source_path
        output = self.config.output_path
        if not source.exists():
            raise FileNotFoundError(f"Source directory not found: {source}")
        if not source.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {source}")

        self.logger.info("Start building doc pages")
        results = await self.walker.walk(source, output)
        summary = BuildSummary(output_dir=output, results=results)
        self.logger.info(
            "Doc pages built (%d pages, %d files copied)", summary.pages, summary.assets
        )
        return summary


def run_build(config: BuildConfig | None = None) -> BuildSummary:
    """Synchronous entry point; raises on the first failure anywhere in the tree."""
    return asyncio.run(DocBuilder(config or BuildConfig()).build())


__all__ = ["DocBuilder", "run_build"]
