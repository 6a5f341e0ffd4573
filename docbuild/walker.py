"""Recursive traversal mirroring a source tree into a destination tree."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import List

from .emitter import PageEmitter
from .errors import StructuralError
from .logging import get_logger
from .models import EmitResult


def _list_entries(src_dir: Path) -> List[os.DirEntry[str]]:
    with os.scandir(src_dir) as entries:
        return sorted(entries, key=lambda entry: entry.name)


class TreeWalker:
    """Fans out over every entry of a directory and joins on the whole subtree.

    Sibling entries run concurrently with no ordering between them. The first
    failure anywhere in the tree propagates out of :meth:`walk`.
    """

    def __init__(self, emitter: PageEmitter) -> None:
        self.emitter = emitter
        self.logger = get_logger("walker")

    async def walk(self, src_dir: Path, dest_dir: Path) -> List[EmitResult]:
        """Emit every file below ``src_dir`` into the mirrored ``dest_dir``."""
        entries = await asyncio.to_thread(_list_entries, src_dir)
        self.logger.debug("walking %s (%d entries)", src_dir, len(entries))
        nested = await asyncio.gather(*(self._visit(entry, dest_dir) for entry in entries))
        return [result for group in nested for result in group]

    async def _visit(self, entry: os.DirEntry[str], dest_dir: Path) -> List[EmitResult]:
        path = Path(entry.path)
        # Symlinks are not followed; they count as neither file nor directory.
        if entry.is_file(follow_symlinks=False):
            return [await self.emitter.emit(path, entry.name, dest_dir)]
        if entry.is_dir(follow_symlinks=False):
            return await self.walk(path, dest_dir / entry.name)
        raise StructuralError(path)


__all__ = ["TreeWalker"]
