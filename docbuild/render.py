"""Markdown to HTML conversion with a single output hook."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import markdown
from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor

HtmlHook = Callable[[str], str]

DEFAULT_EXTENSIONS: tuple[str, ...] = ("tables", "fenced_code")

# Built-in postprocessors register at 20 and above; the hook must see their output.
_HOOK_PRIORITY = 0


class _HookPostprocessor(Postprocessor):
    def __init__(self, md: markdown.Markdown, hook: HtmlHook) -> None:
        super().__init__(md)
        self.hook = hook

    def run(self, text: str) -> str:
        return self.hook(text)


class OutputHookExtension(Extension):
    """Registers ``hook`` as the last postprocessor of a Markdown instance."""

    def __init__(self, hook: HtmlHook, **kwargs) -> None:
        self.hook = hook
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802 - Markdown API
        md.postprocessors.register(
            _HookPostprocessor(md, self.hook), "docbuild_output_hook", _HOOK_PRIORITY
        )


class MarkdownRenderer:
    """Converts Markdown bodies into HTML fragments."""

    def __init__(
        self,
        post_process: Optional[HtmlHook] = None,
        *,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        self.post_process = post_process
        self.extensions = tuple(extensions)

    def render(self, body: str) -> str:
        """Return the HTML fragment for ``body`` with the output hook applied."""
        # A fresh instance per call keeps conversions independent across threads.
        return self._build_markdown().convert(body)

    def _build_markdown(self) -> markdown.Markdown:
        extensions: list[str | Extension] = list(self.extensions)
        if self.post_process is not None:
            extensions.append(OutputHookExtension(self.post_process))
        return markdown.Markdown(extensions=extensions, output_format="html")


__all__ = ["DEFAULT_EXTENSIONS", "HtmlHook", "MarkdownRenderer", "OutputHookExtension"]
