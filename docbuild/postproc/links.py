"""Rewrites links between Markdown sources so they resolve after conversion."""

from __future__ import annotations

import re


class LinkRewriter:
    """Points ``href`` values at ``.html`` pages instead of ``.md`` sources."""

    _HREF_PATTERN = re.compile(r'href="([^"]+)"')
    _SUFFIX_PATTERN = re.compile(r"\.md(#|$)")

    def __init__(self, target_suffix: str = ".html") -> None:
        self.target_suffix = target_suffix

    def __call__(self, html: str) -> str:
        return self.rewrite(html)

    def rewrite(self, html: str) -> str:
        """Return ``html`` with every ``.md`` href rewritten, fragments kept."""
        return self._HREF_PATTERN.sub(self._replace_href, html)

    def rewrite_target(self, target: str) -> str:
        """Rewrite a single link target; the rule is suffix based and ignores the scheme."""
        return self._SUFFIX_PATTERN.sub(
            lambda match: f"{self.target_suffix}{match.group(1)}", target, count=1
        )

    def _replace_href(self, match: re.Match[str]) -> str:
        return f'href="{self.rewrite_target(match.group(1))}"'


def rewrite_links(html: str) -> str:
    """Rewrite ``.md`` hrefs in rendered HTML to ``.html``."""
    return LinkRewriter().rewrite(html)


__all__ = ["LinkRewriter", "rewrite_links"]
