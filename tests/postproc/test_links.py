"""Tests for the .md to .html link rewriter."""

from __future__ import annotations

import pytest

from docbuild.postproc.links import LinkRewriter, rewrite_links


@pytest.mark.parametrize(
    ("href", "expected"),
    [
        ("foo.md", "foo.html"),
        ("foo.md#bar", "foo.html#bar"),
        ("../guide/setup.md", "../guide/setup.html"),
        ("https://x.com/a.md", "https://x.com/a.html"),
        ("foo.html", "foo.html"),
        ("#anchor", "#anchor"),
        ("https://x.com/", "https://x.com/"),
        ("notes.mdx", "notes.mdx"),
        ("foo.md?raw=1", "foo.md?raw=1"),
    ],
)
def test_rewrite_links_single_href(href: str, expected: str) -> None:
    html = f'<p><a href="{href}">link</a></p>'
    assert rewrite_links(html) == f'<p><a href="{expected}">link</a></p>'


def test_rewrite_links_handles_multiple_hrefs() -> None:
    html = (
        '<ul>\n<li><a href="a.md">A</a></li>\n'
        '<li><a href="b.md#top">B</a></li>\n'
        '<li><a href="#local">C</a></li>\n</ul>'
    )
    assert rewrite_links(html) == (
        '<ul>\n<li><a href="a.html">A</a></li>\n'
        '<li><a href="b.html#top">B</a></li>\n'
        '<li><a href="#local">C</a></li>\n</ul>'
    )


def test_rewrite_links_leaves_text_and_other_attributes_alone() -> None:
    html = '<p>See readme.md and <img src="diagram.md"> <a title="x.md" href="y.md">y.md</a></p>'
    assert rewrite_links(html) == (
        '<p>See readme.md and <img src="diagram.md"> <a title="x.md" href="y.html">y.md</a></p>'
    )


def test_rewrite_links_only_touches_first_suffix_in_value() -> None:
    assert rewrite_links('<a href="a.md#b.md">x</a>') == '<a href="a.html#b.md">x</a>'


def test_link_rewriter_is_callable_with_custom_suffix() -> None:
    rewriter = LinkRewriter(target_suffix=".htm")
    assert rewriter('<a href="page.md#s">p</a>') == '<a href="page.htm#s">p</a>'
    assert rewriter.rewrite_target("page.md") == "page.htm"


def test_rewrite_links_is_stateless_across_calls() -> None:
    html = '<a href="a.md">a</a>'
    assert rewrite_links(html) == rewrite_links(html) == '<a href="a.html">a</a>'
