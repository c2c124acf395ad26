"""Tests for newsdigest.frontmatter (split, render, tag slugs)."""

import unittest

from newsdigest.frontmatter import (
    normalize_tags,
    parse_frontmatter,
    render_frontmatter,
    split_frontmatter_and_body,
    with_frontmatter,
)


class SplitFrontmatterTests(unittest.TestCase):
    def test_no_frontmatter(self) -> None:
        md = "# Title\n\nBody\n"
        self.assertEqual(split_frontmatter_and_body(md), ({}, md))

    def test_frontmatter_and_body(self) -> None:
        md = '---\ntitle: "Weekly"\nthemes: 3\ntags:\n  - "ai"\n  - "chips"\n---\n\n# Weekly\n'
        fm, body = split_frontmatter_and_body(md)

        self.assertEqual(fm, {"title": "Weekly", "themes": 3, "tags": ["ai", "chips"]})
        self.assertEqual(body, "\n# Weekly\n")

    def test_crlf_frontmatter(self) -> None:
        fm, body = split_frontmatter_and_body("---\r\nsource: X\r\n---\r\n# T\r\n")
        self.assertEqual(fm, {"source": "X"})
        self.assertEqual(body, "# T\r\n")

    def test_unclosed_block_is_body(self) -> None:
        md = "---\ntitle: x\n# never closed\n"
        self.assertEqual(split_frontmatter_and_body(md), ({}, md))

    def test_parse_scalars(self) -> None:
        data = parse_frontmatter("a: true\nb: null\nc: 15\nd: plain text\ne: []\nf:\n- x\n- 2")
        self.assertEqual(data, {"a": True, "b": None, "c": 15, "d": "plain text", "e": [], "f": ["x", 2]})

    def test_stray_items_and_comments_ignored(self) -> None:
        data = parse_frontmatter('- orphan\n# note\ntitle: "T"\ntags:\n  - "ai"\nnot a key\n  - "lost"')
        self.assertEqual(data, {"title": "T", "tags": ["ai"]})


class RenderFrontmatterTests(unittest.TestCase):
    def test_stable_key_order_and_skip_none(self) -> None:
        out = render_frontmatter({"zeta": 1, "tags": [], "title": "T", "source": None, "date": "2026-10-18"})
        self.assertEqual(out, '---\ntitle: "T"\ndate: "2026-10-18"\ntags: []\nzeta: 1\n---')

    def test_quotes_escaped(self) -> None:
        out = render_frontmatter({"title": 'Say "hi"'})
        self.assertIn('title: "Say \\"hi\\""', out)
        fm, _ = split_frontmatter_and_body(out + "\n")
        self.assertEqual(fm["title"], 'Say "hi"')

    def test_with_frontmatter_replaces_existing(self) -> None:
        md = '---\ntitle: "Old"\n---\n\n# Body\n'
        out = with_frontmatter(md, {"title": "New"})
        self.assertEqual(out, '---\ntitle: "New"\n---\n\n# Body\n')


class NormalizeTagsTests(unittest.TestCase):
    def test_slugs_dedupes_and_limits(self) -> None:
        tags = normalize_tags(["AI Spending", "ai spending!", "  ", "Chips & Supply"], max_tags=12)
        self.assertEqual(tags, ["ai-spending", "chips-supply"])

    def test_max_tags(self) -> None:
        self.assertEqual(normalize_tags([f"t{i}" for i in range(20)], max_tags=3), ["t0", "t1", "t2"])

    def test_empty(self) -> None:
        self.assertEqual(normalize_tags(None), [])


if __name__ == "__main__":
    unittest.main()
