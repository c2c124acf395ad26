"""Tests for newsdigest.render (markdown rendering and file-name titles)."""

import datetime as dt
import unittest

from newsdigest.frontmatter import split_frontmatter_and_body
from newsdigest.parser import ParsedDigest, Theme, parse_digest
from newsdigest.render import render_digest_body, render_digest_md, title_for_file

DIGEST = ParsedDigest(
    title="Weekly Roundup",
    executive_summary="AI spending keeps climbing.\nChip supply remains tight.",
    themes=(
        Theme(title="AI Spending", summary="Budgets grow.", details=("Cloud capex up", "Startups raise")),
        Theme(title="Chips & Supply", summary="", details=()),
    ),
    notable_quotes=("Hello world",),
    action_items=("Read the report", "Try the demo"),
    source_info="- **Source**: Tech Weekly",
)


class RenderBodyTests(unittest.TestCase):
    def test_sections_and_formatting(self) -> None:
        body = render_digest_body(DIGEST)

        self.assertTrue(body.startswith("# Weekly Roundup\n\n## Executive Summary\nAI spending keeps climbing."))
        self.assertIn("## Key Themes\n### Theme 1: AI Spending\nBudgets grow.\n- Cloud capex up\n- Startups raise\n", body)
        self.assertIn("### Theme 2: Chips & Supply\n", body)
        self.assertIn('## Notable Quotes\n> "Hello world"\n', body)
        self.assertIn("## Action Items & Takeaways\n- Read the report\n- Try the demo\n", body)
        self.assertIn("## Source Information\n- **Source**: Tech Weekly", body)

    def test_empty_sections_omitted(self) -> None:
        body = render_digest_body(ParsedDigest(title="Bare"))

        self.assertEqual(body, "# Bare\n")
        for heading in ("## Executive Summary", "## Key Themes", "## Notable Quotes", "## Action Items", "## Source Information"):
            self.assertNotIn(heading, body)

    def test_rendered_body_reparses_to_same_digest(self) -> None:
        self.assertEqual(parse_digest(render_digest_body(DIGEST)), DIGEST)

    def test_summary_taken_from_first_detail_not_repeated(self) -> None:
        digest = ParsedDigest(
            title="T",
            themes=(Theme(title="Only details", summary="First", details=("First", "Second")),),
        )
        body = render_digest_body(digest)

        self.assertIn("### Theme 1: Only details\n- First\n- Second\n", body)
        self.assertEqual(parse_digest(body), digest)

    def test_rendered_file_reparses_after_frontmatter(self) -> None:
        _, body = split_frontmatter_and_body(render_digest_md(DIGEST, source="Tech Weekly"))
        self.assertEqual(parse_digest(body), DIGEST)


class RenderDigestMdTests(unittest.TestCase):
    def test_frontmatter_fields(self) -> None:
        md = render_digest_md(DIGEST, source="Tech Weekly", processed=dt.date(2026, 10, 18))
        fm, body = split_frontmatter_and_body(md)

        self.assertEqual(fm["title"], "Weekly Roundup")
        self.assertEqual(fm["date"], "2026-10-18")
        self.assertEqual(fm["source"], "Tech Weekly")
        self.assertEqual(fm["tags"], ["ai-spending", "chips-supply"])
        self.assertEqual(fm["description"], "AI spending keeps climbing. Chip supply remains tight.")
        self.assertEqual((fm["themes"], fm["quotes"], fm["actions"]), (2, 1, 2))
        self.assertEqual(fm["generator"], "newsdigest")
        self.assertIn("lastmod", fm)
        self.assertTrue(body.lstrip().startswith("# Weekly Roundup"))
        self.assertTrue(md.endswith("\n"))

    def test_description_truncated_and_source_omitted(self) -> None:
        md = render_digest_md(DIGEST, description_max_chars=10)
        fm, _ = split_frontmatter_and_body(md)

        self.assertEqual(fm["description"], "AI spendin…")
        self.assertNotIn("source", fm)


class TitleForFileTests(unittest.TestCase):
    def test_parsed_title_preferred(self) -> None:
        self.assertEqual(title_for_file("# Newsletter Digest: Weekly\n", "issue.eml"), "Weekly")

    def test_eml_suffix_removed_when_no_heading(self) -> None:
        self.assertEqual(title_for_file("no heading", "issue-12.eml"), "issue-12")
        self.assertEqual(title_for_file("", "ISSUE.EML"), "ISSUE")

    def test_other_names_kept(self) -> None:
        self.assertEqual(title_for_file("", "notes.txt"), "notes.txt")


if __name__ == "__main__":
    unittest.main()
