#!/usr/bin/env python3
"""
Test suite for document segmentation.
"""

import re
import unittest

from core.config_loader import SegmenterConfig
from core.segmenter import split_into_pages, Page
from core.segmenter.headings import find_html_heading_offsets, find_text_heading_offsets
from core.segmenter.length import split_by_length, find_split_point
from core.segmenter.markup import extract_headings, split_on_page_breaks, strip_tags

SENTENCE = "The quick brown fox jumps over the lazy dog. "


def unstructured_text(length: int) -> str:
    text = SENTENCE * (length // len(SENTENCE) + 1)
    return text[:length]


def without_whitespace(text: str) -> str:
    return re.sub(r'\s+', '', text)


class TestSplitIntoPages(unittest.TestCase):
    """Cascade behaviour of split_into_pages."""

    def test_empty_input_yields_one_empty_page(self):
        self.assertEqual(split_into_pages(""), [Page(content="")])
        self.assertEqual(split_into_pages("   \n\n "), [Page(content="")])

    def test_short_unstructured_text_is_one_page(self):
        text = "  " + unstructured_text(1800) + "\n"

        pages = split_into_pages(text)

        self.assertEqual(len(pages), 1)
        self.assertEqual(pages[0].content, text.strip())
        self.assertIsNone(pages[0].title)

    def test_form_feed_splits_exactly(self):
        text = "a" * 2500 + "\f" + "b" * 2499

        pages = split_into_pages(text)

        self.assertEqual(pages, [Page(content="a" * 2500), Page(content="b" * 2499)])

    def test_form_feeds_drop_empty_pages(self):
        pages = split_into_pages("First page\f\f  \fSecond page")

        self.assertEqual([p.content for p in pages], ["First page", "Second page"])

    def test_form_feeds_win_over_html(self):
        html = '<h1>Intro</h1><hr class="page-break"/><h1>Outro</h1>'

        pages = split_into_pages("Intro text\fOutro text", html)

        self.assertEqual([p.content for p in pages], ["Intro text", "Outro text"])

    def test_html_page_break_markers(self):
        html = (
            '<p>Page one text</p>'
            '<div class="page-break"></div>'
            '<p>Page two &amp; more</p>'
            '<p CLASS="x page-break y"></p>'
            '<p>Page three</p>'
        )

        pages = split_into_pages("Page one text Page two & more Page three", html)

        self.assertEqual(
            [p.content for p in pages],
            ["Page one text", "Page two & more", "Page three"]
        )

    def test_html_headings_give_titled_pages(self):
        intro_body = "This report looks at quarterly revenue. " * 3
        methods_body = "Revenue was sampled from all regions. " * 3
        text = f"Introduction\n\n{intro_body}\n\nMethods\n\n{methods_body}"
        html = f"<h1>Introduction</h1><p>{intro_body}</p><h2>Methods</h2><p>{methods_body}</p>"

        pages = split_into_pages(text, html)

        self.assertEqual(len(pages), 2)
        self.assertEqual(pages[0].title, "Introduction")
        self.assertTrue(pages[0].content.startswith("Introduction"))
        self.assertEqual(pages[1].title, "Methods")
        self.assertTrue(pages[1].content.startswith("Methods"))

    def test_text_before_first_heading_is_untitled(self):
        preface = "Prepared for the board of directors by the finance team."
        body = "Quarterly revenue grew in every region we operate in. " * 2
        text = f"{preface}\n\nResults\n\n{body}"
        html = f"<p>{preface}</p><h1>Results</h1><p>{body}</p>"

        pages = split_into_pages(text, html)

        self.assertEqual(len(pages), 2)
        self.assertIsNone(pages[0].title)
        self.assertEqual(pages[0].content, preface)
        self.assertEqual(pages[1].title, "Results")

    def test_numbered_text_headings(self):
        scope = "This section describes what the agreement covers in detail."
        terms = "This section defines the terms used throughout the agreement."
        text = f"1. Scope\n{scope}\n2. Terms\n{terms}"

        pages = split_into_pages(text)

        self.assertEqual(len(pages), 2)
        self.assertEqual(pages[0].content, f"1. Scope\n{scope}")
        self.assertEqual(pages[1].content, f"2. Terms\n{terms}")
        self.assertIsNone(pages[0].title)
        self.assertIsNone(pages[1].title)

    def test_single_heading_falls_back_to_length(self):
        text = "Chapter 1 Beginnings\n" + unstructured_text(500)

        pages = split_into_pages(text)

        self.assertEqual(pages, [Page(content=text.strip())])

    def test_long_unstructured_text_round_trip(self):
        text = unstructured_text(13000)

        pages = split_into_pages(text)

        self.assertGreater(len(pages), 1)
        self.assertEqual(without_whitespace("".join(p.content for p in pages)), without_whitespace(text))
        for page in pages:
            self.assertLessEqual(len(page.content), 2200)
            self.assertIsNone(page.title)

    def test_long_text_splits_on_sentence_boundaries(self):
        pages = split_into_pages(unstructured_text(13000))

        for page in pages[:-1]:
            self.assertTrue(page.content.endswith("dog."), page.content[-20:])
        for page in pages[1:]:
            self.assertTrue(page.content.startswith("The quick"), page.content[:20])

    def test_custom_config(self):
        config = SegmenterConfig(target_length=100, min_length=80, max_length=120,
                                 sentence_window=10, overshoot=5)

        pages = split_into_pages("x" * 250, config=config)

        self.assertEqual([len(p.content) for p in pages], [100, 100, 50])

    def test_to_dict_omits_missing_title(self):
        self.assertEqual(Page(content="Body").to_dict(), {'content': "Body"})
        self.assertEqual(Page(content="Body", title="Intro").to_dict(), {'content': "Body", 'title': "Intro"})


class TestLengthSplit(unittest.TestCase):

    def setUp(self):
        self.config = SegmenterConfig()

    def test_text_at_max_length_is_one_page(self):
        text = "y" * self.config.max_length
        self.assertEqual(split_by_length(text, self.config), [Page(content=text)])

    def test_hard_cut_without_boundaries(self):
        pages = split_by_length("x" * 5000, self.config)

        self.assertEqual([len(p.content) for p in pages], [2000, 2000, 1000])

    def test_sentence_boundary_preferred(self):
        text = "a" * 1990 + ". B" + "c" * 3000

        self.assertEqual(find_split_point(text, 0, self.config), 1992)

        pages = split_by_length(text, self.config)
        self.assertEqual(pages[0].content, "a" * 1990 + ".")
        self.assertTrue(pages[1].content.startswith("B"))

    def test_sentence_boundary_past_overshoot_is_ignored(self):
        text = "a" * 2150 + ". B" + "c" * 3000

        self.assertEqual(find_split_point(text, 0, self.config), 2000)

    def test_paragraph_break_fallback(self):
        text = "a" * 1950 + "\n\n" + "b" * 3000

        self.assertEqual(find_split_point(text, 0, self.config), 1952)

        pages = split_by_length(text, self.config)
        self.assertEqual([len(p.content) for p in pages], [1950, 2000, 1000])

    def test_newline_fallback(self):
        text = "a" * 1900 + "\n" + "b" * 3000

        self.assertEqual(find_split_point(text, 0, self.config), 1901)

    def test_break_before_minimum_is_ignored(self):
        text = "a" * 1500 + "\n\n" + "b" * 3000

        self.assertEqual(find_split_point(text, 0, self.config), 2000)


class TestHeadingDetection(unittest.TestCase):

    def test_html_heading_search_moves_forward(self):
        text = (
            "Preface mentions Results briefly.\n\n"
            "Introduction\n\nSome opening words.\n\n"
            "Results\n\nThe numbers."
        )
        html = "<p>Preface mentions Results briefly.</p><h1>Introduction</h1><p>Some opening words.</p><h2>Results</h2>"

        offsets = find_html_heading_offsets(text, html)

        self.assertEqual(offsets, {
            text.index("Introduction"): "Introduction",
            text.index("Results\n"): "Results",
        })

    def test_missing_html_heading_is_skipped(self):
        offsets = find_html_heading_offsets("Body only", "<h1>Not in text</h1>")

        self.assertEqual(offsets, {})

    def test_text_headings_near_known_offsets_are_dropped(self):
        text = "1. Scope\n" + "x" * 20 + "\n2. Terms\n" + "y" * 80 + "\nSECTION 3 Payment\n"

        found = find_text_heading_offsets(text, [], proximity=50)

        self.assertEqual(found, [0, text.index("SECTION 3")])

    def test_text_headings_skip_html_offsets(self):
        text = "Chapter 1 Origins\n" + "z" * 100

        self.assertEqual(find_text_heading_offsets(text, [0], proximity=50), [])
        self.assertEqual(find_text_heading_offsets(text, [], proximity=50), [0])


class TestMarkup(unittest.TestCase):

    def test_extract_headings_in_document_order(self):
        html = "<h2>Second level</h2><h1 class='big'>Top &amp; level</h1><h1>  </h1>"

        self.assertEqual(
            [title for _, title in extract_headings(html)],
            ["Second level", "Top & level"]
        )

    def test_split_on_page_breaks_strips_tags(self):
        html = '<p>One</p><hr class="page-break"/><hr class="page-break"/><p><b>Two</b></p>'

        self.assertEqual(split_on_page_breaks(html), ["One", "Two"])

    def test_strip_tags(self):
        self.assertEqual(strip_tags("<p>Fish &amp; chips</p>"), "Fish & chips")


if __name__ == '__main__':
    unittest.main()
