"""Tests for the text formatters."""

from __future__ import annotations

import re

from modules.exa.formatting import (
    SEPARATOR_LINE,
    format_contents,
    format_score,
    format_search_results,
    format_similar_results,
    preview,
)
from modules.exa.models import ContentsResponse, FindSimilarResponse, SearchResponse
from modules.exa.tests.fixtures import (
    CONTENTS_RESPONSE,
    FIND_SIMILAR_RESPONSE,
    SEARCH_RESPONSE,
    SEARCH_RESPONSE_MINIMAL,
)


def _entries(text: str) -> list[str]:
    return re.findall(r"^\d+\. \*\*", text, flags=re.MULTILINE)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def test_preview_short_text_unchanged():
    assert preview("hello", 200) == "hello"
    assert preview("x" * 200, 200) == "x" * 200


def test_preview_long_text_truncated():
    assert preview("x" * 201, 200) == "x" * 200 + "..."


def test_format_score():
    assert format_score(0.87654) == "0.877"
    assert format_score(0.5) == "0.500"
    assert format_score(1) == "1.000"
    assert format_score(0.0625) == "0.063"
    assert format_score(None) == "0.000"


def test_format_score_large_values():
    assert format_score(123456789012345678901234567.0).endswith(".000")
    assert format_score(1e30) == "1000000000000000019884624838656.000"
    assert format_score(-1e30) == "-1000000000000000019884624838656.000"
    assert format_score(float("inf")) == "Infinity"


def test_search_with_huge_score_still_renders():
    response = SearchResponse.model_validate(
        {"results": [{"id": "1", "url": "https://example.com/big", "score": 1e30}]}
    )
    text = format_search_results(response, "q")

    assert "   📊 Relevance Score: 1000000000000000019884624838656.000\n" in text


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------


def test_search_exact_output_minimal():
    text = format_search_results(SearchResponse.model_validate(SEARCH_RESPONSE_MINIMAL), "q")

    assert text == (
        'Found 1 results for "q":\n\n'
        "1. **Short**\n"
        "   🔗 URL: https://example.net/\n"
        "   📊 Relevance Score: 0.123\n"
        "   📄 Content: short text\n"
        "\n"
    )


def test_search_two_entries_with_preview_and_no_content_line():
    text = format_search_results(SearchResponse.model_validate(SEARCH_RESPONSE), "protein folding")

    assert text.startswith('Found 2 results for "protein folding":\n\n')
    assert len(_entries(text)) == 2

    first, second = text.split("2. **", 1)
    assert f"   📄 Content: {'a' * 200}...\n" in first
    assert "Content:" not in second


def test_search_optional_fields_in_order():
    text = format_search_results(SearchResponse.model_validate(SEARCH_RESPONSE), "protein folding")
    first = text.split("2. **", 1)[0]

    labels = ["URL:", "Relevance Score: 0.877", "Author: Jane Doe", "Published: 2024-03-01",
              "Summary: An overview of folding.", "Content:", "Key Highlights:"]
    positions = [first.index(label) for label in labels]
    assert positions == sorted(positions)


def test_search_highlights_capped_at_three():
    text = format_search_results(SearchResponse.model_validate(SEARCH_RESPONSE), "q")

    assert "   🔍 Key Highlights: first | second | third\n" in text
    assert "fourth" not in text


def test_search_autoprompt_note():
    text = format_search_results(SearchResponse.model_validate(SEARCH_RESPONSE), "q")

    assert text.endswith(
        '\n💡 _Enhanced query used: "Here is a great article about protein folding:"_\n'
    )


def test_search_without_autoprompt_has_no_note():
    text = format_search_results(SearchResponse.model_validate(SEARCH_RESPONSE_MINIMAL), "q")
    assert "Enhanced query" not in text


def test_search_empty_results():
    text = format_search_results(SearchResponse(results=[]), "nothing")
    assert text == 'Found 0 results for "nothing":\n\n'


# ---------------------------------------------------------------------------
# get_contents
# ---------------------------------------------------------------------------


def test_contents_output():
    text = format_contents(ContentsResponse.model_validate(CONTENTS_RESPONSE))

    assert text.startswith("Retrieved content for 2 page(s):\n\n")
    assert len(_entries(text)) == 2
    assert "   📊 Content Length: 1,500 characters\n" in text
    assert f"   📄 Preview: {'b' * 300}...\n\n" in text
    assert f"   📝 **Full Content:**\n{'b' * 1500}\n" in text
    assert "   ✍️  Author: Jane Doe\n" in text
    assert text.count(SEPARATOR_LINE) == 2


def test_contents_short_page_exact_block():
    text = format_contents(ContentsResponse.model_validate(CONTENTS_RESPONSE))
    second = "2. **" + text.split("2. **", 1)[1]

    assert second == (
        "2. **AlphaFold Notes**\n"
        "   🔗 URL: https://example.org/alpha\n"
        "   📊 Content Length: 11 characters\n"
        "   📄 Preview: Short page.\n\n"
        "   📝 **Full Content:**\nShort page.\n"
        f"\n{'─' * 80}\n\n"
    )


def test_contents_missing_text_counts_zero():
    response = ContentsResponse.model_validate({"results": [{"id": "x", "url": "https://x.com", "title": "X"}]})
    text = format_contents(response)

    assert "Content Length: 0 characters" in text


# ---------------------------------------------------------------------------
# find_similar
# ---------------------------------------------------------------------------


def test_similar_output():
    text = format_similar_results(
        FindSimilarResponse.model_validate(FIND_SIMILAR_RESPONSE), "https://source.com"
    )

    assert text.startswith('Found 2 pages similar to "https://source.com":\n\n')
    assert "   📊 Similarity Score: 0.900\n" in text
    assert "   📊 Similarity Score: 0.750\n" in text
    assert "   ✍️  Author: John Roe\n" in text
    assert "   📅 Published: 2023-11-20\n" in text
    assert f"   📄 Content: {'c' * 200}...\n" in text
    assert "Relevance Score" not in text


def test_formatting_is_deterministic():
    response = SearchResponse.model_validate(SEARCH_RESPONSE)
    assert format_search_results(response, "q") == format_search_results(response, "q")
