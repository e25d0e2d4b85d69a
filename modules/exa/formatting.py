"""Text rendering for Exa tool results.

Each formatter is a pure function of the parsed response. Field order,
preview lengths, highlight count, and score precision are fixed so that
downstream consumers can parse the text reliably.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from modules.exa.models import ContentsResponse, ExaResult, FindSimilarResponse, SearchResponse

RESULT_PREVIEW_CHARS = 200
CONTENT_PREVIEW_CHARS = 300
MAX_HIGHLIGHTS = 3
HIGHLIGHT_SEPARATOR = " | "
SEPARATOR_LINE = "─" * 80


def preview(text: str, limit: int) -> str:
    """Return the first ``limit`` characters, with '...' appended if cut."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def format_score(score: float | None) -> str:
    """Format a score to 3 decimal places, rounding halves up."""
    value = Decimal(score if score is not None else 0.0)
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "-Infinity" if value < 0 else "Infinity"
    with localcontext() as ctx:
        # Room for every integer digit plus the three decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return str(value.quantize(Decimal("0.001"), rounding=ROUND_HALF_UP))


def _header_lines(index: int, result: ExaResult) -> list[str]:
    return [
        f"{index}. **{result.title or ''}**\n",
        f"   🔗 URL: {result.url}\n",
    ]


def _byline(result: ExaResult) -> list[str]:
    lines = []
    if result.author:
        lines.append(f"   ✍️  Author: {result.author}\n")
    if result.published_date:
        lines.append(f"   📅 Published: {result.published_date}\n")
    return lines


def format_search_results(response: SearchResponse, query: str) -> str:
    """Render search results with relevance scores and optional extras."""
    parts = [f'Found {len(response.results)} results for "{query}":\n\n']

    for i, result in enumerate(response.results, start=1):
        parts.extend(_header_lines(i, result))
        parts.append(f"   📊 Relevance Score: {format_score(result.score)}\n")
        parts.extend(_byline(result))

        if result.summary:
            parts.append(f"   📝 Summary: {result.summary}\n")

        if result.text:
            parts.append(f"   📄 Content: {preview(result.text, RESULT_PREVIEW_CHARS)}\n")

        if result.highlights:
            top = HIGHLIGHT_SEPARATOR.join(result.highlights[:MAX_HIGHLIGHTS])
            parts.append(f"   🔍 Key Highlights: {top}\n")

        parts.append("\n")

    if response.autoprompt_string:
        parts.append(f'\n💡 _Enhanced query used: "{response.autoprompt_string}"_\n')

    return "".join(parts)


def format_contents(response: ContentsResponse) -> str:
    """Render retrieved pages: metadata, a preview, then the full text."""
    parts = [f"Retrieved content for {len(response.results)} page(s):\n\n"]

    for i, result in enumerate(response.results, start=1):
        text = result.text or ""
        parts.extend(_header_lines(i, result))
        parts.append(f"   📊 Content Length: {len(text):,} characters\n")
        parts.extend(_byline(result))
        parts.append(f"   📄 Preview: {preview(text, CONTENT_PREVIEW_CHARS)}\n\n")
        parts.append(f"   📝 **Full Content:**\n{text}\n")
        parts.append(f"\n{SEPARATOR_LINE}\n\n")

    return "".join(parts)


def format_similar_results(response: FindSimilarResponse, url: str) -> str:
    """Render pages similar to ``url`` with similarity scores."""
    parts = [f'Found {len(response.results)} pages similar to "{url}":\n\n']

    for i, result in enumerate(response.results, start=1):
        parts.extend(_header_lines(i, result))
        parts.append(f"   📊 Similarity Score: {format_score(result.score)}\n")
        parts.extend(_byline(result))

        if result.text:
            parts.append(f"   📄 Content: {preview(result.text, RESULT_PREVIEW_CHARS)}\n")

        parts.append("\n")

    return "".join(parts)
