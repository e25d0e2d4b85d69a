"""Exa module manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

CATEGORIES = [
    "company",
    "research paper",
    "news",
    "linkedin company",
    "github",
    "tweet",
    "movie",
    "song",
    "personal site",
    "pdf",
]

MAX_DOMAINS = 20
MAX_CONTENT_ITEMS = 100


def _num_results(description: str) -> ToolParameter:
    return ToolParameter(
        name="num_results",
        type="integer",
        description=description,
        required=False,
        default=10,
        minimum=1,
        maximum=100,
    )


def _domain_filters(scope: str) -> list[ToolParameter]:
    return [
        ToolParameter(
            name="include_domains",
            type="array",
            items="string",
            description=f"List of domains to include in {scope} (e.g. ['reddit.com', 'github.com'])",
            required=False,
            max_items=MAX_DOMAINS,
        ),
        ToolParameter(
            name="exclude_domains",
            type="array",
            items="string",
            description=f"List of domains to exclude from {scope}",
            required=False,
            max_items=MAX_DOMAINS,
        ),
    ]


def _date_filters() -> list[ToolParameter]:
    labels = {
        "start_crawl_date": "Start date for content crawling",
        "end_crawl_date": "End date for content crawling",
        "start_published_date": "Start date for published content",
        "end_published_date": "End date for published content",
    }
    return [
        ToolParameter(
            name=name,
            type="string",
            description=f"{label} (YYYY-MM-DD format)",
            required=False,
            pattern=DATE_PATTERN,
        )
        for name, label in labels.items()
    ]


def _category(description: str) -> ToolParameter:
    return ToolParameter(
        name="category",
        type="string",
        description=description,
        required=False,
        enum=CATEGORIES,
    )


def _text_options(scope: str) -> list[ToolParameter]:
    return [
        ToolParameter(
            name="include_text",
            type="boolean",
            description=f"Include text content in {scope}. Default: false",
            required=False,
            default=False,
        ),
        ToolParameter(
            name="text_length_limit",
            type="integer",
            description="Maximum characters of text content to include per result (100-10000). Default: 1000",
            required=False,
            default=1000,
            minimum=100,
            maximum=10000,
        ),
    ]


SEARCH = ToolDefinition(
    name="exa.search",
    description=(
        "Search the web using Exa's AI-powered neural search. "
        "Finds high-quality, contextually relevant content. "
        "Supports both neural (semantic) and keyword search modes. "
        "Example: 'Find recent research papers on protein folding.'"
    ),
    parameters=[
        ToolParameter(
            name="query",
            type="string",
            description=(
                "The search query. Use natural language for neural search "
                "or keywords for keyword search."
            ),
            min_length=1,
            max_length=500,
        ),
        _num_results("Number of results to return (1-100). Default: 10"),
        *_domain_filters("search"),
        *_date_filters(),
        ToolParameter(
            name="use_autoprompt",
            type="boolean",
            description="Let Exa automatically enhance the search query. Default: true",
            required=False,
            default=True,
        ),
        ToolParameter(
            name="type",
            type="string",
            description="Search type: 'neural' for semantic search, 'keyword' for traditional search. Default: neural",
            required=False,
            enum=["neural", "keyword"],
            default="neural",
        ),
        _category("Filter results by content category"),
        *_text_options("search results"),
        ToolParameter(
            name="include_summary",
            type="boolean",
            description="Include AI-generated summaries in results. Default: false",
            required=False,
            default=False,
        ),
    ],
)

GET_CONTENTS = ToolDefinition(
    name="exa.get_contents",
    description=(
        "Extract full text content from web pages by URL or Exa result ID. "
        "Provide exactly one of 'ids' or 'urls'. "
        "Example: 'Get the full text of the first two search results.'"
    ),
    parameters=[
        ToolParameter(
            name="ids",
            type="array",
            items="string",
            description="List of Exa result IDs to get content for",
            required=False,
            max_items=MAX_CONTENT_ITEMS,
        ),
        ToolParameter(
            name="urls",
            type="array",
            items="string",
            items_format="uri",
            description="List of URLs to get content for",
            required=False,
            max_items=MAX_CONTENT_ITEMS,
        ),
        ToolParameter(
            name="text_length_limit",
            type="integer",
            description="Maximum characters of text content to return per page (100-50000). Default: 5000",
            required=False,
            default=5000,
            minimum=100,
            maximum=50000,
        ),
        ToolParameter(
            name="include_html",
            type="boolean",
            description="Include HTML content alongside text. Default: false",
            required=False,
            default=False,
        ),
    ],
    one_of=[["ids"], ["urls"]],
)

FIND_SIMILAR = ToolDefinition(
    name="exa.find_similar",
    description=(
        "Find web pages similar to a given URL using Exa's similarity matching. "
        "Useful for content discovery and competitive research. "
        "Example: 'Find sites similar to https://example.com/blog.'"
    ),
    parameters=[
        ToolParameter(
            name="url",
            type="string",
            format="uri",
            description="The URL to find similar content for",
        ),
        _num_results("Number of similar results to return (1-100). Default: 10"),
        *_domain_filters("similarity search"),
        *_date_filters(),
        _category("Filter similar results by content category"),
        *_text_options("similarity results"),
    ],
)

MANIFEST = ModuleManifest(
    module_name="exa",
    description="Neural and keyword web search, content extraction, and similarity search using the Exa API.",
    tools=[SEARCH, GET_CONTENTS, FIND_SIMILAR],
)
