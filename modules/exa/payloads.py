"""Map validated tool arguments to Exa API request bodies."""

from __future__ import annotations

from typing import Any

# Tool argument name -> Exa request field, shared by search and findSimilar
_FILTER_FIELDS = {
    "start_crawl_date": "startCrawlDate",
    "end_crawl_date": "endCrawlDate",
    "start_published_date": "startPublishedDate",
    "end_published_date": "endPublishedDate",
    "category": "category",
}


def _add_filters(body: dict[str, Any], args: dict[str, Any]) -> None:
    if args.get("include_domains"):
        body["includeDomains"] = list(args["include_domains"])
    if args.get("exclude_domains"):
        body["excludeDomains"] = list(args["exclude_domains"])
    for arg_name, field in _FILTER_FIELDS.items():
        if args.get(arg_name):
            body[field] = args[arg_name]


def build_search_body(args: dict[str, Any]) -> dict[str, Any]:
    """Build the POST /search body.

    ``contents`` is only present when text or a summary is requested.
    """
    body: dict[str, Any] = {
        "query": args["query"].strip(),
        "numResults": args["num_results"],
        "useAutoprompt": args["use_autoprompt"],
        "type": args["type"],
    }

    contents: dict[str, Any] = {}
    if args["include_text"]:
        contents["text"] = {"maxCharacters": args["text_length_limit"]}
    if args["include_summary"]:
        contents["summary"] = {}
    if contents:
        body["contents"] = contents

    _add_filters(body, args)
    return body


def build_contents_body(args: dict[str, Any]) -> dict[str, Any]:
    """Build the POST /contents body for either ``ids`` or ``urls``."""
    contents: dict[str, Any] = {
        "text": {"maxCharacters": args["text_length_limit"]},
    }
    if args["include_html"]:
        contents["html"] = {}

    body: dict[str, Any] = {"contents": contents}
    if "ids" in args:
        body["ids"] = list(args["ids"])
    if "urls" in args:
        body["urls"] = list(args["urls"])
    return body


def build_find_similar_body(args: dict[str, Any]) -> dict[str, Any]:
    """Build the POST /findSimilar body."""
    body: dict[str, Any] = {
        "url": args["url"],
        "numResults": args["num_results"],
    }
    if args["include_text"]:
        body["contents"] = {"text": {"maxCharacters": args["text_length_limit"]}}

    _add_filters(body, args)
    return body
