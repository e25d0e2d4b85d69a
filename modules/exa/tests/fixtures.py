"""Test fixtures and mock data for Exa module tests."""

from __future__ import annotations

LONG_TEXT = "a" * 250

SEARCH_RESPONSE = {
    "requestId": "req-search-1",
    "autopromptString": "Here is a great article about protein folding:",
    "results": [
        {
            "id": "https://example.com/folding",
            "url": "https://example.com/folding",
            "title": "Protein Folding Explained",
            "score": 0.87654,
            "publishedDate": "2024-03-01",
            "author": "Jane Doe",
            "text": LONG_TEXT,
            "highlights": ["first", "second", "third", "fourth"],
            "highlightScores": [0.9, 0.8, 0.7, 0.6],
            "summary": "An overview of folding.",
        },
        {
            "id": "https://example.org/alpha",
            "url": "https://example.org/alpha",
            "title": "AlphaFold Notes",
            "score": 0.5,
        },
    ],
}

SEARCH_RESPONSE_MINIMAL = {
    "results": [
        {
            "id": "abc",
            "url": "https://example.net/",
            "title": "Short",
            "score": 0.1234,
            "text": "short text",
        },
    ],
}

CONTENTS_RESPONSE = {
    "requestId": "req-contents-1",
    "results": [
        {
            "id": "https://example.com/folding",
            "url": "https://example.com/folding",
            "title": "Protein Folding Explained",
            "text": "b" * 1500,
            "author": "Jane Doe",
            "publishedDate": "2024-03-01",
        },
        {
            "id": "https://example.org/alpha",
            "url": "https://example.org/alpha",
            "title": "AlphaFold Notes",
            "text": "Short page.",
        },
    ],
}

FIND_SIMILAR_RESPONSE = {
    "requestId": "req-similar-1",
    "results": [
        {
            "id": "https://similar.com/one",
            "url": "https://similar.com/one",
            "title": "Similar One",
            "score": 0.9,
            "author": "John Roe",
            "text": "c" * 210,
        },
        {
            "id": "https://similar.com/two",
            "url": "https://similar.com/two",
            "title": "Similar Two",
            "score": 0.75,
            "publishedDate": "2023-11-20",
        },
    ],
}

RATE_LIMITED_BODY = {"message": "rate limited", "requestId": "req-429"}
