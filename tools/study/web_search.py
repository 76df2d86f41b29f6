"""
Web resource search using Google Custom Search.

Looks for PDF study material on a topic. Needs both an API key and a
search engine id (cx); without either, or on any failure, the result is
an empty list.
"""

import time
from typing import Any, Dict, List, Optional

import httpx

from config import settings
from utils.http import get_http_client
from utils.monitoring import get_logger, track_fetcher_failure

logger = get_logger(__name__)

CUSTOM_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


def format_search_results(items: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Project raw search items onto {title, link}.

    Items without a link are skipped.
    """
    results = []
    for item in items:
        if not isinstance(item, dict):
            continue
        link = item.get("link")
        if not link:
            continue
        results.append({
            "title": item.get("title") or link,
            "link": link,
        })
    return results


async def fetch_web_resources(
    topic: str,
    client: Optional[httpx.AsyncClient] = None,
) -> List[Dict[str, str]]:
    """
    Search web resources for a topic.

    Args:
        topic: Search query
        client: HTTP client override (defaults to the shared client)

    Returns:
        List of {title, link}; empty if unconfigured or on error
    """
    if not settings.google_cse_api_key or not settings.google_cse_id:
        return []

    client = client or get_http_client()
    params = {
        "key": settings.google_cse_api_key,
        "cx": settings.google_cse_id,
        "q": topic,
        "num": settings.search_max_results,
        "safe": "active",
        "fileType": "pdf",
    }

    start = time.time()
    try:
        response = await client.get(CUSTOM_SEARCH_URL, params=params)
        response.raise_for_status()
        data = response.json()
        results = format_search_results(data.get("items") or [])
    except httpx.HTTPStatusError as e:
        logger.error(
            f"Google Custom Search error: HTTP {e.response.status_code}",
            body=e.response.text[:500],
        )
        track_fetcher_failure("web_search")
        return []
    except (httpx.HTTPError, ValueError, AttributeError, TypeError) as e:
        logger.error(f"Google Custom Search error: {e}")
        track_fetcher_failure("web_search")
        return []

    logger.external_call(
        "web_search",
        success=True,
        latency_ms=int((time.time() - start) * 1000),
        results=len(results),
    )
    return results
