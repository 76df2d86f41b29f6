"""
Video search for study topics using the YouTube Data API v3.

Returns an empty list when no API key is configured or the call fails,
so callers never special-case a missing integration.
"""

import time
from typing import Dict, List, Optional

import httpx

from config import settings
from utils.http import get_http_client
from utils.monitoring import get_logger, track_fetcher_failure

logger = get_logger(__name__)

YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


def format_video_results(items: List[Dict]) -> List[Dict[str, str]]:
    """
    Project raw search items onto {title, url, thumbnail}.

    Items without a video id or title are skipped.
    """
    videos = []
    for item in items:
        if not isinstance(item, dict):
            continue
        snippet = item.get("snippet") or {}
        video_id = (item.get("id") or {}).get("videoId")
        title = snippet.get("title")
        if not video_id or not title:
            continue
        thumbnail = ((snippet.get("thumbnails") or {}).get("medium") or {}).get("url") or ""
        videos.append({
            "title": title,
            "url": YOUTUBE_WATCH_URL.format(video_id=video_id),
            "thumbnail": thumbnail,
        })
    return videos


async def fetch_videos(
    topic: str,
    client: Optional[httpx.AsyncClient] = None,
) -> List[Dict[str, str]]:
    """
    Search videos for a topic.

    Args:
        topic: Search query
        client: HTTP client override (defaults to the shared client)

    Returns:
        List of {title, url, thumbnail}; empty if unconfigured or on error
    """
    if not settings.youtube_api_key:
        return []

    client = client or get_http_client()
    params = {
        "key": settings.youtube_api_key,
        "q": topic,
        "part": "snippet",
        "maxResults": settings.youtube_max_results,
        "type": "video",
    }

    start = time.time()
    try:
        response = await client.get(YOUTUBE_SEARCH_URL, params=params)
        response.raise_for_status()
        data = response.json()
        results = format_video_results(data.get("items") or [])
    except httpx.HTTPStatusError as e:
        logger.error(
            f"YouTube API error: HTTP {e.response.status_code}",
            body=e.response.text[:500],
        )
        track_fetcher_failure("youtube")
        return []
    except (httpx.HTTPError, ValueError, AttributeError, TypeError) as e:
        logger.error(f"YouTube API error: {e}")
        track_fetcher_failure("youtube")
        return []

    logger.external_call(
        "youtube",
        success=True,
        latency_ms=int((time.time() - start) * 1000),
        results=len(results),
    )
    return results
