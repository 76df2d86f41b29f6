"""
Study Tools

- document_text: Text extraction from uploaded PDFs and text files
- video_search: YouTube video search
- web_search: Google Custom Search for PDF resources
"""

from .document_text import (
    extract_text,
    extract_text_async,
    save_upload,
    discard_upload,
    upload_extension,
    ALLOWED_EXTENSIONS,
)
from .video_search import fetch_videos
from .web_search import fetch_web_resources

__all__ = [
    'extract_text',
    'extract_text_async',
    'save_upload',
    'discard_upload',
    'upload_extension',
    'ALLOWED_EXTENSIONS',
    'fetch_videos',
    'fetch_web_resources',
]
