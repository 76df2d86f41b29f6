"""
Tools Package

- tools.study: document text extraction and study-resource search
  (document_text, video_search, web_search)

Import from subdirectories:
    from tools.study import extract_text_async, fetch_videos, fetch_web_resources
"""
