"""
Main entry point for the study quiz service.

Usage:
    python main.py                      # Serve on API_HOST:API_PORT (default 0.0.0.0:3000)
    python main.py --port 8000          # Override the port
    python main.py --reload             # Auto-reload on code changes
"""

import argparse

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from config import settings


def main():
    """Parse command line arguments and start the API server."""
    parser = argparse.ArgumentParser(
        description="Study quiz service: document summaries, quizzes and study material"
    )
    parser.add_argument("--host", default=settings.api_host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Bind port")
    parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.api_reload,
        help="Enable auto-reload",
    )
    args = parser.parse_args()

    print(f"🎓 {settings.app_name} v{settings.app_version}")
    print(f"   Listening on http://{args.host}:{args.port}")

    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
