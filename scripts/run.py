#!/usr/bin/env python3
"""
Watch Next Tonight Startup Script
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def check_env_file():
    """Copy .env.example to .env if there is no .env yet"""
    env_path = Path(__file__).parent.parent / ".env"
    env_example = Path(__file__).parent.parent / ".env.example"

    if not env_path.exists():
        if env_example.exists():
            env_path.write_text(env_example.read_text())
            print("Created .env from .env.example - set TMDB_READ_ACCESS_TOKEN before starting")
        else:
            print("Warning: .env.example not found, using environment only")


async def run_server():
    """Run API server"""
    import uvicorn
    from watchnext.config import settings

    print(f"API server starting on http://{settings.HOST}:{settings.PORT}")

    config = uvicorn.Config(
        "watchnext.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
    )
    server = uvicorn.Server(config)
    await server.serve()


def main():
    check_env_file()

    # Fails here, before binding, when TMDB_READ_ACCESS_TOKEN is missing
    try:
        from watchnext.config import settings  # noqa: F401
    except Exception as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
