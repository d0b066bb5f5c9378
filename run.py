#!/usr/bin/env python3
"""
Big Integer API Entry Point

Starts the FastAPI server with host and port taken from BIGINT_* settings.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from big_integer.api import run_server
from big_integer.config import get_config
from big_integer.logging_config import setup_logging


if __name__ == "__main__":
    settings = get_config()
    setup_logging(settings.log_level, log_format=settings.log_format)

    print("Starting Big Integer API...")
    print(f"API available at: http://{settings.api_host}:{settings.api_port}")
    print(f"Documentation at: http://{settings.api_host}:{settings.api_port}/docs")
    print()

    try:
        run_server(
            host=settings.api_host,
            port=settings.api_port,
            debug=False
        )
    except KeyboardInterrupt:
        print("\nShutting down Big Integer API...")
    except Exception as e:
        print(f"Error starting server: {e}")
        sys.exit(1)
