#!/usr/bin/env python3
"""
Development server launcher for the formsmith API.

This script starts the FastAPI server with appropriate settings for development.
For production, you'd use a proper ASGI server deployment.
"""

import copy
from pathlib import Path

import uvicorn
from uvicorn.config import LOGGING_CONFIG

project_root = Path(__file__).parent
package_path = project_root / "formsmith"

# uvicorn applies log_config inside the reload worker too, so app loggers need to live here
LOG_CONFIG = copy.deepcopy(LOGGING_CONFIG)
LOG_CONFIG["loggers"]["formsmith"] = {"handlers": ["default"], "level": "INFO", "propagate": False}


def main():
    print("Starting formsmith API Development Server")
    print("Server will be available at: http://localhost:8000")
    print("API documentation at: http://localhost:8000/docs")

    uvicorn.run(
        "formsmith.api.main:app",
        host="0.0.0.0",  # Accept connections from any IP
        port=8000,
        reload=True,     # Auto-reload on code changes (development only)
        reload_dirs=[str(package_path)],
        log_level="info",
        log_config=LOG_CONFIG,
    )


if __name__ == "__main__":
    main()
