"""
Main module entry point.

This allows running the HTTP service as: python -m predictive_hpa.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "predictive_hpa.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
    )


if __name__ == "__main__":
    main()
