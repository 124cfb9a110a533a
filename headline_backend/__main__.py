"""
Run the Headline Analyzer backend with uvicorn.

    python -m headline_backend

Host and port come from HOST / PORT (see headline_backend.config).
"""

import uvicorn

from headline_backend.config import settings


def main() -> None:
    print(f"Server is running on http://localhost:{settings.PORT}")
    print(f"   - Analyze:  POST http://localhost:{settings.PORT}/api/analyze")
    print(f"   - Generate: POST http://localhost:{settings.PORT}/api/generate")
    print(f"   - API Docs:      http://localhost:{settings.PORT}/docs")

    uvicorn.run(
        "headline_backend.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
