"""
Run the API with uvicorn.

    python -m chirp.api
"""

import uvicorn

from chirp.config.settings import settings


def main() -> None:
    uvicorn.run(
        "chirp.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
