# lotto_service/run_api.py

import uvicorn

from .config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "lotto_service.api:app",
        host=settings.UVICORN_HOST,
        port=settings.UVICORN_PORT,
        reload=settings.UVICORN_RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
