import uvicorn

from person_enrichment.infrastructure.config.dependencies import get_settings
from person_enrichment.infrastructure.logging.logger import configure_logging


def main():
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        "person_enrichment.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_SECONDS,
    )


if __name__ == "__main__":
    main()
