import logging
import uvicorn
from booking_engine.core.config import settings
from booking_engine.core.logger_config import configure_logging

logger = logging.getLogger("booking_engine")


def main():
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"booking-engine listening on :{settings.PORT}")
    uvicorn.run(
        "booking_engine.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
