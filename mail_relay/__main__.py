"""Run the mail relay with uvicorn: ``python -m mail_relay``."""

import logging

import uvicorn

from mail_relay.core.clock import utc_timestamp
from mail_relay.core.config import get_settings
from mail_relay.main import create_app

logger = logging.getLogger("mail_relay")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info("Mail relay running on port %s", settings.PORT)
    logger.info(
        "Email service: %s",
        "Configured" if settings.sendgrid_configured else "NOT CONFIGURED",
    )
    logger.info("Started at: %s", utc_timestamp())

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
