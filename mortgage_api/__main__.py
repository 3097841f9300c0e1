# This project was developed with assistance from AI tools.
"""Run the service: ``python -m mortgage_api``.

The listening port comes from the YAML service config; uvicorn handles
graceful shutdown on SIGINT/SIGTERM.
"""

import logging

import uvicorn

from .core.config import settings
from .core.yaml_config import load_config

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config(settings.CONFIG_PATH)
    logger.info("Starting server on %s:%d", settings.HOST, config.server.port)
    uvicorn.run("mortgage_api.main:app", host=settings.HOST, port=config.server.port)


if __name__ == "__main__":
    main()
