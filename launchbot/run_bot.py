from __future__ import annotations

import logging

from .bot import LaunchBot
from .config import Settings
from .errors import MissingToken

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)s  %(name)s  %(message)s",
    )
    try:
        settings = Settings.from_env()
    except MissingToken as exc:
        logger.critical("%s", exc)
        raise SystemExit(1)

    bot = LaunchBot(settings)
    bot.run(settings.token, log_handler=None)


if __name__ == "__main__":
    main()
