"""Console entry point: configures logging and runs the game."""

import logging
import os

from .app import App

LOG_LEVEL_ENV_VAR = "TIMESTABLES_LOG_LEVEL"


def main() -> None:
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = App()
    app.run()
