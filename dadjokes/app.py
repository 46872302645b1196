"""
Entry point (`dadjokes` script, `python -m dadjokes`): wire storage, HTTP client,
controller and Tk window, then run the main loop.
"""

import logging
import os
import tkinter as tk

from .client import JokeClient
from .config import LOG_LEVEL_ENV_VAR
from .controller import AppController
from .logs import configure_logging
from .repository import FavouritesStore
from .storage import get_favourites_path
from .ui import AppUI, tk_dispatcher

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO"))

    root = tk.Tk()
    store = FavouritesStore(get_favourites_path())
    controller = AppController(JokeClient(), store, dispatch=tk_dispatcher(root))
    AppUI(root, controller)

    logger.info("Favourites file: %s", store.path)
    controller.start()
    root.mainloop()


if __name__ == "__main__":
    main()
