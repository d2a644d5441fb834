from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from tabpad.di.container import Container
from tabpad.logging_utils import configure_logging
from tabpad.services.config.app_config import build_app_config
from tabpad.utils.constants import APP_NAME, APP_ORG

log = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window. Extra CLI arguments are files to open.
    """
    config = build_app_config()
    configure_logging(config.log_level())
    if config.loaded_from:
        log.info("Loaded config from %s", config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container(config=config)
    start_paths = [Path(a) for a in argv[1:]]

    win = container.build_main_window(start_paths=start_paths, app_title=APP_NAME)
    win.show()

    return app.exec()
