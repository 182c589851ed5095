"""Application entry point for the desktop front-end."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from ..config import APP_NAME
from ..core.usage import UsageCounter
from ..settings import SettingsManager
from ..utils.logging import get_logger
from .ui.controllers.filter_controller import FilterController
from .ui.main_window import MainWindow


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Launch the Instafilter window.

    An optional image path in *argv* is loaded right away, as if it had been
    picked from the import dialog.
    """

    args = list(sys.argv if argv is None else argv)
    logger = get_logger()

    app = QApplication.instance() or QApplication(args)
    app.setApplicationName(APP_NAME)

    settings = SettingsManager()
    settings.load()
    controller = FilterController(usage=UsageCounter(settings))
    window = MainWindow(controller)
    window.show()

    if len(args) > 1:
        window.open_path(Path(args[1]).expanduser())

    logger.info("%s started (settings: %s)", APP_NAME, settings.path)
    exit_code = app.exec()
    controller.wait_for_done()
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
