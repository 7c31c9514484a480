"""Application entry point and setup for the Loot Clock timer."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from lootclock.core.config import AppConfig
from lootclock.core.rewards import RewardCatalog
from lootclock.core.session import AppSession
from lootclock.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_session(config: AppConfig) -> AppSession:
    """Load the reward catalog and create the session shared by all tabs."""
    catalog = RewardCatalog(config.rewards_path)
    logging.info(f"Loaded {len(catalog)} rewards")
    return AppSession(catalog)


def run() -> None:
    """Initialize the application, build the session, and start the main window."""
    configure_logging()
    config = AppConfig.from_env()
    if config.tick_interval_ms != 1000:
        logging.warning(f"Timer ticks every {config.tick_interval_ms} ms instead of every second")

    app = QApplication(sys.argv)
    app.setApplicationName("Loot Clock")
    app.setApplicationDisplayName("Loot Clock")

    session = build_session(config)
    window = MainWindow(session=session, config=config)
    window.resize(480, 760)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
