from __future__ import annotations

from PySide6.QtCore import QSize
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QTabWidget

from lootclock.core.config import AppConfig
from lootclock.core.session import AppSession
from lootclock.ui.colors import AppColors
from lootclock.ui.tabs import InventoryTab, LootBoxTab, ProfileTab, TimerTab
from lootclock.ui.ticker import QtTicker


class MainWindow(QMainWindow):
    """Tabbed shell: Timer, Loot Box, Inventory and Profile.

    Every tab works on the same AppSession, so a colour won in the loot box
    shows up in the inventory and experience from the timer shows up on the
    profile straight away.
    """

    def __init__(self, session: AppSession, config: AppConfig) -> None:
        super().__init__()
        self._session = session
        self.setWindowTitle("Loot Clock")
        self.setMinimumSize(QSize(420, 640))

        self._tabs = QTabWidget()
        self._tabs.setDocumentMode(True)
        self._tabs.setTabPosition(QTabWidget.TabPosition.South)
        self._tabs.setStyleSheet(
            f"""
            QTabWidget::pane {{ background: {AppColors.PANEL_BG}; border: none; }}
            QTabBar::tab {{ padding: 10px 18px; color: {AppColors.TEXT_MUTED}; }}
            QTabBar::tab:selected {{ color: {AppColors.PRIMARY}; font-weight: 700; }}
            """
        )

        self._timer_tab = TimerTab(session, QtTicker(self, interval_ms=config.tick_interval_ms))
        self._tabs.addTab(self._timer_tab, "Timer")
        self._tabs.addTab(LootBoxTab(session), "Loot Box")
        self._tabs.addTab(InventoryTab(session), "Inventory")
        self._tabs.addTab(ProfileTab(session, config.username), "Profile")
        self.setCentralWidget(self._tabs)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop any running countdown before the window goes away."""
        self._timer_tab.dispose()
        super().closeEvent(event)
