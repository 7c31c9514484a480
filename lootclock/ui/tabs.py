"""The four tabs of the main window: Timer, Loot Box, Inventory and Profile."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QIntValidator
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from lootclock.core.progress import required_experience
from lootclock.core.session import AppSession
from lootclock.core.timer import Phase, Ticker, TIMED_PHASES
from lootclock.ui.colors import AppColors, text_color_for
from lootclock.ui.models import build_inventory_tiles
from lootclock.ui.reward_tiles import RewardGridWidget

_PHASE_TITLES = {
    Phase.INITIAL: "Work",
    Phase.BREAK: "Break",
    Phase.FINAL: "Final",
    Phase.FINISHED: "Finished",
}


class TimerTab(QWidget):
    """Interval timer screen.

    Owns its IntervalTimer; ``dispose()`` must run before the tab goes away so
    the tick source is released.
    """

    def __init__(self, session: AppSession, ticker: Ticker, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session = session
        self._timer = session.create_timer(ticker)
        self._timer.subscribe(self._refresh)
        self._timer.subscribe_finished(self._on_finished)
        self._unsubscribe_progress = session.progress.subscribe(self._refresh)

        self.setObjectName("timerTab")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        self._title = QLabel("Timer")
        self._title.setObjectName("timerTitle")
        self._title.setAlignment(Qt.AlignCenter)

        self._fields_panel = QWidget()
        fields_layout = QGridLayout(self._fields_panel)
        fields_layout.setContentsMargins(0, 0, 0, 0)
        fields_layout.setHorizontalSpacing(8)
        self._fields: dict[Phase, tuple[QLineEdit, QLineEdit]] = {}
        for row, phase in enumerate(TIMED_PHASES):
            label = QLabel(_PHASE_TITLES[phase])
            label.setObjectName("timerFieldLabel")
            minutes = self._make_field("min")
            seconds = self._make_field("sec")
            fields_layout.addWidget(label, row, 0)
            fields_layout.addWidget(minutes, row, 1)
            fields_layout.addWidget(seconds, row, 2)
            self._fields[phase] = (minutes, seconds)

        self._action_button = QPushButton("Start Timer")
        self._action_button.setObjectName("timerAction")
        self._action_button.setCursor(Qt.PointingHandCursor)
        self._action_button.clicked.connect(self._on_action)

        self._phase_label = QLabel("")
        self._phase_label.setObjectName("timerPhase")
        self._phase_label.setAlignment(Qt.AlignCenter)

        self._status_label = QLabel("")
        self._status_label.setObjectName("timerStatus")
        self._status_label.setAlignment(Qt.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.addStretch(1)
        layout.addWidget(self._title)
        layout.addWidget(self._fields_panel, 0, Qt.AlignHCenter)
        layout.addWidget(self._action_button, 0, Qt.AlignHCenter)
        layout.addWidget(self._phase_label)
        layout.addWidget(self._status_label)
        layout.addStretch(1)

        self._refresh()

    def _make_field(self, placeholder: str) -> QLineEdit:
        field = QLineEdit()
        field.setPlaceholderText(placeholder)
        field.setValidator(QIntValidator(0, 99999, field))
        field.setFixedWidth(80)
        return field

    def dispose(self) -> None:
        self._timer.dispose()
        self._unsubscribe_progress()

    def showEvent(self, event) -> None:
        self._session.promote_selected()
        super().showEvent(event)

    def _on_action(self) -> None:
        if self._timer.timer_finished:
            self._restart()
        elif self._timer.is_running:
            self._timer.stop()
        else:
            for phase, (minutes, seconds) in self._fields.items():
                self._timer.configure(phase, minutes.text(), seconds.text())
            self._timer.start()

    def _restart(self) -> None:
        self._timer.reset()
        for minutes, seconds in self._fields.values():
            minutes.clear()
            seconds.clear()

    def _on_finished(self) -> None:
        QApplication.beep()

    def _refresh(self) -> None:
        finished = self._timer.timer_finished
        if finished:
            background = self._session.progress.selected_color or AppColors.FINISHED_DEFAULT
        else:
            background = AppColors.TIMER_BG
        text = text_color_for(background)
        self.setStyleSheet(
            f"""
            QWidget#timerTab {{ background: {background}; }}
            QLabel#timerTitle {{ color: {text}; font-size: 34px; font-weight: 800; }}
            QLabel#timerFieldLabel {{ color: {text}; font-size: 14px; }}
            QLabel#timerPhase {{ color: {text}; font-size: 14px; }}
            QLabel#timerStatus {{ color: {text}; font-size: 17px; font-weight: 700; }}
            QLineEdit {{ background: #FFFFFF; color: #000000; border-radius: 6px; padding: 4px; }}
            QPushButton#timerAction {{
                background: transparent;
                color: {text};
                border: none;
                font-size: 26px;
            }}
            """
        )
        self._fields_panel.setVisible(not finished)

        if finished:
            self._action_button.setText("Restart Timer")
            self._status_label.setText("Timer Finished!")
        else:
            self._action_button.setText("Stop Timer" if self._timer.is_running else "Start Timer")
            self._status_label.setText(f"Time remaining: {self._timer.remaining_seconds} seconds")
        self._phase_label.setText(f"Phase: {_PHASE_TITLES[self._timer.phase]}")


class LootBoxTab(QWidget):
    def __init__(self, session: AppSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session = session
        session.inventory.subscribe(self._refresh)

        self._spin_button = QPushButton("Spin the Wheel")
        self._spin_button.setObjectName("spinButton")
        self._spin_button.setCursor(Qt.PointingHandCursor)
        self._spin_button.clicked.connect(self._spin)

        self._remaining_label = QLabel("")
        self._remaining_label.setAlignment(Qt.AlignCenter)

        self.setStyleSheet(
            f"""
            QPushButton#spinButton {{
                background: transparent;
                color: {AppColors.TEXT_PRIMARY};
                border: none;
                font-size: 26px;
            }}
            QLabel {{ color: {AppColors.TEXT_MUTED}; font-size: 13px; }}
            """
        )

        layout = QVBoxLayout(self)
        layout.addStretch(1)
        layout.addWidget(self._spin_button, 0, Qt.AlignHCenter)
        layout.addWidget(self._remaining_label)
        layout.addStretch(1)

        self._refresh()

    def _spin(self) -> None:
        reward = self._session.open_loot_box()
        message = reward.name if reward is not None else "No color acquired"
        QMessageBox.information(self, "Acquired Color", message)

    def _refresh(self) -> None:
        left = len(self._session.dispenser.candidates(self._session.inventory.items()))
        self._remaining_label.setText(f"{left} of {len(self._session.catalog)} colors left")


class InventoryTab(QWidget):
    def __init__(self, session: AppSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session = session
        session.inventory.subscribe(self._refresh)
        session.progress.subscribe(self._refresh)

        title = QLabel("Inventory")
        title.setStyleSheet(f"color: {AppColors.TEXT_PRIMARY}; font-size: 28px; font-weight: 800;")

        self._empty_label = QLabel("Spin the loot box to collect colors.")
        self._empty_label.setStyleSheet(f"color: {AppColors.TEXT_MUTED};")
        self._empty_label.setAlignment(Qt.AlignCenter)

        self._grid = RewardGridWidget(on_tile_clicked=self._session.select_reward)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setWidget(self._grid)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addWidget(title)
        layout.addWidget(self._empty_label)
        layout.addWidget(scroll, 1)

        self._refresh()

    def _refresh(self) -> None:
        rewards = self._session.inventory.items()
        self._empty_label.setVisible(not rewards)
        self._grid.set_tiles(build_inventory_tiles(rewards, self._session.progress.selected_color))


class ProfileTab(QWidget):
    def __init__(self, session: AppSession, username: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session = session
        self._progress = session.progress
        self._progress.subscribe(self._refresh)

        avatar = QLabel(username[1:2].upper() if username.startswith("@") else username[:1].upper())
        avatar.setFixedSize(100, 100)
        avatar.setAlignment(Qt.AlignCenter)
        avatar.setStyleSheet(
            f"background: {AppColors.PRIMARY}; color: #FFFFFF; border-radius: 50px;"
            " font-size: 40px; font-weight: 800;"
        )

        name = QLabel(username)
        name.setAlignment(Qt.AlignCenter)
        name.setStyleSheet(f"color: {AppColors.TEXT_PRIMARY}; font-size: 26px;")

        self._level_label = QLabel("")
        self._level_label.setAlignment(Qt.AlignCenter)

        self._active_label = QLabel("")
        self._active_label.setAlignment(Qt.AlignCenter)
        self._active_label.setStyleSheet(f"color: {AppColors.TEXT_MUTED};")

        self._xp_bar = QProgressBar()
        self._xp_bar.setObjectName("xpBar")
        self._xp_bar.setRange(0, 1000)
        self._xp_bar.setTextVisible(False)
        self._xp_bar.setFixedHeight(20)
        self._xp_bar.setStyleSheet(
            f"""
            QProgressBar#xpBar {{
                border: none;
                border-radius: 10px;
                background: {AppColors.XP_TRACK};
            }}
            QProgressBar#xpBar::chunk {{
                border-radius: 10px;
                background: {AppColors.XP_FILL};
            }}
            """
        )

        self._xp_label = QLabel("")
        self._xp_label.setAlignment(Qt.AlignCenter)
        self._xp_label.setStyleSheet(f"color: {AppColors.TEXT_MUTED};")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)
        layout.addWidget(avatar, 0, Qt.AlignHCenter)
        layout.addWidget(name)
        layout.addWidget(self._level_label)
        layout.addWidget(self._xp_bar)
        layout.addWidget(self._xp_label)
        layout.addWidget(self._active_label)
        layout.addStretch(1)

        self._refresh()

    def _refresh(self) -> None:
        level = self._progress.level
        self._level_label.setText(f"Level {level}")
        self._xp_bar.setValue(int(round(self._progress.level_fraction() * 1000)))
        self._xp_label.setText(f"{self._progress.experience:.1f} / {required_experience(level):.0f} XP")
        active = self._session.active_reward()
        if active is None:
            self._active_label.setText("No active color")
        else:
            self._active_label.setText(f"Active color: {active.name or active.color}")
