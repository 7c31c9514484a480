"""Inventory UI: RewardTile and the RewardGridWidget that lays them out."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QGraphicsDropShadowEffect,
    QGridLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from lootclock.ui.colors import AppColors, blend_hex, text_color_for
from lootclock.ui.models import InventoryTile


class RewardTile(QWidget):
    """A clickable colour square; the selected one carries a check mark."""

    def __init__(self, *, on_click: Callable[[str], None], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._on_click = on_click
        self._color: str = ""

        self.setObjectName("rewardTile")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumSize(100, 100)
        self.setMaximumHeight(100)

        self._check = QLabel("")
        self._check.setObjectName("rewardTileCheck")
        self._check.setAlignment(Qt.AlignCenter)

        self._name = QLabel("")
        self._name.setObjectName("rewardTileName")
        self._name.setAlignment(Qt.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addStretch(1)
        layout.addWidget(self._check, 0, Qt.AlignCenter)
        layout.addStretch(1)
        layout.addWidget(self._name, 0, Qt.AlignCenter)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(18)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(15, 23, 42, 60))
        self.setGraphicsEffect(shadow)

    def set_tile(self, tile: InventoryTile) -> None:
        self._color = tile.reward.color
        top = blend_hex(self._color, "#FFFFFF", 0.12)
        bottom = blend_hex(self._color, "#000000", 0.08)
        text = text_color_for(self._color)
        self.setStyleSheet(
            f"""
            QWidget#rewardTile {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {top}, stop:1 {bottom});
                border-radius: 10px;
                border: 1px solid {AppColors.TILE_BORDER};
            }}
            QLabel#rewardTileCheck {{
                color: {text};
                font-size: 26px;
                font-weight: 900;
            }}
            QLabel#rewardTileName {{
                color: {text};
                font-size: 12px;
                font-weight: 700;
            }}
            """
        )
        self._check.setText("✓" if tile.selected else "")
        self._name.setText(tile.reward.name)
        self.setToolTip(tile.reward.name or tile.reward.color)

    def mousePressEvent(self, event) -> None:
        if self._color:
            self._on_click(self._color)
        super().mousePressEvent(event)


class RewardGridWidget(QWidget):
    """Grid of RewardTiles, rebuilt whenever the inventory or selection changes."""

    def __init__(
        self,
        *,
        on_tile_clicked: Callable[[str], None],
        columns: int = 3,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._on_tile_clicked = on_tile_clicked
        self._columns = max(1, columns)
        self._tiles: list[RewardTile] = []
        self._grid = QGridLayout(self)
        self._grid.setContentsMargins(10, 10, 10, 10)
        self._grid.setSpacing(10)
        self._grid.setAlignment(Qt.AlignTop)

    def set_tiles(self, tiles: list[InventoryTile]) -> None:
        while len(self._tiles) < len(tiles):
            self._tiles.append(RewardTile(on_click=self._on_tile_clicked, parent=self))

        for i, tile in enumerate(tiles):
            widget = self._tiles[i]
            widget.set_tile(tile)
            self._grid.addWidget(widget, i // self._columns, i % self._columns)
            widget.show()

        for widget in self._tiles[len(tiles):]:
            self._grid.removeWidget(widget)
            widget.hide()
