# src/rv_cycle_tracer/ui/memory_view.py
"""
データメモリの先頭ワードを表形式で表示するウィジェット。
"""
from typing import Optional, Sequence

from PySide6.QtWidgets import QWidget, QVBoxLayout, QTableWidget, QTableWidgetItem, QHeaderView
from PySide6.QtGui import QColor

from rv_cycle_tracer.core.state import ArchState, WORD_BYTES
from rv_cycle_tracer.ui.theme import get_monospace_font, COLOR_HIGHLIGHT

# @intent:responsibility データメモリの内容（バイトアドレスと値）を表示し、直近のアクセス位置をハイライトします。
class MemoryView(QWidget):
    def __init__(self, visible_words: int = 32, parent=None):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.table = QTableWidget()
        self.table.setColumnCount(2)
        self.table.setHorizontalHeaderLabels(["Address", "Value"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setFont(get_monospace_font(10))
        self.layout.addWidget(self.table)

        self.visible_words = visible_words
        self.table.setRowCount(visible_words)

    def set_visible_words(self, visible_words: int) -> None:
        self.visible_words = visible_words
        self.table.setRowCount(visible_words)

    # @intent:responsibility メモリ内容を表示し、指定されたバイトアドレスのワードをハイライトします。
    def update_memory(self, memory: Sequence[int], highlight_address: Optional[int] = None):
        highlight_row = ArchState.memory_index(highlight_address) if highlight_address is not None else -1

        for row in range(self.visible_words):
            addr_item = QTableWidgetItem(f"[{row * WORD_BYTES}]")
            value_item = QTableWidgetItem(str(memory[row]))
            if row == highlight_row:
                addr_item.setBackground(QColor(COLOR_HIGHLIGHT))
                value_item.setBackground(QColor(COLOR_HIGHLIGHT))
            self.table.setItem(row, 0, addr_item)
            self.table.setItem(row, 1, value_item)
