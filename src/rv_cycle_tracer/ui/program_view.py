# src/rv_cycle_tracer/ui/program_view.py
"""
プログラム（命令リスト）の表示と編集を行うウィジェット。
"""
from typing import Sequence

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QPushButton,
    QTableWidget, QTableWidgetItem, QHeaderView
)
from PySide6.QtGui import QColor
from PySide6.QtCore import Signal, Slot

from rv_cycle_tracer.ui.theme import get_monospace_font, COLOR_HIGHLIGHT

# @intent:responsibility 命令リストを表形式で表示し、現在のPCをハイライトします。追加・削除要求をシグナルで通知します。
class ProgramView(QWidget):
    """
    プログラム表示ウィジェット。
    状態を直接変更せず、instruction_added / instruction_removed シグナルで編集を要求します。
    """
    instruction_added = Signal(str)
    instruction_removed = Signal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.table = QTableWidget()
        self.table.setColumnCount(2)
        self.table.setHorizontalHeaderLabels(["#", "Instruction"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setFont(get_monospace_font(10))
        self.layout.addWidget(self.table)

        input_layout = QHBoxLayout()
        self.input = QLineEdit()
        self.input.setPlaceholderText("e.g. addi x5, x0, 7")
        self.input.returnPressed.connect(self._on_add)
        input_layout.addWidget(self.input)

        self.add_button = QPushButton("Add")
        self.add_button.clicked.connect(self._on_add)
        input_layout.addWidget(self.add_button)

        self.delete_button = QPushButton("Delete")
        self.delete_button.clicked.connect(self._on_delete)
        input_layout.addWidget(self.delete_button)
        self.layout.addLayout(input_layout)

    # @intent:responsibility 命令リストを再描画し、PCの行をハイライトします。
    def update_program(self, program: Sequence[str], pc: int):
        self.table.setRowCount(len(program))
        for row, text in enumerate(program):
            index_item = QTableWidgetItem(f"{row}:")
            text_item = QTableWidgetItem(text)
            if row == pc:
                index_item.setBackground(QColor(COLOR_HIGHLIGHT))
                text_item.setBackground(QColor(COLOR_HIGHLIGHT))
            self.table.setItem(row, 0, index_item)
            self.table.setItem(row, 1, text_item)
        if 0 <= pc < len(program):
            self.table.scrollToItem(self.table.item(pc, 0), QTableWidget.EnsureVisible)

    @Slot()
    def _on_add(self):
        text = self.input.text().strip()
        if text:
            self.instruction_added.emit(text)
        self.input.clear()

    @Slot()
    def _on_delete(self):
        row = self.table.currentRow()
        if row >= 0:
            self.instruction_removed.emit(row)
