# src/rv_cycle_tracer/ui/register_view.py
"""
CPUのレジスタを表示する汎用ウィジェット。
AbstractCpuのメタデータを利用して動的にUIを構築します。
"""
from typing import Dict, Optional
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QLabel, QGroupBox
from PySide6.QtCore import Qt

from rv_cycle_tracer.core.cpu import AbstractCpu
from rv_cycle_tracer.ui.theme import get_monospace_font_family, COLOR_BACKGROUND, COLOR_TEXT, COLOR_VALUE

COLUMNS = 4

# @intent:responsibility CPUのレジスタ値を表示する汎用UIウィジェットを提供します。
class RegisterView(QWidget):
    """
    CPUのレジスタ状態を表示するウィジェット。
    値が0でないレジスタは強調表示されます。
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet(f"background-color: {COLOR_BACKGROUND}; color: {COLOR_TEXT};")

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(5, 5, 5, 5)

        self._font_family = get_monospace_font_family()
        self._register_labels: Dict[str, QLabel] = {}
        self._cpu: Optional[AbstractCpu] = None

    # @intent:responsibility 表示対象のCPUを設定し、UIレイアウトを構築します。
    def set_cpu(self, cpu: AbstractCpu) -> None:
        self._cpu = cpu
        self._setup_ui()
        self.update_registers()

    def _setup_ui(self):
        # 既存のウィジェットをクリア
        while self.layout.count():
            item = self.layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._register_labels.clear()

        for group in self._cpu.get_register_layout():
            group_box = QGroupBox(group.group_name)
            grid = QGridLayout(group_box)
            grid.setContentsMargins(10, 15, 10, 10)
            grid.setSpacing(5)

            for i, reg in enumerate(group.registers):
                row, col = divmod(i, COLUMNS)
                label_name = QLabel(f"{reg.name}:")
                label_name.setStyleSheet(f"font-weight: bold; color: {COLOR_TEXT};")

                label_value = QLabel("0")
                label_value.setAlignment(Qt.AlignRight)

                grid.addWidget(label_name, row, col * 2)
                grid.addWidget(label_value, row, col * 2 + 1)
                self._register_labels[reg.name] = label_value

            self.layout.addWidget(group_box)

        self.layout.addStretch()

    # @intent:responsibility 現在のCPU状態を取得し、レジスタの表示値を更新します。
    def update_registers(self):
        if not self._cpu:
            return

        for name, value in self._cpu.get_register_map().items():
            label = self._register_labels.get(name)
            if label is None:
                continue
            label.setText(str(value))
            color = COLOR_VALUE if value != 0 else "#555555"
            label.setStyleSheet(f"font-family: '{self._font_family}', monospace; color: {color};")

    def value_text(self, name: str) -> str:
        return self._register_labels[name].text()
