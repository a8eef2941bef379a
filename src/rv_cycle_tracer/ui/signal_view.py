# src/rv_cycle_tracer/ui/signal_view.py
"""
制御信号とALUの入出力を表示するウィジェット。
"""
from typing import Dict, Optional
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QFormLayout, QLabel, QGroupBox
from PySide6.QtCore import Qt

from rv_cycle_tracer.core.cpu import AbstractCpu
from rv_cycle_tracer.ui.theme import get_monospace_font_family, COLOR_ACTIVE, COLOR_BACKGROUND, COLOR_TEXT, COLOR_VALUE

# @intent:responsibility 直近サイクルの制御信号ベクトルとALUのオペランド・結果を表示します。
class SignalView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet(f"background-color: {COLOR_BACKGROUND}; color: {COLOR_TEXT};")
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(5, 5, 5, 5)

        self._font_family = get_monospace_font_family()
        self._signal_labels: Dict[str, QLabel] = {}
        self._cpu: Optional[AbstractCpu] = None

        self._signal_box = QGroupBox("Control Signals")
        self._signal_grid = QGridLayout(self._signal_box)
        self.layout.addWidget(self._signal_box)

        alu_box = QGroupBox("ALU")
        alu_form = QFormLayout(alu_box)
        self.operand_a_label = QLabel("0")
        self.operand_b_label = QLabel("0")
        self.result_label = QLabel("0")
        for caption, label in (("A:", self.operand_a_label), ("B:", self.operand_b_label), ("Result:", self.result_label)):
            label.setAlignment(Qt.AlignRight)
            label.setStyleSheet(f"font-family: '{self._font_family}', monospace; color: {COLOR_VALUE};")
            alu_form.addRow(QLabel(caption), label)
        self.layout.addWidget(alu_box)

        self.decoded_label = QLabel("")
        self.decoded_label.setStyleSheet(f"font-family: '{self._font_family}', monospace; color: {COLOR_ACTIVE};")
        self.layout.addWidget(self.decoded_label)
        self.instruction_label = QLabel("")
        self.layout.addWidget(self.instruction_label)
        self.layout.addStretch()

    # @intent:responsibility 表示対象のCPUを設定し、信号ラベルを作成します。
    def set_cpu(self, cpu: AbstractCpu) -> None:
        self._cpu = cpu
        while self._signal_grid.count():
            item = self._signal_grid.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._signal_labels.clear()

        for row, name in enumerate(cpu.get_signal_state().keys()):
            label_name = QLabel(f"{name}:")
            label_name.setStyleSheet(f"font-weight: bold; color: {COLOR_TEXT};")
            label_value = QLabel("0")
            label_value.setAlignment(Qt.AlignCenter)
            self._signal_grid.addWidget(label_name, row, 0)
            self._signal_grid.addWidget(label_value, row, 1)
            self._signal_labels[name] = label_value
        self.update_signals()

    # @intent:responsibility 現在の制御信号と直近の実行記録で表示を更新します。
    def update_signals(self):
        if not self._cpu:
            return

        for name, value in self._cpu.get_signal_state().items():
            label = self._signal_labels.get(name)
            if label is None:
                continue
            if isinstance(value, bool):
                label.setText("1" if value else "0")
                active = value
            else:
                label.setText(str(value))
                active = value != "00"
            color = COLOR_ACTIVE if active else "#555555"
            label.setStyleSheet(f"font-family: '{self._font_family}', monospace; color: {color};")

        record = self._cpu.get_last_record()
        if record is None:
            self.operand_a_label.setText("0")
            self.operand_b_label.setText("0")
            self.result_label.setText("0")
            self.decoded_label.setText("")
            self.instruction_label.setText("")
            return
        self.operand_a_label.setText(str(record.read_data1))
        self.operand_b_label.setText(str(record.alu_operand_b))
        self.result_label.setText(str(record.alu_result))
        self.decoded_label.setText(record.disassembly)
        self.instruction_label.setText(record.trace)

    def signal_text(self, name: str) -> str:
        return self._signal_labels[name].text()
