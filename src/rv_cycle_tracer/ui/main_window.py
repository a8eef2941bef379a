# src/rv_cycle_tracer/ui/main_window.py
"""
メインウィンドウの実装。
アプリケーションの主要なUIコンポーネントを保持し、レイアウトを管理します。
"""
import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QApplication, QDockWidget, QTabWidget, QToolBar, QLabel,
    QFileDialog, QMessageBox, QPlainTextEdit
)
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtCore import Qt, QTimer, Slot

from rv_cycle_tracer.common.errors import TracerError
from rv_cycle_tracer.config.builder import SystemBuilder
from rv_cycle_tracer.config.loader import ConfigLoader
from rv_cycle_tracer.config.models import SimulatorConfig
from rv_cycle_tracer.debugger.runner import StepStatus
from rv_cycle_tracer.loader.loader import ProgramLoader
from .register_view import RegisterView
from .memory_view import MemoryView
from .signal_view import SignalView
from .program_view import ProgramView
from .theme import build_dark_palette, build_stylesheet, get_monospace_font, get_monospace_font_family

logger = logging.getLogger(__name__)

# @intent:responsibility アプリケーションのメインウィンドウを定義し、UIの主要なコンポーネントを組み立てます。
class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    連続実行はQTimerで一定間隔ごとにRunner.tick()を呼び出して実現します。
    """
    def __init__(self, config: Optional[SimulatorConfig] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("RV Cycle Tracer")
        self.setGeometry(100, 100, 1200, 800)

        self._config = config or SimulatorConfig()
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_tick)

        self._setup_backend(self._config)
        self._set_dark_theme()
        self._create_toolbar()
        self._create_menus()
        self._create_central_log()
        self._create_navigation_pane()
        self._create_status_inspector()

        self._update_ui_state(False)
        self._refresh_views()

    # @intent:responsibility 設定からCPUとRunnerを生成します。
    def _setup_backend(self, config: SimulatorConfig):
        self.cpu, self.runner = SystemBuilder().build_system(config)
        self._timer.setInterval(self.runner.interval_ms)

    def _create_menus(self):
        file_menu = self.menuBar().addMenu("File")

        self.load_config_action = QAction("Load Config...", self)
        self.load_config_action.triggered.connect(self._load_config)
        file_menu.addAction(self.load_config_action)

        self.load_program_action = QAction("Load Program...", self)
        self.load_program_action.setShortcut("Ctrl+O")
        self.load_program_action.triggered.connect(self._load_program)
        file_menu.addAction(self.load_program_action)

    # @intent:responsibility 実行制御用のツールバーを作成します。
    def _create_toolbar(self):
        toolbar = QToolBar("Main Toolbar")
        self.addToolBar(toolbar)

        self.run_action = QAction("Run", self)
        self.run_action.triggered.connect(self._run)
        toolbar.addAction(self.run_action)

        self.stop_action = QAction("Stop", self)
        self.stop_action.triggered.connect(self._stop)
        toolbar.addAction(self.stop_action)

        self.step_action = QAction("Step", self)
        self.step_action.triggered.connect(self._step)
        toolbar.addAction(self.step_action)

        self.reset_action = QAction("Reset", self)
        self.reset_action.triggered.connect(self._reset)
        toolbar.addAction(self.reset_action)

        self.status_label = QLabel("")
        toolbar.addWidget(self.status_label)

    def _create_central_log(self):
        self.log_view = QPlainTextEdit(self)
        self.log_view.setReadOnly(True)
        self.log_view.setFont(get_monospace_font(10))
        self.log_view.setPlaceholderText("No executions yet...")
        self.setCentralWidget(self.log_view)

    def _create_navigation_pane(self):
        nav_dock = QDockWidget("Program", self)
        nav_dock.setAllowedAreas(Qt.LeftDockWidgetArea)
        self.program_view = ProgramView()
        self.program_view.instruction_added.connect(self._add_instruction)
        self.program_view.instruction_removed.connect(self._remove_instruction)
        nav_dock.setWidget(self.program_view)
        self.addDockWidget(Qt.LeftDockWidgetArea, nav_dock)

    def _create_status_inspector(self):
        status_dock = QDockWidget("Status Inspector", self)
        status_dock.setAllowedAreas(Qt.RightDockWidgetArea)
        tab_widget = QTabWidget()
        self.register_view = RegisterView()
        self.register_view.set_cpu(self.cpu)
        tab_widget.addTab(self.register_view, "Registers")
        self.signal_view = SignalView()
        self.signal_view.set_cpu(self.cpu)
        tab_widget.addTab(self.signal_view, "Datapath")
        self.memory_view = MemoryView(self._config.visible_memory_words)
        tab_widget.addTab(self.memory_view, "Memory")
        status_dock.setWidget(tab_widget)
        self.addDockWidget(Qt.RightDockWidgetArea, status_dock)

    def _set_dark_theme(self):
        QApplication.setPalette(build_dark_palette())
        self.setStyleSheet(build_stylesheet(get_monospace_font_family()))

    # @intent:responsibility 実行状態に応じてUIコンポーネントの有効/無効を切り替えます。
    def _update_ui_state(self, is_running: bool):
        self.load_config_action.setEnabled(not is_running)
        self.load_program_action.setEnabled(not is_running)
        self.run_action.setEnabled(not is_running)
        self.step_action.setEnabled(not is_running)
        self.stop_action.setEnabled(is_running)

    # @intent:responsibility 現在のCPU状態で全てのビューを更新します。
    def _refresh_views(self):
        snapshot = self.cpu.snapshot()
        record = self.cpu.get_last_record()
        highlight = None
        if record is not None and (record.signals.mem_read or record.signals.mem_write):
            highlight = record.alu_result

        self.register_view.update_registers()
        self.signal_view.update_signals()
        self.memory_view.update_memory(snapshot.memory, highlight_address=highlight)
        self.program_view.update_program(snapshot.program, snapshot.pc)
        self.log_view.setPlainText("\n".join(self.cpu.get_log()))
        self.log_view.verticalScrollBar().setValue(self.log_view.verticalScrollBar().maximum())
        if snapshot.finished:
            self.status_label.setText(f"  PC = {snapshot.pc}  (end of program)")
        else:
            self.status_label.setText(f"  PC = {snapshot.pc}  {snapshot.program[snapshot.pc]}")

    @Slot()
    def _run(self):
        self.runner.start()
        if not self.runner.is_running():
            self._refresh_views()
            return
        self._update_ui_state(True)
        self._timer.start()

    @Slot()
    def _stop(self):
        self._timer.stop()
        self.runner.stop()
        self._update_ui_state(False)

    # @intent:responsibility タイマー周期ごとに1命令を実行し、終端または停止でタイマーを止めます。
    @Slot()
    def _on_tick(self):
        try:
            result = self.runner.tick()
        except TracerError as e:
            self._stop()
            self._refresh_views()
            QMessageBox.critical(self, "Execution Error", str(e))
            return
        if result.status is not StepStatus.STEPPED or not self.runner.is_running():
            self._stop()
        self._refresh_views()

    @Slot()
    def _step(self):
        try:
            self.runner.step_instruction()
        except TracerError as e:
            QMessageBox.critical(self, "Execution Error", str(e))
        self._refresh_views()

    @Slot()
    def _reset(self):
        self._timer.stop()
        self.runner.reset()
        self._update_ui_state(False)
        self._refresh_views()

    @Slot(str)
    def _add_instruction(self, text: str):
        self.runner.insert_instruction(text)
        self._refresh_views()

    @Slot(int)
    def _remove_instruction(self, index: int):
        self.runner.remove_instruction(index)
        self._refresh_views()

    @Slot()
    def _load_program(self):
        file_name, _ = QFileDialog.getOpenFileName(self, "Open Program", "", "Assembly Files (*.s *.asm *.txt);;All Files (*)")
        if file_name:
            try:
                program = ProgramLoader().load_from_file(file_name)
                self._timer.stop()
                self.runner.load_program(program)
                self._update_ui_state(False)
                self._refresh_views()
            except OSError as e:
                QMessageBox.critical(self, "Error", f"Failed to load program: {e}")

    @Slot()
    def _load_config(self):
        file_name, _ = QFileDialog.getOpenFileName(self, "Open Config", "", "YAML Files (*.yaml *.yml);;All Files (*)")
        if file_name:
            try:
                config = ConfigLoader().load_from_file(file_name)
            except (OSError, TracerError) as e:
                QMessageBox.critical(self, "Error", f"Failed to load config: {e}")
                return
            self._timer.stop()
            self._config = config
            self._setup_backend(config)
            self.register_view.set_cpu(self.cpu)
            self.signal_view.set_cpu(self.cpu)
            self.memory_view.set_visible_words(config.visible_memory_words)
            self._update_ui_state(False)
            self._refresh_views()

    # @intent:responsibility ウィンドウ終了時に、予約済みのタイマー周期が残らないよう停止します。
    def closeEvent(self, event: QCloseEvent):
        self._timer.stop()
        self.runner.stop()
        event.accept()
