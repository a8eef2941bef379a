# src/rv_cycle_tracer/ui/app.py
"""
Qtアプリケーションのエントリポイント。
アプリケーションを初期化し、メインウィンドウを起動します。
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from rv_cycle_tracer.config.loader import ConfigLoader
from .main_window import MainWindow

# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main():
    """
    アプリケーションのメイン関数。
    第1引数にYAML設定ファイルのパスを指定できます。
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    config = None
    if len(sys.argv) > 1:
        config = ConfigLoader().load_from_file(sys.argv[1])

    app = QApplication(sys.argv)
    main_win = MainWindow(config)
    main_win.show()
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
