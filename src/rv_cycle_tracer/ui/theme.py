"""
UIテーマ管理モジュール。

等幅フォントの選択と、アプリケーション全体のダークテーマ（パレットとスタイルシート）を提供します。
"""
from PySide6.QtGui import QColor, QFont, QFontDatabase, QPalette

# @intent:constant ビューで共通に使う配色。
COLOR_BACKGROUND = "#121212"
COLOR_TEXT = "#BBBBBB"
COLOR_VALUE = "#FFD700"
COLOR_ACTIVE = "#00AAAA"
COLOR_HIGHLIGHT = "#404000"

PREFERRED_FONTS = ["JetBrains Mono", "Consolas", "Menlo", "DejaVu Sans Mono", "Courier New"]

# @intent:responsibility 現在のシステムで利用可能な最適な等幅フォントファミリー名を返します。
def get_monospace_font_family() -> str:
    available_families = QFontDatabase.families()
    for font in PREFERRED_FONTS:
        if font in available_families:
            return font
    return QFontDatabase.systemFont(QFontDatabase.FixedFont).family()

def get_monospace_font(size: int = 10) -> QFont:
    return QFont(get_monospace_font_family(), size)

# @intent:responsibility ダークテーマ用のパレットを生成します。
def build_dark_palette() -> QPalette:
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(29, 29, 29))
    palette.setColor(QPalette.WindowText, QColor(224, 224, 224))
    palette.setColor(QPalette.Base, QColor(30, 30, 30))
    palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    palette.setColor(QPalette.Text, QColor(224, 224, 224))
    palette.setColor(QPalette.Button, QColor(53, 53, 53))
    palette.setColor(QPalette.ButtonText, QColor(224, 224, 224))
    palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    palette.setColor(QPalette.HighlightedText, QColor(0, 0, 0))
    return palette

# @intent:responsibility メインウィンドウ用のスタイルシートを返します。
def build_stylesheet(font_family: str) -> str:
    return f"""
        QWidget {{ font-family: '{font_family}', monospace; font-size: 10pt; }}
        QMainWindow, QToolBar {{ background-color: #1D1D1D; border: none; }}
        QDockWidget::title {{ text-align: left; background: #101010; padding: 4px; font-weight: bold; }}
        QGroupBox {{ font-weight: bold; border: 1px solid #222; border-radius: 4px; margin-top: 20px; color: #EEE; }}
        QGroupBox::title {{ subcontrol-origin: margin; left: 10px; padding: 0 5px; color: {COLOR_ACTIVE}; }}
        QTableWidget {{ background-color: #101010; color: {COLOR_TEXT}; gridline-color: #303030; }}
        QLineEdit, QPushButton {{ background-color: #252525; color: #EEE; border: 1px solid #444; padding: 4px; }}
    """
