"""
プロジェクト共通の例外定義。
"""

# @intent:responsibility トレーサ全体の例外の基底クラスです。
class TracerError(ValueError):
    pass

# @intent:responsibility 範囲外のレジスタ番号など、実行できないオペランドを表します。
# @intent:rationale 不正な値を黙って伝播させず、step()の呼び出し元に通知します。
class InvalidOperandError(TracerError):
    def __init__(self, message: str, pc: int = -1, text: str = ""):
        super().__init__(message)
        self.pc = pc
        self.text = text

# @intent:responsibility 設定ファイルの内容が不正であることを表します。
class ConfigError(TracerError):
    pass
