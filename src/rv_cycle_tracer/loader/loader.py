# rv_cycle_tracer/loader/loader.py
"""
プログラムローダ。

1行1命令のテキストファイルを読み込み、命令文字列のリストに変換します。
"""
import logging
from typing import Iterable, List

logger = logging.getLogger(__name__)

COMMENT_CHARS = ("#", ";")

# @intent:responsibility テキスト形式のプログラムを読み込みます。
class ProgramLoader:
    """
    コメント（'#' または ';' 以降）と空行を取り除き、命令テキストのリストを返すローダ。
    命令の妥当性はここでは検証しません（不正な命令は実行時にNOPとして扱われます）。
    """
    def load_from_file(self, path: str) -> List[str]:
        with open(path, 'r', encoding='utf-8') as f:
            program = self.parse_lines(f)
        logger.info("Loaded %d instructions from %s", len(program), path)
        return program

    def parse_lines(self, lines: Iterable[str]) -> List[str]:
        program = []
        for line in lines:
            text = self._strip_comment(line).strip()
            if text:
                program.append(text)
        return program

    def _strip_comment(self, line: str) -> str:
        cut = len(line)
        for ch in COMMENT_CHARS:
            idx = line.find(ch)
            if idx != -1:
                cut = min(cut, idx)
        return line[:cut]
