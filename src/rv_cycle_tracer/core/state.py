# rv_cycle_tracer/core/state.py
"""
Core Layer (アーキテクチャ状態)

このモジュールは、単一サイクルプロセッサのアーキテクチャ状態
（レジスタ、データメモリ、PC、プログラム）を保持するデータ構造を定義します。
"""
from dataclasses import dataclass, field
from typing import List

from rv_cycle_tracer.common.errors import InvalidOperandError

# @intent:constant レジスタ本数とデータメモリのワード数。
REGISTER_COUNT = 32
MEMORY_WORDS = 256
WORD_BYTES = 4

# @intent:responsibility アーキテクチャ状態を保持し、レジスタとメモリへの検証付きアクセスを提供します。
@dataclass
class ArchState:
    """
    レジスタ、メモリ、PC、プログラムを保持するデータクラス。
    x0への書き込みは無視され、常に0を保ちます。
    """
    registers: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    memory: List[int] = field(default_factory=lambda: [0] * MEMORY_WORDS)
    pc: int = 0
    program: List[str] = field(default_factory=list)

    # @intent:responsibility レジスタ番号が範囲内であることを検証します。
    def check_register(self, index: int) -> int:
        if not 0 <= index < REGISTER_COUNT:
            raise InvalidOperandError(
                f"register x{index} out of range (x0-x{REGISTER_COUNT - 1})",
                pc=self.pc,
                text=self.current_text(),
            )
        return index

    def read_register(self, index: int) -> int:
        return self.registers[self.check_register(index)]

    # @intent:responsibility レジスタへ書き込みます。x0への書き込みは無視します。
    def write_register(self, index: int, value: int) -> None:
        self.check_register(index)
        if index != 0:
            self.registers[index] = value

    # @intent:responsibility バイトアドレスをワードインデックスへ変換します。
    # @intent:rationale アドレスは4で切り捨て除算し、メモリサイズで折り返します（負のアドレスも同様）。
    @staticmethod
    def memory_index(address: int) -> int:
        return (address // WORD_BYTES) % MEMORY_WORDS

    def load_word(self, address: int) -> int:
        return self.memory[self.memory_index(address)]

    def store_word(self, address: int, value: int) -> None:
        self.memory[self.memory_index(address)] = value

    def current_text(self) -> str:
        if 0 <= self.pc < len(self.program):
            return self.program[self.pc]
        return ""
