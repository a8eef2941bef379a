# rv_cycle_tracer/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、1サイクル分の制御信号とデータパスの値、
およびアーキテクチャ状態のコピーを記録する不変のデータ構造を定義します。
UIへの情報提供と、実行トレースの記録に用いる責務を負います。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

# @intent:responsibility ALU制御への粗い指示（ALUOp）を定義します。
class AluOp(Enum):
    ADD = "00"      # Load/Store: アドレス計算
    COMPARE = "01"  # Branch: 比較
    FUNCT = "10"    # R/I: funct3/funct7に従う

# @intent:responsibility 単一サイクルの制御信号ベクトルを記録します。
@dataclass(frozen=True)
class ControlSignals:
    """
    主制御ユニットが出力する制御信号のデータクラス。
    """
    reg_write: bool = False
    alu_src: bool = False
    mem_write: bool = False
    mem_read: bool = False
    mem_to_reg: bool = False
    branch: bool = False
    alu_op: AluOp = AluOp.ADD

    # @intent:invariant RegWriteとMemWriteは同時に有効にならない。
    def __post_init__(self):
        if self.reg_write and self.mem_write:
            raise ValueError("RegWrite and MemWrite cannot both be asserted")

    # @intent:responsibility 表示用に信号名と値の辞書を返します。
    def as_dict(self) -> dict:
        return {
            "RegWrite": self.reg_write,
            "ALUSrc": self.alu_src,
            "MemWrite": self.mem_write,
            "MemRead": self.mem_read,
            "MemToReg": self.mem_to_reg,
            "Branch": self.branch,
            "ALUOp": self.alu_op.value,
        }

# @intent:constant 全ての信号が無効な状態（リセット直後、未知命令）。
IDLE_SIGNALS = ControlSignals()

# @intent:responsibility 1命令実行後のデータパスの状態を不変に記録します。
@dataclass(frozen=True)
class StepRecord:
    """
    1サイクル分の実行記録。
    制御信号、読み出したオペランド、ALU結果、メモリデータ、トレース文字列を保持します。
    命令はアーキテクチャ非依存に、ニーモニック名と正規化済みテキストで記録します。
    """
    pc: int
    next_pc: int
    mnemonic: str
    disassembly: str
    signals: ControlSignals
    trace: str
    rd: Optional[int] = None
    rs1: Optional[int] = None
    rs2: Optional[int] = None
    read_data1: int = 0
    read_data2: int = 0
    immediate: int = 0
    alu_result: int = 0
    mem_data: Optional[int] = None
    branch_taken: Optional[bool] = None

    # @intent:rationale UIのALUパネルは、即値を使う命令ではBオペランドとして即値を表示する。
    @property
    def alu_operand_b(self) -> int:
        return self.immediate if self.signals.alu_src else self.read_data2

# @intent:responsibility 外部の読み手に渡すアーキテクチャ状態の不変コピーです。
@dataclass(frozen=True)
class StateSnapshot:
    registers: Tuple[int, ...]
    memory: Tuple[int, ...]
    pc: int
    program: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def finished(self) -> bool:
        return self.pc >= len(self.program)
