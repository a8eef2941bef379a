# src/rv_cycle_tracer/arch/rv32i/instructions/base.py
"""
命令実装用の共通データ構造とユーティリティ。
"""
from dataclasses import dataclass
from typing import Optional

from rv_cycle_tracer.core.snapshot import ControlSignals

# @intent:responsibility 命令クラスごとの実行関数が返す、データパスの途中結果を保持します。
@dataclass
class ExecutionResult:
    next_pc: int
    signals: ControlSignals
    message: str
    rd: Optional[int] = None
    rs1: Optional[int] = None
    rs2: Optional[int] = None
    read_data1: int = 0
    read_data2: int = 0
    immediate: int = 0
    alu_result: int = 0
    mem_data: Optional[int] = None
    branch_taken: Optional[bool] = None
