# src/rv_cycle_tracer/arch/rv32i/instructions/__init__.py
"""
RV32Iサブセットの命令実装パッケージ。
"""
from rv_cycle_tracer.arch.rv32i.decoder import Instruction
from rv_cycle_tracer.config.models import OperandDefaults
from rv_cycle_tracer.core.state import ArchState
from .base import ExecutionResult
from .maps import EXECUTE_MAP

# @intent:responsibility デコードされた命令を命令クラスに応じて実行します。
def execute_instruction(state: ArchState, instr: Instruction, defaults: OperandDefaults) -> ExecutionResult:
    """
    命令を実行してアーキテクチャ状態を変更し、データパスの途中結果を返します。
    PCの更新は呼び出し元が行います。
    """
    executor = EXECUTE_MAP[instr.instruction_class]
    return executor(state, instr, defaults)
