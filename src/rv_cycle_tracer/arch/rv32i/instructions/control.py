# src/rv_cycle_tracer/arch/rv32i/instructions/control.py
"""
条件分岐命令と、未知命令（NOP扱い）の実装。
"""
from typing import Callable, Dict

from rv_cycle_tracer.arch.rv32i.alu import alu, to_unsigned32
from rv_cycle_tracer.arch.rv32i.decoder import Instruction
from rv_cycle_tracer.arch.rv32i.isa import FUNCT7_ALT
from rv_cycle_tracer.common.errors import InvalidOperandError
from rv_cycle_tracer.config.models import OperandDefaults
from rv_cycle_tracer.core.snapshot import IDLE_SIGNALS, AluOp, ControlSignals
from rv_cycle_tracer.core.state import ArchState
from .base import ExecutionResult

BRANCH_SIGNALS = ControlSignals(branch=True, alu_op=AluOp.COMPARE)

# @intent:map funct3から分岐条件への対応表。
BRANCH_CONDITIONS: Dict[int, Callable[[int, int], bool]] = {
    0b000: lambda a, b: a == b,                                 # BEQ
    0b001: lambda a, b: a != b,                                 # BNE
    0b100: lambda a, b: a < b,                                  # BLT
    0b101: lambda a, b: a >= b,                                 # BGE
    0b110: lambda a, b: to_unsigned32(a) < to_unsigned32(b),    # BLTU
    0b111: lambda a, b: to_unsigned32(a) >= to_unsigned32(b),   # BGEU
}

# @intent:responsibility 分岐命令を実行します。条件成立時は現在のPCからの相対位置へ分岐します。
def execute_branch(state: ArchState, instr: Instruction, defaults: OperandDefaults) -> ExecutionResult:
    rs1 = instr.operands[0]
    rs2 = instr.operands[1]
    offset = instr.operand(2, defaults.branch_offset)
    val1 = state.read_register(rs1)
    val2 = state.read_register(rs2)

    taken = BRANCH_CONDITIONS[instr.funct3](val1, val2)
    header = f"{instr.mnemonic.name} x{rs1}, x{rs2}, {offset}"
    if taken:
        next_pc = state.pc + offset
        if next_pc < 0:
            raise InvalidOperandError(
                f"branch target {next_pc} is before the start of the program",
                pc=state.pc,
                text=instr.text,
            )
        message = f"{header} -> branch taken (PC = {next_pc})"
    else:
        next_pc = state.pc + 1
        message = f"{header} -> branch not taken"

    return ExecutionResult(
        next_pc=next_pc,
        signals=BRANCH_SIGNALS,
        message=message,
        rs1=rs1, rs2=rs2,
        read_data1=val1, read_data2=val2, immediate=offset,
        alu_result=alu(0b000, FUNCT7_ALT, val1, val2),
        branch_taken=taken,
    )

# @intent:responsibility 未知の命令を実行します。状態は変更せずPCのみを進めます。
def execute_unknown(state: ArchState, instr: Instruction, defaults: OperandDefaults) -> ExecutionResult:
    return ExecutionResult(
        next_pc=state.pc + 1,
        signals=IDLE_SIGNALS,
        message=f"{instr.text.strip()} -> no-op (unrecognized instruction)",
    )
