# src/rv_cycle_tracer/arch/rv32i/instructions/memory.py
"""
ロード/ストア命令の実装。

バイト/ハーフワード版（LB, LH, LBU, LHU, SB, SH）もワード単位でアクセスします。
"""
from rv_cycle_tracer.arch.rv32i.decoder import Instruction
from rv_cycle_tracer.config.models import OperandDefaults
from rv_cycle_tracer.core.snapshot import AluOp, ControlSignals
from rv_cycle_tracer.core.state import ArchState
from .base import ExecutionResult

LOAD_SIGNALS = ControlSignals(reg_write=True, alu_src=True, mem_read=True, mem_to_reg=True, alu_op=AluOp.ADD)
STORE_SIGNALS = ControlSignals(alu_src=True, mem_write=True, alu_op=AluOp.ADD)

# @intent:responsibility ロード命令を実行し、rs1+offsetのメモリワードをrdへ読み込みます。
def execute_load(state: ArchState, instr: Instruction, defaults: OperandDefaults) -> ExecutionResult:
    rd = instr.operands[0]
    rs1 = instr.operands[1]
    offset = instr.operand(2, defaults.memory_offset)
    state.check_register(rd)
    base = state.read_register(rs1)

    address = base + offset
    value = state.load_word(address)
    state.write_register(rd, value)

    return ExecutionResult(
        next_pc=state.pc + 1,
        signals=LOAD_SIGNALS,
        message=f"{instr.mnemonic.name} x{rd}, {offset}(x{rs1}) -> x{rd} = MEM[{address}] = {value}",
        rd=rd, rs1=rs1,
        read_data1=base, immediate=offset,
        alu_result=address, mem_data=value,
    )

# @intent:responsibility ストア命令を実行し、rs2の値をrs1+offsetのメモリワードへ書き込みます。
def execute_store(state: ArchState, instr: Instruction, defaults: OperandDefaults) -> ExecutionResult:
    rs2 = instr.operands[0]
    rs1 = instr.operands[1]
    offset = instr.operand(2, defaults.memory_offset)
    value = state.read_register(rs2)
    base = state.read_register(rs1)

    address = base + offset
    state.store_word(address, value)

    return ExecutionResult(
        next_pc=state.pc + 1,
        signals=STORE_SIGNALS,
        message=f"{instr.mnemonic.name} x{rs2}, {offset}(x{rs1}) -> MEM[{address}] = {value}",
        rs1=rs1, rs2=rs2,
        read_data1=base, read_data2=value, immediate=offset,
        alu_result=address, mem_data=value,
    )
