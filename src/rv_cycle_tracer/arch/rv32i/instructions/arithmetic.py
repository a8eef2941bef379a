# src/rv_cycle_tracer/arch/rv32i/instructions/arithmetic.py
"""
算術論理演算命令（R型、I型）の実装。
"""
from rv_cycle_tracer.arch.rv32i.alu import alu
from rv_cycle_tracer.arch.rv32i.decoder import Instruction
from rv_cycle_tracer.config.models import OperandDefaults
from rv_cycle_tracer.core.snapshot import AluOp, ControlSignals
from rv_cycle_tracer.core.state import ArchState
from .base import ExecutionResult

R_TYPE_SIGNALS = ControlSignals(reg_write=True, alu_op=AluOp.FUNCT)
I_TYPE_SIGNALS = ControlSignals(reg_write=True, alu_src=True, alu_op=AluOp.FUNCT)

# @intent:responsibility R型命令を実行し、2つのレジスタのALU演算結果をrdへ書き込みます。
def execute_r_type(state: ArchState, instr: Instruction, defaults: OperandDefaults) -> ExecutionResult:
    rd, rs1, rs2 = instr.operands[:3]
    state.check_register(rd)
    val1 = state.read_register(rs1)
    val2 = state.read_register(rs2)

    result = alu(instr.funct3, instr.funct7, val1, val2)
    state.write_register(rd, result)

    return ExecutionResult(
        next_pc=state.pc + 1,
        signals=R_TYPE_SIGNALS,
        message=f"{instr.mnemonic.name} x{rd}, x{rs1}, x{rs2} -> x{rd} = {result}",
        rd=rd, rs1=rs1, rs2=rs2,
        read_data1=val1, read_data2=val2,
        alu_result=result,
    )

# @intent:responsibility I型演算命令を実行し、レジスタと即値のALU演算結果をrdへ書き込みます。
def execute_i_type(state: ArchState, instr: Instruction, defaults: OperandDefaults) -> ExecutionResult:
    rd, rs1, imm = instr.operands[:3]
    state.check_register(rd)
    val1 = state.read_register(rs1)

    result = alu(instr.funct3, instr.funct7, val1, imm)
    state.write_register(rd, result)

    return ExecutionResult(
        next_pc=state.pc + 1,
        signals=I_TYPE_SIGNALS,
        message=f"{instr.mnemonic.name} x{rd}, x{rs1}, {imm} -> x{rd} = {result}",
        rd=rd, rs1=rs1,
        read_data1=val1, read_data2=imm, immediate=imm,
        alu_result=result,
    )
