# src/rv_cycle_tracer/arch/rv32i/instructions/maps.py
"""
命令クラスと命令実装のマッピング定義。
"""
from rv_cycle_tracer.arch.rv32i.isa import InstructionClass
from . import arithmetic
from . import memory
from . import control

# @intent:map 命令クラスから実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    InstructionClass.R: arithmetic.execute_r_type,
    InstructionClass.I: arithmetic.execute_i_type,
    InstructionClass.LOAD: memory.execute_load,
    InstructionClass.STORE: memory.execute_store,
    InstructionClass.BRANCH: control.execute_branch,
    InstructionClass.UNKNOWN: control.execute_unknown,
}
