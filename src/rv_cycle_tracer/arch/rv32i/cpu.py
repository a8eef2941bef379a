# src/rv_cycle_tracer/arch/rv32i/cpu.py
"""
RV32Iサブセットの単一サイクルCPUエミュレーションの中心モジュール。
"""
import logging
from typing import Dict, List, Optional

from rv_cycle_tracer.arch.rv32i.decoder import decode, format_instruction
from rv_cycle_tracer.arch.rv32i.instructions import execute_instruction
from rv_cycle_tracer.common.types import RegisterMap, RegisterLayoutInfo, RegisterInfo
from rv_cycle_tracer.config.models import OperandDefaults
from rv_cycle_tracer.core.cpu import AbstractCpu
from rv_cycle_tracer.core.snapshot import IDLE_SIGNALS, StepRecord
from rv_cycle_tracer.core.state import ArchState, REGISTER_COUNT

logger = logging.getLogger(__name__)

# @intent:constant ABI名によるレジスタのグループ分け（表示用）。
REGISTER_GROUPS = [
    ("Zero/Pointers", [0, 1, 2, 3, 4]),
    ("Temporaries", [5, 6, 7, 28, 29, 30, 31]),
    ("Saved", [8, 9, 18, 19, 20, 21, 22, 23, 24, 25, 26, 27]),
    ("Arguments", [10, 11, 12, 13, 14, 15, 16, 17]),
]

# @intent:responsibility RV32Iサブセットの具体的な実行ロジック（デコード、実行、記録）を提供します。
class Rv32iCpu(AbstractCpu):
    """
    テキスト命令を解釈する単一サイクルRV32I CPU。
    """
    # @intent:responsibility Rv32iCpuを初期化します。
    def __init__(self, program: Optional[List[str]] = None, operand_defaults: Optional[OperandDefaults] = None):
        self._operand_defaults = operand_defaults or OperandDefaults()
        super().__init__(program)

    # @intent:responsibility 全て0のレジスタとメモリを持つ初期状態を生成します。
    def _create_initial_state(self, program: List[str]) -> ArchState:
        return ArchState(program=program)

    @property
    def operand_defaults(self) -> OperandDefaults:
        return self._operand_defaults

    # @intent:responsibility 命令をデコード・実行し、結果のStepRecordを生成します。
    # @intent:flow デコード -> クラス別実行 -> 記録生成 の順序で処理を行います。
    def _execute_current(self, pc: int) -> StepRecord:
        instr = decode(self._state.program[pc])
        if not instr.is_known:
            logger.warning("Unrecognized instruction at %d: %r", pc, instr.text)

        result = execute_instruction(self._state, instr, self._operand_defaults)

        return StepRecord(
            pc=pc,
            next_pc=result.next_pc,
            mnemonic=instr.mnemonic.name,
            disassembly=format_instruction(instr),
            signals=result.signals,
            trace=f"[{pc}] {result.message}",
            rd=result.rd,
            rs1=result.rs1,
            rs2=result.rs2,
            read_data1=result.read_data1,
            read_data2=result.read_data2,
            immediate=result.immediate,
            alu_result=result.alu_result,
            mem_data=result.mem_data,
            branch_taken=result.branch_taken,
        )

    # @intent:responsibility UI表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> RegisterMap:
        regs = self._state.registers
        reg_map = {f"x{i}": regs[i] for i in range(REGISTER_COUNT)}
        reg_map["PC"] = self._state.pc
        return reg_map

    # @intent:responsibility UIのレジスタ表示レイアウト（グループ化）を定義します。
    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        layout = [
            RegisterLayoutInfo(name, [RegisterInfo(f"x{i}", 32) for i in indices])
            for name, indices in REGISTER_GROUPS
        ]
        layout.append(RegisterLayoutInfo("Control", [RegisterInfo("PC", 32)]))
        return layout

    # @intent:responsibility UI表示用に、直近サイクルの制御信号を辞書形式で提供します。
    def get_signal_state(self) -> Dict[str, object]:
        record = self._last_record
        signals = record.signals if record else IDLE_SIGNALS
        return signals.as_dict()
