# rv_cycle_tracer/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、アーキテクチャ状態の所有と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from rv_cycle_tracer.core.snapshot import StepRecord, StateSnapshot
from rv_cycle_tracer.core.state import ArchState
from rv_cycle_tracer.common.types import RegisterMap, RegisterLayoutInfo

logger = logging.getLogger(__name__)

# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    単一サイクルCPUの基底となる抽象クラス。
    状態の所有、プログラム編集、命令サイクル（step）の共通フローを提供します。
    """
    # @intent:responsibility CPUの状態とプログラムを初期化します。
    def __init__(self, program: Optional[List[str]] = None):
        self._state: ArchState = self._create_initial_state(list(program or []))
        self._last_record: Optional[StepRecord] = None
        self._log: List[str] = []
        # @intent:rationale Stateオブジェクトの直接操作を避けるため、protectedな命名規則を採用。
        #                  外部からの参照は`snapshot()`を介して行う。

    # @intent:responsibility 初期状態のArchStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self, program: List[str]) -> ArchState:
        """
        全レジスタ・全メモリが0、PC=0で、指定されたプログラムを持つ状態を返します。
        """
        pass

    # @intent:responsibility CPUをリセットし、初期状態に戻します。
    # @intent:rationale 状態は差分で戻さず、_create_initial_stateで丸ごと置き換えます。編集中のプログラムは保持します。
    def reset(self) -> None:
        """
        レジスタ、メモリ、PC、直近の実行記録、トレースログを初期化します。
        """
        self._state = self._create_initial_state(list(self._state.program))
        self._last_record = None
        self._log = []
        logger.info("CPU reset")

    # @intent:responsibility プログラムを置き換え、状態を初期化します。
    def load_program(self, program: List[str]) -> None:
        self._state = self._create_initial_state([line.strip() for line in program if line.strip()])
        self._last_record = None
        self._log = []
        logger.info("Program loaded (%d instructions)", len(self._state.program))

    # @intent:responsibility プログラムの終端に達したかを返します。
    def is_finished(self) -> bool:
        return self._state.pc >= len(self._state.program)

    # @intent:responsibility 現在の状態の不変コピーを返します。
    def snapshot(self) -> StateSnapshot:
        s = self._state
        return StateSnapshot(
            registers=tuple(s.registers),
            memory=tuple(s.memory),
            pc=s.pc,
            program=tuple(s.program),
        )

    @property
    def pc(self) -> int:
        return self._state.pc

    def get_program(self) -> List[str]:
        return list(self._state.program)

    def get_last_record(self) -> Optional[StepRecord]:
        return self._last_record

    # @intent:responsibility 追記専用のトレースログのコピーを返します。
    def get_log(self) -> List[str]:
        return list(self._log)

    # @intent:responsibility プログラムに命令を追加します（末尾または指定位置）。
    def insert_instruction(self, text: str, position: Optional[int] = None) -> bool:
        """
        空白のみの命令は無視してFalseを返します。
        positionが0..len(program)の範囲外の場合はIndexErrorを送出します。
        """
        text = text.strip()
        if not text:
            return False
        program = self._state.program
        if position is None:
            program.append(text)
        else:
            if not 0 <= position <= len(program):
                raise IndexError(f"insert position {position} out of range 0..{len(program)}")
            program.insert(position, text)
        return True

    # @intent:responsibility プログラムから命令を削除します。
    # @intent:rationale 削除後にPCがプログラム長以上になった場合は、末尾へ丸めずに0へ戻します。
    def remove_instruction(self, index: int) -> str:
        program = self._state.program
        if not 0 <= index < len(program):
            raise IndexError(f"instruction index {index} out of range 0..{len(program) - 1}")
        removed = program.pop(index)
        if self._state.pc >= len(program):
            self._state.pc = 0
        return removed

    # @intent:responsibility CPUを1命令サイクル進め、その結果の実行記録を返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（終端判定→デコード→実行→PC更新→記録）を定義します。
    def step(self) -> Optional[StepRecord]:
        """
        PCが指す命令を1つ実行します。プログラム終端では何もせずNoneを返します。
        範囲外のオペランドはInvalidOperandErrorとなり、状態は変更されません。
        """
        if self.is_finished():
            return None

        initial_pc = self._state.pc
        record = self._execute_current(initial_pc)

        self._state.pc = record.next_pc
        self._log.append(record.trace)
        self._last_record = record
        logger.debug("%s", record.trace)
        return record

    # @intent:responsibility 現在のPCの命令をデコード・実行し、StepRecordを生成します。PCは更新しません。
    @abstractmethod
    def _execute_current(self, pc: int) -> StepRecord:
        pass

    @abstractmethod
    def get_register_map(self) -> RegisterMap:
        """
        現在のレジスタ値を辞書形式で返す。
        UIがCPUの内部構造を知らなくても値を表示できるようにするために使用される。
        """
        pass

    @abstractmethod
    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        """
        レジスタをUI上でどのように配置・グループ化すべきかの定義を返す。
        """
        pass

    @abstractmethod
    def get_signal_state(self) -> Dict[str, object]:
        """
        直近のサイクルの制御信号を辞書形式で返す。
        """
        pass
