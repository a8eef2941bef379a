# rv_cycle_tracer/debugger/runner.py
"""
実行制御モジュール。

CPUのステップ実行と、一定間隔での連続実行（Run）を制御し、
停止・リセット要求で確実に実行を中断させる責務を負います。
"""
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from rv_cycle_tracer.core.cpu import AbstractCpu
from rv_cycle_tracer.core.snapshot import StepRecord
from rv_cycle_tracer.config.models import DEFAULT_RUN_INTERVAL_MS

logger = logging.getLogger(__name__)

# @intent:responsibility 1回の実行要求の結果種別を定義します。
class StepStatus(Enum):
    STEPPED = "STEPPED"                 # 1命令を実行した
    END_OF_PROGRAM = "END_OF_PROGRAM"   # PCがプログラム終端に達している
    STOPPED = "STOPPED"                 # 連続実行が停止要求で中断された

# @intent:responsibility 実行要求の結果（種別と実行記録）を保持します。
@dataclass(frozen=True)
class StepResult:
    status: StepStatus
    record: Optional[StepRecord] = None

# @intent:responsibility CPUの実行制御（ステップ、連続実行、停止、リセット、プログラム編集）を行います。
class Runner:
    """
    CPUの実行を制御するクラス。
    連続実行は一定間隔のtick()の繰り返しとして表現され、各tickは高々1命令を実行します。
    """
    def __init__(self, cpu: AbstractCpu, interval_ms: int = DEFAULT_RUN_INTERVAL_MS,
                 sleep: Callable[[float], None] = time.sleep):
        self._cpu = cpu
        self._interval_ms = interval_ms
        self._sleep = sleep
        self._running: bool = False

    @property
    def cpu(self) -> AbstractCpu:
        return self._cpu

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def is_running(self) -> bool:
        return self._running

    def step_instruction(self) -> StepResult:
        """
        CPUを1命令分実行し、その結果を返します。
        """
        record = self._cpu.step()
        if record is None:
            return StepResult(StepStatus.END_OF_PROGRAM)
        return StepResult(StepStatus.STEPPED, record)

    # @intent:responsibility 連続実行状態に入ります。実際の実行はtick()またはrun()が行います。
    def start(self) -> None:
        if self._cpu.is_finished():
            logger.info("Run requested at end of program")
            return
        self._running = True
        logger.info("Run started at PC=%d", self._cpu.pc)

    # @intent:responsibility 連続実行の1周期分を処理します。
    # @intent:rationale 終端到達と例外発生時は実行状態を解除し、以後のtickを無効にします。
    def tick(self) -> StepResult:
        """
        実行中であれば1命令を実行します。停止中はSTOPPEDを返します。
        """
        if not self._running:
            return StepResult(StepStatus.STOPPED)
        try:
            result = self.step_instruction()
        except Exception:
            self._running = False
            logger.info("Run aborted at PC=%d", self._cpu.pc)
            raise
        if result.status is StepStatus.END_OF_PROGRAM or self._cpu.is_finished():
            self._running = False
            logger.info("Run finished: end of program")
        return result

    def run(self) -> StepStatus:
        """
        プログラム終端またはstop()まで、一定間隔で命令を実行し続けます。
        """
        self.start()
        while self._running:
            self.tick()
            if not self._running:
                break
            self._sleep(self._interval_ms / 1000.0)
        if self._cpu.is_finished():
            return StepStatus.END_OF_PROGRAM
        return StepStatus.STOPPED

    def stop(self) -> None:
        if self._running:
            logger.info("Run stopped at PC=%d", self._cpu.pc)
        self._running = False

    # @intent:responsibility 実行中の連続実行を中断してからCPUをリセットします。
    def reset(self) -> None:
        self.stop()
        self._cpu.reset()

    def load_program(self, program: List[str]) -> None:
        self.stop()
        self._cpu.load_program(program)

    def insert_instruction(self, text: str, position: Optional[int] = None) -> bool:
        return self._cpu.insert_instruction(text, position)

    def remove_instruction(self, index: int) -> str:
        return self._cpu.remove_instruction(index)
