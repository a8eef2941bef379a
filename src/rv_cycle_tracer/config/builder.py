from typing import Tuple

from rv_cycle_tracer.arch.rv32i.cpu import Rv32iCpu
from rv_cycle_tracer.debugger.runner import Runner
from .models import SimulatorConfig

# @intent:responsibility 設定（Config）に基づいて、CPUと実行制御（Runner）を生成・接続します。
class SystemBuilder:
    def build_system(self, config: SimulatorConfig) -> Tuple[Rv32iCpu, Runner]:
        cpu = Rv32iCpu(program=config.program, operand_defaults=config.operand_defaults)
        runner = Runner(cpu, interval_ms=config.run_interval_ms)
        return cpu, runner
