from dataclasses import dataclass, field
from typing import List

DEFAULT_RUN_INTERVAL_MS = 500
DEFAULT_VISIBLE_MEMORY_WORDS = 32

# 起動時に読み込まれるスタータープログラム
DEFAULT_PROGRAM = [
    "addi x1, x0, 10",
    "addi x2, x0, 20",
    "add x3, x1, x2",
    "sub x4, x2, x1",
]

@dataclass(frozen=True)
class OperandDefaults:
    branch_offset: int = 1  # 分岐オフセット省略時
    memory_offset: int = 0  # ロード/ストアのオフセット省略時

@dataclass
class SimulatorConfig:
    run_interval_ms: int = DEFAULT_RUN_INTERVAL_MS
    visible_memory_words: int = DEFAULT_VISIBLE_MEMORY_WORDS
    operand_defaults: OperandDefaults = field(default_factory=OperandDefaults)
    program: List[str] = field(default_factory=lambda: list(DEFAULT_PROGRAM))
