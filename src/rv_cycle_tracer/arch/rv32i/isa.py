# src/rv_cycle_tracer/arch/rv32i/isa.py
"""
RV32Iサブセットの命令定義。

ニーモニックごとの命令クラス、funct3、funct7を閉じた列挙型として定義します。
"""
from enum import Enum
from typing import Dict, NamedTuple

# @intent:constant 交替演算（SUB, SRA, SRAI）を選択するfunct7の値。
FUNCT7_ALT = 0b0100000

# @intent:responsibility 命令クラスとそのオペコード値を定義します。
class InstructionClass(Enum):
    R = 0b0110011
    I = 0b0010011
    LOAD = 0b0000011
    STORE = 0b0100011
    BRANCH = 0b1100011
    UNKNOWN = 0

    @property
    def opcode(self) -> int:
        return self.value

    # @intent:responsibility デコードに必要な最小オペランド数を返します。
    # @intent:rationale メモリ命令のオフセットと分岐のオフセットは省略可能です。
    @property
    def min_operands(self) -> int:
        if self in (InstructionClass.R, InstructionClass.I):
            return 3
        if self is InstructionClass.UNKNOWN:
            return 0
        return 2

class Encoding(NamedTuple):
    instruction_class: InstructionClass
    funct3: int
    funct7: int = 0

# @intent:responsibility サポートする全ニーモニックの列挙。各メンバーは命令クラス、funct3、funct7を持ちます。
class Mnemonic(Enum):
    # R-type
    ADD = Encoding(InstructionClass.R, 0b000)
    SUB = Encoding(InstructionClass.R, 0b000, FUNCT7_ALT)
    SLL = Encoding(InstructionClass.R, 0b001)
    SLT = Encoding(InstructionClass.R, 0b010)
    SLTU = Encoding(InstructionClass.R, 0b011)
    XOR = Encoding(InstructionClass.R, 0b100)
    SRL = Encoding(InstructionClass.R, 0b101)
    SRA = Encoding(InstructionClass.R, 0b101, FUNCT7_ALT)
    OR = Encoding(InstructionClass.R, 0b110)
    AND = Encoding(InstructionClass.R, 0b111)

    # I-type (arithmetic)
    ADDI = Encoding(InstructionClass.I, 0b000)
    SLTI = Encoding(InstructionClass.I, 0b010)
    SLTIU = Encoding(InstructionClass.I, 0b011)
    XORI = Encoding(InstructionClass.I, 0b100)
    ORI = Encoding(InstructionClass.I, 0b110)
    ANDI = Encoding(InstructionClass.I, 0b111)
    SLLI = Encoding(InstructionClass.I, 0b001)
    SRLI = Encoding(InstructionClass.I, 0b101)
    SRAI = Encoding(InstructionClass.I, 0b101, FUNCT7_ALT)

    # Load
    LB = Encoding(InstructionClass.LOAD, 0b000)
    LH = Encoding(InstructionClass.LOAD, 0b001)
    LW = Encoding(InstructionClass.LOAD, 0b010)
    LBU = Encoding(InstructionClass.LOAD, 0b100)
    LHU = Encoding(InstructionClass.LOAD, 0b101)

    # Store
    SB = Encoding(InstructionClass.STORE, 0b000)
    SH = Encoding(InstructionClass.STORE, 0b001)
    SW = Encoding(InstructionClass.STORE, 0b010)

    # Branch
    BEQ = Encoding(InstructionClass.BRANCH, 0b000)
    BNE = Encoding(InstructionClass.BRANCH, 0b001)
    BLT = Encoding(InstructionClass.BRANCH, 0b100)
    BGE = Encoding(InstructionClass.BRANCH, 0b101)
    BLTU = Encoding(InstructionClass.BRANCH, 0b110)
    BGEU = Encoding(InstructionClass.BRANCH, 0b111)

    UNKNOWN = Encoding(InstructionClass.UNKNOWN, 0)

    @property
    def instruction_class(self) -> InstructionClass:
        return self.value.instruction_class

    @property
    def funct3(self) -> int:
        return self.value.funct3

    @property
    def funct7(self) -> int:
        return self.value.funct7

    @property
    def opcode(self) -> int:
        return self.value.instruction_class.opcode

# @intent:map 小文字のニーモニック文字列から列挙メンバーへのマッピングテーブル。
MNEMONIC_MAP: Dict[str, Mnemonic] = {
    m.name.lower(): m for m in Mnemonic if m is not Mnemonic.UNKNOWN
}

# @intent:responsibility ニーモニック文字列を列挙メンバーへ変換します。未知の文字列はUNKNOWNになります。
def lookup_mnemonic(name: str) -> Mnemonic:
    return MNEMONIC_MAP.get(name.lower(), Mnemonic.UNKNOWN)
