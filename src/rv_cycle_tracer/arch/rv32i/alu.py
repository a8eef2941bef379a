# src/rv_cycle_tracer/arch/rv32i/alu.py
"""
32ビットALUの実装。

副作用のない純粋関数として、funct3/funct7に従った演算を行います。
"""
from rv_cycle_tracer.arch.rv32i.isa import FUNCT7_ALT

MASK32 = 0xFFFFFFFF
SHAMT_MASK = 0x1F

# @intent:utility_function 任意の整数を符号付き32ビット値に変換します。
def to_signed32(value: int) -> int:
    value &= MASK32
    return value - 0x100000000 if value & 0x80000000 else value

# @intent:utility_function 任意の整数を符号なし32ビット値として解釈します。
def to_unsigned32(value: int) -> int:
    return value & MASK32

# @intent:responsibility funct3で演算を選択し、funct7でADD/SUBおよびSRL/SRAを区別します。
def alu(funct3: int, funct7: int, a: int, b: int) -> int:
    """
    ALU演算を実行し、符号付き32ビットの結果を返します。
    シフト量は下位5ビットにマスクされます。未知のfunct3は0を返します。
    """
    a = to_signed32(a)
    b = to_signed32(b)
    alternate = funct7 == FUNCT7_ALT

    if funct3 == 0b000:    # ADD/SUB
        return to_signed32(a - b if alternate else a + b)
    if funct3 == 0b001:    # SLL
        return to_signed32(a << (b & SHAMT_MASK))
    if funct3 == 0b010:    # SLT
        return 1 if a < b else 0
    if funct3 == 0b011:    # SLTU
        return 1 if to_unsigned32(a) < to_unsigned32(b) else 0
    if funct3 == 0b100:    # XOR
        return to_signed32(a ^ b)
    if funct3 == 0b101:    # SRL/SRA
        if alternate:
            return a >> (b & SHAMT_MASK)
        return to_signed32(to_unsigned32(a) >> (b & SHAMT_MASK))
    if funct3 == 0b110:    # OR
        return to_signed32(a | b)
    if funct3 == 0b111:    # AND
        return to_signed32(a & b)
    return 0
