# tests/arch/rv32i/test_alu.py
"""
rv_cycle_tracer.arch.rv32i.aluモジュールの単体テスト。
"""
import pytest

from rv_cycle_tracer.arch.rv32i.alu import alu, to_signed32, to_unsigned32
from rv_cycle_tracer.arch.rv32i.isa import FUNCT7_ALT

INT32_MAX = 0x7FFFFFFF
INT32_MIN = -0x80000000

# @intent:test_suite 32ビット符号付き演算、シフト量マスク、符号なし比較の検証。

class TestConversions:
    def test_to_signed32(self):
        assert to_signed32(0xFFFFFFFF) == -1
        assert to_signed32(0x80000000) == INT32_MIN
        assert to_signed32(INT32_MAX + 1) == INT32_MIN
        assert to_signed32(5) == 5

    def test_to_unsigned32(self):
        assert to_unsigned32(-1) == 0xFFFFFFFF
        assert to_unsigned32(7) == 7

class TestAlu:
    def test_add_sub(self):
        assert alu(0b000, 0, 10, 20) == 30
        assert alu(0b000, FUNCT7_ALT, 20, 10) == 10
        assert alu(0b000, FUNCT7_ALT, 10, 20) == -10

    # @intent:test_case_wraparound 加算のオーバーフローが32ビットで折り返されることを検証します。
    def test_add_wraps_at_32_bits(self):
        assert alu(0b000, 0, INT32_MAX, 1) == INT32_MIN
        assert alu(0b000, FUNCT7_ALT, INT32_MIN, 1) == INT32_MAX

    def test_operands_are_coerced_to_32_bits(self):
        assert alu(0b000, 0, 0xFFFFFFFF, 1) == 0

    def test_sll(self):
        assert alu(0b001, 0, 1, 4) == 16
        assert alu(0b001, 0, 1, 31) == INT32_MIN
        assert alu(0b001, 0, 3, 31) == INT32_MIN

    # @intent:test_case_shift_mask シフト量が下位5ビットにマスクされることを検証します。
    def test_shift_amount_is_masked(self):
        assert alu(0b001, 0, 1, 32) == 1
        assert alu(0b001, 0, 1, 33) == 2
        assert alu(0b101, 0, 16, 36) == 1

    def test_srl_is_logical(self):
        assert alu(0b101, 0, -1, 28) == 0xF
        assert alu(0b101, 0, -16, 0) == -16

    def test_sra_is_arithmetic(self):
        assert alu(0b101, FUNCT7_ALT, -16, 2) == -4
        assert alu(0b101, FUNCT7_ALT, -1, 31) == -1

    def test_slt_signed(self):
        assert alu(0b010, 0, -1, 1) == 1
        assert alu(0b010, 0, 1, -1) == 0

    # @intent:test_case_unsigned 符号なし比較で負の値が非負の値より大きいと扱われることを検証します。
    def test_sltu_unsigned(self):
        assert alu(0b011, 0, -1, 1) == 0
        assert alu(0b011, 0, 1, -1) == 1
        assert alu(0b011, 0, 0, 1) == 1

    def test_logic_ops(self):
        assert alu(0b100, 0, 0b1100, 0b1010) == 0b0110
        assert alu(0b110, 0, 0b1100, 0b1010) == 0b1110
        assert alu(0b111, 0, 0b1100, 0b1010) == 0b1000
        assert alu(0b100, 0, -1, 0) == -1

    @pytest.mark.parametrize("funct3", [8, -1, 100])
    def test_unknown_funct3_returns_zero(self, funct3):
        assert alu(funct3, 0, 5, 7) == 0
