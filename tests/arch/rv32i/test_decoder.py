# tests/arch/rv32i/test_decoder.py
"""
rv_cycle_tracer.arch.rv32i.decoderモジュールの単体テスト。
"""
import pytest

from rv_cycle_tracer.arch.rv32i.decoder import decode, format_instruction
from rv_cycle_tracer.arch.rv32i.isa import FUNCT7_ALT, InstructionClass, Mnemonic, lookup_mnemonic

# @intent:test_suite テキスト命令の字句解析とニーモニック表の検証。

class TestDecode:
    # @intent:test_case_r_type レジスタ間命令のオペランドとフィールドが正しく取り出されることを検証します。
    def test_decode_r_type(self):
        instr = decode("add x3, x1, x2")
        assert instr.mnemonic is Mnemonic.ADD
        assert instr.operands == (3, 1, 2)
        assert instr.instruction_class is InstructionClass.R
        assert instr.opcode == 0b0110011
        assert instr.funct3 == 0
        assert instr.funct7 == 0

    def test_decode_is_case_and_comma_insensitive(self):
        instr = decode("  SUB   X4 X2,X1  ")
        assert instr.mnemonic is Mnemonic.SUB
        assert instr.operands == (4, 2, 1)
        assert instr.funct7 == FUNCT7_ALT

    def test_decode_signed_immediate(self):
        instr = decode("addi x1, x0, -15")
        assert instr.mnemonic is Mnemonic.ADDI
        assert instr.operands == (1, 0, -15)
        assert instr.instruction_class is InstructionClass.I

    def test_decode_plus_signed_immediate(self):
        assert decode("addi x1, x0, +7").operands == (1, 0, 7)

    # @intent:test_case_base_offset offset(xN) 形式がベースレジスタ、オフセットの順に展開されることを検証します。
    def test_decode_base_offset_form(self):
        instr = decode("lw x7, 8(x6)")
        assert instr.mnemonic is Mnemonic.LW
        assert instr.operands == (7, 6, 8)

    def test_decode_base_offset_without_offset(self):
        assert decode("sw x5, (x6)").operands == (5, 6, 0)

    def test_decode_negative_base_offset(self):
        assert decode("lw x1, -4(x2)").operands == (1, 2, -4)

    def test_optional_offsets_may_be_omitted(self):
        assert decode("lw x1, x2").mnemonic is Mnemonic.LW
        assert decode("sw x1, x2").mnemonic is Mnemonic.SW
        assert decode("beq x1, x2").mnemonic is Mnemonic.BEQ
        assert decode("beq x1, x2").operand(2, 1) == 1

    def test_extra_operands_are_ignored_by_operand_lookup(self):
        instr = decode("add x1, x2, x3, x4")
        assert instr.mnemonic is Mnemonic.ADD
        assert instr.operands[:3] == (1, 2, 3)

    # @intent:test_case_out_of_range_register デコーダはレジスタ番号の範囲を検証しないことを確認します。
    def test_register_bounds_not_validated(self):
        instr = decode("add x40, x1, x2")
        assert instr.mnemonic is Mnemonic.ADD
        assert instr.operands[0] == 40

    @pytest.mark.parametrize("text", [
        "mul x1, x2, x3",       # 未対応のニーモニック
        "addi x1, x0, ten",     # 解析できない即値
        "add x1, x2, y3",       # 解析できないレジスタ
        "add a0, x1, x2",       # ABI名は未対応
        "lw x1, 8(r2)",         # ベースレジスタの接頭辞が異なる
        "add x1, x2",           # オペランド不足
        "addi x1, x0, 0x10",    # 16進数は未対応
        "",
        "   ",
    ])
    def test_malformed_text_decodes_to_unknown(self, text):
        instr = decode(text)
        assert instr.mnemonic is Mnemonic.UNKNOWN
        assert instr.opcode == 0
        assert instr.funct3 == 0
        assert instr.funct7 == 0
        assert not instr.is_known

class TestMnemonicTable:
    def test_every_mnemonic_has_single_encoding(self):
        encodings = [m.value for m in Mnemonic]
        assert len(encodings) == len(set(encodings))

    @pytest.mark.parametrize("name", ["sub", "sra", "srai"])
    def test_alternate_operations_set_funct7(self, name):
        assert lookup_mnemonic(name).funct7 == FUNCT7_ALT

    def test_other_operations_have_zero_funct7(self):
        alternates = {Mnemonic.SUB, Mnemonic.SRA, Mnemonic.SRAI}
        for m in Mnemonic:
            if m not in alternates:
                assert m.funct7 == 0

    def test_lookup_unknown(self):
        assert lookup_mnemonic("jal") is Mnemonic.UNKNOWN

    def test_class_opcodes(self):
        assert lookup_mnemonic("lw").opcode == 0b0000011
        assert lookup_mnemonic("sw").opcode == 0b0100011
        assert lookup_mnemonic("bgeu").opcode == 0b1100011
        assert lookup_mnemonic("bgeu").funct3 == 0b111

class TestFormatInstruction:
    def test_format_each_class(self):
        assert format_instruction(decode("add x3,x1,x2")) == "ADD x3, x1, x2"
        assert format_instruction(decode("addi x1 x0 -1")) == "ADDI x1, x0, -1"
        assert format_instruction(decode("lw x7, x6, 8")) == "LW x7, 8(x6)"
        assert format_instruction(decode("sw x5, x6")) == "SW x5, 0(x6)"
        assert format_instruction(decode("bne x1, x2, -3")) == "BNE x1, x2, -3"

    def test_format_unknown_keeps_text(self):
        assert format_instruction(decode("  nop  ")) == "nop"
