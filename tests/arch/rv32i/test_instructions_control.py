# tests/arch/rv32i/test_instructions_control.py
"""
分岐命令と未知命令の実行関数の単体テスト。
"""
import pytest

from rv_cycle_tracer.arch.rv32i.decoder import decode
from rv_cycle_tracer.arch.rv32i.instructions import execute_instruction
from rv_cycle_tracer.common.errors import InvalidOperandError
from rv_cycle_tracer.config.models import OperandDefaults
from rv_cycle_tracer.core.snapshot import AluOp, IDLE_SIGNALS
from rv_cycle_tracer.core.state import ArchState

class TestBranchInstructions:
    @pytest.fixture
    def state(self):
        state = ArchState(program=["nop"] * 10, pc=3)
        return state

    def _execute(self, state, text, defaults=None):
        return execute_instruction(state, decode(text), defaults or OperandDefaults())

    # @intent:test_case_beq 等しい場合は現在のPC+offset、異なる場合はPC+1になることを検証します。
    def test_beq_taken_and_not_taken(self, state):
        state.registers[1] = state.registers[2] = 4
        result = self._execute(state, "beq x1, x2, 2")
        assert result.branch_taken is True
        assert result.next_pc == 5
        assert result.message == "BEQ x1, x2, 2 -> branch taken (PC = 5)"

        state.registers[2] = 5
        result = self._execute(state, "beq x1, x2, 2")
        assert result.branch_taken is False
        assert result.next_pc == 4
        assert result.message == "BEQ x1, x2, 2 -> branch not taken"

    def test_branch_signals(self, state):
        signals = self._execute(state, "bne x0, x0, 2").signals
        assert signals.branch
        assert not (signals.reg_write or signals.mem_write or signals.mem_read or signals.alu_src)
        assert signals.alu_op is AluOp.COMPARE

    def test_branch_does_not_modify_registers(self, state):
        state.registers[1] = 1
        before = list(state.registers)
        self._execute(state, "blt x0, x1, 2")
        assert state.registers == before

    @pytest.mark.parametrize("text,a,b,taken", [
        ("bne x1, x2, 3", 1, 2, True),
        ("bne x1, x2, 3", 2, 2, False),
        ("blt x1, x2, 3", -1, 1, True),
        ("blt x1, x2, 3", 1, -1, False),
        ("bge x1, x2, 3", 1, 1, True),
        ("bge x1, x2, 3", -2, 1, False),
        ("bltu x1, x2, 3", 1, -1, True),
        ("bltu x1, x2, 3", -1, 1, False),
        ("bgeu x1, x2, 3", -1, 1, True),
        ("bgeu x1, x2, 3", 1, -1, False),
    ])
    def test_conditions(self, state, text, a, b, taken):
        state.registers[1] = a
        state.registers[2] = b
        result = self._execute(state, text)
        assert result.branch_taken is taken
        assert result.next_pc == (6 if taken else 4)

    def test_default_offset_is_one(self, state):
        result = self._execute(state, "beq x0, x0")
        assert result.immediate == 1
        assert result.next_pc == 4

    def test_configured_branch_offset(self, state):
        result = self._execute(state, "beq x0, x0", OperandDefaults(branch_offset=3))
        assert result.next_pc == 6

    def test_backward_branch(self, state):
        assert self._execute(state, "beq x0, x0, -3").next_pc == 0

    def test_branch_before_program_start(self, state):
        with pytest.raises(InvalidOperandError):
            self._execute(state, "beq x0, x0, -4")

    def test_out_of_range_compare_register(self, state):
        with pytest.raises(InvalidOperandError):
            self._execute(state, "beq x0, x64, 2")

class TestUnknownInstruction:
    def test_unknown_is_noop(self):
        state = ArchState(program=["frobnicate x1, x2"], pc=0)
        state.registers[1] = 9
        before_regs = list(state.registers)
        result = execute_instruction(state, decode("frobnicate x1, x2"), OperandDefaults())
        assert result.next_pc == 1
        assert result.signals == IDLE_SIGNALS
        assert state.registers == before_regs
        assert "no-op" in result.message
