# tests/arch/rv32i/test_instructions_memory.py
"""
ロード/ストア命令の実行関数の単体テスト。
"""
import pytest

from rv_cycle_tracer.arch.rv32i.decoder import decode
from rv_cycle_tracer.arch.rv32i.instructions import execute_instruction
from rv_cycle_tracer.common.errors import InvalidOperandError
from rv_cycle_tracer.config.models import OperandDefaults
from rv_cycle_tracer.core.snapshot import AluOp
from rv_cycle_tracer.core.state import ArchState

class TestMemoryInstructions:
    @pytest.fixture
    def state(self):
        return ArchState(program=["nop"])

    def _execute(self, state, text, defaults=None):
        return execute_instruction(state, decode(text), defaults or OperandDefaults())

    def test_store_then_load(self, state):
        state.registers[5] = -123
        state.registers[6] = 16
        store = self._execute(state, "sw x5, 0(x6)")
        load = self._execute(state, "lw x7, 0(x6)")
        assert state.memory[4] == -123
        assert state.registers[7] == -123
        assert store.alu_result == load.alu_result == 16
        assert load.mem_data == -123

    # @intent:test_case_signals ロード/ストアの制御信号を検証します。
    def test_load_store_signals(self, state):
        load = self._execute(state, "lw x1, x0, 4").signals
        assert load.reg_write and load.alu_src and load.mem_read and load.mem_to_reg
        assert not load.mem_write and not load.branch
        assert load.alu_op is AluOp.ADD

        store = self._execute(state, "sw x1, x0, 4").signals
        assert store.mem_write and store.alu_src
        assert not store.reg_write and not store.mem_read
        assert store.alu_op is AluOp.ADD

    def test_offset_defaults_to_zero(self, state):
        state.registers[2] = 8
        state.registers[3] = 55
        result = self._execute(state, "sw x3, x2")
        assert result.immediate == 0
        assert state.memory[2] == 55

    def test_configured_memory_offset(self, state):
        state.registers[3] = 9
        self._execute(state, "sw x3, x0", OperandDefaults(memory_offset=12))
        assert state.memory[3] == 9

    def test_address_wraparound(self, state):
        state.registers[1] = 1024
        state.registers[2] = 77
        self._execute(state, "sw x2, 0(x1)")
        assert state.memory[0] == 77

    def test_unaligned_address_is_floored(self, state):
        state.memory[1] = 42
        self._execute(state, "lw x1, 7(x0)")
        assert state.registers[1] == 42

    def test_load_into_x0_is_discarded(self, state):
        state.memory[0] = 5
        result = self._execute(state, "lw x0, 0(x0)")
        assert state.registers[0] == 0
        assert result.mem_data == 5

    def test_byte_and_half_variants_access_words(self, state):
        state.registers[1] = 0x12345
        self._execute(state, "sb x1, 0(x0)")
        self._execute(state, "lh x2, 0(x0)")
        assert state.memory[0] == 0x12345
        assert state.registers[2] == 0x12345

    def test_messages(self, state):
        state.registers[5] = 3
        assert self._execute(state, "sw x5, 8(x0)").message == "SW x5, 8(x0) -> MEM[8] = 3"
        assert self._execute(state, "lw x6, 8(x0)").message == "LW x6, 8(x0) -> x6 = MEM[8] = 3"

    def test_out_of_range_store_register(self, state):
        with pytest.raises(InvalidOperandError):
            self._execute(state, "sw x33, 0(x0)")
        assert state.memory == [0] * 256

    def test_out_of_range_load_destination(self, state):
        state.memory[0] = 1
        with pytest.raises(InvalidOperandError):
            self._execute(state, "lw x32, 0(x0)")
