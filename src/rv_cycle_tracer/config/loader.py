import logging
from typing import Any, Dict

import yaml

from rv_cycle_tracer.common.errors import ConfigError
from rv_cycle_tracer.core.state import MEMORY_WORDS
from .models import SimulatorConfig, OperandDefaults

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"run_interval_ms", "visible_memory_words", "operand_defaults", "program"}
KNOWN_OPERAND_DEFAULT_KEYS = {"branch_offset", "memory_offset"}

class ConfigLoader:
    def load_from_file(self, path: str) -> SimulatorConfig:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
        config = self.load_from_string(text)
        logger.info("Loaded simulator config from %s", path)
        return config

    def load_from_string(self, text: str) -> SimulatorConfig:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping")
        return self._parse_config(data)

    def _parse_config(self, data: Dict[str, Any]) -> SimulatorConfig:
        for key in data:
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown config key '%s'", key)

        defaults = SimulatorConfig()

        run_interval_ms = self._parse_int(data.get("run_interval_ms", defaults.run_interval_ms))
        if run_interval_ms < 0:
            raise ConfigError(f"run_interval_ms must be >= 0, got {run_interval_ms}")

        visible_words = self._parse_int(data.get("visible_memory_words", defaults.visible_memory_words))
        if not 0 < visible_words <= MEMORY_WORDS:
            raise ConfigError(f"visible_memory_words must be in 1..{MEMORY_WORDS}, got {visible_words}")

        # Parse Operand Defaults
        offsets_data = data.get("operand_defaults") or {}
        if not isinstance(offsets_data, dict):
            raise ConfigError("operand_defaults must be a mapping")
        for key in offsets_data:
            if key not in KNOWN_OPERAND_DEFAULT_KEYS:
                logger.warning("Ignoring unknown config key 'operand_defaults.%s'", key)
        operand_defaults = OperandDefaults(
            branch_offset=self._parse_int(offsets_data.get("branch_offset", 1)),
            memory_offset=self._parse_int(offsets_data.get("memory_offset", 0)),
        )

        # Parse Program
        program = data.get("program", defaults.program)
        if not isinstance(program, list):
            raise ConfigError("program must be a list of instruction strings")
        program = [str(line).strip() for line in program if str(line).strip()]

        return SimulatorConfig(
            run_interval_ms=run_interval_ms,
            visible_memory_words=visible_words,
            operand_defaults=operand_defaults,
            program=program,
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ConfigError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.lower().startswith(("0x", "-0x")):
                    return int(value, 16)
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Invalid integer format: {value}")
