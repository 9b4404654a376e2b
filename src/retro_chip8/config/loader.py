import logging
from typing import Any, Dict

import yaml

from retro_chip8.core.errors import ConfigError
from .models import MachineConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return self._parse_config(data)

    def _parse_config(self, data: Any) -> MachineConfig:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Config document must be a mapping")

        defaults = MachineConfig()
        config = MachineConfig(
            rom_directory=str(data.get("rom_directory", defaults.rom_directory)),
            rom_extension=str(data.get("rom_extension", defaults.rom_extension)),
            cycles_per_tick=self._parse_int(data.get("cycles_per_tick", defaults.cycles_per_tick)),
            tick_interval_ms=self._parse_int(data.get("tick_interval_ms", defaults.tick_interval_ms)),
            pixel_scale=self._parse_int(data.get("pixel_scale", defaults.pixel_scale)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
            seed=None if data.get("seed") is None else self._parse_int(data.get("seed")),
        )
        self._validate(config)
        return config

    def _validate(self, config: MachineConfig) -> None:
        for name in ("cycles_per_tick", "tick_interval_ms", "pixel_scale"):
            if getattr(config, name) <= 0:
                raise ConfigError(f"{name} must be positive: {getattr(config, name)}")
        if config.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {config.log_level}")

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ConfigError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.lower().startswith("0x"):
                    return int(value, 16)
                return int(value)
            except ValueError:
                raise ConfigError(f"Invalid integer format: {value}")
        raise ConfigError(f"Invalid integer format: {value}")

    # @intent:responsibility 設定のログレベル名をloggingの数値レベルに変換します。
    @staticmethod
    def log_level_value(config: MachineConfig) -> int:
        return getattr(logging, config.log_level)
