from dataclasses import dataclass
from typing import Optional

@dataclass
class MachineConfig:
    rom_directory: str = "roms"
    rom_extension: str = ".ch8"
    cycles_per_tick: int = 10   # 60Hzのtick 1回あたりの命令数
    tick_interval_ms: int = 16  # ホストループの周期 (約60Hz)
    pixel_scale: int = 10
    log_level: str = "INFO"
    seed: Optional[int] = None  # 乱数命令のシード（再現実行用）
