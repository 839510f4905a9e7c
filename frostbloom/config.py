import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

RGB = Tuple[int, int, int]

LOG_LEVEL_ENV = "FROSTBLOOM_LOG_LEVEL"


@dataclass
class FrostConfig:
    view_width: int = 1280
    view_height: int = 800
    fps: int = 60
    caption: str = "Frostbloom"
    seed: Optional[int] = None  # None -> fresh crystals every run
    # palette
    background: RGB = (0, 11, 24)        # #000b18
    frost_color: RGB = (210, 235, 255)
    glow_color: RGB = (130, 195, 255)
    glow_alpha: float = 0.45
    glow_blur: float = 3.5               # px of extra width on the glow pass
    hint_text: str = "DRAW TO GROW FROST"
    log_level: str = "WARNING"


def _parse_log_level(val, default: int = logging.WARNING) -> int:
    """Turn 'debug' / 'INFO' / 10 into a logging level, falling back to default."""
    if val is None or val == "":
        return default
    if isinstance(val, int):
        return val
    lvl = getattr(logging, str(val).upper(), None)
    return lvl if isinstance(lvl, int) else default


def configure_logging(cfg: FrostConfig) -> int:
    """Install a basic stderr handler. The environment variable wins over cfg."""
    level = _parse_log_level(os.environ.get(LOG_LEVEL_ENV), _parse_log_level(cfg.log_level))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("frostbloom").setLevel(level)
    return level
