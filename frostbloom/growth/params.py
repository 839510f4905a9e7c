from __future__ import annotations

"""
frostbloom/growth/params.py

The fixed tunables behind crystal growth. Defaults mirror the packaged
content/growth.yaml; GrowthParams.load() reads that file so the numbers live
in one data file the way prototypes do, but nothing else writes to it.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

_LOGGER = logging.getLogger(__name__)

Range = Tuple[float, float]


def default_params_path() -> Path:
    return Path(__file__).resolve().parents[1] / "content" / "growth.yaml"


def draw(rng, span: Range) -> float:
    """Uniform draw in [low, high) from one rng.random() call."""
    low, high = span
    return low + rng.random() * (high - low)


@dataclass(frozen=True)
class GrowthParams:
    grow_speed: float = 7.0
    spawn_distance: float = 13.0
    max_depth: int = 4

    # root arms
    arm_count: Tuple[int, int] = (3, 7)
    arm_jitter: float = 0.5
    arm_curl: Range = (0.018, 0.040)
    arm_length: Range = (55.0, 125.0)
    arm_first_fork: Range = (0.22, 0.42)
    arm_alpha: float = 0.88
    arm_width: float = 1.5

    # forks
    bilateral_chance: float = 0.75
    fork_spread: float = 1.0471975511965976
    fork_spread_jitter: float = 0.55
    child_curl_span: float = 0.042
    child_length: Range = (0.48, 0.70)
    child_first_fork: Range = (0.28, 0.60)
    refork: Range = (0.35, 0.70)
    alpha_decay: float = 0.72
    width_decay: float = 0.62
    min_fork_remaining: float = 6.0
    refork_min_remaining: float = 14.0

    def __post_init__(self) -> None:
        if self.grow_speed <= 0:
            raise ValueError(f"grow_speed must be positive, got {self.grow_speed!r}")
        if self.spawn_distance <= 0:
            raise ValueError(f"spawn_distance must be positive, got {self.spawn_distance!r}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth!r}")
        lo, hi = self.arm_count
        if lo < 1 or hi <= lo:
            raise ValueError(f"arm_count must be an increasing range from 1, got {self.arm_count!r}")
        for name in ("arm_curl", "arm_length", "arm_first_fork", "child_length", "child_first_fork", "refork"):
            low, high = getattr(self, name)
            if high < low:
                raise ValueError(f"{name} range is inverted: {(low, high)!r}")
        if self.arm_length[0] <= 0:
            raise ValueError("arm_length must be strictly positive")
        # children must come out fainter and thinner than their parent
        for name in ("alpha_decay", "width_decay"):
            val = getattr(self, name)
            if not 0.0 < val < 1.0:
                raise ValueError(f"{name} must lie in (0, 1), got {val!r}")

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "GrowthParams":
        """Build params from the nested YAML layout (see content/growth.yaml)."""
        if not isinstance(data, dict):
            raise ValueError("growth tunables must be a mapping")
        arms = data.get("arms") or {}
        fork = data.get("fork") or {}
        base = cls()
        kwargs: Dict[str, Any] = {}

        def put(key: str, src: Dict[str, Any], src_key: str, conv) -> None:
            if src_key not in src:
                return
            try:
                kwargs[key] = conv(src[src_key])
            except (TypeError, ValueError, IndexError) as exc:
                raise ValueError(f"malformed growth tunable {src_key!r}: {src[src_key]!r}") from exc

        def pair(v) -> Range:
            return (float(v[0]), float(v[1]))

        put("grow_speed", data, "grow_speed", float)
        put("spawn_distance", data, "spawn_distance", float)
        put("max_depth", data, "max_depth", int)

        put("arm_count", arms, "count", lambda v: (int(v[0]), int(v[1])))
        put("arm_jitter", arms, "jitter", float)
        put("arm_curl", arms, "curl", pair)
        put("arm_length", arms, "length", pair)
        put("arm_first_fork", arms, "first_fork", pair)
        put("arm_alpha", arms, "alpha", float)
        put("arm_width", arms, "width", float)

        put("bilateral_chance", fork, "bilateral_chance", float)
        put("fork_spread", fork, "spread", float)
        put("fork_spread_jitter", fork, "spread_jitter", float)
        put("child_curl_span", fork, "curl_span", float)
        put("child_length", fork, "length", pair)
        put("child_first_fork", fork, "first_fork", pair)
        put("refork", fork, "refork", pair)
        put("alpha_decay", fork, "alpha_decay", float)
        put("width_decay", fork, "width_decay", float)
        put("min_fork_remaining", fork, "min_remaining", float)
        put("refork_min_remaining", fork, "refork_min_remaining", float)

        return replace(base, **kwargs)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GrowthParams":
        path = Path(path) if path is not None else default_params_path()
        if not path.is_file():
            raise FileNotFoundError(f"growth tunables not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        params = cls.from_mapping(data)
        _LOGGER.debug("Loaded growth tunables from %s", path)
        return params
