"""Pure crystal growth: no pygame in here."""

from .branch import NO_FORK, Branch
from .params import GrowthParams
from .sampler import SeedSampler
from .seed import seed_crystal
from .simulation import FrameResult, FrostSimulation, step_frame
from .step import Segment, StepResult, advance

__all__ = [
    "NO_FORK",
    "Branch",
    "FrameResult",
    "FrostSimulation",
    "GrowthParams",
    "SeedSampler",
    "Segment",
    "StepResult",
    "advance",
    "seed_crystal",
    "step_frame",
]
