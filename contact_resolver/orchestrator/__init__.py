"""Discovery waterfall: stage descriptors, upgrade policy and the runner."""

from .policy import ContactCandidate, apply_candidate, should_accept_email, should_accept_name
from .service import ContactWaterfall
from .stages import STAGE_NAMES, Stage, default_stages
from .stats import RunStats, StageStats
from .timeouts import StageTimeoutError, call_with_timeout

__all__ = [
    "ContactCandidate",
    "ContactWaterfall",
    "RunStats",
    "STAGE_NAMES",
    "Stage",
    "StageStats",
    "StageTimeoutError",
    "apply_candidate",
    "call_with_timeout",
    "default_stages",
    "should_accept_email",
    "should_accept_name",
]
