"""CWR export engine: generator orchestration and share calculation."""

from cwrcodec.engine.generator import STAGE, WorkWarning, check_works, generate
from cwrcodec.engine.shares import (
    DEFAULT_MANUSCRIPT_SHARE,
    OPU_MAX_SHARE,
    RightShares,
    ShareCalculation,
    ShareInput,
    calculate_ownership,
    calculate_shares,
    uncontrolled_publisher_shares,
)

__all__ = [
    "generate",
    "check_works",
    "WorkWarning",
    "STAGE",
    "RightShares",
    "ShareInput",
    "ShareCalculation",
    "calculate_shares",
    "calculate_ownership",
    "uncontrolled_publisher_shares",
    "DEFAULT_MANUSCRIPT_SHARE",
    "OPU_MAX_SHARE",
]
