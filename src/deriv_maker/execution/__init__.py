"""Execution module.

Provides the hysteresis gate deciding when resting quotes are replaced.
"""

from deriv_maker.execution.gate import HeadChangeGate, relative_head_change, should_replace

__all__ = [
    "HeadChangeGate",
    "relative_head_change",
    "should_replace",
]
