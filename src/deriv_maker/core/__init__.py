"""Core configuration and arithmetic for the quoting core."""

from deriv_maker.core.config import MakerConfig, MarketConfig, RiskParameters, load_config

__all__ = [
    "MakerConfig",
    "MarketConfig",
    "RiskParameters",
    "load_config",
]
