"""Configuration models for the quoting core.

Loads and validates configuration from YAML files using pydantic. All
range checks happen here so the pricing pipeline only ever sees valid
parameters.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from deriv_maker.core.decimal_math import basis_points_to_fraction
from deriv_maker.domain.errors import ConfigurationError
from deriv_maker.domain.market_data import MarketSpec

# Parameters configured in basis points and stored as fractions
BASIS_POINT_FIELDS = {
    "head_change_tolerance_bp": "head_change_tolerance",
    "tail_distance_from_mid_bp": "tail_distance_from_mid",
    "min_tail_distance_bp": "min_tail_distance",
}

FRACTION_FIELDS = (
    "reservation_param",
    "spread_param",
    "active_capital",
    "head_change_tolerance",
    "tail_distance_from_mid",
    "min_tail_distance",
)


class RiskParameters(BaseModel):
    """Risk parameters applied to every quoting decision.

    Tolerance and distance parameters may be supplied in basis points
    (``*_bp`` keys); they are converted to fractions once, at load time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    leverage: Decimal = Decimal("1")
    order_density: int = 1  # Levels per ladder
    max_market_data_delay: int = 0  # Seconds, 0 disables the check
    reservation_param: Decimal = Decimal("0")
    spread_param: Decimal = Decimal("0")
    active_capital: Decimal = Decimal("0")
    head_change_tolerance: Decimal = Decimal("0")
    tail_distance_from_mid: Decimal = Decimal("0")
    min_tail_distance: Decimal = Decimal("0")

    @model_validator(mode="before")
    @classmethod
    def convert_basis_points(cls, data: Any) -> Any:
        """Convert ``*_bp`` keys to their fractional counterparts."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for bp_key, field in BASIS_POINT_FIELDS.items():
            if bp_key not in data:
                continue
            if field in data:
                raise ValueError(f"Specify only one of {bp_key} and {field}")
            raw = data.pop(bp_key)
            try:
                bp = Decimal(str(raw))
            except ArithmeticError as e:
                raise ValueError(f"{bp_key} is not a number: {raw!r}") from e
            data[field] = basis_points_to_fraction(bp)
        return data

    @field_validator(*FRACTION_FIELDS)
    @classmethod
    def validate_fraction(cls, v: Decimal) -> Decimal:
        """Ensure fractional parameters lie in [0, 1]."""
        if not v.is_finite() or v < 0 or v > 1:
            raise ValueError("must be between 0 and 1")
        return v

    @field_validator("leverage")
    @classmethod
    def validate_leverage(cls, v: Decimal) -> Decimal:
        """Ensure leverage is positive."""
        if not v.is_finite() or v <= 0:
            raise ValueError("must be positive")
        return v

    @field_validator("order_density")
    @classmethod
    def validate_order_density(cls, v: int) -> int:
        """Ensure at least one level per ladder."""
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("max_market_data_delay")
    @classmethod
    def validate_delay(cls, v: int) -> int:
        """Ensure the staleness limit is not negative."""
        if v < 0:
            raise ValueError("must not be negative")
        return v


class MarketConfig(BaseModel):
    """Market and account identifiers.

    Identifiers are opaque to the quoting core; they are only passed
    through to the action plan.
    """

    market_id: str = Field(min_length=1)
    subaccount_id: str = Field(min_length=1)
    fee_recipient: str = ""
    min_price_tick_size: Decimal | None = Field(default=None, gt=0)
    min_quantity_tick_size: Decimal | None = Field(default=None, gt=0)

    def to_spec(self) -> MarketSpec:
        """Return the market trading rules used by the ladder builder."""
        return MarketSpec(
            market_id=self.market_id,
            min_price_tick_size=self.min_price_tick_size,
            min_quantity_tick_size=self.min_quantity_tick_size,
        )


class MakerConfig(BaseModel):
    """Root configuration for the quoting core."""

    market: MarketConfig
    risk: RiskParameters = Field(default_factory=RiskParameters)

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> MakerConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Validated MakerConfig

        Raises:
            ConfigurationError: If the file is missing, unparsable or invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse config {path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ConfigurationError(f"Config root must be a mapping: {path}")

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MakerConfig:
        """Load configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Validated MakerConfig

        Raises:
            ConfigurationError: If any value fails validation
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise _to_configuration_error(e) from e

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path to write the configuration
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)


def _to_configuration_error(error: ValidationError) -> ConfigurationError:
    """Collapse a pydantic validation error into a ConfigurationError."""
    errors = error.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    message = f"Invalid configuration: {field or 'root'}: {first.get('msg', error)}"
    return ConfigurationError(
        message,
        field=field,
        context={"errors": len(errors)},
    )


def load_config(path: str | Path | None = None) -> MakerConfig:
    """Load maker configuration.

    Looks for config in the following order:
    1. Provided path argument
    2. ./config/maker.yaml
    3. ./maker.yaml

    Args:
        path: Optional explicit path to config file

    Returns:
        Validated MakerConfig

    Raises:
        ConfigurationError: If no config is found or it is invalid
    """
    if path:
        return MakerConfig.from_yaml(path)

    default_paths = [
        Path("./config/maker.yaml"),
        Path("./maker.yaml"),
    ]

    for default_path in default_paths:
        if default_path.exists():
            return MakerConfig.from_yaml(default_path)

    raise ConfigurationError("No configuration file found")
