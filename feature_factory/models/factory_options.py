"""Factory configuration request model using Pydantic for type safety and validation"""
import math
import re
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, Field, field_validator

from feature_factory.core import FactoryFlag, InvalidConfigurationError, KERNEL_CONSTANTS

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")
_FALSE_STRINGS = frozenset({"", "0", "false", "f", "no", "n", "off"})


def leading_integer(value: Any) -> int:
    """
    Read an integer option the lenient way

    Floats are truncated, strings contribute their leading integer ("2.5"
    gives 2), and anything without one (None, "fine", inf, NaN) gives 0.
    Defaults and floors are applied by the caller afterwards.
    """
    if value is None:
        return 0
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("ascii", errors="ignore")
    if isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        return int(match.group(1)) if match else 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


class FactoryOptions(BaseModel):
    """
    Options accepted when creating a factory.

    Every field is optional and no value is rejected: integers are read
    with leading_integer, a buffer resolution below the floor is clamped,
    and flags follow truthiness ("false", "no", "off" and "0" are false).
    The Z/M exclusivity rule is checked by the factory, not here.
    """
    lenient_polygon_assertions: bool = Field(
        default=False,
        description="Skip validity assertions when building polygons and multi-polygons"
    )
    support_z_coordinate: bool = Field(default=False, description="Carry a Z ordinate")
    support_m_coordinate: bool = Field(default=False, description="Carry an M ordinate")
    srid: int = Field(
        default=KERNEL_CONSTANTS.DEFAULT_SRID,
        description="Spatial reference id attached to every geometry"
    )
    buffer_resolution: int = Field(
        default=KERNEL_CONSTANTS.MIN_BUFFER_RESOLUTION,
        description="Segments per quarter circle used by buffer operations"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "support_z_coordinate": True,
                "srid": 4326,
                "buffer_resolution": 8
            }
        }

    @field_validator("lenient_polygon_assertions", "support_z_coordinate", "support_m_coordinate",
                     mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() not in _FALSE_STRINGS
        return bool(value)

    @field_validator("srid", "buffer_resolution", mode="before")
    @classmethod
    def _coerce_integer(cls, value: Any) -> int:
        return leading_integer(value)

    @field_validator("buffer_resolution")
    @classmethod
    def _clamp_buffer_resolution(cls, value: int) -> int:
        return KERNEL_CONSTANTS.clamp_buffer_resolution(value)

    def to_flags(self) -> FactoryFlag:
        """Collapse the boolean options into a flag set"""
        flags = FactoryFlag.NONE
        if self.lenient_polygon_assertions:
            flags |= FactoryFlag.LENIENT_POLYGON
        if self.support_z_coordinate:
            flags |= FactoryFlag.SUPPORTS_Z
        if self.support_m_coordinate:
            flags |= FactoryFlag.SUPPORTS_M
        return flags

    @classmethod
    def from_value(
        cls,
        options: Union['FactoryOptions', Dict[str, Any], None] = None,
        **overrides: Any
    ) -> 'FactoryOptions':
        """
        Build options from an existing instance, a dict and/or keyword arguments

        Args:
            options: FactoryOptions instance, dict of options, or None
            **overrides: Individual options, applied on top of `options`

        Returns:
            Parsed FactoryOptions

        Raises:
            InvalidConfigurationError: If `options` is not a FactoryOptions or a mapping
        """
        if isinstance(options, FactoryOptions) and not overrides:
            return options

        data: Dict[str, Any] = {}
        if isinstance(options, FactoryOptions):
            data.update(options.model_dump())
        elif isinstance(options, Mapping):
            data.update(options)
        elif options is not None:
            raise InvalidConfigurationError("options", f"expected a mapping, got {type(options).__name__}")
        data.update(overrides)

        return cls(**data)

    def describe(self) -> str:
        """Short human-readable summary, used in log messages"""
        extras = [name for name, enabled in (
            ("Z", self.support_z_coordinate),
            ("M", self.support_m_coordinate),
        ) if enabled]
        dims = "+".join(["XY"] + extras)
        return f"srid={self.srid} dims={dims} buffer_resolution={self.buffer_resolution}"
