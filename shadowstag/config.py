"""
Shadow configuration.

:class:`ShadowConfig` is an immutable snapshot of all options a shadow is
rendered with. It accepts snake_case field names as well as the camelCase
attribute names used by toolkit layout files:

    >>> config = ShadowConfig.from_dict({'blurRadius': 12, 'blurType': 1})
    >>> config.blur_radius
    12
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .blur_strategy import BlurType, MAX_BLUR_RADIUS, MIN_BLUR_RADIUS, clamp_platform_radius
from .exceptions import InvalidConfig
from .settings import settings


def _parse_blur_type(value: Any) -> BlurType:
    """Accepts a BlurType, its numeric id or its name."""
    if isinstance(value, BlurType):
        return value
    if isinstance(value, str) and not value.isdigit():
        try:
            return BlurType[value.upper()]
        except KeyError:
            raise InvalidConfig(f"Unknown blur type: {value}") from None
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        return BlurType.from_id(int(value))
    raise InvalidConfig(f"Invalid blur type: {value!r}")


def _exact_int(value: Any) -> Optional[int]:
    """Returns value as int if it denotes a whole number, None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


class ShadowConfig(BaseModel):
    """
    Immutable shadow options.

    For the PLATFORM_NATIVE blur the radius is clamped to
    [MIN_BLUR_RADIUS, MAX_BLUR_RADIUS] when the config is created, the STACK
    blur has no upper limit.

    Raises InvalidConfig for a non-positive downscale rate or blur radius,
    an alpha percentage outside [0, 100] or negative offsets.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )

    MIN_BLUR_RADIUS: ClassVar[int] = MIN_BLUR_RADIUS
    MAX_BLUR_RADIUS: ClassVar[int] = MAX_BLUR_RADIUS

    blur_radius: int = Field(
        default_factory=lambda: settings.DEFAULT_BLUR_RADIUS, alias='blurRadius')
    downscale_rate: int = Field(
        default_factory=lambda: settings.DEFAULT_DOWNSCALE_RATE, alias='downscaleRate')
    alpha_percent: int = Field(
        default_factory=lambda: settings.DEFAULT_ALPHA_PERCENT, alias='alphaPercent')
    left_offset: int = Field(
        default_factory=lambda: settings.DEFAULT_OFFSET, alias='leftOffset')
    right_offset: int = Field(
        default_factory=lambda: settings.DEFAULT_OFFSET, alias='rightOffset')
    top_offset: int = Field(
        default_factory=lambda: settings.DEFAULT_OFFSET, alias='topOffset')
    bottom_offset: int = Field(
        default_factory=lambda: settings.DEFAULT_OFFSET, alias='bottomOffset')
    blur_type: BlurType = Field(
        default_factory=lambda: BlurType.from_id(settings.DEFAULT_BLUR_TYPE), alias='blurType')

    @model_validator(mode='before')
    @classmethod
    def _clamp_blur_radius(cls, data: Any) -> Any:
        """Clamp the radius for the platform blur before it is validated."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        type_key = 'blurType' if 'blurType' in data else 'blur_type'
        blur_type = _parse_blur_type(
            data.get(type_key, settings.DEFAULT_BLUR_TYPE))
        data[type_key] = blur_type

        if blur_type == BlurType.PLATFORM_NATIVE:
            radius_key = 'blurRadius' if 'blurRadius' in data else 'blur_radius'
            radius = _exact_int(data.get(radius_key, settings.DEFAULT_BLUR_RADIUS))
            # anything but a whole number is left to field validation
            if radius is not None:
                data[radius_key] = clamp_platform_radius(radius)
        return data

    @field_validator('blur_type', mode='before')
    @classmethod
    def _validate_blur_type(cls, value: Any) -> BlurType:
        return _parse_blur_type(value)

    @model_validator(mode='after')
    def _check_ranges(self) -> 'ShadowConfig':
        if self.downscale_rate <= 0:
            raise InvalidConfig(
                f"DownscaleRate must be > 0, current downscaleRate: {self.downscale_rate}")
        if self.blur_radius <= 0:
            raise InvalidConfig(
                f"ShadowBlurRadius must be > 0, current shadowBlurRadius: {self.blur_radius}")
        if not 0 <= self.alpha_percent <= 100:
            raise InvalidConfig(
                f"AlphaPercent must be within [0, 100], current alphaPercent: {self.alpha_percent}")
        offsets = (self.left_offset, self.right_offset, self.top_offset, self.bottom_offset)
        if min(offsets) < 0:
            raise InvalidConfig(f"Shadow offsets must be >= 0, got {offsets}")
        return self

    @property
    def paint_alpha(self) -> int:
        """Alpha (0-255) the shadow is composited with."""
        return int(self.alpha_percent / 100 * 255)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a dict with camelCase keys."""
        return self.model_dump(by_alias=True, mode='json')

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ShadowConfig':
        """Create a config from camelCase or snake_case options."""
        return cls.model_validate(data)
