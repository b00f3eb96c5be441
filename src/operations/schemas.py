"""
Parameter schemas for every operation.

The schemas take the raw values a command line or configuration file
provides (channel names, hex colors, key tokens, flat threshold lists),
validate them with the :mod:`parsers` functions and build the matching
:class:`~mutations.base.ImageMutation`. Invalid configuration is rejected
while validating, before any image is read.
"""

from dataclasses import fields
from typing import Annotated, Any, Literal, Mapping

from pydantic import BeforeValidator, Field, TypeAdapter, field_validator
from returns.result import safe

from container_models.base import RGB, Pixel
from container_models.channels import ChannelSelector
from container_models.predicates import KeyPredicate, ThresholdRange
from models.base import BaseModelConfig
from models.enums import Direction, FilterMode, SortKey
from mutations import ChannelOperation, GlowBloom, PixelSort, ThresholdFilter
from mutations.base import ImageMutation
from mutations.operands import ConstantOperand
from mutations.operators import OPERATORS, Operator
from parsers import (
    hex_to_rgb,
    parse_channel_selector,
    parse_color,
    parse_direction,
    parse_filter_mode,
    parse_rgba,
    parse_sort_key,
    parse_threshold_ranges,
)
from settings import get_settings
from utils.constants import CHANNEL_MAX, MAX_SHIFT_BITS
from utils.logger import log_railway_function


def _selector_or_none(value: Any) -> ChannelSelector | None:
    if value is None or isinstance(value, ChannelSelector):
        return value
    if isinstance(value, str):
        value = [token for token in value.replace(",", " ").split() if token]
    return parse_channel_selector(value)


def _color_or_none(value: Any) -> RGB | None:
    if value is None or isinstance(value, RGB):
        return value
    return parse_color(value)


def _pixel(value: Any) -> Pixel:
    if isinstance(value, Pixel):
        return value
    return parse_rgba(value)


def _key(value: Any) -> SortKey:
    return value if isinstance(value, SortKey) else parse_sort_key(value)


def _ranges(value: Any) -> tuple[ThresholdRange, ...]:
    if value and all(isinstance(threshold, ThresholdRange) for threshold in value):
        return tuple(value)
    return parse_threshold_ranges(value)


type Selector = Annotated[ChannelSelector | None, BeforeValidator(_selector_or_none)]
type Color = Annotated[RGB | None, BeforeValidator(_color_or_none)]
type Key = Annotated[SortKey, BeforeValidator(_key)]
type Thresholds = Annotated[tuple[ThresholdRange, ...], BeforeValidator(_ranges)]


class OperationParameters(BaseModelConfig):
    """Parameters of a channel operation from the operator catalog."""

    kind: Literal["operation"] = "operation"
    operator: str = Field(
        ...,
        description="Operator name.",
        examples=sorted(OPERATORS),
    )
    lhs: Selector = Field(None, description="Channel names feeding the left operand.")
    rhs: Selector = Field(None, description="Channel names remapping the color.")
    color: Color = Field(
        None,
        description="Constant right operand, hex string or RGB triple. "
        "Defaults to the configured fallback color.",
    )
    raw: bool = Field(False, description="Wrap around instead of clamping.")
    negate: bool = Field(False, description="Complement bitwise results.")
    bits: int = Field(1, ge=0, le=MAX_SHIFT_BITS, description="Bits to shift.")
    intensity: float = Field(1.0, description="Bloom mix intensity.")

    @field_validator("operator", mode="after")
    @classmethod
    def validate_operator(cls, operator: str) -> str:
        """Validate that the operator is part of the catalog."""
        if operator not in OPERATORS:
            raise ValueError(
                f"unsupported operator: {operator}, expected one of {', '.join(sorted(OPERATORS))}"
            )
        return operator

    def build_operator(self) -> Operator:
        """Instantiate the operator with only the scalars it accepts."""
        operator_type = OPERATORS[self.operator]
        return operator_type(
            **{field.name: getattr(self, field.name) for field in fields(operator_type)}
        )

    def to_mutation(self) -> ChannelOperation:
        rhs = None
        if self.color is not None or self.rhs is not None:
            rhs = ConstantOperand(
                self.color or hex_to_rgb(get_settings().fallback_color),
                self.rhs or ChannelSelector.identity(),
            )
        return ChannelOperation(
            self.build_operator(),
            lhs=self.lhs,
            rhs=rhs,
        )


class FilterParameters(BaseModelConfig):
    """Parameters of a threshold filter."""

    kind: Literal["filter"] = "filter"
    mode: Annotated[FilterMode, BeforeValidator(parse_filter_mode)] = Field(
        ..., description="include keeps matching pixels, exclude replaces them."
    )
    key: Key = Field(..., description="Pixel property tested against the thresholds.")
    thresholds: Thresholds = Field(
        ..., description="Flat list of numbers, read pairwise as (minimum, maximum)."
    )
    replacement: Annotated[Pixel, BeforeValidator(_pixel)] = Field(
        Pixel(0, 0, 0, CHANNEL_MAX), description="RGBA value of replaced pixels."
    )
    lhs: Selector = Field(None, description="Channel names feeding the predicate.")

    def to_mutation(self) -> ThresholdFilter:
        return ThresholdFilter(
            KeyPredicate(key=self.key, ranges=self.thresholds),
            mode=self.mode,
            replacement=self.replacement,
            lhs=self.lhs,
        )


class SortParameters(BaseModelConfig):
    """Parameters of a scanline pixel sort."""

    kind: Literal["sort"] = "sort"
    key: Key = Field(..., description="Pixel property used to select and to sort.")
    thresholds: Thresholds = Field(
        ..., description="Flat list of numbers, read pairwise as (minimum, maximum)."
    )
    direction: Annotated[Direction, BeforeValidator(parse_direction)] = Field(
        Direction.HORIZONTAL, description="Sort along rows or along columns."
    )
    reverse: bool = Field(False, description="Sort descending.")

    def to_mutation(self) -> PixelSort:
        return PixelSort(
            KeyPredicate(key=self.key, ranges=self.thresholds),
            direction=self.direction,
            reverse=self.reverse,
        )


class GlowParameters(BaseModelConfig):
    """Parameters of the luminance-masked bloom."""

    kind: Literal["glow"] = "glow"
    threshold: float = Field(..., ge=0, le=CHANNEL_MAX, description="Luminance threshold.")
    radius: float = Field(..., ge=0, description="Blur radius in pixels.")
    intensity: float = Field(1.0, ge=0, description="Weight of the blurred bright pass.")

    def to_mutation(self) -> GlowBloom:
        return GlowBloom(
            threshold=self.threshold, radius=self.radius, intensity=self.intensity
        )


type Parameters = Annotated[
    OperationParameters | FilterParameters | SortParameters | GlowParameters,
    Field(discriminator="kind"),
]

_PARAMETERS: TypeAdapter[Parameters] = TypeAdapter(Parameters)


@log_railway_function(
    "Failed to parse operation parameters",
    "Successfully parsed operation parameters",
)
@safe
def parse_operation(parameters: Mapping[str, Any]) -> ImageMutation:
    """
    Validate raw parameters and build the mutation they describe.

    The ``kind`` key selects the schema: ``operation``, ``filter``, ``sort``
    or ``glow``.

    :param parameters: Raw parameter mapping.
    :returns: A `Result` with the configured mutation, or a `Failure` with
        the `ValidationError` describing every invalid value.
    """
    return _PARAMETERS.validate_python(parameters).to_mutation()
