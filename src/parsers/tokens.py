"""
Parsers for the textual configuration of operations.

Every function raises a :class:`~exceptions.ConfigurationError` subclass on
invalid input, so configuration is rejected before any pixel is processed.
"""

from collections.abc import Iterable, Sequence
from typing import Final

from loguru import logger

from container_models.channels import ChannelSelector
from container_models.predicates import ThresholdRange
from exceptions import (
    ChannelSelectorError,
    DirectionError,
    FilterModeError,
    SortKeyError,
    ThresholdParseError,
)
from models.enums import Channel, Direction, FilterMode, SortKey
from settings import get_settings

_SORT_KEYS: Final[dict[str, SortKey]] = {
    token: key for key in SortKey for token in (key.value, key.short)
}
_DIRECTIONS: Final[dict[str, Direction]] = {
    token: direction
    for direction in Direction
    for token in (direction.value, direction.short)
}


def _normalize(token: str) -> str:
    return token.strip().lower()


def parse_channel_selector(
    tokens: Sequence[str], strict: bool | None = None
) -> ChannelSelector:
    """
    Build a channel selector from exactly three channel names.

    Names are ``r``, ``g`` and ``b``, case-insensitive. The i-th name picks
    the source channel for destination channel i.

    :param tokens: The three channel names.
    :param strict: Reject unknown names. Defaults to the
        `strict_channel_selectors` setting. When not strict, unknown names
        select a channel of zeros.
    :raises ChannelSelectorError: If there are not exactly three names, or a
        name is unknown in strict mode.
    """
    if isinstance(tokens, str) or len(tokens) != 3:
        raise ChannelSelectorError(
            f"A channel selector needs exactly 3 channel names, got {tokens!r}"
        )
    if strict is None:
        strict = get_settings().strict_channel_selectors

    channels: list[Channel | None] = []
    for token in tokens:
        try:
            channels.append(Channel(_normalize(token)))
        except ValueError:
            if strict:
                raise ChannelSelectorError(
                    f"Invalid channel name: {token!r}, expected one of r, g, b"
                ) from None
            logger.warning(f"Unknown channel name {token!r} resolves to zero")
            channels.append(None)
    return ChannelSelector.from_channels(channels)


def parse_sort_key(token: str) -> SortKey:
    """
    Parse a sort or filter key from its long or one-letter form.

    :raises SortKeyError: If the token is not a known key.
    """
    try:
        return _SORT_KEYS[_normalize(token)]
    except KeyError:
        raise SortKeyError(f"Invalid sort key: {token!r}") from None


def parse_filter_mode(token: str) -> FilterMode:
    """
    Parse ``include`` or ``exclude``.

    :raises FilterModeError: If the token is not a filter mode.
    """
    try:
        return FilterMode(_normalize(token))
    except ValueError:
        raise FilterModeError(f"Invalid filter mode: {token!r}") from None


def parse_direction(token: str) -> Direction:
    """
    Parse ``horizontal``/``h`` or ``vertical``/``v``.

    :raises DirectionError: If the token is not a direction.
    """
    try:
        return _DIRECTIONS[_normalize(token)]
    except KeyError:
        raise DirectionError(f"Invalid direction: {token!r}") from None


def _to_float(value: float | str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ThresholdParseError(f"Invalid threshold value: {value!r}") from None


def parse_threshold_ranges(values: Iterable[float | str]) -> tuple[ThresholdRange, ...]:
    """
    Group a flat list of numbers into ``(minimum, maximum)`` ranges.

    A trailing value without partner is dropped with a warning.

    :raises ThresholdParseError: If a value is not numeric or no complete
        range is given.
    """
    numbers = [_to_float(value) for value in values]
    if len(numbers) % 2:
        logger.warning(
            f"Ignoring trailing threshold value {numbers[-1]}, thresholds come in pairs"
        )
        numbers = numbers[:-1]
    if not numbers:
        raise ThresholdParseError("At least one threshold range (minimum, maximum) is required")
    return tuple(
        ThresholdRange(minimum, maximum)
        for minimum, maximum in zip(numbers[::2], numbers[1::2])
    )
