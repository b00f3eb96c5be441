"""
Operation configuration.

Validates raw operation parameters and turns them into configured
mutations, so a caller can describe a whole edit as plain data::

    sort = parse_operation(
        {"kind": "sort", "key": "h", "thresholds": [30, 90], "direction": "v"}
    ).unwrap()
    result = load_image(path).bind_result(sort)
"""

from .schemas import (
    FilterParameters,
    GlowParameters,
    OperationParameters,
    SortParameters,
    parse_operation,
)

__all__ = [
    "FilterParameters",
    "GlowParameters",
    "OperationParameters",
    "SortParameters",
    "parse_operation",
]
