class ConfigurationError(ValueError):
    """Raised when operation parameters cannot be parsed or validated."""

    def __init__(self, message: str):
        super().__init__(message)


class ChannelSelectorError(ConfigurationError):
    """Raised when a channel selector does not consist of three known channel names."""


class ColorParseError(ConfigurationError):
    """Raised when a color value is neither an RGB triple nor a hex string."""


class SortKeyError(ConfigurationError):
    """Raised when a sort or filter key token is not recognized."""


class FilterModeError(ConfigurationError):
    """Raised when a filter mode token is not recognized."""


class DirectionError(ConfigurationError):
    """Raised when a sort direction token is not recognized."""


class ThresholdParseError(ConfigurationError):
    """Raised when threshold values cannot be turned into ranges."""


class ImageShapeMismatchError(Exception):
    """Raised when two images (or an image and a mask) differ in shape."""

    def __init__(self, message: str):
        super().__init__(message)
