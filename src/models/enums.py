from enum import StrEnum, auto


class Channel(StrEnum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"

    @property
    def index(self) -> int:
        """Position of the channel in an RGBA pixel."""
        return "rgb".index(self.value)


class SortKey(StrEnum):
    LUMINANCE = auto()
    RED = auto()
    GREEN = auto()
    BLUE = auto()
    HUE = auto()
    SATURATION = auto()
    VALUE = auto()

    @property
    def short(self) -> str:
        return self.value[0]


class FilterMode(StrEnum):
    INCLUDE = auto()
    EXCLUDE = auto()


class Direction(StrEnum):
    HORIZONTAL = auto()
    VERTICAL = auto()

    @property
    def short(self) -> str:
        return self.value[0]
