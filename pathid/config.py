"""Configuration classes for pathid components."""

from dataclasses import dataclass

from pathid.types.base import DEFAULT_WIDTH, PathOverflowError


@dataclass
class CodecConfig:
    """Fixed-width integer arithmetic settings for the codec."""

    # Width in bits of every identifier entry (unsigned)
    width: int = DEFAULT_WIDTH

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValueError(f"width must be an integer, got {self.width!r}")
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")

    @property
    def max_value(self) -> int:
        """Largest value representable at the configured width."""
        return (1 << self.width) - 1

    def check(self, value: int) -> int:
        """Return ``value`` if it fits the configured width, else raise."""
        if value < 0 or value > self.max_value:
            raise PathOverflowError(self.width, value)
        return value


# Global configuration instance
CODEC_CONFIG = CodecConfig()
