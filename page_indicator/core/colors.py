"""Color value type used for dot tints."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA color with float components in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a ``#RRGGBB`` or ``#RRGGBBAA`` string.

        Args:
            value: Hex color, with or without the leading ``#``.

        Returns:
            The parsed Color.

        Raises:
            ValueError: If the string is not 6 or 8 hex digits.
        """
        digits = value.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected 6 or 8 hex digits, got: {value!r}")
        channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
        return cls(*channels)

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """Return the color as 8-bit channels, as Pillow expects."""
        return (
            round(self.red * 255),
            round(self.green * 255),
            round(self.blue * 255),
            round(self.alpha * 255),
        )

    def to_hex(self) -> str:
        r, g, b, a = self.to_rgba8()
        if a == 255:
            return f"#{r:02X}{g:02X}{b:02X}"
        return f"#{r:02X}{g:02X}{b:02X}{a:02X}"


DEFAULT_DOT_COLOR = Color.from_hex("#AAAAAA")
DEFAULT_SELECTED_COLOR = Color.from_hex("#3DACF7")
