"""Token types produced by the pattern parser.

A parsed pattern is a tuple of tokens in source order. Tokens are frozen
and own no external state, so a token sequence can be cached and shared.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeAlias

from cldrdates.enums import FieldKind

__all__ = ["FieldToken", "LiteralToken", "Token"]


@dataclass(frozen=True, slots=True)
class FieldToken:
    """A run of one repeated pattern letter.

    Attributes:
        kind: Date field the letter selects
        width: Run length, clamped to 1-5
        letter: The pattern letter as written (for diagnostics)
    """

    kind: FieldKind
    width: int
    letter: str = ""

    def __post_init__(self) -> None:
        """Validate width.

        Raises:
            ValueError: If width is not positive
        """
        if self.width < 1:
            msg = f"FieldToken.width must be >= 1, got {self.width}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LiteralToken:
    """Text copied to the output unchanged.

    Attributes:
        text: Literal characters (quotes already unescaped)
    """

    text: str


Token: TypeAlias = FieldToken | LiteralToken
