"""CLDR date pattern parser.

Tokenizes a CLDR date pattern such as ``EEEE, d 'de' MMMM 'de' y`` into
field tokens and literal text.

CLDR Pattern Syntax (supported subset):
    Letters | Field   | Example
    --------|---------|--------
    G..GGGGG| Era     | AD, Anno Domini, A
    y..yyyyy| Year    | 2016, 16, 02016
    M..MMMMM| Month   | 7, 07, Jul, July, J
    d, dd   | Day     | 1, 01
    E..EEEEE| Weekday | Mon, Monday, M

QUOTE ESCAPING (CLDR):
    - Single quotes delimit literal text: 'de' -> "de"
    - Two single quotes produce one quote, inside or outside a quoted run
    - Example: "d 'o''clock'" -> d, " ", "o'clock"

Any other ASCII letter is reserved by TR35 and rejected. All other
characters (punctuation, spaces, digits, non-ASCII letters such as 年)
are literals.

Thread-safe. Pure function of the pattern text.

Python 3.13+. Zero external dependencies.
"""

from cldrdates.constants import FIELD_LETTERS, MAX_FIELD_WIDTH, QUOTE
from cldrdates.diagnostics import ErrorTemplate, MalformedPatternError, UnsupportedPatternFieldError

from .tokens import FieldToken, LiteralToken, Token

__all__ = ["PatternParser", "parse_pattern"]


def _is_pattern_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def parse_pattern(pattern: str) -> tuple[Token, ...]:
    """Parse a CLDR date pattern into tokens.

    Single pass over the pattern; the whole input is consumed or an
    error is raised.

    Args:
        pattern: CLDR date pattern text

    Returns:
        Tuple of FieldToken and LiteralToken in source order

    Raises:
        UnsupportedPatternFieldError: Unquoted ASCII letter outside G, y, M, d, E
        MalformedPatternError: Quoted literal without a closing quote

    Examples:
        >>> parse_pattern("d.MM.y")
        (FieldToken(kind=<FieldKind.DAY: 'day'>, width=1, letter='d'), LiteralToken(text='.'), \
FieldToken(kind=<FieldKind.MONTH: 'month'>, width=2, letter='M'), LiteralToken(text='.'), \
FieldToken(kind=<FieldKind.YEAR: 'year'>, width=1, letter='y'))

        >>> parse_pattern("'o''clock'")
        (LiteralToken(text="o'clock"),)
    """
    tokens: list[Token] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == QUOTE:
            # '' outside a quoted run is a literal quote
            if i + 1 < n and pattern[i + 1] == QUOTE:
                tokens.append(LiteralToken(QUOTE))
                i += 2
                continue

            start = i
            i += 1
            literal_chars: list[str] = []
            closed = False
            while i < n:
                if pattern[i] == QUOTE:
                    if i + 1 < n and pattern[i + 1] == QUOTE:
                        literal_chars.append(QUOTE)
                        i += 2
                        continue
                    i += 1
                    closed = True
                    break
                literal_chars.append(pattern[i])
                i += 1

            if not closed:
                diagnostic = ErrorTemplate.unterminated_quote(pattern, start)
                raise MalformedPatternError(diagnostic, pattern=pattern, position=start)
            tokens.append(LiteralToken("".join(literal_chars)))
            continue

        if _is_pattern_letter(char):
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            kind = FIELD_LETTERS.get(char)
            if kind is None:
                diagnostic = ErrorTemplate.unsupported_pattern_field(char, pattern, i)
                raise UnsupportedPatternFieldError(
                    diagnostic, letter=char, width=j - i, pattern=pattern, position=i
                )
            tokens.append(FieldToken(kind, min(j - i, MAX_FIELD_WIDTH), char))
            i = j
            continue

        tokens.append(LiteralToken(char))
        i += 1

    return tuple(tokens)


class PatternParser:
    """Object interface to parse_pattern().

    Stateless; one instance can be shared between threads.

    Example:
        >>> PatternParser().parse("y")
        (FieldToken(kind=<FieldKind.YEAR: 'year'>, width=1, letter='y'),)
    """

    __slots__ = ()

    def parse(self, pattern: str) -> tuple[Token, ...]:
        """Parse a CLDR date pattern into tokens. See parse_pattern()."""
        return parse_pattern(pattern)
