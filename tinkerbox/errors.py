"""Error handling: name tags, token purchases and positive non-zero integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a signed decimal integer strictly, within ``low``..``high``."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    if number > high:
        raise ValueError("number too large to fit in target type")
    if number < low:
        raise ValueError("number too small to fit in target type")
    return number


def generate_nametag_text(name: str) -> str:
    """Return the text for a name tag; empty names are refused."""
    if not name:
        raise ValueError("Empty names aren't allowed")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the cost in tokens of buying the typed quantity of items.

    Raises ``ValueError`` when the quantity is not a valid integer.
    """
    quantity = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    cost = _COST_PER_ITEM * quantity + _PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def purchase(tokens: int, user_input: str) -> tuple[int, str]:
    """Try to buy the typed quantity with the given tokens.

    Returns the tokens left and a message for the player.
    """
    cost = total_cost(user_input)
    if cost > tokens:
        return tokens, "You can't afford that many!"
    tokens -= cost
    return tokens, f"You now have {tokens} tokens."


class CreationErrorKind(enum.Enum):
    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """Raised when a number cannot become a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class ParsePosNonzeroError(ValueError):
    """Raised when text cannot be parsed into a positive non-zero integer.

    Exactly one of ``creation`` and ``parse_int`` holds the underlying error.
    """

    def __init__(
        self,
        *,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        if (creation is None) == (parse_int is None):
            raise TypeError("give exactly one of creation or parse_int")
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(creation=err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(parse_int=err)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap a value, refusing negative numbers and zero."""
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> PositiveNonzeroInteger:
        """Parse text, raising ``ParsePosNonzeroError`` on any failure."""
        try:
            number = _parse_int(text, _I64_MIN, _I64_MAX)
        except ValueError as err:
            raise ParsePosNonzeroError.from_parse_int(err) from err
        try:
            return cls.new(number)
        except CreationError as err:
            raise ParsePosNonzeroError.from_creation(err) from err


def parse_positive_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer.

    Parse failures raise ``ValueError``; negative and zero values raise
    ``CreationError``.
    """
    number = _parse_int(text, _I64_MIN, _I64_MAX)
    return PositiveNonzeroInteger.new(number)