"""Records and tagged messages: colours, orders, packages and a message-driven state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, NamedTuple, TypeVar, Union

T = TypeVar("T")

_MIN_PACKAGE_GRAMS = 10


class Color(NamedTuple):
    """An RGB colour, reachable by field name or by position."""

    red: int
    green: int
    blue: int


class UnitStruct:
    """A value that carries no data."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < _MIN_PACKAGE_GRAMS:
            raise ValueError("Can't ship a package with weight below 10 grams")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Return the shipping fee in cents."""
        return self.weight_in_grams * cents_per_gram


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


@dataclass(frozen=True)
class Quit:
    pass


Message = Union[Resize, Move, Echo, ChangeColor, Quit]


@dataclass
class State:
    """Screen state that changes in response to messages."""

    width: int = 0
    height: int = 0
    position: Point = field(default_factory=lambda: Point(0, 0))
    message: str = ""
    color: tuple[int, int, int] = (0, 0, 0)
    quit_requested: bool = False

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def move_position(self, point: Point) -> None:
        self.position = point

    def echo(self, text: str) -> None:
        self.message = text

    def change_color(self, red: int, green: int, blue: int) -> None:
        self.color = (red, green, blue)

    def quit(self) -> None:
        self.quit_requested = True

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Resize(width=width, height=height):
                self.resize(width, height)
            case Move(point=point):
                self.move_position(point)
            case Echo(text=text):
                self.echo(text)
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color(red, green, blue)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")


def widened_numbers() -> list[float]:
    """Return an unsigned and a signed byte widened into one float list."""
    unsigned_byte = 42
    signed_byte = -1
    return [float(unsigned_byte), float(signed_byte)]


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Hold a single value of any type."""

    value: T