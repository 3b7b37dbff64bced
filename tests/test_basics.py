from unittest import mock

import pytest

from tinkerbox import basics


def test_ten_is_bigger_than_eight():
    assert basics.bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert basics.bigger(32, 42) == 42


def test_equal_numbers():
    assert basics.bigger(42, 42) == 42


@pytest.mark.parametrize(
    "word, expected",
    [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")],
)
def test_foo_if_fizz(word, expected):
    assert basics.foo_if_fizz(word) == expected


@pytest.mark.parametrize(
    "animal, habitat",
    [
        ("gopher", "Burrow"),
        ("snake", "Desert"),
        ("crab", "Beach"),
        ("dinosaur", "Unknown"),
    ],
)
def test_animal_habitat(animal, habitat):
    assert basics.animal_habitat(animal) == habitat


@pytest.mark.parametrize(
    "quantity, price", [(35, 70), (40, 80), (41, 41), (65, 65)]
)
def test_calculate_price_of_apples(quantity, price):
    assert basics.calculate_price_of_apples(quantity) == price


def test_sale_price_odd_and_even():
    assert basics.sale_price(51) == 48
    assert basics.sale_price(50) == 40


def test_is_even():
    assert basics.is_even(4) is True
    assert basics.is_even(7) is False
    assert basics.is_even(-3) is False


def test_square():
    assert basics.square(3) == 9
    assert basics.square(-4) == 16


def test_ring_calls():
    assert basics.ring_calls(3) == [
        "Ring! Call number 1",
        "Ring! Call number 2",
        "Ring! Call number 3",
    ]
    assert basics.ring_calls(0) == []


@pytest.mark.parametrize(
    "char, expected",
    [
        ("C", "Alphabetical!"),
        ("é", "Alphabetical!"),
        ("7", "Numerical!"),
        ("%", "Neither alphabetic nor numeric!"),
    ],
)
def test_describe_char(char, expected):
    assert basics.describe_char(char) == expected


@pytest.mark.parametrize("text", ["", "ab"])
def test_describe_char_rejects_non_single(text):
    with pytest.raises(ValueError):
        basics.describe_char(text)


def test_make_sausage():
    assert basics.make_sausage() == "sausage!"


def test_favorite_snacks():
    assert basics.favorite_snacks() == ("Pear", "Cucumber")


@mock.patch("time.time", return_value=1000.7)
def test_seconds_since_epoch(_time):
    assert basics.seconds_since_epoch() == 1000


@mock.patch("time.time", return_value=-5.0)
def test_seconds_since_epoch_before_epoch(_time):
    with pytest.raises(RuntimeError):
        basics.seconds_since_epoch()


def test_welcome_message_greets():
    message = basics.welcome_message()
    assert message.splitlines()[0].strip() == "Welcome to..."
    assert "Good luck!" in message


@mock.patch("time.time", return_value=42.0)
def test_main_prints_walkthrough(_time, capsys):
    assert basics.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Hello world!" in lines
    assert "x has the value 5" in lines
    assert "x is ten!" in lines
    assert "Spell a number: T-H-R-E-E" in lines
    assert "Number plus two is: 5" in lines
    assert "Your sale price is 48" in lines
    assert "The square of 3 is 9" in lines
    assert "Number: 10" in lines
    assert "Good evening!" not in lines
    assert "Wow, that's a big array!" in lines
    assert "Furry McFurson is 3.5 years old" in lines
    assert "favorite snacks: Pear and Cucumber" in lines
    assert "1970-01-01 00:00:00 UTC was 42 seconds ago!" in lines
    assert lines.count("Ring! Call number 3") == 2
    assert "Ring! Call number 5" in lines