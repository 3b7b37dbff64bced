import dataclasses

import pytest

from tinkerbox.records import (
    ChangeColor,
    Color,
    Echo,
    Move,
    Order,
    Package,
    Point,
    Quit,
    Resize,
    State,
    UnitStruct,
    Wrapper,
    create_order_template,
    widened_numbers,
)


def test_regular_structs():
    green = Color(red=0, green=255, blue=0)
    assert green.red == 0
    assert green.green == 255
    assert green.blue == 0


def test_tuple_structs():
    green = Color(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    unit_struct = UnitStruct()
    message = f"{unit_struct!r}s are fun!"
    assert message == "UnitStructs are fun!"


def test_your_order():
    order_template = create_order_template()
    your_order = dataclasses.replace(order_template, name="Hacker in Rust", count=1)

    assert your_order.name == "Hacker in Rust"
    assert your_order.year == order_template.year
    assert your_order.made_by_phone == order_template.made_by_phone
    assert your_order.made_by_mobile == order_template.made_by_mobile
    assert your_order.made_by_email == order_template.made_by_email
    assert your_order.item_number == order_template.item_number
    assert your_order.count == 1


def test_order_template_values():
    assert create_order_template() == Order("Bob", 2019, False, False, True, 123, 0)


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="below 10 grams"):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international()


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert not package.is_international()


def test_calculate_transport_fees():
    cents_per_gram = 3
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_match_message_call():
    state = State(
        width=0,
        height=0,
        position=Point(0, 0),
        message="hello world",
        color=(0, 0, 0),
        quit_requested=False,
    )

    state.process(Resize(width=10, height=30))
    state.process(Move(Point(10, 15)))
    state.process(Echo("Hello world!"))
    state.process(ChangeColor(255, 0, 255))
    state.process(Quit())

    assert state.width == 10
    assert state.height == 30
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.message == "Hello world!"
    assert state.color == (255, 0, 255)
    assert state.quit_requested is True


def test_process_unknown_message():
    with pytest.raises(TypeError):
        State().process("jump")


def test_change_color_out_of_range():
    with pytest.raises(ValueError):
        ChangeColor(256, 0, 0)


def test_message_repr_shows_fields():
    assert repr(Resize(width=10, height=30)) == "Resize(width=10, height=30)"


def test_widened_numbers():
    assert widened_numbers() == [42.0, -1.0]


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"