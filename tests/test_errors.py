import pytest

from rustdrill.drills.errors import (
    CreationError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    parse_pos_nonzero,
    remaining_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_item_quantity_too_large():
    with pytest.raises(ValueError) as info:
        total_cost("99999999999")
    assert str(info.value) == "number too large to fit in target type"


def test_cost_overflow():
    with pytest.raises(OverflowError):
        total_cost("2147483647")


def test_remaining_tokens_after_purchase(capsys):
    assert remaining_tokens(100, "8") == 59
    assert capsys.readouterr().out == "You now have 59 tokens.\n"


def test_remaining_tokens_cannot_afford(capsys):
    assert remaining_tokens(100, "100") == 100
    assert capsys.readouterr().out == "You can't afford that many!\n"


def test_remaining_tokens_bad_input_costs_minus_one(capsys):
    assert remaining_tokens(100, "eight") == 101
    assert capsys.readouterr().out == "You now have 101 tokens.\n"


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert str(negative.value) == "number is negative"
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert str(zero.value) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not isinstance(info.value.cause, CreationError)
    assert isinstance(info.value.cause, ValueError)
    assert str(info.value.cause) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.cause, CreationError)
    assert str(info.value.cause) == "number is negative"


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert isinstance(info.value.cause, CreationError)
    assert str(info.value.cause) == "number is zero"


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)


def test_positive_with_plus_sign():
    assert parse_pos_nonzero("+7") == PositiveNonzeroInteger(7)