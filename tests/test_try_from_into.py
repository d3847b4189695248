import pytest

from rustdrill.drills.try_from_into import (
    BadLength,
    Color,
    IntConversion,
    color_from_array,
    color_from_slice,
    color_from_tuple,
)


def test_tuple_out_of_range_positive():
    with pytest.raises(IntConversion):
        color_from_tuple((256, 1000, 10000))


def test_tuple_out_of_range_negative():
    with pytest.raises(IntConversion):
        color_from_tuple((-1, -10, -256))


def test_tuple_sum():
    with pytest.raises(IntConversion):
        color_from_tuple((-1, 255, 255))


def test_tuple_correct():
    assert color_from_tuple((183, 65, 14)) == Color(red=183, green=65, blue=14)


def test_array_out_of_range_positive():
    with pytest.raises(IntConversion):
        color_from_array([1000, 10000, 256])


def test_array_out_of_range_negative():
    with pytest.raises(IntConversion):
        color_from_array([-10, -256, -1])


def test_array_sum():
    with pytest.raises(IntConversion):
        color_from_array([-1, 255, 255])


def test_array_correct():
    assert color_from_array([183, 65, 14]) == Color(red=183, green=65, blue=14)


def test_slice_out_of_range_positive():
    with pytest.raises(IntConversion):
        color_from_slice([10000, 256, 1000])


def test_slice_out_of_range_negative():
    with pytest.raises(IntConversion):
        color_from_slice([-256, -1, -10])


def test_slice_sum():
    with pytest.raises(IntConversion):
        color_from_slice([-1, 255, 255])


def test_slice_correct():
    assert color_from_slice([183, 65, 14]) == Color(red=183, green=65, blue=14)


def test_slice_excess_length():
    with pytest.raises(BadLength):
        color_from_slice([0, 0, 0, 0])


def test_slice_insufficient_length():
    with pytest.raises(BadLength):
        color_from_slice([0, 0])


def test_slice_checks_range_before_length():
    with pytest.raises(IntConversion):
        color_from_slice([256, 0])


def test_tuple_of_wrong_size_is_rejected():
    with pytest.raises(TypeError):
        color_from_tuple((1, 2))