"""
Unit tests for the conversion session
"""

import pytest

from unit_converter import (
    Category,
    ConversionRequest,
    ConversionSession,
    ParseError,
    UnknownCategoryError,
    UnknownUnitError,
    list_units,
)


def test_session_defaults(session):
    assert session.category is Category.LENGTH
    assert session.input_unit == "Meters"
    assert session.output_unit == "Miles"
    assert session.raw_value == ""
    assert session.units == list_units(Category.LENGTH)


@pytest.mark.parametrize("category", list(Category))
def test_category_change_resets_units_and_value(session, category):
    session.set_value("42")
    session.set_category(category)
    units = list_units(category)
    assert session.input_unit == units[0]
    assert session.output_unit == units[-1]
    assert session.raw_value == ""
    assert session.input_unit in session.units
    assert session.output_unit in session.units


def test_category_change_by_name(session):
    session.set_category("temperature")
    assert session.category is Category.TEMPERATURE
    assert (session.input_unit, session.output_unit) == ("Celsius", "Kelvin")


def test_unknown_category_keeps_state(session):
    session.set_value("5")
    with pytest.raises(UnknownCategoryError):
        session.set_category("Mass")
    assert session.category is Category.LENGTH
    assert session.raw_value == "5"


def test_set_units_canonicalises(session):
    session.set_input_unit("kilometers")
    session.set_output_unit(" FEET ")
    assert session.input_unit == "Kilometers"
    assert session.output_unit == "Feet"


def test_set_unit_outside_category(session):
    with pytest.raises(UnknownUnitError):
        session.set_input_unit("Celsius")
    assert session.input_unit == "Meters"


def test_result(session):
    session.set_category(Category.TIME)
    session.set_input_unit("Days")
    session.set_output_unit("Hours")
    session.set_value("2")
    assert session.result() == 48


def test_empty_value_reads_as_zero(session):
    session.set_category(Category.TEMPERATURE)
    session.set_output_unit("Fahrenheit")
    assert session.result() == 32


def test_blank_value_still_converts(lenient_session):
    lenient_session.set_category(Category.TEMPERATURE)
    lenient_session.set_value("   ")
    assert lenient_session.result() == pytest.approx(273.15)


def test_unparseable_value_strict(session):
    session.set_value("twelve")
    with pytest.raises(ParseError):
        session.result()


def test_unparseable_value_lenient(lenient_session):
    lenient_session.set_value("twelve")
    assert lenient_session.result() == 0.0


def test_swap_units(session):
    session.set_value("1")
    session.swap_units()
    assert (session.input_unit, session.output_unit) == ("Miles", "Meters")
    assert session.result() == pytest.approx(1609.34)


def test_request_snapshot(session):
    session.set_category(Category.VOLUME)
    session.set_value("3")
    req = session.request()
    assert req == ConversionRequest(Category.VOLUME, "Milliliters", "Gallons", "3")
    session.set_value("4")
    assert req.raw_value == "3"


def test_sessions_are_independent():
    a = ConversionSession()
    b = ConversionSession(Category.TIME)
    a.set_category(Category.VOLUME)
    assert b.category is Category.TIME
    assert b.input_unit == "Seconds"
