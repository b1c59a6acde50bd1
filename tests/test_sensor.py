import pytest

from sensorlink.sensor import DummySensor, celsius_to_fahrenheit, reading_to_celsius


def test_dummy_sensor_default_reading():
    assert DummySensor().read() == 650


def test_dummy_sensor_custom_reading():
    assert DummySensor(value=400).read() == 400


def test_reference_resistance_gives_reference_temperature():
    # 1023 / 511.5 - 1 == 1, so R == R0 and the result is 298.15 K.
    assert reading_to_celsius(511.5) == pytest.approx(298.15 - 273.15)


def test_celsius_increases_with_reading():
    readings = [100, 300, 500, 650, 900]
    temps = [reading_to_celsius(r) for r in readings]
    assert temps == sorted(temps)
    assert len(set(temps)) == len(temps)


@pytest.mark.parametrize("reading", [0, -5, 1023, 2000])
def test_out_of_range_reading_raises(reading):
    with pytest.raises(ValueError):
        reading_to_celsius(reading)


def test_fahrenheit_freezing_and_boiling():
    assert celsius_to_fahrenheit(0) == 32
    assert celsius_to_fahrenheit(100) == 212


def test_fahrenheit_equals_celsius_at_minus_forty():
    assert celsius_to_fahrenheit(-40) == pytest.approx(-40)


def test_fahrenheit_is_linear():
    a = celsius_to_fahrenheit(10)
    b = celsius_to_fahrenheit(20)
    c = celsius_to_fahrenheit(30)
    assert b - a == pytest.approx(c - b)
    assert b - a == pytest.approx(18)