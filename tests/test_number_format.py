import math

import pytest

from calculator import format_number, parse_number


@pytest.mark.parametrize('value, expected', [
    (10.0, '10'),
    (-3.0, '-3'),
    (0.5, '0.5'),
    (3.75, '3.75'),
    (-0.0, '0'),
    (0.1 + 0.2, '0.30000000000000004'),
    (1e20, '100000000000000000000'),
    (1e21, '1e+21'),
    (1.5e21, '1.5e+21'),
    (0.000001, '0.000001'),
    (1e-7, '1e-7'),
    (-2.5e-8, '-2.5e-8'),
    (123456.789, '123456.789'),
    (math.inf, 'Infinity'),
    (-math.inf, '-Infinity'),
    (math.nan, 'NaN'),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize('text, expected', [
    ('0', 0.0),
    ('42', 42.0),
    ('0.', 0.0),
    ('-9', -9.0),
    ('1e-7', 1e-7),
    ('1e+21', 1e21),
    ('Infinity', math.inf),
    ('-Infinity', -math.inf),
    ('1.5.', 1.5),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize('text', ['NaN', '', 'abc'])
def test_parse_number_nan(text):
    assert math.isnan(parse_number(text))
