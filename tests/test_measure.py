import pytest

from pslib.measure import parse_size, mm, cm, inch, pt, Rectangle

def test_parse_size_names():
    assert parse_size("a4") == (595.0, 842.0)
    assert parse_size("A4 landscape") == (842.0, 595.0)
    assert parse_size("letter portrait") == (612.0, 792.0)

def test_parse_size_numbers():
    assert parse_size((400, 300)) == (400.0, 300.0)
    assert parse_size([10, 20]) == (10.0, 20.0)
    assert parse_size(100) == (100.0, 100.0)

def test_parse_size_errors():
    with pytest.raises(KeyError):
        parse_size("napkin")
    with pytest.raises(TypeError):
        parse_size(None)

def test_units():
    assert inch(1) == 72.0
    assert mm(25.4) == pytest.approx(72.0)
    assert cm(2.54) == pytest.approx(72.0)
    assert pt(12) == 12

def test_rectangle():
    r = Rectangle(10, 20, 30, 40)
    assert r.as_tuple() == (10, 20, 40, 60)
    assert r.center == (25.0, 40.0)
