import pytest

from drillbook.shapes import (
    DEFAULT_NAMES,
    CorruptedMapError,
    Shape,
    describe,
    main,
    shape_by_name,
    shape_name,
)

GERMAN = {Shape.CIRCLE: "Kreis", Shape.SQUARE: "Quadrat", Shape.RECTANGLE: "Rechteck"}


@pytest.mark.parametrize("shape", list(Shape))
def test_name_round_trip(shape):
    name = shape_name(shape)
    assert name == DEFAULT_NAMES[shape]
    assert shape_by_name(name) is shape
    assert shape_by_name(name.upper()) is shape
    assert shape_name(shape.value) == name


def test_mixed_case_lookup():
    assert shape_by_name("rEcTaNgLe") is Shape.RECTANGLE


@pytest.mark.parametrize("bad", [7, -1, "x"])
def test_unknown_number(bad):
    with pytest.raises(LookupError):
        shape_name(bad)


@pytest.mark.parametrize("bad", ["Rect", "", "hexagon", "Circles"])
def test_unknown_name(bad):
    with pytest.raises(LookupError):
        shape_by_name(bad)


def test_corrupted_map():
    with pytest.raises(CorruptedMapError):
        shape_name(Shape.CIRCLE, {Shape.CIRCLE: "Circle"})


def test_custom_names():
    assert shape_name(Shape.SQUARE, GERMAN) == "Quadrat"
    assert shape_by_name("kreis", GERMAN) is Shape.CIRCLE


@pytest.mark.parametrize(
    "query, answer",
    [
        ("2", "Shape name: Rectangle"),
        ("0", "Shape name: Circle"),
        ("1abc", "Shape name: Square"),
        ("circle", "Shape name: Circle"),
        ("hexagon", "Undefined shape!"),
        ("5", "Undefined shape!"),
        ("-1", "Undefined shape!"),
    ],
)
def test_describe(query, answer):
    assert describe(query) == answer


def test_describe_by_custom_name_reports_default_name():
    assert describe("rechteck", GERMAN) == "Shape name: Rectangle"


def test_describe_corrupted_map_by_number():
    assert describe("1", {Shape.SQUARE: "Square"}) == "Corrupted map!"


def test_main_prints_answer(capsys):
    assert main(["square"]) == 0
    assert capsys.readouterr().out == "Shape name: Square\n"