# tests/model/test_file_position.py
import pytest

from deoptlens.model import FilePosition, Location


def test_text_form_round_trips_with_colons_in_file():
    pos = FilePosition("file:///C:/work/app.js", 12, 4)
    assert str(pos) == "file:///C:/work/app.js:12:4"
    assert FilePosition.parse(str(pos)) == pos


@pytest.mark.parametrize("text", ["", "app.js", "app.js:1", ":1:2", "app.js:x:2"])
def test_invalid_positions(text):
    with pytest.raises(ValueError):
        FilePosition.parse(text)


def test_positions_are_hashable_and_ordered():
    a = FilePosition("/a.js", 1, 9)
    b = FilePosition("/a.js", 2, 1)
    assert sorted([b, a]) == [a, b]
    assert {a: 1}[FilePosition("/a.js", 1, 9)] == 1


def test_location_format():
    loc = Location.at("C:\\work\\app.js", 3, 5)
    assert loc.format(basename=True) == "app.js:3:5"
    assert loc.format(include_position=False, basename=True) == "app.js"
    assert loc.file == "C:\\work\\app.js"
