import pytest

from dsakit.cli import (
    Feedback,
    ascii_code,
    celsius_to_kelvin,
    double_triangle,
    guess_feedback,
    kelvin_to_celsius,
    main,
)


def test_kelvin_offset():
    assert kelvin_to_celsius(274.15) == pytest.approx(0.0)


@pytest.mark.parametrize("value", [-40.0, 0.0, 25.5, 1000.0])
def test_temperature_round_trip(value):
    assert kelvin_to_celsius(celsius_to_kelvin(value)) == pytest.approx(value)
    assert celsius_to_kelvin(kelvin_to_celsius(value)) == pytest.approx(value)


@pytest.mark.parametrize("rows", [1, 3, 5, 9])
def test_triangle_shape(rows):
    lines = double_triangle(rows)
    assert len(lines) == rows
    assert lines[0] == "*" * rows
    assert lines[-1] == "*" * rows
    assert lines == lines[::-1]
    assert lines[rows // 2].strip() == "*"
    assert all(len(line) <= rows for line in lines)


@pytest.mark.parametrize("rows", [0, 2, 4, -3])
def test_triangle_rejects_bad_rows(rows):
    with pytest.raises(ValueError):
        double_triangle(rows)


def test_ascii_code_of_a():
    assert ascii_code("A") == 65


@pytest.mark.parametrize("text", ["", "AB"])
def test_ascii_code_needs_one_character(text):
    with pytest.raises(ValueError):
        ascii_code(text)


def test_guess_feedback():
    assert guess_feedback(80, 50) is Feedback.LOWER
    assert guess_feedback(10, 50) is Feedback.HIGHER
    assert guess_feedback(50, 50) is Feedback.CORRECT


def test_main_ascii(capsys):
    assert main(["ascii", "z"]) == 0
    assert str(ascii_code("z")) in capsys.readouterr().out


def test_main_triangle(capsys):
    assert main(["triangle", "5"]) == 0
    assert capsys.readouterr().out.splitlines() == double_triangle(5)


def test_main_triangle_invalid(capsys):
    assert main(["triangle", "4"]) == 1
    assert "invalid input" in capsys.readouterr().err


def test_main_conversion(capsys):
    assert main(["to-celsius", "300"]) == 0
    out = capsys.readouterr().out
    assert f"{kelvin_to_celsius(300):g}C" in out
    assert main(["to-kelvin", "20"]) == 0
    assert f"{celsius_to_kelvin(20):g}K" in capsys.readouterr().out


def test_main_guessing_game(capsys, monkeypatch):
    replies = iter(["10", "oops", "90", "42"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    assert main(["guess", "--secret", "42"]) == 0
    out = capsys.readouterr().out
    assert Feedback.HIGHER.value in out
    assert Feedback.LOWER.value in out
    assert "IN 3 ATTEMPTS" in out


def test_main_guessing_game_end_of_input(monkeypatch):
    def no_more(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more)
    assert main(["guess", "--secret", "7"]) == 1