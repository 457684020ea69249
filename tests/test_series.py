import math

import pytest

from metagems.series import evaluate_series, main, read_file


def test_read_file(tmp_path):
    path = tmp_path / "coef.txt"
    path.write_text("1 0.5\n-2\t3e2\n")
    assert read_file(path) == [1.0, 0.5, -2.0, 300.0]


def test_read_file_stops_at_garbage(tmp_path):
    path = tmp_path / "coef.txt"
    path.write_text("1 2 oops 3")
    assert read_file(path) == [1.0, 2.0]


def test_read_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_file(tmp_path / "absent.txt")


def test_evaluate_empty_series():
    assert evaluate_series([], 7.0) == 0.0


def test_evaluate_constant_term_at_zero():
    assert evaluate_series([4.5, 9.0, 9.0], 0.0) == 4.5


def test_evaluate_matches_exp_taylor():
    coefficients = [1 / math.factorial(n) for n in range(20)]
    assert evaluate_series(coefficients, 1.0) == pytest.approx(math.e)


def test_main_prints_result(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "series.txt").write_text("1 2 3")
    assert main(["2"]) == 0
    expected = evaluate_series([1, 2, 3], 2.0)
    assert capsys.readouterr().out == f"f({2.0:f}) = {expected:f}\n"


def test_main_requires_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "expected 'x' argument to function\n"