import pytest
from fraclab import cli
from fraclab.menu import FractionMenu


def test_eval_simple(capsys):
    assert cli.main(["eval", "simple", "2", "-x", "5"]) == 0
    assert capsys.readouterr().out.strip() == "Result: 0.1000"


def test_eval_continued_negative_coefficients(capsys):
    assert cli.main(["--precision", "6", "eval", "continued", "-1", "2", "4", "-x", "1"]) == 0
    # inner = 4, middle = 2.25, outer = -1 + 1/2.25
    assert capsys.readouterr().out.strip() == f"Result: {1 / (-1 + 1 / 2.25):.6f}"


def test_eval_domain_error(capsys):
    assert cli.main(["eval", "continued", "3", "1", "1", "-x", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: coefficient 'a1' must not equal 3" in captured.err


def test_eval_wrong_coefficient_count():
    with pytest.raises(SystemExit) as info:
        cli.main(["eval", "continued", "1", "2", "-x", "1"])
    assert info.value.code == 2


def test_table(capsys):
    assert cli.main(["table", "simple", "1", "--start", "-1", "--stop", "1", "--num", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3].split() == ["-1.0000", "-1.0000"]
    assert lines[-2].split() == ["0.0000", "undefined"]
    assert lines[-1].split() == ["1.0000", "1.0000"]


def test_default_runs_menu(monkeypatch):
    seen = {}

    def fake_run(self):
        seen["precision"] = self.precision
        seen["tolerance"] = self.tolerance
        return 0

    monkeypatch.setattr(FractionMenu, "run", fake_run)
    assert cli.main(["--precision", "3", "--tolerance", "1e-9"]) == 0
    assert seen == {"precision": 3, "tolerance": 1e-9}


@pytest.mark.parametrize(
    "argv",
    [
        ["eval", "simple", "nan", "-x", "1"],
        ["eval", "simple", "inf", "-x", "0"],
        ["eval", "simple", "1", "-x", "inf"],
        ["--tolerance", "nan", "eval", "simple", "0", "-x", "1"],
        ["--tolerance", "0", "eval", "simple", "1", "-x", "1"],
        ["table", "simple", "1", "--start", "nan", "--stop", "1"],
        ["table", "simple", "1", "--start", "0", "--stop", "1", "--num", "-1"],
    ],
)
def test_rejects_non_finite_and_out_of_range_arguments(argv, capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(argv)
    assert info.value.code == 2
    assert capsys.readouterr().out == ""


def test_eval_accepts_decimal_comma(capsys):
    assert cli.main(["eval", "simple", "2,5", "-x", "2"]) == 0
    assert capsys.readouterr().out.strip() == "Result: 0.2000"
