import pytest

from philo.cli import main


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["4", "100", "100"],
        ["4", "100", "100", "100", "1", "2"],
        ["-4", "100", "100", "100"],
        ["4", "abc", "100", "100"],
        ["0", "100", "100", "100"],
        ["4", "100", "100", "100", "0"],
    ],
)
def test_invalid_arguments(argv, capsys):
    assert main(argv) == 1
    assert "Invalid arguments" in capsys.readouterr().out


def test_single_philosopher_dies(capsys):
    assert main(["1", "60", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 has taken a fork")
    assert lines[-1].endswith(" 1 died")


def test_meal_limit_ends_without_death(capsys):
    assert main(["2", "600", "20", "20", "1"]) == 0
    output = capsys.readouterr().out
    assert "died" not in output
    assert " 1 is eating" in output
    assert " 2 is eating" in output