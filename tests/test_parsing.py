import pytest

from philo.parsing import INT_MAX, ArgumentError, Settings, parse_arguments, parse_int


def test_parse_int_plain_digits():
    assert parse_int("42") == 42


def test_parse_int_leading_plus():
    assert parse_int("+7") == 7


def test_parse_int_upper_limit_accepted():
    assert parse_int(str(INT_MAX)) == INT_MAX


@pytest.mark.parametrize(
    "text",
    ["-5", "0", "+0", "", "+", "12a", " 12", "1.5", str(INT_MAX + 1), "99999999999", "١٢"],
)
def test_parse_int_rejects(text):
    with pytest.raises(ArgumentError):
        parse_int(text)


def test_argument_error_message():
    with pytest.raises(ArgumentError, match="Invalid arguments"):
        parse_int("abc")


def test_parse_arguments_four_values():
    settings = parse_arguments(["5", "800", "200", "300"])
    assert settings == Settings(5, 800, 200, 300, None)
    assert settings.must_eat is None


def test_parse_arguments_with_must_eat():
    settings = parse_arguments(["4", "410", "200", "200", "7"])
    assert settings.philos_count == 4
    assert settings.must_eat == 7


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "1"],
        ["0", "800", "200", "200"],
        ["5", "800", "-200", "200"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "x"],
    ],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(ArgumentError):
        parse_arguments(args)


def test_time_to_think_even_slack_is_half():
    settings = parse_arguments(["5", "800", "200", "200"])
    slack = settings.time_to_die - settings.time_to_eat - settings.time_to_sleep
    assert settings.time_to_think * 2 == slack


def test_time_to_think_odd_slack_truncates():
    assert parse_arguments(["3", "411", "200", "200"]).time_to_think == 5


def test_time_to_think_negative_truncates_toward_zero():
    assert parse_arguments(["3", "101", "100", "100"]).time_to_think == -49