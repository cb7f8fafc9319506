import argparse
import logging

import pytest

from app.config import configure_logging, load_settings
from scripts import desk_cli


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env out of the way
    monkeypatch.chdir(tmp_path)
    # setenv first so values loaded from .env are undone after the test
    for name in ("SERVICE_DESK_MAX_SIZE", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_settings_defaults(isolated_env):
    settings = load_settings()
    assert settings.max_size == 10
    assert settings.log_level == "INFO"


def test_settings_from_environment(isolated_env):
    isolated_env.setenv("SERVICE_DESK_MAX_SIZE", "3")
    isolated_env.setenv("LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.max_size == 3
    assert settings.log_level == "DEBUG"


def test_settings_ignore_invalid_size(isolated_env):
    isolated_env.setenv("SERVICE_DESK_MAX_SIZE", "lots")
    assert load_settings().max_size == 10


def test_settings_from_dotenv_file(isolated_env, tmp_path):
    (tmp_path / ".env").write_text("SERVICE_DESK_MAX_SIZE=7\n")
    assert load_settings().max_size == 7


def test_parse_customer_with_and_without_priority():
    customer = desk_cli.parse_customer("Bob, ACC-1 ,Printer jam,4")
    assert (customer.name, customer.account_id, customer.problem, customer.priority) == (
        "Bob",
        "ACC-1",
        "Printer jam",
        4,
    )
    assert desk_cli.parse_customer("Tim,ACC-2,Reset").priority == 0


@pytest.mark.parametrize("raw", ["Bob,ACC-1", "Bob,ACC-1,Jam,high", "a,b,c,1,extra"])
def test_parse_customer_rejects_malformed(raw):
    with pytest.raises(argparse.ArgumentTypeError):
        desk_cli.parse_customer(raw)


def test_cli_prints_customers_in_service_order(isolated_env, capsys):
    code = desk_cli.main(
        [
            "--customer",
            "Bob,ACC-1,Jam,1",
            "--customer",
            "Sue,ACC-2,Outage,9",
            "--customer",
            "Tim,ACC-3,Reset,1",
        ]
    )

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "Sue (ACC-2)  : Outage",
        "Bob (ACC-1)  : Jam",
        "Tim (ACC-3)  : Reset",
    ]


def test_cli_reports_rejected_customers(isolated_env, capsys):
    code = desk_cli.main(["--max-size", "1", "--customer", "Bob,A,Jam", "--customer", "Sue,B,Outage,5"])

    out, err = capsys.readouterr()
    assert code == 0
    assert out.splitlines() == ["Bob (A)  : Jam"]
    assert "Rejected (desk full): Sue (B)  : Outage" in err


def test_cli_rejects_bad_customer_argument(isolated_env):
    with pytest.raises(SystemExit) as excinfo:
        desk_cli.main(["--customer", "only-a-name"])
    assert excinfo.value.code == 2


def test_cli_max_size_defaults_from_environment(isolated_env, capsys):
    isolated_env.setenv("SERVICE_DESK_MAX_SIZE", "1")

    desk_cli.main(["--customer", "Bob,A,Jam", "--customer", "Sue,B,Outage"])

    out, err = capsys.readouterr()
    assert out.splitlines() == ["Bob (A)  : Jam"]
    assert "Rejected (desk full): Sue (B)  : Outage" in err


def test_cli_max_size_flag_overrides_environment(isolated_env, capsys):
    isolated_env.setenv("SERVICE_DESK_MAX_SIZE", "1")

    desk_cli.main(["--max-size", "2", "--customer", "Bob,A,Jam", "--customer", "Sue,B,Outage"])

    assert len(capsys.readouterr().out.splitlines()) == 2


@pytest.mark.parametrize(
    "level, expected",
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("root", logging.INFO), ("nonsense", logging.INFO)],
)
def test_configure_logging_resolves_level_names(monkeypatch, level, expected):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(level)

    assert calls[0]["level"] == expected
