from typer.testing import CliRunner

from cli import doctor
from cli import main as cli_main

runner = CliRunner()


def test_doctor_reports_missing_base_url(monkeypatch, make_settings):
    monkeypatch.setattr(doctor, "AppSettings", lambda: make_settings(base_url=None, api_token=None))

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "MISSING" in result.output
    assert "FAIL" in result.output


def test_doctor_setup_stores_token(monkeypatch, make_settings):
    saved = {}

    def fake_write(values):
        saved.update(values)
        return "/tmp/kanban/.env"

    monkeypatch.setattr(doctor, "AppSettings", lambda: make_settings(base_url=None))
    monkeypatch.setattr(doctor, "write_user_env_vars", fake_write)

    result = runner.invoke(cli_main.app, ["doctor", "setup"], input="http://planka.local\nmy-token\n")

    assert result.exit_code == 0, result.output
    assert saved == {"KANBAN_BASE_URL": "http://planka.local", "KANBAN_API_TOKEN": "my-token"}


def test_doctor_setup_stores_credentials_without_token(monkeypatch, make_settings):
    saved = {}

    def fake_write(values):
        saved.update(values)
        return "/tmp/kanban/.env"

    monkeypatch.setattr(doctor, "AppSettings", lambda: make_settings(base_url=None))
    monkeypatch.setattr(doctor, "write_user_env_vars", fake_write)

    result = runner.invoke(
        cli_main.app,
        ["doctor", "setup"],
        input="http://planka.local\n\ndemo@example.com\ns3cret\n",
    )

    assert result.exit_code == 0, result.output
    assert saved == {
        "KANBAN_BASE_URL": "http://planka.local",
        "KANBAN_EMAIL_OR_USERNAME": "demo@example.com",
        "KANBAN_PASSWORD": "s3cret",
    }
