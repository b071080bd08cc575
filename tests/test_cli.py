from __future__ import annotations

import json

import httpx
import pytest
from typer.testing import CliRunner

import cli.doctor as doctor
import cli.main as cli_main
from adapters.directus import DirectusClient
from core.config import get_user_env_file

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("LARES_DIRECTUS_URL", "http://cms.test")


def test_check_form_valid(tmp_path, valid_form):
    path = tmp_path / "form.json"
    path.write_text(json.dumps(valid_form), encoding="utf-8")
    result = runner.invoke(cli_main.app, ["check-form", str(path)])
    assert result.exit_code == 0
    assert "Valid submission" in result.output


def test_check_form_invalid(tmp_path, valid_form):
    path = tmp_path / "form.json"
    path.write_text(json.dumps({**valid_form, "subject": "hacking"}), encoding="utf-8")
    result = runner.invoke(cli_main.app, ["check-form", str(path)])
    assert result.exit_code == 1
    assert "invalid subject value" in result.output


def test_sanitize_text_and_url():
    result = runner.invoke(cli_main.app, ["sanitize", "<b>ciao</b> & co"])
    assert result.exit_code == 0
    assert result.output.strip() == "ciao &amp; co"

    result = runner.invoke(cli_main.app, ["sanitize", "--url", "javascript:alert(1)"])
    assert result.exit_code == 0
    assert result.output.strip() == ""


def test_routes_for_one_locale():
    result = runner.invoke(cli_main.app, ["routes", "--locale", "en"])
    assert result.exit_code == 0
    assert "/en/about-us/" in result.output


def test_fetch_prints_and_exports(monkeypatch, tmp_path):
    calls = []

    async def fake_fetch(collection, locale, slug, settings):
        calls.append((collection, locale, slug, settings.base_url))
        return [{"id": 1, "slug": "home"}]

    monkeypatch.setattr(cli_main, "_fetch", fake_fetch)

    result = runner.invoke(cli_main.app, ["fetch", "pages", "--locale", "de"])
    assert result.exit_code == 0
    assert '"slug": "home"' in result.output

    out = tmp_path / "export" / "pages.json"
    result = runner.invoke(cli_main.app, ["fetch", "pages", "--output", str(out)])
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8")) == [{"id": 1, "slug": "home"}]
    assert calls[0] == ("pages", "de", None, "http://cms.test")


def test_fetch_reports_cms_errors(monkeypatch):
    from adapters.directus import DirectusError

    async def failing_fetch(collection, locale, slug, settings):
        raise DirectusError(404, collection, "Not Found")

    monkeypatch.setattr(cli_main, "_fetch", failing_fetch)
    result = runner.invoke(cli_main.app, ["fetch", "pages"])
    assert result.exit_code == 1
    assert "404" in result.output


def test_fetch_reports_unreachable_cms(monkeypatch):
    async def unreachable_fetch(collection, locale, slug, settings):
        raise httpx.ConnectError("All connection attempts failed")

    monkeypatch.setattr(cli_main, "_fetch", unreachable_fetch)
    result = runner.invoke(cli_main.app, ["fetch", "pages"])
    assert result.exit_code == 1
    assert "CMS unreachable" in result.output
    assert "All connection attempts failed" in result.output


def test_fetch_reports_non_json_cms_body(monkeypatch, settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    async def fetch_through_mock(collection, locale, slug, _settings):
        async with DirectusClient(settings, transport=transport) as client:
            return await client.get_collection(collection, locale)

    monkeypatch.setattr(cli_main, "_fetch", fetch_through_mock)
    result = runner.invoke(cli_main.app, ["fetch", "pages"])
    assert result.exit_code == 1
    assert "invalid JSON body" in result.output


def test_doctor_reports_cms_status(monkeypatch):
    async def ok(settings):
        return True, "site_settings: 3 fields"

    monkeypatch.setattr(doctor, "_check_cms", ok)
    result = runner.invoke(cli_main.app, ["doctor", "run"])
    assert result.exit_code == 0
    assert "CMS connectivity" in result.output

    async def down(settings):
        return False, "connection refused"

    monkeypatch.setattr(doctor, "_check_cms", down)
    result = runner.invoke(cli_main.app, ["doctor", "run"])
    assert result.exit_code == 1


def test_setup_cms_writes_user_env():
    result = runner.invoke(cli_main.app, ["doctor", "setup-cms"], input="http://cms.local\nen\n")
    assert result.exit_code == 0
    env_file = get_user_env_file()
    content = env_file.read_text(encoding="utf-8")
    assert "LARES_DIRECTUS_URL=http://cms.local" in content
    assert "LARES_DEFAULT_LOCALE=en" in content


def test_setup_cms_rejects_unsupported_locale():
    result = runner.invoke(cli_main.app, ["doctor", "setup-cms"], input="http://cms.local\nes\n")
    assert result.exit_code != 0
    assert not get_user_env_file().exists()
