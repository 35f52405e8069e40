"""
Tests for the command-line entry point and settings.
"""

from unittest.mock import patch

import pytest

from silence_overview.config import Settings, get_settings
from silence_overview.errors import Step, TransportError
from silence_overview.main import build_parser, main, settings_from_args
from silence_overview.services.pipeline import PipelineResult


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep the developer's environment and .env out of the defaults
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_TOKEN", "GITHUB_ORG", "GITHUB_TEAM", "ALERTMANAGER_ADDR", "DRY_RUN", "DEBUG"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.github_api_url == "https://api.github.com/"
        assert settings.github_discussion_title == "Silence Overview"
        assert settings.github_alertmanager_name == "default"
        assert settings.alertmanager_addr == "http://localhost:9093"
        assert settings.silence_comment_filter == "automated silence|silenced our tenants"
        assert settings.github_verify_ssl is True

    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        assert Settings().github_token == "env-token"

    def test_overrides_win_and_none_is_ignored(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ORG", "env-org")
        settings = get_settings(github_org="cli-org", github_team=None)
        assert settings.github_org == "cli-org"
        assert settings.github_team == "team"


class TestParser:
    def test_flags_map_to_settings(self):
        args = build_parser().parse_args(
            [
                "--github-org", "acme",
                "--github-team", "platform",
                "--github-alertmanager-name", "prod",
                "--silence-comment-filter", "ci",
                "--request-timeout", "10",
                "--insecure-skip-verify",
                "--dry-run",
            ]
        )

        settings = settings_from_args(args)

        assert settings.github_org == "acme"
        assert settings.github_team == "platform"
        assert settings.github_alertmanager_name == "prod"
        assert settings.silence_comment_filter == "ci"
        assert settings.request_timeout == 10
        assert settings.github_verify_ssl is False
        assert settings.dry_run is True

    def test_unset_flags_keep_environment(self, monkeypatch):
        monkeypatch.setenv("DRY_RUN", "true")
        settings = settings_from_args(build_parser().parse_args([]))
        assert settings.dry_run is True
        assert settings.github_verify_ssl is True


class TestMain:
    def test_success_exit_code(self):
        with patch("silence_overview.main.SilenceOverviewPipeline") as pipeline_cls:
            pipeline_cls.return_value.run.return_value = PipelineResult(
                body="x", silence_count=0, created=True
            )
            assert main(["--github-org", "acme"]) == 0

        settings = pipeline_cls.call_args.args[0]
        assert settings.github_org == "acme"

    def test_error_exit_code(self, caplog):
        with patch("silence_overview.main.SilenceOverviewPipeline") as pipeline_cls:
            pipeline_cls.return_value.run.side_effect = TransportError(
                "error creating discussion", step=Step.CREATE
            )
            assert main([]) == 1

        assert "create failed: error creating discussion" in caplog.text

    def test_invalid_configuration(self, monkeypatch):
        monkeypatch.setenv("REQUEST_TIMEOUT", "soon")
        assert main([]) == 1
