"""Unit tests for the m3ucatalog command line interface."""

import json

import pytest
from click.testing import CliRunner

from m3ucatalog.cli import cli
from m3ucatalog.config import Config


@pytest.fixture
def runner(monkeypatch, tmp_path):
    """CliRunner with config isolated to tmp_path and logging setup disabled."""
    import m3ucatalog.cli as cli_mod
    import m3ucatalog.config as config_mod
    import m3ucatalog.utils.logs as logs_mod

    monkeypatch.setattr(config_mod, "CONFIG_DIR", tmp_path / ".m3ucatalog")
    monkeypatch.setattr(config_mod, "CONFIG_FILE", tmp_path / ".m3ucatalog" / "config.json")
    monkeypatch.setattr(cli_mod, "CONFIG_FILE", tmp_path / ".m3ucatalog" / "config.json")
    monkeypatch.setattr(logs_mod, "setup_logging", lambda level: None)
    monkeypatch.chdir(tmp_path)
    for key in Config.__dataclass_fields__:
        monkeypatch.delenv(f"M3UCATALOG_{key.upper()}", raising=False)
    monkeypatch.delenv("M3U_URL", raising=False)
    monkeypatch.setenv("M3UCATALOG_CACHE_DIR", str(tmp_path / "cache"))
    return CliRunner()


class TestBrowse:

    def test_json_output(self, runner, playlist_file):
        result = runner.invoke(cli, ["browse", "movies", "--source", str(playlist_file), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [c["label"] for c in data] == ["Action Movies", "Uncategorized", "VOD Classics"]
        assert data[0]["members"][0]["name"] == "Die Hard"
        assert data[0]["members"][0]["kind"] == "on_demand"

    def test_table_output(self, runner, playlist_file):
        result = runner.invoke(cli, ["browse", "live", "-s", str(playlist_file)])
        assert result.exit_code == 0, result.output
        assert "News" in result.output
        assert "BBC" in result.output
        assert "3 entries in 2 categories" in result.output

    def test_search(self, runner, playlist_file):
        result = runner.invoke(cli, ["browse", "live", "-s", str(playlist_file), "-q", "espn", "--json"])
        data = json.loads(result.stdout)
        assert [c["label"] for c in data] == ["Sports"]

    def test_admin_is_empty(self, runner, playlist_file):
        result = runner.invoke(cli, ["browse", "admin", "-s", str(playlist_file)])
        assert result.exit_code == 0
        assert "No entries found" in result.output

    def test_offline_uses_cache(self, runner, playlist_file, tmp_path):
        runner.invoke(cli, ["browse", "series", "-s", str(playlist_file)])
        playlist_file.unlink()
        result = runner.invoke(cli, ["browse", "series", "--offline", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)[0]["label"] == "Breaking Bad Season 1"

    def test_missing_source(self, runner):
        result = runner.invoke(cli, ["browse", "live"])
        assert result.exit_code == 1
        assert "No playlist source" in result.output

    def test_retrieval_failure(self, runner, tmp_path):
        result = runner.invoke(cli, ["browse", "live", "-s", str(tmp_path / "missing.m3u")])
        assert result.exit_code == 1
        assert "Connection Error" in result.output


class TestStats:

    def test_counts(self, runner, playlist_file):
        result = runner.invoke(cli, ["stats", "-s", str(playlist_file)])
        assert result.exit_code == 0, result.output
        assert "live" in result.output
        assert "movies" in result.output
        assert "series" in result.output


class TestInitAndConfig:

    def test_init_saves_url(self, runner, tmp_path):
        result = runner.invoke(cli, ["init", "--url", "http://example.com/list.m3u"])
        assert result.exit_code == 0, result.output
        saved = json.loads((tmp_path / ".m3ucatalog" / "config.json").read_text())
        assert saved["playlist_url"] == "http://example.com/list.m3u"

    def test_config_shows_keys(self, runner):
        result = runner.invoke(cli, ["config"])
        assert result.exit_code == 0
        assert "playlist_url" in result.output

    def test_invalid_env_value(self, runner, monkeypatch):
        monkeypatch.setenv("M3UCATALOG_ROW_LIMIT", "many")
        result = runner.invoke(cli, ["config"])
        assert result.exit_code == 1
        assert "M3UCATALOG_ROW_LIMIT" in result.output

    def test_zero_chunk_size(self, runner, monkeypatch, playlist_file):
        monkeypatch.setenv("M3UCATALOG_CHUNK_SIZE", "0")
        result = runner.invoke(cli, ["browse", "live", "-s", str(playlist_file)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "chunk_size must be at least 1" in result.output
