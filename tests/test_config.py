"""Tests for WPMCP configuration."""

import os

from wpmcp.config import Config, env_flag


class TestConfig:
    def test_defaults(self):
        assert Config.SERVER_NAME == "wordpress-gutenberg-mcp-server"
        assert Config.SERVER_VERSION == "1.0.0"
        assert Config.PROTOCOL_VERSION == "2024-11-05"

    def test_data_dir_from_env(self):
        # conftest points WPMCP_DATA_DIR at a temp directory before import
        assert str(Config.DATA_DIR) == os.environ["WPMCP_DATA_DIR"]
        assert Config.LOG_DIR == Config.DATA_DIR / "logs"

    def test_resources_dir_default(self):
        if "WPMCP_RESOURCES_DIR" not in os.environ:
            assert (Config.RESOURCES_DIR / "coding-standards.md").exists()

    def test_ensure_dirs(self, tmp_data_dir):
        (tmp_data_dir / "logs").rmdir()
        Config.ensure_dirs()
        assert Config.DATA_DIR.exists()
        assert Config.LOG_DIR.exists()


class TestEnvFlag:
    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("WPMCP_TEST_FLAG", raising=False)
        assert env_flag("WPMCP_TEST_FLAG") is False
        assert env_flag("WPMCP_TEST_FLAG", default=True) is True

    def test_truthy_values(self, monkeypatch):
        for value in ("1", "true", "YES", " on "):
            monkeypatch.setenv("WPMCP_TEST_FLAG", value)
            assert env_flag("WPMCP_TEST_FLAG") is True

    def test_falsy_values(self, monkeypatch):
        for value in ("0", "false", "no", ""):
            monkeypatch.setenv("WPMCP_TEST_FLAG", value)
            assert env_flag("WPMCP_TEST_FLAG", default=True) is False


class TestConfigEnvFile:
    def test_loading(self, tmp_path, monkeypatch):
        from wpmcp import config

        wpmcp_dir = tmp_path / ".wpmcp"
        wpmcp_dir.mkdir()
        (wpmcp_dir / "config.env").write_text(
            "# Comment line\n"
            "WPMCP_TEST_VAR=hello_world\n"
            "\n"
            "WPMCP_TEST_QUOTED=\"quoted value\"\n"
            "WPMCP_TEST_KEEP=from_file\n"
        )
        monkeypatch.setattr(config.Path, "home", lambda: tmp_path)
        monkeypatch.delenv("WPMCP_TEST_VAR", raising=False)
        monkeypatch.delenv("WPMCP_TEST_QUOTED", raising=False)
        monkeypatch.setenv("WPMCP_TEST_KEEP", "from_env")

        config._load_config_env()

        assert os.environ["WPMCP_TEST_VAR"] == "hello_world"
        assert os.environ["WPMCP_TEST_QUOTED"] == "quoted value"
        # Environment wins over the file
        assert os.environ["WPMCP_TEST_KEEP"] == "from_env"

        monkeypatch.delenv("WPMCP_TEST_VAR")
        monkeypatch.delenv("WPMCP_TEST_QUOTED")

    def test_missing_file_is_ignored(self, tmp_path, monkeypatch):
        from wpmcp import config

        monkeypatch.setattr(config.Path, "home", lambda: tmp_path)
        config._load_config_env()
