"""Tests for config.py — environment helpers and constants."""

from easy_cols import config


class TestLoadEnv:
    def test_only_prefixed_keys(self, monkeypatch):
        monkeypatch.setenv("EASYCOLS_OUTPUT_FORMAT", "csv")
        monkeypatch.setenv("UNRELATED_VAR", "x")
        env = config.load_env()
        assert env["EASYCOLS_OUTPUT_FORMAT"] == "csv"
        assert "UNRELATED_VAR" not in env


class TestEnvBool:
    def test_truthy(self, monkeypatch):
        for raw in ("1", "true", "YES", " on "):
            monkeypatch.setattr(config, "env", {"EASYCOLS_NO_HEADER": raw})
            assert config._env_bool("EASYCOLS_NO_HEADER") is True

    def test_falsy(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"EASYCOLS_NO_HEADER": "no"})
        assert config._env_bool("EASYCOLS_NO_HEADER", default=True) is False

    def test_missing_uses_default(self):
        assert config._env_bool("EASYCOLS_NO_HEADER", default=True) is True


class TestEnvStr:
    def test_value_is_stripped(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"EASYCOLS_INPUT_FORMAT": " tsv "})
        assert config._env_str("EASYCOLS_INPUT_FORMAT", "auto") == "tsv"

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"EASYCOLS_INPUT_FORMAT": "  "})
        assert config._env_str("EASYCOLS_INPUT_FORMAT", "auto") == "auto"


class TestConstants:
    def test_separators(self):
        assert config.DEFAULT_SEPARATOR == " , "
        assert config.TABLE_SEPARATOR == " | "
        assert config.TABLE_RULE_JOINER == "-+-"

    def test_version_string(self):
        assert config.VERSION.count(".") == 2
