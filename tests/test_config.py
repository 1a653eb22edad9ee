"""Tests for md5state.config: models and YAML loader."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from md5state.config.loader import _expand_env_vars, load_config
from md5state.config.models import DispositionConfig, Md5StateConfig, PolicyConfig
from md5state.policy import Abort, Omit, Policy, Substitute


# ── Md5StateConfig defaults ─────────────────────────────────────────


class TestMd5StateConfigDefaults:
    def test_default_algorithm(self, sample_config):
        assert sample_config.algorithm == "md5"

    def test_default_log_level(self, sample_config):
        assert sample_config.log_level == "warn"

    def test_default_policy_matches_builtin(self, sample_config):
        assert sample_config.policy.to_policy() == Policy()


# ── DispositionConfig ───────────────────────────────────────────────


class TestDispositionConfig:
    def test_substitute(self):
        assert DispositionConfig(action="substitute", text="N/A").to_disposition() == Substitute("N/A")

    def test_substitute_allows_empty_text(self):
        assert DispositionConfig(action="substitute", text="").to_disposition() == Substitute("")

    def test_omit(self):
        assert DispositionConfig(action="omit").to_disposition() == Omit()

    def test_abort(self):
        assert DispositionConfig(action="abort").to_disposition() == Abort()

    def test_substitute_requires_text(self):
        with pytest.raises(ValidationError, match="requires 'text'"):
            DispositionConfig(action="substitute")

    def test_invalid_action(self):
        with pytest.raises(ValidationError):
            DispositionConfig(action="retry")


class TestPolicyConfig:
    def test_partial_override(self):
        cfg = PolicyConfig(nonexistent=DispositionConfig(action="abort"))
        policy = cfg.to_policy()
        assert policy.nonexistent == Abort()
        assert policy.directory == Omit()
        assert policy.unreadable == Abort()


class TestLogLevel:
    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Md5StateConfig(log_level="verbose")


# ── _expand_env_vars ────────────────────────────────────────────────


class TestExpandEnvVars:
    def test_expands_string(self):
        with patch.dict(os.environ, {"PLACEHOLDER": "GONE"}):
            assert _expand_env_vars("${PLACEHOLDER}") == "GONE"

    def test_unset_var_expands_empty(self):
        with patch.dict(os.environ, {}, clear=True):
            assert _expand_env_vars("[${NOPE}]") == "[]"

    def test_nested_structures(self):
        with patch.dict(os.environ, {"X": "1"}):
            assert _expand_env_vars({"a": ["${X}", 2], "b": {"c": "${X}"}}) == {
                "a": ["1", 2],
                "b": {"c": "1"},
            }


# ── load_config ─────────────────────────────────────────────────────


class TestLoadConfig:
    def test_returns_defaults_when_no_file_exists(self, workdir):
        config = load_config()
        assert config == Md5StateConfig()

    def test_loads_project_local_yaml(self, workdir):
        (workdir / "md5state.yaml").write_text(
            "log_level: debug\npolicy:\n  directory:\n    action: substitute\n    text: '<dir>'\n"
        )
        config = load_config()
        assert config.log_level == "debug"
        assert config.policy.to_policy().directory == Substitute("<dir>")

    def test_env_var_path_takes_priority(self, workdir, monkeypatch):
        (workdir / "md5state.yaml").write_text("log_level: debug\n")
        custom = workdir / "custom.yaml"
        custom.write_text("log_level: error\n")
        monkeypatch.setenv("MD5STATE_CONFIG", str(custom))
        assert load_config().log_level == "error"

    def test_explicit_path_takes_priority(self, workdir, monkeypatch):
        custom = workdir / "custom.yaml"
        custom.write_text("algorithm: sha1\n")
        other = workdir / "other.yaml"
        other.write_text("algorithm: sha512\n")
        monkeypatch.setenv("MD5STATE_CONFIG", str(other))
        assert load_config(str(custom)).algorithm == "sha1"

    def test_user_global_config_used_as_fallback(self, workdir, monkeypatch):
        fake_home = workdir / "fakehome"
        (fake_home / ".md5state").mkdir(parents=True)
        (fake_home / ".md5state" / "config.yaml").write_text("log_level: info\n")
        monkeypatch.setattr("pathlib.Path.home", lambda: fake_home)
        assert load_config().log_level == "info"

    def test_raises_on_invalid_yaml(self, workdir):
        (workdir / "md5state.yaml").write_text("  bad:\nyaml: [unterminated")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config()

    def test_raises_on_invalid_config_values(self, workdir):
        (workdir / "md5state.yaml").write_text("policy:\n  unreadable:\n    action: shrug\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config()

    def test_raises_on_non_mapping(self, workdir):
        (workdir / "md5state.yaml").write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config()

    def test_raises_when_config_path_is_directory(self, workdir, monkeypatch):
        monkeypatch.setenv("MD5STATE_CONFIG", str(workdir))
        with pytest.raises(ValueError, match="Cannot read config"):
            load_config()

    def test_raises_on_non_string_keys(self, workdir):
        (workdir / "md5state.yaml").write_text("1: one\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config()

    def test_empty_yaml_file_returns_defaults(self, workdir):
        (workdir / "md5state.yaml").write_text("")
        assert load_config() == Md5StateConfig()

    def test_env_vars_expanded_in_loaded_config(self, workdir, monkeypatch):
        monkeypatch.setenv("MISSING_MARK", "<gone>")
        (workdir / "md5state.yaml").write_text(
            "policy:\n  nonexistent:\n    action: substitute\n    text: ${MISSING_MARK}\n"
        )
        assert load_config().policy.to_policy().nonexistent == Substitute("<gone>")
