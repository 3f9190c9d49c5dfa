"""Unit tests for Config (archgen.config).

Tests cover:
- Config defaults and validation
- Config.from_env with every ARCHGEN_* variable
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from archgen.config import DEFAULT_MODULE, PROJECT_PREFIX, Config


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.output_dir == Path(".")
        assert config.default_module == "github.com/user/project"
        assert config.use_fuzzy is True
        assert config.fzf_command == "fzf"
        assert config.staged is False
        assert config.verbose is False

    @pytest.mark.unit
    def test_constants(self):
        assert PROJECT_PREFIX == "project_"
        assert DEFAULT_MODULE == "github.com/user/project"

    @pytest.mark.unit
    def test_output_dir_coerced_to_path(self):
        config = Config(output_dir="some/where")
        assert config.output_dir == Path("some/where")

    @pytest.mark.unit
    def test_invalid_type_rejected(self):
        with pytest.raises(ValidationError):
            Config(use_fuzzy="not-a-bool")


# ---------------------------------------------------------------------------
# Config.from_env
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_defaults_when_no_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_output_dir_from_env(self):
        with patch.dict(os.environ, {"ARCHGEN_OUTPUT_DIR": "/tmp/out"}, clear=True):
            config = Config.from_env()
        assert config.output_dir == Path("/tmp/out")

    @pytest.mark.unit
    def test_default_module_from_env(self):
        env = {"ARCHGEN_DEFAULT_MODULE": "example.org/team/svc"}
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.default_module == "example.org/team/svc"

    @pytest.mark.unit
    def test_empty_default_module_falls_back(self):
        with patch.dict(os.environ, {"ARCHGEN_DEFAULT_MODULE": ""}, clear=True):
            config = Config.from_env()
        assert config.default_module == DEFAULT_MODULE

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", " On "])
    def test_no_fuzzy_truthy(self, value):
        with patch.dict(os.environ, {"ARCHGEN_NO_FUZZY": value}, clear=True):
            config = Config.from_env()
        assert config.use_fuzzy is False

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "0", "false", "no", "off", "maybe"])
    def test_no_fuzzy_falsy(self, value):
        with patch.dict(os.environ, {"ARCHGEN_NO_FUZZY": value}, clear=True):
            config = Config.from_env()
        assert config.use_fuzzy is True

    @pytest.mark.unit
    def test_fzf_command_from_env(self):
        with patch.dict(os.environ, {"ARCHGEN_FZF_COMMAND": "sk"}, clear=True):
            config = Config.from_env()
        assert config.fzf_command == "sk"

    @pytest.mark.unit
    def test_staged_and_verbose_from_env(self):
        env = {"ARCHGEN_STAGED": "1", "ARCHGEN_VERBOSE": "true"}
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.staged is True
        assert config.verbose is True
