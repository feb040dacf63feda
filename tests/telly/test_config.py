"""Tests for loading the endpoint configuration."""

from pathlib import Path

import pytest

from telly.config import load_endpoint_config
from telly.errors import ConfigLoadError, MissingConfigValue
from telly.models import EndpointConfig


def _write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "telly.ini"
    config_file.write_text(content, encoding="utf-8")
    return config_file


class TestLoadEndpointConfig:

    def test_load_default_section(self, tmp_path: Path):
        config_file = _write_config(
            tmp_path,
            "[DEFAULT]\napi_key = test_key\nbasic = https://api.test.org/bot\nrecipient = 123456\n",
        )
        config = load_endpoint_config(config_file)

        assert config == EndpointConfig(
            base_url="https://api.test.org/bot",
            api_token="test_key",
            recipient_id="123456",
        )
        assert config.api_root == "https://api.test.org/bottest_key"

    def test_load_without_section_header(self, tmp_path: Path):
        config_file = _write_config(
            tmp_path,
            "basic = https://api.test.org/bot\napi_key = ABC123\nrecipient = 456\n",
        )
        config = load_endpoint_config(config_file)
        assert config.base_url == "https://api.test.org/bot"
        assert config.api_token == "ABC123"
        assert config.recipient_id == "456"

    def test_accepts_string_path(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "basic = b\napi_key = k\nrecipient = r\n")
        assert load_endpoint_config(str(config_file)).recipient_id == "r"

    def test_percent_signs_are_literal(self, tmp_path: Path):
        config_file = _write_config(
            tmp_path,
            "basic = https://api.test.org/bot\napi_key = 12%34\nrecipient = 456\n",
        )
        assert load_endpoint_config(config_file).api_token == "12%34"

    def test_keys_are_case_insensitive(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "BASIC = b\nApi_Key = k\nRECIPIENT = r\n")
        config = load_endpoint_config(config_file)
        assert (config.base_url, config.api_token, config.recipient_id) == ("b", "k", "r")

    def test_basic_is_not_given_a_trailing_slash(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "basic = https://x.org/bot\napi_key = k\nrecipient = r\n")
        assert load_endpoint_config(config_file).api_root == "https://x.org/botk"

    @pytest.mark.parametrize("missing_key", ["basic", "api_key", "recipient"])
    def test_missing_key_is_named(self, tmp_path: Path, missing_key: str):
        values = {"basic": "https://api.test.org/bot", "api_key": "ABC123", "recipient": "456"}
        del values[missing_key]
        config_file = _write_config(
            tmp_path, "[DEFAULT]\n" + "".join(f"{k} = {v}\n" for k, v in values.items())
        )

        with pytest.raises(MissingConfigValue) as exc_info:
            load_endpoint_config(config_file)

        assert exc_info.value.key == missing_key
        assert "Missing" in str(exc_info.value)
        assert "configuration value" in str(exc_info.value)

    def test_empty_value_counts_as_missing(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "basic = b\napi_key =\nrecipient = r\n")
        with pytest.raises(MissingConfigValue) as exc_info:
            load_endpoint_config(config_file)
        assert exc_info.value.key == "api_key"

    def test_first_missing_key_is_reported(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "[DEFAULT]\napi_key = test_key\n# missing basic and recipient\n")
        with pytest.raises(MissingConfigValue) as exc_info:
            load_endpoint_config(config_file)
        assert exc_info.value.key == "basic"

    def test_named_section_keys_are_ignored(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "[bot]\nbasic = b\napi_key = k\nrecipient = r\n")
        with pytest.raises(MissingConfigValue):
            load_endpoint_config(config_file)

    def test_utf8_bom_is_ignored(self, tmp_path: Path):
        config_file = tmp_path / "telly.ini"
        config_file.write_bytes(
            b"\xef\xbb\xbfbasic = https://api.test.org/bot\napi_key = ABC123\nrecipient = 456\n"
        )
        config = load_endpoint_config(config_file)
        assert config.base_url == "https://api.test.org/bot"

    def test_missing_file(self, tmp_path: Path):
        config_file = tmp_path / "nonexistent.ini"
        with pytest.raises(ConfigLoadError) as exc_info:
            load_endpoint_config(config_file)
        assert exc_info.value.path == config_file

    def test_unparseable_file(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "this line has no separator\n")
        with pytest.raises(ConfigLoadError):
            load_endpoint_config(config_file)

    def test_duplicate_key(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "basic = a\nbasic = b\napi_key = k\nrecipient = r\n")
        with pytest.raises(ConfigLoadError):
            load_endpoint_config(config_file)
