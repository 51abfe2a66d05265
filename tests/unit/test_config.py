"""Unit tests for configuration loading and validation."""

from pathlib import Path

import pytest
import yaml

from stylist.utils.config import AppConfig, LLMConfig, get_config, load_config, reset_config
from stylist.utils.exceptions import ConfigFileNotFoundError, ConfigurationError

EXAMPLE_CONFIG = Path(__file__).parents[2] / "config" / "config.example.yaml"


class TestLLMConfig:
    """Test chat source configuration."""

    def test_defaults(self):
        config = LLMConfig()
        assert config.provider_order == ["glm", "kimi"]
        assert config.temperature == 0.7
        assert config.glm_api_key is None

    def test_base_url_trailing_slash_removed(self):
        config = LLMConfig(base_url="https://proxy.example.com/api/ai/")
        assert config.base_url == "https://proxy.example.com/api/ai"

    def test_base_url_scheme_validation(self):
        with pytest.raises(ValueError, match="http"):
            LLMConfig(base_url="ftp://proxy.example.com")

    def test_provider_order_validation(self):
        assert LLMConfig(provider_order=["KIMI"]).provider_order == ["kimi"]
        with pytest.raises(ValueError, match="Unknown providers"):
            LLMConfig(provider_order=["openai"])
        with pytest.raises(ValueError, match="repeat"):
            LLMConfig(provider_order=["glm", "glm"])

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            LLMConfig(timeout_seconds=0)

    def test_keys_from_environment(self, monkeypatch):
        monkeypatch.setenv("GLM_API_KEY", "glm-secret")
        config = LLMConfig()

        assert config.api_key_for("glm") == "glm-secret"
        assert config.api_key_for("kimi") is None

    def test_explicit_key_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv("KIMI_API_KEY", "from-env")
        assert LLMConfig(kimi_api_key="from-yaml").kimi_api_key == "from-yaml"


class TestAppConfig:
    """Test application configuration."""

    def test_load_from_yaml(self, tmp_path):
        config_data = {
            "llm": {"base_url": "http://localhost:9000/api/ai", "provider_order": ["kimi"]},
            "catalog": {"current_product_id": "sku001"},
            "cart": {"seed_product_ids": ["sku005"]},
            "log_level": "debug",
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(config_data))

        config = AppConfig.from_yaml(config_file)

        assert config.llm.provider_order == ["kimi"]
        assert config.catalog.current_product_id == "sku001"
        assert config.cart.seed_product_ids == ["sku005"]
        assert config.log_level == "DEBUG"

    def test_example_config_is_valid(self):
        config = AppConfig.from_yaml(EXAMPLE_CONFIG)
        assert config.catalog.current_product_id == "sku789"
        assert config.llm.timeout_seconds == 15

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            AppConfig(log_level="LOUD")

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("llm: [unclosed")

        with pytest.raises(ConfigurationError):
            AppConfig.from_yaml(config_file)

    def test_non_mapping_root(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            AppConfig.from_yaml(config_file)

    def test_empty_file_gives_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert AppConfig.from_yaml(config_file) == AppConfig()


class TestLoadConfig:
    """Test config file resolution and caching."""

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigFileNotFoundError) as exc_info:
            load_config(tmp_path / "nope.yaml")
        assert exc_info.value.code == "CONFIG_FILE_NOT_FOUND"

    def test_missing_env_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STYLIST_CONFIG", str(tmp_path / "nope.yaml"))
        with pytest.raises(ConfigFileNotFoundError):
            load_config()

    def test_env_file_used(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"log_level": "WARNING"}))
        monkeypatch.setenv("STYLIST_CONFIG", str(config_file))

        assert load_config().log_level == "WARNING"

    def test_get_config_is_cached(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"log_level": "ERROR"}))

        first = get_config(config_file)
        assert get_config() is first

        config_file.write_text(yaml.dump({"log_level": "DEBUG"}))
        assert get_config(config_file, reload=True).log_level == "DEBUG"

        reset_config()
        assert get_config(config_file) is not first
