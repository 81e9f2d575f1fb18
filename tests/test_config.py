"""Unit tests for configuration loading."""

import json
import pytest
from config import (
    Config,
    GeneratorConfig,
    ServerConfig,
    LoggingConfig,
    load_config,
)


class TestGeneratorConfig:
    """Tests for GeneratorConfig class."""

    def test_default_values(self):
        """GeneratorConfig has sensible defaults."""
        config = GeneratorConfig()
        assert config.namespaces == ["default"]
        assert config.default_block_id == 1

    def test_custom_values(self):
        """GeneratorConfig accepts custom values."""
        config = GeneratorConfig(namespaces=("a", "b"), default_block_id=42)
        assert config.namespaces == ["a", "b"]
        assert config.default_block_id == 42


class TestServerConfig:
    """Tests for ServerConfig class."""

    def test_default_values(self):
        """ServerConfig has sensible defaults."""
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080

    def test_custom_values(self):
        """ServerConfig accepts custom values."""
        config = ServerConfig(host="0.0.0.0", port=9000)
        assert config.host == "0.0.0.0"
        assert config.port == 9000


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        assert LoggingConfig().level == "INFO"

    def test_custom_values(self):
        assert LoggingConfig(level="DEBUG").level == "DEBUG"


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Config creates default sub-configs."""
        config = Config()
        assert isinstance(config.generator, GeneratorConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        """Config.from_dict parses dictionary."""
        data = {
            "generator": {"namespaces": ["orders"], "default_block_id": 3},
            "server": {"port": 9000},
            "logging": {"level": "DEBUG"}
        }
        config = Config.from_dict(data)
        assert config.generator.namespaces == ["orders"]
        assert config.generator.default_block_id == 3
        assert config.server.port == 9000
        assert config.logging.level == "DEBUG"

    def test_from_dict_partial(self):
        """Config.from_dict handles partial data."""
        config = Config.from_dict({"generator": {"default_block_id": 5}})
        assert config.generator.default_block_id == 5
        assert config.server.port == 8080  # Default


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_returns_config(self):
        """load_config returns Config object."""
        assert isinstance(load_config(), Config)

    def test_load_config_reads_file(self):
        """load_config reads from config.json."""
        config = load_config()
        assert config.generator.namespaces == ["orders", "invoices"]

    def test_load_config_custom_path(self, tmp_path):
        path = tmp_path / "glid.json"
        path.write_text(json.dumps({"server": {"port": 9100}}))
        assert load_config(path).server.port == 9100

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert isinstance(config, Config)
        assert config.generator.namespaces == ["default"]
