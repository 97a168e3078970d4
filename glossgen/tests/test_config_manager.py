"""
Unit tests for ConfigManager.
"""
import json

import pytest
import yaml

from glossgen.core.exceptions import InvalidConfigError
from glossgen.utils.config_manager import AppConfig, ConfigManager


class TestConfigManager:
    """Test suite for ConfigManager."""

    def test_defaults_when_file_missing(self, temp_dir):
        manager = ConfigManager(temp_dir / "missing.yaml")
        assert manager.config.tokenizer.separators == " \t,"
        assert manager.config.glossary.duplicate_policy == "reject"
        assert manager.config.output.index_name == "index.html"
        assert not (temp_dir / "missing.yaml").exists()

    def test_create_if_missing(self, temp_dir):
        path = temp_dir / "conf" / "glossgen.yaml"
        ConfigManager(path, create_if_missing=True)
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["output"]["index_name"] == "index.html"

    def test_load_yaml(self, temp_dir):
        path = temp_dir / "glossgen.yaml"
        path.write_text(
            "tokenizer:\n"
            "  separators: \" ;\"\n"
            "glossary:\n"
            "  duplicate_policy: last_wins\n"
            "output:\n"
            "  index_name: terms.html\n",
            encoding="utf-8"
        )
        config = ConfigManager(path).config
        assert config.tokenizer.separators == " ;"
        assert config.glossary.duplicate_policy == "last_wins"
        assert config.output.index_name == "terms.html"
        assert config.output.encoding == "utf-8"

    def test_load_json(self, temp_dir):
        path = temp_dir / "glossgen.json"
        path.write_text(json.dumps({"input": {"trailing_space": True}}), encoding="utf-8")
        assert ConfigManager(path).config.input.trailing_space is True

    def test_save_and_reload_json(self, temp_dir):
        path = temp_dir / "glossgen.json"
        manager = ConfigManager(path)
        manager.set("output.title", "Terms")
        manager.save()
        assert ConfigManager(path).config.output.title == "Terms"

    def test_unsupported_format(self, temp_dir):
        path = temp_dir / "glossgen.ini"
        path.write_text("[x]\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            ConfigManager(path)

    def test_unknown_key(self, temp_dir):
        path = temp_dir / "glossgen.yaml"
        path.write_text("output:\n  colour: red\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError) as exc_info:
            ConfigManager(path)
        assert exc_info.value.field == "output"

    def test_malformed_yaml(self, temp_dir):
        path = temp_dir / "glossgen.yaml"
        path.write_text("tokenizer: [unclosed\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError) as exc_info:
            ConfigManager(path)
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_malformed_json(self, temp_dir):
        path = temp_dir / "glossgen.json"
        path.write_text('{"output": ', encoding="utf-8")
        with pytest.raises(InvalidConfigError) as exc_info:
            ConfigManager(path)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    @pytest.mark.parametrize("section_text", [
        "output: [1, 2]\n",
        "tokenizer: just a string\n",
        "glossary: 3\n",
    ])
    def test_section_must_be_mapping(self, temp_dir, section_text):
        path = temp_dir / "glossgen.yaml"
        path.write_text(section_text, encoding="utf-8")
        with pytest.raises(InvalidConfigError) as exc_info:
            ConfigManager(path)
        assert exc_info.value.field == section_text.split(":")[0]

    def test_empty_section_uses_defaults(self, temp_dir):
        path = temp_dir / "glossgen.yaml"
        path.write_text("output:\n", encoding="utf-8")
        assert ConfigManager(path).config.output.index_name == "index.html"

    def test_invalid_duplicate_policy(self, temp_dir):
        path = temp_dir / "glossgen.yaml"
        path.write_text("glossary:\n  duplicate_policy: sometimes\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            ConfigManager(path)

    def test_get_and_set(self, temp_dir):
        manager = ConfigManager(temp_dir / "missing.yaml")
        assert manager.get("output.heading_color") == "red"
        assert manager.get("output.nothing", "fallback") == "fallback"
        manager.set("output.heading_color", "blue")
        assert manager.config.output.heading_color == "blue"
        with pytest.raises(KeyError):
            manager.set("nothing.here", 1)

    def test_env_overrides(self, temp_dir, monkeypatch):
        monkeypatch.setenv("GLOSSGEN_SEPARATORS", " ;")
        monkeypatch.setenv("GLOSSGEN_DUPLICATE_POLICY", "first_wins")
        monkeypatch.setenv("GLOSSGEN_INDEX_NAME", "all.html")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        config = ConfigManager(temp_dir / "missing.yaml").config
        assert config.tokenizer.separators == " ;"
        assert config.glossary.duplicate_policy == "first_wins"
        assert config.output.index_name == "all.html"
        assert config.logging.log_level == "DEBUG"

    def test_export_template_loads_as_defaults(self, temp_dir, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        path = temp_dir / "template.yaml"
        ConfigManager.export_template(path)
        config = ConfigManager(path).config
        defaults = AppConfig()
        assert config.tokenizer.separators == defaults.tokenizer.separators
        assert config.output == defaults.output
        assert config.logging == defaults.logging
