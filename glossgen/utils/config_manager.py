"""
Configuration manager for loading and saving settings from YAML/JSON files.
"""
import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict, fields
import os
from dotenv import load_dotenv

from ..core.exceptions import InvalidConfigError
from ..core.models import (
    DuplicatePolicy, DEFAULT_SEPARATORS, DEFAULT_INDEX_NAME, DEFAULT_INDEX_TITLE
)


@dataclass
class TokenizerConfig:
    """Configuration for the tokenizer."""
    separators: str = DEFAULT_SEPARATORS


@dataclass
class GlossaryConfig:
    """Configuration for the glossary index."""
    duplicate_policy: str = DuplicatePolicy.REJECT.value


@dataclass
class InputConfig:
    """Configuration for reading the terms file."""
    encoding: str = "utf-8"
    trailing_space: bool = False


@dataclass
class OutputConfig:
    """Configuration for generated pages."""
    output_dir: str = "."
    index_name: str = DEFAULT_INDEX_NAME
    encoding: str = "utf-8"
    title: str = DEFAULT_INDEX_TITLE
    heading_color: str = "red"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: Optional[str] = None
    log_level: str = "INFO"
    console_level: str = "WARNING"
    max_bytes: int = 10_000_000
    backup_count: int = 5
    use_colors: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    glossary: GlossaryConfig = field(default_factory=GlossaryConfig)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'tokenizer': TokenizerConfig,
    'glossary': GlossaryConfig,
    'input': InputConfig,
    'output': OutputConfig,
    'logging': LoggingConfig,
}


class ConfigManager:
    """
    Configuration manager for loading/saving application settings.
    Supports YAML and JSON formats, environment variables, and defaults.
    """

    def __init__(self, config_path: Optional[Path] = None, create_if_missing: bool = False):
        """
        Initialize config manager.

        Args:
            config_path: Path to config file (YAML or JSON)
            create_if_missing: Write a default config file if none exists
        """
        self.config_path = Path(config_path) if config_path else Path("glossgen.yaml")
        self.config: AppConfig = AppConfig()

        # Load environment variables
        load_dotenv()

        if self.config_path.exists():
            self.load()
        else:
            if create_if_missing:
                self.save()
            self._apply_env_vars()
            self.validate()

    def load(self) -> AppConfig:
        """
        Load configuration from file.

        Returns:
            AppConfig instance

        Raises:
            InvalidConfigError: If the file format or a value is invalid
        """
        if not self.config_path.exists():
            return self.config

        # Determine format by extension
        if self.config_path.suffix in ['.yaml', '.yml']:
            data = self._load_yaml()
        elif self.config_path.suffix == '.json':
            data = self._load_json()
        else:
            raise InvalidConfigError(
                f"Unsupported config format: {self.config_path.suffix}",
                field="config_path"
            )

        self.config = self._parse_config(data)

        # Override with environment variables
        self._apply_env_vars()
        self.validate()

        return self.config

    def save(self, config: Optional[AppConfig] = None):
        """
        Save configuration to file.

        Args:
            config: Config to save (uses current if None)
        """
        if config:
            self.config = config

        data = self._config_to_dict(self.config)

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.suffix in ['.yaml', '.yml']:
            self._save_yaml(data)
        elif self.config_path.suffix == '.json':
            self._save_json(data)
        else:
            raise InvalidConfigError(
                f"Unsupported config format: {self.config_path.suffix}",
                field="config_path"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot notation key.

        Args:
            key: Configuration key (e.g., 'output.index_name')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        parts = key.split('.')
        value = self.config

        for part in parts:
            if hasattr(value, part):
                value = getattr(value, part)
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set configuration value by dot notation key.

        Args:
            key: Configuration key
            value: Value to set
        """
        parts = key.split('.')
        obj = self.config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise KeyError(f"Invalid config key: {key}")

        if not hasattr(obj, parts[-1]):
            raise KeyError(f"Invalid config key: {key}")
        setattr(obj, parts[-1], value)

    def validate(self):
        """
        Check values that would otherwise fail later in the run.

        Raises:
            InvalidConfigError: On an invalid value
        """
        try:
            DuplicatePolicy.from_value(self.config.glossary.duplicate_policy)
        except ValueError as e:
            raise InvalidConfigError(str(e), field="glossary.duplicate_policy") from e

        if not self.config.output.index_name:
            raise InvalidConfigError("Index page name cannot be empty", field="output.index_name")

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML config file."""
        with open(self.config_path, 'r', encoding='utf-8') as f:
            try:
                return yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise InvalidConfigError(
                    f"Invalid YAML in {self.config_path}: {e}", field="config_path"
                ) from e

    def _load_json(self) -> Dict[str, Any]:
        """Load JSON config file."""
        with open(self.config_path, 'r', encoding='utf-8') as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidConfigError(
                    f"Invalid JSON in {self.config_path}: {e}", field="config_path"
                ) from e

    def _save_yaml(self, data: Dict[str, Any]):
        """Save config as YAML."""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, indent=2)

    def _save_json(self, data: Dict[str, Any]):
        """Save config as JSON."""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _parse_config(self, data: Dict[str, Any]) -> AppConfig:
        """Parse dictionary to AppConfig."""
        if not isinstance(data, dict):
            raise InvalidConfigError("Config root must be a mapping", field="config")

        config = AppConfig()

        for section, section_cls in _SECTIONS.items():
            if section not in data:
                continue
            values = data[section]
            if values is None:
                values = {}
            if not isinstance(values, dict):
                raise InvalidConfigError(f"Section '{section}' must be a mapping", field=section)
            known = {f.name for f in fields(section_cls)}
            unknown = set(values) - known
            if unknown:
                raise InvalidConfigError(
                    f"Unknown keys in '{section}': {', '.join(sorted(map(str, unknown)))}",
                    field=section
                )
            setattr(config, section, section_cls(**values))

        return config

    def _config_to_dict(self, config: AppConfig) -> Dict[str, Any]:
        """Convert AppConfig to dictionary."""
        return {section: asdict(getattr(config, section)) for section in _SECTIONS}

    def _apply_env_vars(self):
        """Override config with environment variables."""
        if os.getenv('GLOSSGEN_SEPARATORS'):
            self.config.tokenizer.separators = os.getenv('GLOSSGEN_SEPARATORS')

        if os.getenv('GLOSSGEN_DUPLICATE_POLICY'):
            self.config.glossary.duplicate_policy = os.getenv('GLOSSGEN_DUPLICATE_POLICY')

        if os.getenv('GLOSSGEN_OUTPUT_DIR'):
            self.config.output.output_dir = os.getenv('GLOSSGEN_OUTPUT_DIR')
        if os.getenv('GLOSSGEN_INDEX_NAME'):
            self.config.output.index_name = os.getenv('GLOSSGEN_INDEX_NAME')

        if os.getenv('LOG_LEVEL'):
            self.config.logging.log_level = os.getenv('LOG_LEVEL')
            self.config.logging.console_level = os.getenv('LOG_LEVEL')

    @staticmethod
    def export_template(output_path: Path):
        """
        Export configuration template with comments.

        Args:
            output_path: Path to save template
        """
        template = """# Glossary Generator Configuration

# Tokenizer Settings
tokenizer:
  separators: " \\t,"       # Characters that separate words

# Glossary Settings
glossary:
  duplicate_policy: reject  # reject, first_wins, last_wins

# Input Settings
input:
  encoding: utf-8           # Terms file encoding
  trailing_space: false     # Keep a space after every definition line

# Output Settings
output:
  output_dir: .             # Directory for generated pages
  index_name: index.html    # Index page name
  encoding: utf-8           # Page encoding
  title: Glossary           # Index page title and heading
  heading_color: red        # Term heading color

# Logging Settings
logging:
  log_dir: null             # Log directory (null = console only)
  log_level: INFO           # File log level
  console_level: WARNING    # Console output level
  max_bytes: 10000000       # Max log file size (10MB)
  backup_count: 5           # Number of backup files
  use_colors: true          # Colored console output
"""

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(template)

