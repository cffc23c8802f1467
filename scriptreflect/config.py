"""
Configuration system for scriptreflect.

Supports YAML and JSON configuration files for choosing how scripts
are parsed and how results are printed.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict

import yaml


# Default configuration file names to search for
CONFIG_FILE_NAMES = [
    ".scriptreflect.yaml",
    ".scriptreflect.yml",
    ".scriptreflect.json",
    "scriptreflect.yaml",
    "scriptreflect.yml",
    "scriptreflect.json",
]


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    format: str = "text"  # text, json
    output_file: Optional[str] = None
    verbose: bool = False
    color: bool = True
    sort_lines: bool = False


@dataclass
class ReflectConfig:
    """
    Main configuration for scriptreflect.

    Example YAML config:

    ```yaml
    parser:
      language: javascript
      source_type: script   # script, module
      tolerant: false
      jsx: false

    encoding: utf-8

    output:
      format: text
      color: true
      sort_lines: false
    ```
    """
    # Parser settings
    language: str = "javascript"
    source_type: str = "script"
    tolerant: bool = False
    jsx: bool = False

    # Input settings
    encoding: str = "utf-8"

    # Output settings
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a dictionary."""
        return asdict(self)

    def to_parser_options(self) -> Dict[str, Any]:
        """Convert to parser keyword arguments."""
        return {
            "source_type": self.source_type,
            "tolerant": self.tolerant,
            "jsx": self.jsx,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReflectConfig":
        """Create config from a dictionary."""
        data = dict(data)

        # Handle nested 'parser' section
        if "parser" in data and isinstance(data["parser"], dict):
            data.update(data.pop("parser"))
        if "output" in data and isinstance(data["output"], dict):
            known_output = {f for f in OutputConfig.__dataclass_fields__}
            data["output"] = OutputConfig(
                **{k: v for k, v in data["output"].items() if k in known_output}
            )

        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)


def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    ``.json`` files are read as JSON; anything else goes through the
    YAML loader, which also accepts JSON.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    content = path.read_text(encoding="utf-8")

    if path.suffix == ".json":
        data = json.loads(content)
    else:
        data = yaml.safe_load(content)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must hold a mapping: {path}")
    return data


def find_config(start_path: str = ".") -> Optional[str]:
    """
    Find a configuration file by searching up the directory tree.

    Returns the path to the first config file found, or None.
    """
    current = Path(start_path).resolve()
    if current.is_file():
        current = current.parent

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.exists():
                return str(config_path)
        if current == current.parent:
            return None
        current = current.parent


def load_reflect_config(path: Optional[str] = None, start_dir: str = ".") -> ReflectConfig:
    """
    Load a ReflectConfig from a file or create a default one.

    If path is None, searches for a config file starting from start_dir.
    """
    if path is None:
        path = find_config(start_dir)

    if path is None:
        return ReflectConfig()

    return ReflectConfig.from_dict(load_config(path))


def create_default_config() -> str:
    """
    Create a default configuration file content.
    """
    config = {
        "parser": {
            "language": "javascript",
            "source_type": "script",
            "tolerant": False,
            "jsx": False,
        },
        "encoding": "utf-8",
        "output": {
            "format": "text",
            "verbose": False,
            "color": True,
            "sort_lines": False,
        },
    }

    return yaml.dump(config, default_flow_style=False, sort_keys=False)
