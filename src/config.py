"""
Configuration for the inventory utilities.

Values are resolved from, in order of precedence: command-line overrides,
environment variables, an optional YAML config file, and the defaults below.
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from jsonschema import ValidationError, validate

DEFAULT_REGION = "us-west-2"
DEFAULT_WINDOW_MINUTES = 60

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "scan_stacks": {
            "type": "object",
            "properties": {
                "region": {"type": "string"},
                "profile": {"type": "string"},
                "all_regions": {"type": "boolean"},
                "discover_regions": {"type": "boolean"},
                "regions": {"type": "array", "items": {"type": "string"}},
                "verbose": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "show_task_logs": {
            "type": "object",
            "properties": {
                "region": {"type": "string"},
                "profile": {"type": "string"},
                "cluster": {"type": "string"},
                "task_id": {"type": "string"},
                "log_group_name": {"type": "string"},
                "window_minutes": {"type": "integer", "minimum": 1},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


class ConfigurationError(Exception):
    """Raised when configuration is invalid or incomplete."""


def load_config_file(path: Union[str, Path], section: str) -> Dict[str, Any]:
    """
    Load one section of a YAML config file.

    Args:
        path: Path to the YAML file
        section: Top-level key to return (``scan_stacks`` or ``show_task_logs``)
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    try:
        validate(instance=data, schema=CONFIG_SCHEMA)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e.message}") from e

    return dict(data.get(section) or {})


def _merge(
    defaults: Dict[str, Any],
    file_values: Optional[Mapping[str, Any]],
    env_values: Mapping[str, Any],
    overrides: Mapping[str, Any],
) -> Dict[str, Any]:
    merged = dict(defaults)
    for layer in (file_values or {}, env_values, overrides):
        merged.update({k: v for k, v in layer.items() if v not in (None, "")})
    return merged


def _check_known(cls: type, values: Mapping[str, Any]) -> None:
    known = {f.name for f in fields(cls)}
    unknown = set(values) - known
    if unknown:
        raise ConfigurationError(f"Unknown settings: {', '.join(sorted(unknown))}")


@dataclass
class StackScanConfig:
    """Settings for the stack scanner."""

    region: str = DEFAULT_REGION
    profile: Optional[str] = None
    all_regions: bool = False
    discover_regions: bool = True
    regions: List[str] = field(default_factory=list)
    verbose: bool = True

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        file_values: Optional[Mapping[str, Any]] = None,
        **overrides: Any,
    ) -> "StackScanConfig":
        """Build the scanner settings from the environment and overrides."""
        environ = os.environ if environ is None else environ
        env_values = {
            "region": environ.get("AWS_REGION"),
            "profile": environ.get("AWS_PROFILE"),
        }
        _check_known(cls, overrides)
        return cls(**_merge({}, file_values, env_values, overrides))


@dataclass
class TaskLogConfig:
    """Settings for the task log fetcher."""

    cluster: str
    task_id: str
    log_group_name: str
    region: str = DEFAULT_REGION
    profile: Optional[str] = None
    window_minutes: int = DEFAULT_WINDOW_MINUTES

    REQUIRED = {
        "cluster": "ECS_CLUSTER",
        "task_id": "ECS_TASK_ID",
        "log_group_name": "LOG_GROUP_NAME",
    }

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        file_values: Optional[Mapping[str, Any]] = None,
        **overrides: Any,
    ) -> "TaskLogConfig":
        """
        Build the fetcher settings from the environment and overrides.

        Raises:
            ConfigurationError: if the cluster, task id or log group is missing
        """
        environ = os.environ if environ is None else environ
        env_values = {
            "region": environ.get("AWS_REGION"),
            "profile": environ.get("AWS_PROFILE"),
        }
        for name, variable in cls.REQUIRED.items():
            env_values[name] = environ.get(variable)

        _check_known(cls, overrides)
        values = _merge({}, file_values, env_values, overrides)

        for name, variable in cls.REQUIRED.items():
            if not values.get(name):
                raise ConfigurationError(f"{variable} environment variable is required")

        if int(values.get("window_minutes", DEFAULT_WINDOW_MINUTES)) < 1:
            raise ConfigurationError("window_minutes must be at least 1")

        return cls(**values)
