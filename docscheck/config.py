"""Configuration loading for docs-check (.docs-check.yml and environment)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".docs-check.yml"
DEFAULT_TEMP_DIRECTORY = "/tmp/docs-check"
DEFAULT_LABELS = ("documentation",)
DEFAULT_BRANCH_PREFIX = "docs-check"


@dataclass
class LLMConfig:
    """Analysis model settings."""

    model: Optional[str] = None
    max_turns: Optional[int] = None
    timeout: Optional[float] = None
    permission_mode: str = "plan"


@dataclass
class GitHubConfig:
    """Settings for remote issue and pull request creation."""

    labels: List[str] = field(default_factory=lambda: list(DEFAULT_LABELS))
    branch_prefix: str = DEFAULT_BRANCH_PREFIX


@dataclass
class AppConfig:
    """Effective settings for one docs-check run."""

    anthropic_api_key: str
    github_token: Optional[str] = None
    temp_directory: Path = Path(DEFAULT_TEMP_DIRECTORY)
    llm: LLMConfig = field(default_factory=LLMConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)


def load_config(
    config_path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    require_github_token: bool = False,
) -> AppConfig:
    """Build the run configuration from the optional YAML file and environment."""
    environ = os.environ if env is None else env

    anthropic_api_key = environ.get("ANTHROPIC_API_KEY")
    if not anthropic_api_key:
        raise ConfigError("ANTHROPIC_API_KEY environment variable is required")

    github_token = environ.get("GITHUB_TOKEN") or None
    if require_github_token and not github_token:
        raise ConfigError("GITHUB_TOKEN environment variable is required")

    data = _load_file(config_path)

    llm_data = _as_dict(data.get("llm"))
    llm = LLMConfig(
        model=_as_str(llm_data.get("model")),
        max_turns=_as_int(llm_data.get("max_turns")),
        timeout=_as_float(llm_data.get("timeout")),
        permission_mode=_as_str(llm_data.get("permission_mode")) or "plan",
    )

    github_data = _as_dict(data.get("github"))
    github = GitHubConfig()
    if github_data:
        if "labels" in github_data:
            github.labels = _as_str_list(github_data.get("labels"))
        github.branch_prefix = _as_str(github_data.get("branch_prefix")) or DEFAULT_BRANCH_PREFIX

    temp_directory = (
        environ.get("TEMP_DIR")
        or _as_str(data.get("temp_directory"))
        or DEFAULT_TEMP_DIRECTORY
    )

    return AppConfig(
        anthropic_api_key=anthropic_api_key,
        github_token=github_token,
        temp_directory=Path(temp_directory).expanduser(),
        llm=llm,
        github=github,
    )


def _load_file(config_path: Path | None) -> Dict[str, Any]:
    if config_path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        if not candidate.exists():
            return {}
        config_path = candidate
    else:
        config_path = config_path.expanduser()
        if config_path.is_dir():
            config_path = config_path / CONFIG_FILENAME
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

    text = config_path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {config_path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{config_path.name} must contain a mapping at the root")
    return loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "AppConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "GitHubConfig",
    "LLMConfig",
    "load_config",
]
