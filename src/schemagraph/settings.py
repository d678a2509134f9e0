from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, field_validator

from .protocols import RuleCheck
from .rules import RULES, resolve_rules

ENV_PREFIX = "SCHEMAGRAPH_"
DEFAULT_CONFIG_NAME = "schemagraph.toml"


class AssemblySettings(BaseModel):
    rules: List[str] = list(RULES)
    fail_on_errors: bool = True
    log_level: str = "INFO"
    log_jsonl: bool = False

    model_config = ConfigDict(extra="ignore")

    @field_validator("rules", mode="before")
    @classmethod
    def split_rules(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("rules")
    @classmethod
    def known_rules(cls, value: List[str]) -> List[str]:
        resolve_rules(value)
        return value

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.upper()

    def rule_checks(self) -> List[RuleCheck]:
        return resolve_rules(self.rules)


def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value
    return target


def _load_toml(path: Path | None) -> Dict[str, Any]:
    if path is None or not path.exists():
        return {}
    with path.open("rb") as f:
        data = tomllib.load(f)
    return dict(data.get("schemagraph", {}))


def _extract_prefixed(source: Dict[str, str], *, prefix: str = ENV_PREFIX, delimiter: str = "__") -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for key, value in source.items():
        if not key.startswith(prefix):
            continue
        path = key.removeprefix(prefix).split(delimiter)
        target = data
        for part in path[:-1]:
            target = target.setdefault(part.lower(), {})
        target[path[-1].lower()] = value
    return data


def load_settings(
    *,
    config_path: Path | None = None,
    overrides: Dict[str, Any] | None = None,
) -> AssemblySettings:
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")
    resolved = config_path or Path(DEFAULT_CONFIG_NAME)

    merged: Dict[str, Any] = {}
    _deep_update(merged, _load_toml(resolved))
    _deep_update(merged, _extract_prefixed(dict(os.environ)))
    if overrides:
        _deep_update(merged, overrides)

    return AssemblySettings(**merged)


__all__ = ["AssemblySettings", "load_settings", "ENV_PREFIX"]
