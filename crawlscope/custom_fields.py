"""User-defined output fields extracted from requests and responses by regex."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from crawlscope.fields import FIELD_NAMES

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+", re.ASCII)


class Part(str, Enum):
    """Part of the exchange a custom field is extracted from."""

    HEADER = "header"
    BODY = "body"
    RESPONSE = "response"

    def __str__(self) -> str:
        return self.value


class CustomFieldError(ValueError):
    """Raised when a custom field configuration cannot be read or is invalid."""


@dataclass
class CustomFieldConfig:
    """Definition of one custom field."""

    name: str = ""
    type: str = ""
    part: str = ""
    group: int = 0
    regex: list[str] = field(default_factory=list)
    compiled_regex: list[re.Pattern[str]] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_mapping(cls, data: Any) -> CustomFieldConfig:
        """Build a config from one decoded YAML entry."""
        if not isinstance(data, dict):
            raise CustomFieldError("could not decode field config: entry is not a mapping")
        regex = data.get("regex") or []
        if isinstance(regex, str):
            regex = [regex]
        try:
            return cls(
                name=str(data.get("name") or ""),
                type=str(data.get("type") or ""),
                part=str(data.get("part") or ""),
                group=int(data.get("group") or 0),
                regex=[str(r) for r in regex],
            )
        except (TypeError, ValueError) as exc:
            raise CustomFieldError(f"could not decode field config: {exc}") from exc

    def to_mapping(self) -> dict[str, Any]:
        """Return the entry as a mapping, leaving out empty values."""
        items = {
            "name": self.name,
            "type": self.type,
            "part": self.part,
            "group": self.group,
            "regex": list(self.regex),
        }
        return {key: value for key, value in items.items() if value}


DEFAULT_FIELD_CONFIG_DATA: tuple[CustomFieldConfig, ...] = (
    CustomFieldConfig(
        name="email",
        type="regex",
        part=Part.RESPONSE.value,
        regex=[r"([a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+)"],
    ),
)


def _read_configs(path: str | os.PathLike[str]) -> list[CustomFieldConfig]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CustomFieldError(f"could not read field config: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CustomFieldError(f"could not decode field config: {exc}") from exc
    if data is None:
        raise CustomFieldError("could not decode field config: empty document")
    if not isinstance(data, list):
        raise CustomFieldError("could not decode field config: expected a list")
    return [CustomFieldConfig.from_mapping(item) for item in data]


def validate_custom_field_names(path: str | os.PathLike[str]) -> None:
    """Check that every field in the config has a valid, unique, non-reserved name."""
    seen: set[str] = set()
    for item in _read_configs(path):
        if not _NAME_PATTERN.fullmatch(item.name):
            raise CustomFieldError(f"wrong custom field name {item.name}")
        if item.name in FIELD_NAMES:
            raise CustomFieldError(
                f'could not register custom field. "{item.name}" already pre-defined field'
            )
        if item.name in seen:
            raise CustomFieldError(
                f'could not register custom field. "{item.name}" custom field already exists'
            )
        seen.add(item.name)


def load_custom_fields(path: str | os.PathLike[str], fields: str) -> dict[str, CustomFieldConfig]:
    """Load the config and return the entries named in the comma-separated ``fields``."""
    all_fields: dict[str, CustomFieldConfig] = {}
    for item in _read_configs(path):
        for pattern in item.regex:
            try:
                item.compiled_regex.append(re.compile(pattern))
            except re.error as exc:
                raise CustomFieldError(f"could not parse regex in field config: {exc}") from exc
        if not item.part:
            item.part = Part.RESPONSE.value
        all_fields[item.name] = item
    return {name: all_fields[name] for name in fields.split(",") if name and name in all_fields}


def init_custom_field_config_file(home: str | os.PathLike[str] | None = None) -> Path:
    """Return the default config path, writing the default config there if missing."""
    base = Path(home) if home is not None else Path.home()
    config = base / ".config" / "crawlscope" / "field-config.yaml"
    if config.is_file():
        return config
    config.parent.mkdir(parents=True, exist_ok=True)
    with config.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(
            [item.to_mapping() for item in DEFAULT_FIELD_CONFIG_DATA],
            handle,
            sort_keys=False,
            default_flow_style=False,
        )
    return config