"""Deployment configuration for GAEA schema catalogs."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable


class SchemaVariant(str, Enum):
    """The two schema variants. They are never mixed within one dataset."""

    FULL = "full"
    LITE = "lite"


class UnknownFieldPolicy(str, Enum):
    """What decoding does with field numbers the local schema does not know."""

    IGNORE = "ignore"
    PRESERVE = "preserve"


@dataclass(frozen=True)
class DeploymentConfig:
    """Schema variant and codec behaviour chosen once per deployment."""

    name: str = "full"
    variant: SchemaVariant = SchemaVariant.FULL
    unknown_fields: UnknownFieldPolicy = UnknownFieldPolicy.IGNORE
    description: str = ""

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "DeploymentConfig":
        """Build a config from a JSON-style mapping."""

        try:
            variant = SchemaVariant(str(payload.get("variant", "full")).strip().lower())
            policy = UnknownFieldPolicy(
                str(payload.get("unknown_fields", "ignore")).strip().lower()
            )
        except ValueError as exc:
            raise ValueError(f"Invalid deployment config: {exc}") from exc

        return cls(
            name=str(payload.get("name", variant.value)),
            variant=variant,
            unknown_fields=policy,
            description=str(payload.get("description", "")),
        )


class DeploymentConfigLoader:
    """Load deployment configs shipped in ``gaea/deployments`` or from a custom path."""

    def __init__(self, config_dir: str | Path | Traversable | None = None) -> None:
        if config_dir is None:
            config_dir = resources.files("gaea") / "deployments"
        elif isinstance(config_dir, str):
            config_dir = Path(config_dir)
        self.config_dir = config_dir

    def list_configs(self) -> list[str]:
        """Return available config names from the configured directory."""

        if not self.config_dir.is_dir():
            return []
        return sorted(
            entry.name.removesuffix(".json")
            for entry in self.config_dir.iterdir()
            if entry.name.endswith(".json") and entry.is_file()
        )

    def load(self, name_or_path: str | Path) -> DeploymentConfig:
        """Load a config by name (for example, ``lite``) or explicit path."""

        source = self._resolve(name_or_path)
        payload = json.loads(source.read_text(encoding="utf-8"))
        return DeploymentConfig.from_mapping(payload)

    def _resolve(self, name_or_path: str | Path) -> Path | Traversable:
        requested = Path(name_or_path)
        if requested.is_file():
            return requested

        shipped = self.config_dir / f"{name_or_path}.json"
        if shipped.is_file():
            return shipped

        raise FileNotFoundError(
            f"Deployment config not found: {name_or_path}. "
            f"Available: {', '.join(self.list_configs()) or 'none'}"
        )
