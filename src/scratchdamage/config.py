from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DamageConfig:
    """
    Tunables for the damage pipeline with the classic defaults.

    A YAML file may override any subset of the fields, either at the top level or
    nested under a ``damage`` key:
      - variance_low: float (default 0.9)
      - variance_high: float (default 1.0)
      - defense_cap: float (default 256.0), the defense that fully mitigates
      - scratch_damage: float (default 1.0), added after mitigation
      - strict: bool (default False), reject out-of-domain ratings
    """

    variance_low: float = 0.9
    variance_high: float = 1.0
    defense_cap: float = 256.0
    scratch_damage: float = 1.0
    strict: bool = False

    def __post_init__(self) -> None:
        for name in ("variance_low", "variance_high", "defense_cap", "scratch_damage"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ConfigError(f"{name} must be a finite number, got {value!r}")
        if self.variance_low < 0.0:
            raise ConfigError("variance_low must be non-negative")
        if self.variance_low > self.variance_high:
            raise ConfigError("variance_low must not exceed variance_high")
        if self.defense_cap <= 0.0:
            raise ConfigError("defense_cap must be positive")
        if not isinstance(self.strict, bool):
            raise ConfigError("strict must be a boolean")

    @staticmethod
    def default() -> "DamageConfig":
        return DamageConfig()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DamageConfig":
        """Overlay ``data`` onto the defaults. Unknown keys are an error.

        Keys inside a nested ``damage`` section win over top-level siblings.
        """
        data = dict(data or {})
        section = data.get("damage")
        if isinstance(section, Mapping):
            data.pop("damage")
            data.update(section)
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown damage config keys: {', '.join(unknown)}")
        merged = {**dataclasses.asdict(cls.default()), **data}
        return cls(**merged)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "DamageConfig":
        """Load config from a YAML file, falling back to defaults if it is absent."""
        if path is None:
            return cls.default()
        path = Path(path)
        if not path.exists():
            logger.warning("Damage config file not found: %s; using defaults.", path)
            return cls.default()
        with path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigError(f"Failed to parse damage config {path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"Damage config {path} must contain a mapping")
        cfg = cls.from_dict(data)
        logger.info("Loaded damage config from %s", path)
        return cfg

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump({"damage": dataclasses.asdict(self)}, f, sort_keys=False)
        logger.info("Saved damage config to %s", path)
