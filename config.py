from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RunConfig:
    """Defaults for one run; anything left as None is asked for interactively."""

    graph_file: Optional[str] = None
    start_node: Optional[str] = None
    end_node: Optional[str] = None
    log_level: str = "WARNING"
    plot_out: Optional[str] = None

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)

    def merged(self, **overrides: Any) -> "RunConfig":
        """Return a copy with every non-None override applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return RunConfig.from_dict(values)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "RunConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        values: Dict[str, Optional[str]] = {}
        for key, value in raw.items():
            if value is None or value is False:
                values[key] = None
            elif value is True:
                raise ValueError(f"Invalid value for {key}: expected a string, got true")
            else:
                values[key] = str(value)
        for key in ("start_node", "end_node"):
            if values.get(key) is not None:
                values[key] = values[key].strip()

        level = (values.pop("log_level", None) or "WARNING").upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level {level!r}; expected one of {', '.join(LOG_LEVELS)}"
            )
        return cls(log_level=level, **values)


def load_config(path: Path) -> RunConfig:
    with Path(path).open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)

    if raw is None:
        return RunConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level of the configuration must be a mapping")
    return RunConfig.from_dict(raw)
