"""I/O utilities for the win-chance engine.

This module owns:
- file format knowledge (JSON, CSV)
- parsing and validation of engine config files
- writing chance tables built by :mod:`frustration_odds.export`

Keeping this separate from :mod:`frustration_odds.data` keeps the engine
free of file handling.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from .data import EngineConfig
from .export import CHANCE_TABLE_FIELDS

_ENGINE_CONFIG_KEYS: tuple[str, ...] = ("default_ranks", "default_suits", "decimal_places", "max_total_cards")


def load_engine_config_from_json(path: str | Path) -> EngineConfig:
    """Load :class:`~frustration_odds.data.EngineConfig` from JSON.

    Expected format: an object such as::

        {"default_ranks": 13, "default_suits": 4, "decimal_places": 3, "max_total_cards": 520}

    Missing keys keep their defaults. Unknown keys are rejected so typos
    don't go unnoticed.
    """

    path = Path(path)
    raw = json.loads(path.read_text(encoding="utf-8-sig"))
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} must contain a JSON object")

    unknown = sorted(set(raw) - set(_ENGINE_CONFIG_KEYS))
    if unknown:
        raise ValueError(f"{path.name} has unknown keys: {unknown}")

    kwargs: dict[str, int] = {}
    for key in _ENGINE_CONFIG_KEYS:
        if key not in raw:
            continue
        value = raw[key]
        # JSON true/false would pass int() silently.
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{path.name}: {key} must be an integer, got {value!r}")
        kwargs[key] = value

    return EngineConfig(**kwargs)


def write_chance_table_json(path: str | Path, records: Iterable[Mapping[str, Any]]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(list(records), indent=2), encoding="utf-8")
    return path


def write_chance_table_csv(path: str | Path, records: Iterable[Mapping[str, Any]]) -> Path:
    """Write chance-table records with a fixed header (see ``CHANCE_TABLE_FIELDS``)."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(CHANCE_TABLE_FIELDS))
        writer.writeheader()
        for rec in records:
            writer.writerow({k: rec[k] for k in CHANCE_TABLE_FIELDS})
    return path
