from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from verlet_sims.core.config import SimConfig


@dataclass(frozen=True)
class LoadedPreset:
    preset_path: Path
    resolved: Dict[str, Any]
    loaded_files: Tuple[Path, ...]  # includes + preset itself

    def to_sim_config(self) -> SimConfig:
        return SimConfig.from_dict(self.resolved)


def _deep_merge(base: Any, override: Any) -> Any:
    """
    Merge override into base and return merged value.

    Rules:
      - dict + dict: recursive merge
      - list: override replaces base (no concatenation)
      - scalars: override replaces base
    """
    if isinstance(base, dict) and isinstance(override, dict):
        out = dict(base)
        for k, v in override.items():
            out[k] = _deep_merge(out[k], v) if k in out else v
        return out
    if isinstance(override, list):
        return list(override)
    return override


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/dict: {path}")
    return data


def _resolve(path: Path, seen: Tuple[Path, ...], loaded: List[Path]) -> Dict[str, Any]:
    if path in seen:
        chain = " -> ".join(str(p) for p in (*seen, path))
        raise ValueError(f"Preset include cycle: {chain}")
    data = _load_yaml(path)

    include_list = data.pop("include", None) or []
    if not isinstance(include_list, list):
        raise ValueError(f"'include' must be a list in {path}")

    merged: Dict[str, Any] = {}
    for rel in include_list:
        if not isinstance(rel, str):
            raise ValueError(f"include entries must be strings. Got {type(rel)} in {path}")
        inc_path = (path.parent / rel).expanduser().resolve()
        merged = _deep_merge(merged, _resolve(inc_path, (*seen, path), loaded))

    loaded.append(path)
    return _deep_merge(merged, data)


def load_preset(preset_path: str | Path) -> LoadedPreset:
    """
    Load a preset YAML that may pull in others first:

      include:
        - base.yaml
      population_cap: 300

    Includes are merged in order, nested includes are followed, and the
    preset's own keys win.
    """
    preset_path = Path(preset_path).expanduser().resolve()
    loaded: List[Path] = []
    resolved = _resolve(preset_path, (), loaded)
    return LoadedPreset(
        preset_path=preset_path,
        resolved=resolved,
        loaded_files=tuple(loaded),
    )
