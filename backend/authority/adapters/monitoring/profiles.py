"""
Built-in monitoring profiles loaded from data/monitoring_profiles.yaml
"""

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

import yaml

from authority.adapters.parsing import PositionThresholds
from authority.models import Language
from authority.utils.validation import LexiconError
from .base import MonitoringProfile

PROFILES_PATH = Path(__file__).parent.parent.parent / "data" / "monitoring_profiles.yaml"


def load_monitoring_profiles(path: Optional[Union[str, Path]] = None) -> Dict[str, MonitoringProfile]:
    """Load every model profile from a YAML file"""
    profiles_path = Path(path) if path else PROFILES_PATH
    if not profiles_path.exists():
        raise LexiconError(f"Monitoring profiles file {profiles_path} not found")

    with open(profiles_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    profiles = {}
    for model, entry in (data.get("profiles") or {}).items():
        try:
            thresholds = PositionThresholds(tuple(float(c) for c in entry["position_thresholds"]))
            fallback = str(entry["fallback_prompt"])
        except (KeyError, TypeError, ValueError) as e:
            raise LexiconError(f"Monitoring profile '{model}' in {profiles_path.name} is invalid: {e}") from e

        profiles[model] = MonitoringProfile(
            model=model,
            thresholds=thresholds,
            language=Language.parse(entry.get("language", "english")),
            fallback_prompt=fallback,
            prompts=MappingProxyType({str(k): str(v) for k, v in (entry.get("prompts") or {}).items()}),
            system_prompt=entry.get("system_prompt"),
        )

    return profiles


@lru_cache()
def get_monitoring_profiles() -> Mapping[str, MonitoringProfile]:
    """Cached built-in profiles"""
    return MappingProxyType(load_monitoring_profiles())
