import json
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from chromasharp.chroma import bucket_width, validate_threshold
from chromasharp.sharpen import get_sharpen_variant

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SETTINGS_PATH = os.path.join(PROJECT_ROOT, "config", "settings.json")


@dataclass
class ChromaSettings:
    foreground: str = "foreground.jpg"
    background: str = "background.jpg"
    output: str = "overlay.jpg"
    threshold: int = 32
    buckets: int = 4
    window: str = "Overlay Image"


@dataclass
class SharpenSettings:
    image: str = "boomer.jpg"
    output: str = "output.jpg"
    variants: List[str] = field(default_factory=lambda: ["indexed", "rows", "cursor"])
    window: str = "Sharpened Image"


@dataclass
class Settings:
    chroma: ChromaSettings = field(default_factory=ChromaSettings)
    sharpen: SharpenSettings = field(default_factory=SharpenSettings)


def _check_variants(names: List[str]) -> None:
    for name in names:
        get_sharpen_variant(name)


# Range checks applied after the type check
_VALIDATORS: Dict[Tuple[str, str], Callable[[Any], Any]] = {
    ("chroma", "threshold"): validate_threshold,
    ("chroma", "buckets"): bucket_width,
    ("sharpen", "variants"): _check_variants,
}


def _check_value(name: str, key: str, default: Any, value: Any) -> None:
    """Raise ValueError unless ``value`` has the type of ``default`` and passes its range check."""
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"expected an integer, got {value!r}")
    elif isinstance(default, str):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"expected a non-empty string, got {value!r}")
    elif isinstance(default, list):
        if not isinstance(value, list) or not value or not all(isinstance(v, str) for v in value):
            raise ValueError(f"expected a non-empty list of strings, got {value!r}")
    validator = _VALIDATORS.get((name, key))
    if validator is not None:
        validator(value)


def _merge_section(section: Any, values: Dict[str, Any], name: str) -> None:
    for key, value in values.items():
        if not hasattr(section, key):
            print(f"Warning: unknown setting '{name}.{key}' in settings.json, ignoring")
            continue
        default = getattr(section, key)
        try:
            _check_value(name, key, default, value)
        except ValueError as exc:
            print(f"Warning: invalid setting '{name}.{key}' in settings.json ({exc}), using default {default!r}")
            continue
        setattr(section, key, value)


def load_settings(path: str = SETTINGS_PATH) -> Settings:
    """Load demo settings from config/settings.json, falling back to defaults."""
    settings = Settings()

    if not os.path.exists(path):
        print(f"Warning: settings.json not found at {path}, using defaults")
        return settings

    try:
        with open(path, "r", encoding="utf-8") as settings_file:
            data = json.load(settings_file) or {}
    except (OSError, ValueError) as exc:
        print(f"Warning: Could not load settings from {path}: {exc}")
        return settings

    if not isinstance(data, dict):
        print("Warning: settings.json must contain a JSON object, using defaults")
        return settings

    for name in ("chroma", "sharpen"):
        values = data.get(name)
        if values is None:
            continue
        if not isinstance(values, dict):
            print(f"Warning: setting '{name}' must be an object, ignoring")
            continue
        _merge_section(getattr(settings, name), values, name)

    return settings
