#!/usr/bin/env python3
"""Configuration management for speedread.

This module handles configuration loading, configuration merging/overrides,
value clamping and the focal color table.
"""
from __future__ import annotations

import dataclasses
import json
import math
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from .logging_utils import warn
from .models import ResolvedConfig, Word
from .text_processing import find_max_word_len


# ============================================================
# Limits
# ============================================================

MIN_WPM = 10
MAX_WPM = 1000
WPM_STEP = 25

# reference word length used by the "fixed" scale policy
FIXED_REFERENCE_LEN = 8

SCALE_REFS = ("longest", "fixed")


# ============================================================
# Focal Colors
# ============================================================

FOCAL_COLORS: Dict[str, str] = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
}

DEFAULT_FOCAL_COLOR = "red"


def color_to_ansi(name: Optional[str]) -> str:
    """Convert a color name to its ANSI foreground escape code.

    Args:
        name: Color name (case-insensitive)

    Returns:
        ANSI escape code; unrecognized names fall back to red
    """
    key = (name or "").strip().lower()
    return FOCAL_COLORS.get(key, FOCAL_COLORS[DEFAULT_FOCAL_COLOR])


# ============================================================
# Configuration Loading
# ============================================================

def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to JSON config file, or None to skip loading

    Returns:
        Dictionary of configuration values, or empty dict if path is None

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config file isn't a valid JSON object
    """
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object at top-level.")
    return data


def apply_overrides(base: ResolvedConfig, overrides: Dict[str, Any]) -> ResolvedConfig:
    """Apply configuration overrides to a base configuration.

    Args:
        base: Base ResolvedConfig instance
        overrides: Dictionary of configuration values to override

    Returns:
        New ResolvedConfig instance with overrides applied
    """
    d = dataclasses.asdict(base)
    for k, v in overrides.items():
        if k in d:
            d[k] = v
    return ResolvedConfig(**d)


def clamp_wpm(wpm: int) -> int:
    """Clamp a words-per-minute value to the supported range."""
    return max(MIN_WPM, min(MAX_WPM, int(wpm)))


# expected value types; bool is rejected where a number is expected
_FIELD_TYPES: Dict[str, Tuple[type, ...]] = {
    "wpm": (int, float),
    "punct_pause_ms": (int, float),
    "focal": (bool,),
    "focal_color": (str,),
    "context": (bool,),
    "scale_ref": (str,),
}


def _check_types(cfg: ResolvedConfig) -> None:
    for name, kinds in _FIELD_TYPES.items():
        value = getattr(cfg, name)
        bad = not isinstance(value, kinds) or (isinstance(value, bool) and bool not in kinds)
        if bad or (isinstance(value, float) and not math.isfinite(value)):
            expected = " or ".join(k.__name__ for k in kinds)
            raise ValueError(f"Invalid value for '{name}': {value!r} (expected {expected})")


def validate_config(cfg: ResolvedConfig) -> ResolvedConfig:
    """Normalize a resolved configuration in place.

    WPM is clamped and the punctuation pause floored at zero, matching
    the command-line behavior. An unknown focal color is replaced by red
    with a warning.

    Raises:
        ValueError: If a value has the wrong type or scale_ref is not a
            known policy
    """
    _check_types(cfg)
    cfg.wpm = clamp_wpm(cfg.wpm)
    cfg.punct_pause_ms = max(0, int(cfg.punct_pause_ms))
    if cfg.scale_ref not in SCALE_REFS:
        raise ValueError(f"Invalid scale_ref '{cfg.scale_ref}'. Valid values: {', '.join(SCALE_REFS)}")
    if (cfg.focal_color or "").strip().lower() not in FOCAL_COLORS:
        warn(f"Unknown focal color '{cfg.focal_color}', using {DEFAULT_FOCAL_COLOR}")
        cfg.focal_color = DEFAULT_FOCAL_COLOR
    return cfg


def resolve_scale_reference(cfg: ResolvedConfig, words: Sequence[Word]) -> int:
    """Pick the reference word length used for uniform scaling.

    Args:
        cfg: Resolved configuration
        words: Full tokenized document

    Returns:
        Longest word length in the document for the "longest" policy,
        FIXED_REFERENCE_LEN for the "fixed" policy
    """
    if cfg.scale_ref == "fixed":
        return FIXED_REFERENCE_LEN
    return find_max_word_len(words)
