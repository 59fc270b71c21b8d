"""
Style Preset Resolution for Resume Layout

Applies named style presets and per-resume settings to a template's StyleParams.
Presets are composable and can override each other, allowing flexible combination
of spacing, fonts, colors, etc.

Examples:
    # Apply multiple presets (later overrides earlier)
    >>> apply_presets(style, ["spacing_tight", "colors_mono"])

    # Mix a font preset with a spacing preset
    >>> apply_presets(style, ["fonts_serif", "spacing_relaxed"])
"""

import os
from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from dotenv import load_dotenv
from omegaconf import OmegaConf

from resumeflow.contexts.intake.resume_data_structure import ResumeSettings
from resumeflow.contexts.templating.style_data_structures import StyleParams

load_dotenv()
DEFAULT_PRESETS_PATH = Path(__file__).parent / "style_presets.yaml"
STYLE_PRESETS_PATH = Path(os.getenv("STYLE_PRESETS_PATH", str(DEFAULT_PRESETS_PATH)))

STYLE_KEYS = [f.name for f in fields(StyleParams)]


def load_style_presets(config_path: Path = None) -> Dict[str, Any]:
    """
    Load style_presets.yaml config file and flatten to single-level dict.

    Collapses nested structure: spacing.tight -> spacing_tight

    Args:
        config_path: Optional path to config file (defaults to STYLE_PRESETS_PATH env variable)

    Returns:
        Flattened dict mapping preset names to configs
        Example: {"spacing_tight": {...}, "colors_mono": {...}}
    """
    if config_path is None:
        config_path = STYLE_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    # Flatten: category.name -> category_name
    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def apply_presets(
    style: StyleParams,
    preset_names: Sequence[str],
    config_path: Path = None,
) -> StyleParams:
    """
    Apply named style presets to a resolved StyleParams.

    Presets are applied in order, with later presets overriding earlier ones.
    Each preset's keys must be StyleParams field names.

    Args:
        style: Base style (usually from the template registry)
        preset_names: Preset names to apply (e.g., ["spacing_tight", "fonts_serif"])
        config_path: Optional path to style_presets.yaml (defaults to STYLE_PRESETS_PATH)

    Returns:
        New StyleParams with presets applied (the input is left untouched)

    Raises:
        ValueError: If a preset is not found or names an unknown style key
        InvalidStyleError: If the merged values fail StyleParams validation
    """
    if not preset_names:
        return style

    presets_dict = load_style_presets(config_path)

    merged = OmegaConf.create(asdict(style))

    for preset_name in preset_names:
        if preset_name not in presets_dict:
            available = list(presets_dict.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")

        preset_config = presets_dict[preset_name] or {}

        unknown = [key for key in preset_config if key not in STYLE_KEYS]
        if unknown:
            raise ValueError(f"Preset '{preset_name}' has unknown style keys {unknown}. Valid keys: {STYLE_KEYS}")

        # Later presets override earlier ones
        merged = OmegaConf.merge(merged, preset_config)

    return StyleParams(**OmegaConf.to_container(merged, resolve=True))


def apply_settings(style: StyleParams, settings: Optional[ResumeSettings]) -> StyleParams:
    """
    Override style values with a resume's own display settings.

    Font family, font size (body and meta), line spacing and colors are style
    concerns; margins and page size shape the PageGeometry instead.

    Args:
        style: Base style
        settings: Resume settings, or None to keep the style as-is

    Returns:
        StyleParams with the settings' non-empty values applied
    """
    if settings is None:
        return style

    overrides: Dict[str, Any] = {}

    if settings.font_family and settings.font_family.strip():
        overrides["font_family"] = settings.font_family.strip()

    if settings.font_size is not None:
        overrides["body_size"] = float(settings.font_size)
        overrides["meta_size"] = float(settings.font_size)

    if settings.line_spacing is not None:
        overrides["line_height_multiplier"] = float(settings.line_spacing)

    if settings.primary_color:
        overrides["primary_color"] = settings.primary_color
    if settings.secondary_color:
        overrides["secondary_color"] = settings.secondary_color

    if not overrides:
        return style

    return replace(style, **overrides)


def list_presets(config_path: Path = None) -> List[str]:
    """List the flattened names of all available presets."""
    return sorted(load_style_presets(config_path).keys())
