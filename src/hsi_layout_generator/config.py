"""
Configuration schema and loader for the layout generator.

Defines Pydantic models representing structured configuration sections,
a TOML-based config loader, and the merge of CLI overrides on top of a
loaded or default configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from hsi_layout_generator.config_defaults import (
    DEFAULT_LAYOUT,
    DEFAULT_LAYOUT_HEIGHT,
    DEFAULT_LAYOUT_WIDTH,
    DEFAULT_NUM_CLASSES,
    DEFAULT_SEED,
    DEFAULT_SIZE_PARAMETER,
    DEFAULT_VERBOSE,
)
from hsi_layout_generator.type_defs import LayoutName


class GridConfig(BaseModel):
    """Dimensions of the generated layout."""

    width: int = Field(DEFAULT_LAYOUT_WIDTH, ge=1)
    height: int = Field(DEFAULT_LAYOUT_HEIGHT, ge=1)


class GenerationConfig(BaseModel):
    """Select the layout generator and its parameters."""

    layout: LayoutName = Field(DEFAULT_LAYOUT)
    num_classes: int = Field(DEFAULT_NUM_CLASSES, ge=1)
    # Stripe width, tile width, or blob size; zero or below means auto.
    size_parameter: int = Field(DEFAULT_SIZE_PARAMETER)
    image: str | None = None


class RandomConfig(BaseModel):
    """Control reproducibility of random layouts."""

    seed: int | None = Field(DEFAULT_SEED, ge=0)


class OutputConfig(BaseModel):
    """Configure where the class map is saved and how much is logged."""

    output: str | None = None
    verbose: bool = DEFAULT_VERBOSE


class LayoutGeneratorConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    grid: GridConfig = Field(
        default_factory=lambda: GridConfig.model_validate({}),
    )
    generation: GenerationConfig = Field(
        default_factory=lambda: GenerationConfig.model_validate({}),
    )
    random: RandomConfig = Field(
        default_factory=lambda: RandomConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> LayoutGeneratorConfig:
        """Load and validate a layout configuration from a TOML file."""
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return LayoutGeneratorConfig.model_validate(doc.unwrap())


# CLI destination name -> (config section, field)
_CLI_FIELDS: dict[str, tuple[str, str]] = {
    "width": ("grid", "width"),
    "height": ("grid", "height"),
    "layout": ("generation", "layout"),
    "num_classes": ("generation", "num_classes"),
    "size": ("generation", "size_parameter"),
    "image": ("generation", "image"),
    "seed": ("random", "seed"),
    "output": ("output", "output"),
}


def build_config_from_cli(
    args: dict[str, Any],
    base_config: LayoutGeneratorConfig | None = None,
) -> LayoutGeneratorConfig:
    """
    Overlay explicitly provided CLI values on a base configuration.

    Arguments that are absent or None leave the base value in place. The
    merged data is validated again so CLI values obey the same bounds as
    the config file.
    """
    base = base_config or LayoutGeneratorConfig.model_validate({})
    data = base.model_dump()
    for arg_name, (section, field) in _CLI_FIELDS.items():
        value = args.get(arg_name)
        if value is not None:
            data[section][field] = value
    if args.get("verbose"):
        data["output"]["verbose"] = True
    return LayoutGeneratorConfig.model_validate(data)
