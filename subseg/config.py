"""Configuration loading and management."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from dotenv import load_dotenv

from subseg.core.options import SplitterOptions, build_options
from subseg.exporters import parse_formats

if TYPE_CHECKING:
    from subseg.core.pipeline import PipelineConfig

load_dotenv()

DEFAULT_CONFIG_NAME = "subseg.yaml"


@dataclass
class SubsegConfig:
    language: str | None = None
    format: str = "json"
    output_dir: str = "."
    log_level: str = "WARNING"
    # splitter
    min_duration: float = 1.5
    target_duration: float = 2.5
    max_duration: float = 3.5
    max_characters: int = 50
    silence_gap: float = 0.5
    converge: bool = False
    # whisper
    model: str = "large-v3"
    device: str = "cuda"
    compute_type: str = "float16"
    model_dir: str = "models"
    vad_filter: bool = True

    def with_overrides(self, **kwargs: Any) -> SubsegConfig:
        return replace(self, **kwargs)


_TOP_LEVEL_KEYS = ("language", "format", "output_dir", "log_level")
_SPLITTER_KEYS = (
    "min_duration",
    "target_duration",
    "max_duration",
    "max_characters",
    "silence_gap",
    "converge",
)
_WHISPER_KEYS = ("model", "device", "compute_type", "model_dir", "vad_filter")
_CONFIG_FIELDS = frozenset(f.name for f in fields(SubsegConfig))


def _apply_env_overrides(config: SubsegConfig) -> SubsegConfig:
    overrides: dict[str, Any] = {}
    model_dir = os.environ.get("SUBSEG_MODEL_DIR")
    if model_dir:
        overrides["model_dir"] = model_dir
    log_level = os.environ.get("SUBSEG_LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level
    if overrides:
        return replace(config, **overrides)
    return config


def load_config(path: Path | None = None) -> SubsegConfig:
    """Load config from ``path``, ``$SUBSEG_CONFIG`` or ./subseg.yaml."""
    if path is None:
        env_path = os.environ.get("SUBSEG_CONFIG")
        if env_path:
            path = Path(env_path)

    if path is None:
        cwd_config = Path(DEFAULT_CONFIG_NAME)
        if cwd_config.exists():
            path = cwd_config

    if path is None or not path.exists():
        return _apply_env_overrides(SubsegConfig())

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    kwargs: dict[str, Any] = {}
    for key in _TOP_LEVEL_KEYS:
        if key in data:
            kwargs[key] = data[key]

    splitter = data.get("splitter")
    if isinstance(splitter, dict):
        for key in _SPLITTER_KEYS:
            if key in splitter:
                kwargs[key] = splitter[key]

    whisper = data.get("whisper")
    if isinstance(whisper, dict):
        for key in _WHISPER_KEYS:
            if key in whisper:
                kwargs[key] = whisper[key]

    return _apply_env_overrides(SubsegConfig(**kwargs))


def resolve_config(config: SubsegConfig, **overrides: Any) -> SubsegConfig:
    """Resolve config priority: CLI args > YAML > defaults.

    ``None`` values mean the flag was not given and are ignored.
    """
    unknown = set(overrides) - _CONFIG_FIELDS
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(sorted(unknown))}")
    given = {k: v for k, v in overrides.items() if v is not None}
    if given:
        return replace(config, **given)
    return config


def build_splitter_options(config: SubsegConfig) -> SplitterOptions:
    return build_options(
        {
            "min_duration": config.min_duration,
            "target_duration": config.target_duration,
            "max_duration": config.max_duration,
            "max_characters": config.max_characters,
            "silence_gap": config.silence_gap,
        }
    )


def build_pipeline_config(config: SubsegConfig) -> PipelineConfig:
    """Convert SubsegConfig to PipelineConfig."""
    from subseg.core.pipeline import PipelineConfig

    parse_formats(config.format)
    return PipelineConfig(
        options=build_splitter_options(config),
        converge=config.converge,
        language=config.language,
        formats=config.format,
        output_dir=config.output_dir,
        model_size=config.model,
        device=config.device,
        compute_type=config.compute_type,
        model_dir=config.model_dir,
        vad_filter=config.vad_filter,
    )
