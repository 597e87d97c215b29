"""Retime command: recompute timings after manual edits."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from subseg.cli import options as opt
from subseg.cli.errors import build_or_exit, exit_on_error
from subseg.config import build_pipeline_config, load_config, resolve_config
from subseg.core.pipeline import SegmentationPipeline


def retime_cmd(
    segments_file: Annotated[
        Path, typer.Argument(help="Segments JSON previously written by subseg."),
    ],
    duration: opt.Duration,
    format: opt.Format = None,
    output: opt.Output = None,
) -> None:
    """Spread edited segments back to back over the given duration."""
    config = build_or_exit(
        lambda: build_pipeline_config(
            resolve_config(
                load_config(),
                format=format,
                output_dir=str(output) if output is not None else None,
            )
        )
    )

    with exit_on_error():
        result = SegmentationPipeline(config).retime(str(segments_file), duration)

    typer.echo(
        f"Retimed {len(result.segments)} segments to {duration:.2f}s.", err=True,
    )
