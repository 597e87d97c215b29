"""Split-text command: plain text without timestamps."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from subseg.cli import options as opt
from subseg.cli.errors import build_or_exit, exit_on_error
from subseg.config import build_pipeline_config, load_config, resolve_config
from subseg.core.pipeline import SegmentationPipeline


def split_text_cmd(
    text_file: Annotated[
        Path, typer.Argument(help="UTF-8 text file with the full transcript."),
    ],
    duration: opt.Duration,
    min_duration: opt.MinDuration = None,
    target_duration: opt.TargetDuration = None,
    max_duration: opt.MaxDuration = None,
    max_chars: opt.MaxChars = None,
    converge: opt.Converge = False,
    format: opt.Format = None,
    output: opt.Output = None,
) -> None:
    """Estimate segment timings from text length when no timestamps exist."""
    config = build_or_exit(
        lambda: build_pipeline_config(
            resolve_config(
                load_config(),
                min_duration=min_duration,
                target_duration=target_duration,
                max_duration=max_duration,
                max_characters=max_chars,
                converge=True if converge else None,
                format=format,
                output_dir=str(output) if output is not None else None,
            )
        )
    )

    with exit_on_error():
        result = SegmentationPipeline(config).run_text(str(text_file), duration)

    typer.echo(
        f"Wrote {len(result.segments)} estimated segments to {config.output_dir}.",
        err=True,
    )
