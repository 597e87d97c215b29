"""Split command: transcript or media file into caption segments."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from subseg.cli import options as opt
from subseg.cli.errors import build_or_exit, exit_on_error
from subseg.config import build_pipeline_config, load_config, resolve_config
from subseg.core.media import validate_input_file
from subseg.core.pipeline import SegmentationPipeline


def split_cmd(
    input_file: Annotated[
        Path,
        typer.Argument(help="STT/Whisper JSON transcript, or an audio/video file."),
    ],
    min_duration: opt.MinDuration = None,
    target_duration: opt.TargetDuration = None,
    max_duration: opt.MaxDuration = None,
    max_chars: opt.MaxChars = None,
    silence_gap: opt.SilenceGap = None,
    converge: opt.Converge = False,
    language: opt.Language = None,
    format: opt.Format = None,
    output: opt.Output = None,
    model: opt.Model = None,
    device: opt.Device = None,
    compute_type: opt.ComputeType = None,
    model_dir: opt.ModelDir = None,
) -> None:
    """Split a transcript into caption segments."""
    with exit_on_error():
        validate_input_file(input_file)

    config = build_or_exit(
        lambda: build_pipeline_config(
            resolve_config(
                load_config(),
                min_duration=min_duration,
                target_duration=target_duration,
                max_duration=max_duration,
                max_characters=max_chars,
                silence_gap=silence_gap,
                converge=True if converge else None,
                language=language,
                format=format,
                output_dir=str(output) if output is not None else None,
                model=model,
                device=device,
                compute_type=compute_type,
                model_dir=model_dir,
            )
        )
    )

    with exit_on_error():
        result = SegmentationPipeline(config).run(str(input_file))

    typer.echo(
        f"Wrote {len(result.segments)} segments to {config.output_dir}.", err=True,
    )
