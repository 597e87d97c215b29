"""Batch command for the subseg CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from subseg.cli import options as opt
from subseg.cli.errors import build_or_exit
from subseg.config import build_pipeline_config, load_config, resolve_config
from subseg.core.batch import BatchRunner, discover_input_files
from subseg.exit_codes import ExitCode


def batch_cmd(
    input_dir: Annotated[
        Path,
        typer.Argument(help="Directory with transcript JSON or media files."),
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
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Process subdirectories."),
    ] = False,
    pattern: Annotated[
        str,
        typer.Option("--pattern", help="Glob pattern for input files."),
    ] = "*",
    skip_existing: Annotated[
        bool,
        typer.Option("--skip-existing", help="Skip already processed files."),
    ] = False,
) -> None:
    """Split every transcript or media file in a directory."""
    if not input_dir.exists():
        typer.echo(f"Error: Directory not found: {input_dir}", err=True)
        raise typer.Exit(code=ExitCode.ERROR_FILE)

    files = discover_input_files(input_dir, recursive=recursive, pattern=pattern)
    if not files:
        typer.echo("No input files found.", err=True)
        raise typer.Exit(code=0)

    stt_config = build_or_exit(
        lambda: resolve_config(
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
    config = build_or_exit(lambda: build_pipeline_config(stt_config))

    runner = BatchRunner(config, skip_existing=skip_existing)
    result = runner.run(
        files,
        Path(stt_config.output_dir),
        input_base=input_dir if recursive else None,
    )

    typer.echo(f"Processed {result.succeeded}/{result.total} files.", err=True)
    for path, err in result.errors:
        typer.echo(f"  Failed: {path} - {err}", err=True)

    raise typer.Exit(code=result.exit_code)
