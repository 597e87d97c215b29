"""Shared typer option declarations."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

MinDuration = Annotated[
    float | None,
    typer.Option("--min-duration", help="Segments shorter than this are merged (s)."),
]
TargetDuration = Annotated[
    float | None,
    typer.Option("--target-duration", help="Soft segment length goal (s)."),
]
MaxDuration = Annotated[
    float | None,
    typer.Option("--max-duration", help="Hard segment length ceiling (s)."),
]
MaxChars = Annotated[
    int | None,
    typer.Option("--max-chars", help="Hard ceiling on non-whitespace characters."),
]
SilenceGap = Annotated[
    float | None,
    typer.Option("--silence-gap", help="Pause that allows a split (s)."),
]
Converge = Annotated[
    bool,
    typer.Option("--converge", help="Repeat short-segment merging until stable."),
]
Language = Annotated[
    str | None,
    typer.Option("--language", "-l", help="Transcript language (ko, en); wins over the language in the input."),
]
Format = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format(s): json,txt."),
]
Output = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Output directory."),
]
Model = Annotated[
    str | None,
    typer.Option("--model", "-m", help="Whisper model size for media input."),
]
Device = Annotated[
    str | None,
    typer.Option("--device", help="Device: cuda or cpu."),
]
ComputeType = Annotated[
    str | None,
    typer.Option("--compute-type", help="Compute type."),
]
ModelDir = Annotated[
    str | None,
    typer.Option("--model-dir", help="Directory for model storage."),
]
Duration = Annotated[
    float,
    typer.Option("--duration", "-d", help="Total audio duration in seconds."),
]
