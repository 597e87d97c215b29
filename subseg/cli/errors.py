"""Map pipeline exceptions to CLI exit codes."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

import typer

from subseg.exceptions import (
    CudaOomError,
    GpuError,
    InputFormatError,
    InputValidationError,
    ModelError,
    TranscriptionError,
)
from subseg.exit_codes import ExitCode

T = TypeVar("T")

_EXIT_CODES: list[tuple[type[Exception], str, ExitCode]] = [
    (InputValidationError, "Error", ExitCode.ERROR_FILE),
    (InputFormatError, "Input format error", ExitCode.ERROR_INPUT_FORMAT),
    (CudaOomError, "GPU out of memory", ExitCode.ERROR_OOM),
    (GpuError, "GPU error", ExitCode.ERROR_GPU),
    (ModelError, "Model error", ExitCode.ERROR_MODEL),
    (TranscriptionError, "Transcription error", ExitCode.ERROR_GENERAL),
]


def build_or_exit(factory: Callable[[], T]) -> T:
    """Build configuration, exiting with ERROR_ARGS on invalid values."""
    try:
        return factory()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=ExitCode.ERROR_ARGS) from None


@contextmanager
def exit_on_error() -> Iterator[None]:
    try:
        yield
    except Exception as e:
        for exc_type, label, code in _EXIT_CODES:
            if isinstance(e, exc_type):
                typer.echo(f"{label}: {e}", err=True)
                raise typer.Exit(code=code) from None
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=ExitCode.ERROR_GENERAL) from None
