"""Batch segmentation of transcript and media files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from subseg.core.media import MEDIA_EXTENSIONS, TRANSCRIPT_EXTENSIONS
from subseg.core.pipeline import PipelineConfig, SegmentationPipeline
from subseg.exit_codes import ExitCode
from subseg.exporters import output_name, parse_formats

logger = logging.getLogger(__name__)

_INPUT_EXTENSIONS = MEDIA_EXTENSIONS | TRANSCRIPT_EXTENSIONS


def discover_input_files(
    input_dir: Path,
    recursive: bool = False,
    pattern: str = "*",
) -> list[Path]:
    """Find transcript JSON and media files, skipping earlier segment exports."""
    if not input_dir.exists():
        raise FileNotFoundError(f"Directory not found: {input_dir}")

    candidates = input_dir.rglob(pattern) if recursive else input_dir.glob(pattern)
    return sorted(
        f
        for f in candidates
        if f.is_file()
        and f.suffix.lower() in _INPUT_EXTENSIONS
        and not f.stem.endswith(".segments")
    )


@dataclass
class BatchResult:
    total: int
    succeeded: int
    failed: int
    errors: list[tuple[Path, str]]

    @property
    def exit_code(self) -> ExitCode:
        if self.failed == 0:
            return ExitCode.SUCCESS
        if self.succeeded > 0:
            return ExitCode.PARTIAL_SUCCESS
        return ExitCode.ERROR_GENERAL


class BatchRunner:
    def __init__(
        self,
        pipeline_config: PipelineConfig,
        skip_existing: bool = False,
    ) -> None:
        self._config = pipeline_config
        self._skip_existing = skip_existing

    def _already_done(self, input_file: Path, file_output_dir: Path) -> bool:
        stem = output_name(str(input_file))
        return all(
            (file_output_dir / f"{stem}.{fmt}").exists()
            for fmt in parse_formats(self._config.formats)
        )

    def run(
        self,
        files: list[Path],
        output_dir: Path,
        input_base: Path | None = None,
    ) -> BatchResult:
        succeeded = 0
        failed = 0
        errors: list[tuple[Path, str]] = []

        pipeline = SegmentationPipeline(self._config)

        for input_file in files:
            file_output_dir = output_dir
            if input_base is not None:
                try:
                    file_output_dir = output_dir / input_file.parent.relative_to(input_base)
                except ValueError:
                    pass

            if self._skip_existing and self._already_done(input_file, file_output_dir):
                logger.info("Skipping %s, output exists", input_file)
                succeeded += 1
                continue

            try:
                pipeline.run(str(input_file), output_dir=str(file_output_dir))
                succeeded += 1
            except Exception as e:
                failed += 1
                errors.append((input_file, str(e)))
                logger.error("Failed %s: %s", input_file, e, exc_info=True)

        return BatchResult(
            total=len(files),
            succeeded=succeeded,
            failed=failed,
            errors=errors,
        )
