"""Segmentation pipeline orchestrator."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from subseg.core.boundaries import get_boundary_rules
from subseg.core.duration import recalculate_timings, split_text_by_duration
from subseg.core.gpu_utils import configure_cuda_allocator, gpu_memory_summary
from subseg.core.media import is_media_file, validate_input_file
from subseg.core.normalize import load_segments, load_stt_result
from subseg.core.options import DEFAULT_OPTIONS, SplitterOptions
from subseg.core.splitter import split_subtitles
from subseg.core.transcriber import Transcriber, TranscriberConfig
from subseg.data_models import (
    SegmentationMetadata,
    SegmentationResult,
    STTResult,
    SubtitleSegment,
)
from subseg.exceptions import InputValidationError
from subseg.exporters import export_segments

logger = logging.getLogger(__name__)

# Whisper is asked for this language when none is configured.
TRANSCRIBE_LANGUAGE = "ko"


@dataclass
class PipelineConfig:
    options: SplitterOptions = field(default_factory=lambda: DEFAULT_OPTIONS)
    converge: bool = False
    language: str | None = None
    formats: str = "json"
    output_dir: str = "."
    model_size: str = "large-v3"
    device: str = "cuda"
    compute_type: str = "float16"
    model_dir: str | None = None
    vad_filter: bool = True


class SegmentationPipeline:
    def __init__(self, config: PipelineConfig) -> None:
        self._config = config

    def _transcribe(self, media_path: Path) -> STTResult:
        configure_cuda_allocator()
        transcriber = Transcriber(
            TranscriberConfig(
                model_size=self._config.model_size,
                device=self._config.device,
                compute_type=self._config.compute_type,
                model_dir=self._config.model_dir,
                language=self._config.language or TRANSCRIBE_LANGUAGE,
                vad_filter=self._config.vad_filter,
            )
        )
        try:
            transcriber.load_model()
            logger.info("[GPU] after model load: %s", gpu_memory_summary() or "CUDA not available")
            t1 = time.monotonic()
            stt_result = transcriber.transcribe(str(media_path))
            logger.info(
                "Transcription completed in %.1fs (%d words)",
                time.monotonic() - t1, len(stt_result.words),
            )
        finally:
            try:
                transcriber.unload_model()
            except Exception:
                logger.exception("Failed to unload transcriber")
        return stt_result

    def _finish(
        self,
        source: Path,
        segments: list[SubtitleSegment],
        *,
        mode: str,
        duration: float,
        language: str | None,
        started: float,
        output_dir: str | None,
    ) -> SegmentationResult:
        elapsed = time.monotonic() - started
        logger.info("Produced %d segments in %.2fs", len(segments), elapsed)
        result = SegmentationResult(
            metadata=SegmentationMetadata(
                source_file=str(source),
                duration_seconds=duration,
                mode=mode,
                language=language,
                processing_time_seconds=elapsed,
            ),
            segments=segments,
        )
        resolved_dir = output_dir if output_dir is not None else self._config.output_dir
        for path in export_segments(result, self._config.formats, Path(resolved_dir)):
            logger.info("Wrote %s", path)
        return result

    def run(self, input_path: str, output_dir: str | None = None) -> SegmentationResult:
        """Segment a transcript JSON file, or a media file after transcribing it."""
        started = time.monotonic()
        path = Path(input_path)
        validate_input_file(path)

        if is_media_file(path):
            stt_result = self._transcribe(path)
        else:
            stt_result = load_stt_result(path)

        language = self._config.language or stt_result.language
        segments = split_subtitles(
            stt_result,
            self._config.options,
            rules=get_boundary_rules(language),
            converge=self._config.converge,
        )
        return self._finish(
            path,
            segments,
            mode="words",
            duration=stt_result.duration,
            language=language,
            started=started,
            output_dir=output_dir,
        )

    def run_text(
        self, text_path: str, total_duration: float, output_dir: str | None = None,
    ) -> SegmentationResult:
        """Segment a plain-text transcript spread over ``total_duration``."""
        started = time.monotonic()
        path = Path(text_path)
        if not path.exists():
            raise InputValidationError(f"File not found: {path}")
        text = path.read_text(encoding="utf-8")
        segments = split_text_by_duration(
            text, total_duration, self._config.options, converge=self._config.converge,
        )
        return self._finish(
            path,
            segments,
            mode="duration",
            duration=total_duration,
            language=self._config.language,
            started=started,
            output_dir=output_dir,
        )

    def retime(
        self, segments_path: str, total_duration: float, output_dir: str | None = None,
    ) -> SegmentationResult:
        """Re-time previously exported segments to fill ``total_duration``."""
        started = time.monotonic()
        path = Path(segments_path)
        validate_input_file(path)
        segments = recalculate_timings(load_segments(path), total_duration)
        return self._finish(
            path,
            segments,
            mode="retime",
            duration=total_duration,
            language=self._config.language,
            started=started,
            output_dir=output_dir,
        )
