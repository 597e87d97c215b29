"""Word-level transcription with faster-whisper."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import torch
from faster_whisper import WhisperModel

from subseg.core.gpu_utils import release_gpu_memory
from subseg.data_models import STTResult, WordTimestamp
from subseg.exceptions import CudaOomError, GpuError, ModelError, TranscriptionError


def _clamp_probability(value: float | None) -> float | None:
    if value is None:
        return None
    return min(max(float(value), 0.0), 1.0)


@dataclass
class TranscriberConfig:
    model_size: str = "large-v3"
    device: str = "cuda"
    compute_type: str = "float16"
    model_dir: str | None = None
    language: str | None = "ko"
    vad_filter: bool = True


class Transcriber:
    def __init__(self, config: TranscriberConfig) -> None:
        self._config = config
        self._model: WhisperModel | None = None

    def load_model(self) -> None:
        if self._config.device == "cuda" and not torch.cuda.is_available():
            raise GpuError("CUDA is not available")
        try:
            kwargs: dict[str, Any] = {
                "device": self._config.device,
                "compute_type": self._config.compute_type,
            }
            if self._config.model_dir is not None:
                kwargs["download_root"] = str(
                    Path(self._config.model_dir).expanduser().resolve()
                )
            self._model = WhisperModel(self._config.model_size, **kwargs)
        except Exception as e:
            raise ModelError(f"Failed to load model: {e}") from e

    def unload_model(self) -> None:
        self._model = None
        release_gpu_memory("transcriber_unload")

    def transcribe(self, media_path: str) -> STTResult:
        """Transcribe ``media_path`` into text with per-word timestamps."""
        if self._model is None:
            raise RuntimeError("Model not loaded. Call load_model() first.")
        try:
            segments_iter, info = self._model.transcribe(
                media_path,
                language=self._config.language,
                word_timestamps=True,
                vad_filter=self._config.vad_filter,
                vad_parameters={"min_silence_duration_ms": 500},
            )
            texts: list[str] = []
            words: list[WordTimestamp] = []
            for seg in segments_iter:
                texts.append(seg.text.strip())
                for w in seg.words or []:
                    token = w.word.strip()
                    if not token:
                        continue
                    words.append(
                        WordTimestamp(
                            word=token,
                            start_time=w.start,
                            end_time=max(w.start, w.end),
                            confidence=_clamp_probability(w.probability),
                        )
                    )
        except torch.cuda.OutOfMemoryError as e:
            raise CudaOomError(f"CUDA OOM during transcription: {e}") from e
        except RuntimeError as e:
            if "out of memory" in str(e).lower():
                raise CudaOomError(f"CUDA OOM during transcription: {e}") from e
            raise TranscriptionError(f"Transcription failed: {e}") from e
        return STTResult(
            full_text=" ".join(t for t in texts if t),
            words=words,
            duration=info.duration,
            language=self._config.language or info.language,
        )
