"""GPU helpers for the transcription stage."""

from __future__ import annotations

import gc
import logging
import os

import torch

logger = logging.getLogger(__name__)

_ALLOCATOR_DEFAULTS = {"max_split_size_mb": "128", "expandable_segments": "True"}


def cuda_available() -> bool:
    return torch.cuda.is_available()


def gpu_memory_summary() -> str | None:
    """Describe allocated, reserved and peak CUDA memory in MB."""
    if not torch.cuda.is_available():
        return None
    mb = 1024 * 1024
    return (
        f"allocated={torch.cuda.memory_allocated() / mb:.0f}MB, "
        f"reserved={torch.cuda.memory_reserved() / mb:.0f}MB, "
        f"peak={torch.cuda.max_memory_allocated() / mb:.0f}MB"
    )


def release_gpu_memory(label: str) -> None:
    """Collect garbage, drop the CUDA cache and log what is left."""
    gc.collect()
    if torch.cuda.is_available():
        torch.cuda.empty_cache()
    logger.debug("[GPU] %s: %s", label, gpu_memory_summary() or "CUDA not available")


def configure_cuda_allocator() -> None:
    """Add allocator defaults to PYTORCH_CUDA_ALLOC_CONF, keeping user values."""
    pairs = dict(_ALLOCATOR_DEFAULTS)
    for item in os.environ.get("PYTORCH_CUDA_ALLOC_CONF", "").split(","):
        if ":" in item:
            key, value = item.split(":", 1)
            pairs[key.strip()] = value.strip()
    os.environ["PYTORCH_CUDA_ALLOC_CONF"] = ",".join(f"{k}:{v}" for k, v in pairs.items())
