"""Export dispatch for segmentation results."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from subseg.data_models import SegmentationResult
from subseg.exporters.json_export import export_json
from subseg.exporters.txt_export import export_txt

_EXPORTERS: dict[str, Callable[..., None]] = {
    "json": export_json,
    "txt": export_txt,
}


def parse_formats(formats: str) -> list[str]:
    format_list = [f.strip() for f in formats.split(",") if f.strip()]
    for fmt in format_list:
        if fmt not in _EXPORTERS:
            raise ValueError(f"Unknown export format: {fmt!r}")
    return format_list


def output_name(source_file: str) -> str:
    """Stem for exported files, suffixed so a JSON input is never overwritten."""
    return f"{Path(source_file).stem}.segments"


def export_segments(
    result: SegmentationResult,
    formats: str,
    output_dir: Path,
) -> list[Path]:
    """Write ``result`` to ``output_dir`` once per format; return the written paths."""
    format_list = parse_formats(formats)

    output_dir.mkdir(parents=True, exist_ok=True)
    stem = output_name(result.metadata.source_file)
    written: list[Path] = []
    for fmt in format_list:
        out_path = output_dir / f"{stem}.{fmt}"
        with open(out_path, "w", encoding="utf-8") as f:
            _EXPORTERS[fmt](result, f)
        written.append(out_path)
    return written
