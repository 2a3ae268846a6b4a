"""Load chunk configs from ``chunk-*.json`` files on disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from pokerpg.systems.generation_config import ChunkConfig
from pokerpg.systems.presets import ChunkPreset

logger = logging.getLogger(__name__)

CHUNK_FILE_GLOB = "chunk-*.json"


def load_chunk_configs(directory: str | Path) -> tuple[ChunkConfig, ...]:
    """Read every ``chunk-*.json`` in *directory*, sorted by (q, r).

    Files missing ``id`` or ``coord`` are skipped. Any other malformed
    content raises ``pydantic.ValidationError``.
    """
    chunks: list[ChunkConfig] = []
    for path in sorted(Path(directory).glob(CHUNK_FILE_GLOB)):
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict) or not raw.get("id") or not raw.get("coord"):
            logger.warning("Skipping %s: missing id or coord", path.name)
            continue
        try:
            chunks.append(ChunkPreset.model_validate(raw).to_config())
        except ValidationError:
            logger.error("Invalid chunk config in %s", path.name)
            raise

    chunks.sort(key=lambda c: (c.coord.q, c.coord.r))
    logger.info("Loaded chunks: %s", [c.id for c in chunks])
    return tuple(chunks)
