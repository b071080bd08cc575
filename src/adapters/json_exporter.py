"""Exportación JSON de contenido del CMS.

Por qué JSON:
- Permite inspeccionar/versionar el contenido traducido que consume el build
  sin depender del CMS en línea.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def dump_json(payload: Any) -> str:
    """UTF-8 friendly, stable formatting (sorted keys, trailing newline)."""

    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_content_json(*, payload: Any, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_json(payload), encoding="utf-8")
    return output_path
