"""Exportación JSON de proyectos.

Permite volcar un listado a disco para otras herramientas o pipelines.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ProjectCollection


def export_projects_json(*, collection: ProjectCollection, output_path: Path) -> Path:
    """Exporta `ProjectCollection` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = collection.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
