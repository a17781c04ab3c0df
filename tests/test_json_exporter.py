import json

from adapters.json_exporter import export_projects_json
from core.domain.models import ProjectCollection


def test_export_projects_json(tmp_path):
    collection = ProjectCollection.model_validate(
        {"items": [{"id": "1", "name": "Ñandú", "background": {"type": "gradient"}}]}
    )

    path = export_projects_json(collection=collection, output_path=tmp_path / "out" / "projects.json")

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert "Ñandú" in text
    assert json.loads(text) == {
        "included": None,
        "items": [{"background": {"type": "gradient"}, "id": "1", "name": "Ñandú"}],
    }
