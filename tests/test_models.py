import pytest
from pydantic import ValidationError

from core.domain.errors import ProjectOperationError
from core.domain.models import (
    MAX_PER_PAGE,
    CreateProjectOptions,
    ProjectCollection,
    ProjectEnvelope,
    ProjectListParams,
    UpdateProjectOptions,
)


def test_list_params_defaults():
    params = ProjectListParams()
    assert params.page == 1
    assert params.per_page == 30
    assert params.to_query() == "page=1&per_page=30"


def test_list_params_clamp_silently():
    assert ProjectListParams(per_page=101).per_page == MAX_PER_PAGE
    assert ProjectListParams(per_page=10_000).per_page == MAX_PER_PAGE
    assert ProjectListParams(per_page=99).per_page == 99


@pytest.mark.parametrize("values", [{"page": 0}, {"page": -1}, {"per_page": 0}])
def test_list_params_reject_non_positive(values):
    with pytest.raises(ValidationError):
        ProjectListParams(**values)


def test_update_body_only_contains_set_fields():
    assert UpdateProjectOptions(id="5").update_body() == {}
    assert UpdateProjectOptions(id="5", name="X").update_body() == {"name": "X"}
    assert UpdateProjectOptions(id="5", name=None).update_body() == {}


def test_create_options_require_name():
    with pytest.raises(ValidationError):
        CreateProjectOptions(name="")
    assert CreateProjectOptions(name="New").create_body() == {"name": "New"}


def test_collection_included_is_optional():
    collection = ProjectCollection.model_validate({"items": []})
    assert collection.included is None


def test_envelope_requires_item():
    with pytest.raises(ValidationError):
        ProjectEnvelope.model_validate({"included": {}})


def test_operation_error_message_and_cause():
    cause = RuntimeError("boom")
    error = ProjectOperationError("list", cause)
    assert str(error) == "Failed to get projects: boom"
    assert error.operation == "list"
    assert error.cause is cause

    assert str(ProjectOperationError("update", "bad")) == "Failed to update project: bad"


def test_included_may_be_missing_but_not_null():
    assert ProjectEnvelope.model_validate({"item": {"id": "1", "name": "A"}}).included is None
    with pytest.raises(ValidationError):
        ProjectCollection.model_validate({"items": [], "included": None})
    with pytest.raises(ValidationError):
        ProjectEnvelope.model_validate({"item": {"id": "1", "name": "A"}, "included": None})
