from __future__ import annotations

import pytest

from ogo_manager.core.exceptions import NotFoundError, ValidationError
from ogo_manager.project_types.model import ProjectType
from ogo_manager.project_types.service import NO_TYPES_LABEL, ProjectTypeService, describe_types


@pytest.fixture
def service(types_repo):
    return ProjectTypeService(types_repo)


def test_describe_types_keeps_order_and_flags_unknown_ids():
    types = [ProjectType(type_id=1, name="Thesis"), ProjectType(type_id=2, name="Slides")]

    assert describe_types([2, 1], types) == "Slides, Thesis"
    assert describe_types([1, 7], types) == "Thesis, Unknown Type (7)"
    assert describe_types([], types) == NO_TYPES_LABEL


def test_add_type(service, types_repo):
    type_id = service.add_type("  Literature Review ")
    assert types_repo.get_by_id(type_id).name == "Literature Review"


def test_add_duplicate_or_blank_type(service):
    with pytest.raises(ValidationError, match="already exists"):
        service.add_type("research paper")
    with pytest.raises(ValidationError):
        service.add_type("   ")
    with pytest.raises(ValidationError, match="at most 100 characters"):
        service.add_type("T" * 101)


def test_rename_type(service, types_repo):
    service.rename_type(2, "Slide Deck")
    assert types_repo.get_by_id(2).name == "Slide Deck"

    with pytest.raises(ValidationError):
        service.rename_type(2, "Research Paper")
    with pytest.raises(NotFoundError):
        service.rename_type(99, "Anything")


def test_delete_type_then_describe_shows_unknown(service):
    service.delete_type(2)

    assert service.describe([1, 2]) == "Research Paper, Unknown Type (2)"
    with pytest.raises(NotFoundError):
        service.delete_type(2)
