from __future__ import annotations

from datetime import datetime

from conftest import FakeProjectsRepo, make_project

from ogo_manager.core.enums import SearchField
from ogo_manager.projects.search import ProjectSearchService, merge_unique


def test_blank_term_returns_nothing(projects_repo, employees_repo):
    service = ProjectSearchService(projects_repo, employees_repo)
    assert service.search("   ") == []


def test_results_are_deduplicated_across_lookups(projects_repo, employees_repo):
    service = ProjectSearchService(projects_repo, employees_repo)

    # "ruhuna" hits the org lookup for two projects; "Ruwan" would hit client name too
    results = service.search("Ruhuna")
    assert sorted(p.project_id for p in results) == [1, 3]
    assert len({p.project_id for p in results}) == len(results)


def test_search_by_project_code_is_case_insensitive(projects_repo, employees_repo):
    service = ProjectSearchService(projects_repo, employees_repo)
    assert [p.project_code for p in service.search("pj1002")] == ["PJ1002"]


def test_search_by_assigned_employee_name(projects_repo, employees_repo):
    service = ProjectSearchService(projects_repo, employees_repo)
    assert sorted(p.project_id for p in service.search("kamala")) == [2]


def test_failed_lookup_does_not_break_the_others(projects_repo, employees_repo, caplog):
    projects_repo.failing_fields = {SearchField.CLIENT_NAME}
    service = ProjectSearchService(projects_repo, employees_repo)

    results = service.search("SLIIT")

    assert [p.project_id for p in results] == [2]
    assert "Error searching by client name" in caplog.text


def test_limit_caps_merged_results(employees_repo):
    repo = FakeProjectsRepo(
        [make_project(i, client_name=f"Same Client {i}", created_at=datetime(2024, 1, i)) for i in range(1, 8)]
    )
    service = ProjectSearchService(repo, employees_repo, limit=5)

    assert len(service.search("same client")) == 5


def test_merge_unique_keeps_first_occurrence_order():
    a, b, c = make_project(1), make_project(2), make_project(3)
    assert [p.project_id for p in merge_unique([[b, a], [a, c]], limit=10)] == [2, 1, 3]
