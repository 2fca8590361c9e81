"""Example: use the service layer directly (no Flask).

Controllers stay thin; business rules live in the services.
"""

import importlib

from config import get_settings_module

from ogo_manager.analytics.model import PeriodFilter
from ogo_manager.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    print("Next project ID:", container.project_service.next_project_code())

    overview = container.analytics_service.build_overview(PeriodFilter(year=None, month=None))
    for line in overview.insights:
        print("-", line)

    for project in container.search_service.search("University")[:5]:
        print(project.project_code, project.client_name, project.status.value)


if __name__ == "__main__":
    main()
