"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.ops_dashboard.ops_dashboard.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    result = container.inquiry_service.submit(
        name="John Doe",
        contact="9876543210",
        inquiry_type="Pest Control",
        work_type="membership",
        address="221B Baker Street",
        rate="50000",
        membership_duration="3month",
    )
    print("created", result)
    print(container.member_service.list_with_schedule()[:1])
    print(container.dashboard_service.stats(today=date.today()))


if __name__ == "__main__":
    main()
