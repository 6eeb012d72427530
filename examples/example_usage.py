"""Example: record a clocking event through the service layer (no Flask).

Controllers are a thin layer; the recording rules live in the services.
"""

import importlib
import logging

from config import get_settings_module

from src.clockwise.clockwise.container import build_container


def main():
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    log = container.clocking_service.submit(
        {"employeeId": "1", "clockInTime": "2024-07-30T08:55:00", "clockOutTime": "2024-07-30T12:30:00"}
    )
    print(log.to_dict())
    print(container.clocking_service.stats().to_dict())


if __name__ == "__main__":
    main()
