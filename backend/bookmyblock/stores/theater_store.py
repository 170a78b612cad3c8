"""
Process-lifetime store of theater applications.
"""

import itertools
from typing import Optional

from bookmyblock.models.theater import ApplicationStatus, TheaterApplication


class TheaterApplicationStore:
    def __init__(self) -> None:
        self._applications: list[TheaterApplication] = []
        self._ids = itertools.count(1)

    def next_id(self) -> str:
        return f"theater_app_{next(self._ids)}"

    def add(self, application: TheaterApplication) -> TheaterApplication:
        self._applications.append(application)
        return application

    def all(self) -> list[TheaterApplication]:
        return list(self._applications)

    def get(self, application_id: str) -> Optional[TheaterApplication]:
        return next((a for a in self._applications if a.id == application_id), None)

    def with_status(self, status: ApplicationStatus) -> list[TheaterApplication]:
        return [a for a in self._applications if a.status == status]
