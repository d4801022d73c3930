"""
Admission strategy interface.
Decides whether a date accepts a new party at submission time.
"""

from abc import ABC, abstractmethod

from dayuse.models import DayConfig


class AdmissionStrategy(ABC):
    """
    Interface for submission-time capacity checks.

    Implementations:
    - CapacityAdmission: the party must fit in the remaining vacancies
    - SelectionAdmission: same rule the calendar applies when a date is picked
    """

    name: str = "abstract"

    @abstractmethod
    def admit(self, day: DayConfig, guests: int) -> bool:
        """
        Check if a party of `guests` may be committed against `day`.

        Called with the store lock held, against the effective config.
        """
        ...


class CapacityAdmission(AdmissionStrategy):
    """Reject parties that would push occupancy over the limit."""

    name = "capacity"

    def admit(self, day: DayConfig, guests: int) -> bool:
        return not day.blocked and day.current_occupancy + guests <= day.limit


class SelectionAdmission(AdmissionStrategy):
    """
    Accept whenever the date still shows vacancies, regardless of party size.

    The last party may overshoot the limit.
    """

    name = "selection"

    def admit(self, day: DayConfig, guests: int) -> bool:
        return not day.blocked and day.current_occupancy < day.limit
