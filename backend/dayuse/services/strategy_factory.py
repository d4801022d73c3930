"""
Admission strategy factory.
Configures which submission-time capacity check to use.
"""

from dayuse.services.interfaces.admission import (
    AdmissionStrategy,
    CapacityAdmission,
    SelectionAdmission,
)
from dayuse.core.config import get_settings

STRATEGIES: dict[str, type[AdmissionStrategy]] = {
    CapacityAdmission.name: CapacityAdmission,
    SelectionAdmission.name: SelectionAdmission,
}


def get_admission_strategy(name: str | None = None) -> AdmissionStrategy:
    """
    Build the configured admission strategy.

    Selected by ADMISSION_STRATEGY; unknown names fall back to capacity.
    """
    strategy = name or get_settings().ADMISSION_STRATEGY
    return STRATEGIES.get(strategy, CapacityAdmission)()


_strategy: AdmissionStrategy | None = None

def get_admission() -> AdmissionStrategy:
    """Get admission strategy singleton."""
    global _strategy
    if _strategy is None:
        _strategy = get_admission_strategy()
    return _strategy
