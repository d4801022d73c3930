"""
Service interfaces for dependency inversion.
Allows swapping implementations without changing business logic.
"""

from .admission import AdmissionStrategy, CapacityAdmission, SelectionAdmission

__all__ = ['AdmissionStrategy', 'CapacityAdmission', 'SelectionAdmission']
