"""
View/navigation shell.

Finite-state router behind the single-page front end: calendar, form,
success and admin screens plus the login gate in front of admin.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from dayuse.models import BookingDetail, DayConfig
from dayuse.services.availability import can_accept


class ViewState(str, Enum):
    CALENDAR = "calendar"
    FORM = "form"
    SUCCESS = "success"
    ADMIN = "admin"


@dataclass
class NavigationShell:
    view: ViewState = ViewState.CALENDAR
    selected_date: date | None = None
    last_booking: BookingDetail | None = None
    identified_cpf: str = ""
    is_authenticated: bool = False
    show_login: bool = False

    def select_date(self, day: date, config: DayConfig) -> bool:
        """Open the form for a bookable date; blocked or full dates stay on the calendar."""
        if self.view != ViewState.CALENDAR or not can_accept(config):
            return False
        self.selected_date = day
        self.view = ViewState.FORM
        return True

    def back(self) -> None:
        self.view = ViewState.CALENDAR

    def booking_succeeded(self, booking: BookingDetail) -> None:
        if self.view != ViewState.FORM or self.selected_date is None:
            raise ValueError("No booking form is open")
        self.identified_cpf = booking.cpf
        self.last_booking = booking
        self.view = ViewState.SUCCESS

    def toggle_admin(self) -> None:
        if self.view == ViewState.ADMIN:
            self.view = ViewState.CALENDAR
        elif self.is_authenticated:
            self.view = ViewState.ADMIN
        else:
            self.show_login = True

    def login(self, success: bool) -> None:
        if not success:
            return
        self.is_authenticated = True
        self.show_login = False
        self.view = ViewState.ADMIN

    def close_login(self) -> None:
        self.show_login = False

    def back_to_site(self) -> None:
        self.view = ViewState.CALENDAR
