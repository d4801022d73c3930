from dayuse.schemas.auth import AdminLogin, Token
from dayuse.schemas.booking import BookingCreate, BookingResponse, BookingConfirmation, GuestLookupResponse
from dayuse.schemas.chat import ChatRequest, ChatResponse
from dayuse.schemas.day import DayResponse, CalendarResponse, BatchStatusUpdate, LimitUpdate
from dayuse.schemas.tier import AgeTierResponse, AgeTierUpdate

__all__ = [
    "AdminLogin", "Token",
    "BookingCreate", "BookingResponse", "BookingConfirmation", "GuestLookupResponse",
    "ChatRequest", "ChatResponse",
    "DayResponse", "CalendarResponse", "BatchStatusUpdate", "LimitUpdate",
    "AgeTierResponse", "AgeTierUpdate",
]
