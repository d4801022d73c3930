from dayuse.models.booking import BookingDetail
from dayuse.models.day import DayConfig
from dayuse.models.site import AgeTier, SiteConfig

__all__ = ["AgeTier", "BookingDetail", "DayConfig", "SiteConfig"]
