from .booking_events import BookingCancelled as BookingCancelled
from .booking_events import BookingCreated as BookingCreated
from .booking_events import BookingStatusChanged as BookingStatusChanged
