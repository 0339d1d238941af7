from .booking_id import BookingId as BookingId
from .booking_metadata import BookingMetadata as BookingMetadata
from .booking_reference import BookingReference as BookingReference
from .customer import Customer as Customer
from .customer import CustomerName as CustomerName
from .customer import EmailAddress as EmailAddress
from .customer import PhoneNumber as PhoneNumber
from .notification_state import NotificationState as NotificationState
from .special_requests import SpecialRequests as SpecialRequests
from .trip import Destination as Destination
from .trip import TravelerCount as TravelerCount
from .trip import Trip as Trip
