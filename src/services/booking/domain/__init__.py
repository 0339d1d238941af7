from .enum import BookingStatus as BookingStatus
from .enum import PaymentStatus as PaymentStatus
from .value_object import BookingId as BookingId
from .value_object import BookingMetadata as BookingMetadata
from .value_object import BookingReference as BookingReference
from .value_object import NotificationState as NotificationState
from .service import BookingReferenceGenerator as BookingReferenceGenerator
from .service import BookingSubmission as BookingSubmission
from .service import BookingValidator as BookingValidator
from .service import PricingCalculator as PricingCalculator
from .service import StatusTransitionPolicy as StatusTransitionPolicy
from .service import ValidatedBooking as ValidatedBooking
from .entity import Booking as Booking
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .query import BookingSearchCriteria as BookingSearchCriteria
from .query import BookingSearchResult as BookingSearchResult
from .query import BookingStats as BookingStats
