from .booking_validator import BookingSubmission as BookingSubmission
from .booking_validator import BookingValidator as BookingValidator
from .booking_validator import ValidatedBooking as ValidatedBooking
from .pricing_calculator import PricingCalculator as PricingCalculator
from .reference_generator import (
    BookingReferenceGenerator as BookingReferenceGenerator,
)
from .status_transition_policy import (
    StatusTransitionPolicy as StatusTransitionPolicy,
)
