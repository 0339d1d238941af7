from .booking_search import BookingSearchCriteria as BookingSearchCriteria
from .booking_search import BookingSearchResult as BookingSearchResult
from .booking_search import Pagination as Pagination
from .booking_search import SortOrder as SortOrder
from .booking_search import search_bookings as search_bookings
from .booking_stats import BookingStats as BookingStats
from .booking_stats import compute_booking_stats as compute_booking_stats
