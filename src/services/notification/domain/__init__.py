from .notification_kind import NotificationKind as NotificationKind
from .notification_scheduler import (
    NotificationScheduler as NotificationScheduler,
)
from .notification_scheduler import (
    NotificationTrigger as NotificationTrigger,
)
from .notifier import NotificationPayload as NotificationPayload
from .notifier import NotificationResult as NotificationResult
from .notifier import Notifier as Notifier
