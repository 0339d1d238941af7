from enum import Enum


class NotificationKind(str, Enum):
    """通知の種類"""

    CONFIRMATION = "confirmation"
    TEAM_ALERT = "team_alert"
    CANCELLATION = "cancellation"
    REMINDER = "reminder"
