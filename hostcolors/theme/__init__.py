"""Theme change notifications for the outer terminal."""

from hostcolors.theme.bridge import listen_for_theme_changes, spawn_theme_change_listener
from hostcolors.theme.channel import ThemeEventChannel
from hostcolors.theme.notifications import (
    NotificationSource,
    NullNotificationSource,
    SignalNotificationSource,
    default_notification_source,
)

__all__ = [
    "NotificationSource",
    "NullNotificationSource",
    "SignalNotificationSource",
    "ThemeEventChannel",
    "default_notification_source",
    "listen_for_theme_changes",
    "spawn_theme_change_listener",
]
