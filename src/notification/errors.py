class NotificationError(Exception):
    """Raised when a notification sound cannot be decoded or played."""


class NotificationConfigurationError(NotificationError):
    """Raised when tone or audio output settings are invalid."""
