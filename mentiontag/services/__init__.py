"""Collaborators around the editing session: directory, comment store, alerts."""

from .comment_service import CommentService
from .directory_service import DirectoryService
from .notification_service import Notification, NotificationService, format_alert

__all__ = [
    "CommentService",
    "DirectoryService",
    "Notification",
    "NotificationService",
    "format_alert",
]
