"""
Enums used across the application.
"""

from enum import Enum


class NotificationType(str, Enum):
    """
    Kind of event a notification reports.

    Values are the wire strings clients receive in REST responses and
    WebSocket pushes.
    """

    NEW_FOLLOWER = "newFollower"
    NEW_LIKE = "newLike"
    NEW_MESSAGE = "newMessage"
