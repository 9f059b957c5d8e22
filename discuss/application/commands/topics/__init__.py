"""Topic commands."""

from .create_topic import CreateTopicCommand, CreateTopicHandler
from .update_topic import UpdateTopicCommand, UpdateTopicHandler
from .delete_topic import DeleteTopicCommand, DeleteTopicHandler

__all__ = [
    "CreateTopicCommand",
    "CreateTopicHandler",
    "UpdateTopicCommand",
    "UpdateTopicHandler",
    "DeleteTopicCommand",
    "DeleteTopicHandler",
]
