"""Comment commands."""

from .create_comment import CreateCommentCommand, CreateCommentHandler
from .delete_comment import DeleteCommentCommand, DeleteCommentHandler

__all__ = [
    "CreateCommentCommand",
    "CreateCommentHandler",
    "DeleteCommentCommand",
    "DeleteCommentHandler",
]
