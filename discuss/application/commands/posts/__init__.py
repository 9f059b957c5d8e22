"""Post commands."""

from .create_post import CreatePostCommand, CreatePostHandler
from .update_post import UpdatePostCommand, UpdatePostHandler
from .delete_post import DeletePostCommand, DeletePostHandler

__all__ = [
    "CreatePostCommand",
    "CreatePostHandler",
    "UpdatePostCommand",
    "UpdatePostHandler",
    "DeletePostCommand",
    "DeletePostHandler",
]
