from .get_post import GetPostQuery, GetPostHandler

__all__ = ["GetPostQuery", "GetPostHandler"]
