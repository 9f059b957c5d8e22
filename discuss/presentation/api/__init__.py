from discuss.presentation.api.topics import router as topics_router
from discuss.presentation.api.posts import router as posts_router
from discuss.presentation.api.comments import router as comments_router

__all__ = [
    "topics_router",
    "posts_router",
    "comments_router",
]
