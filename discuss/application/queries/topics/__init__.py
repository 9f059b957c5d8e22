from .get_topic_by_slug import GetTopicBySlugQuery, GetTopicBySlugHandler

__all__ = ["GetTopicBySlugQuery", "GetTopicBySlugHandler"]
