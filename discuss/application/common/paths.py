"""View paths whose cached rendering a mutation makes stale."""


def home() -> str:
    return "/"


def topic_show(slug: str) -> str:
    return f"/topics/{slug}"


def post_show(slug: str, post_id: str) -> str:
    return f"/topics/{slug}/posts/{post_id}"
