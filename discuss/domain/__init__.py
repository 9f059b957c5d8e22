"""
DOMAIN LAYER - Topics, Posts and Comments

This layer contains:
- Entities: Business objects with identity (Topic, Post, Comment, Identity)
- Value Objects: Immutable types (TopicId, PostId, CommentId, UserId, Slug)
- Ports: Interfaces that infrastructure implements (store, session, cache)
- Services: Pure domain logic (authorization decisions, slug rules)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Redis, Pydantic, etc.)
2. NO I/O operations (ports are declared here, implemented elsewhere)
3. Only depends on Python stdlib
"""
