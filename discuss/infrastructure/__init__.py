"""
INFRASTRUCTURE LAYER - Adapters for the domain ports

persistence/ → Prisma repositories (Topic, Post, Comment)
cache/       → Redis client and view invalidation notifier
auth/        → JWT session resolver
"""
