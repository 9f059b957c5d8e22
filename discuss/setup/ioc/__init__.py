"""
Dishka DI setup.

handlers.py  → HandlerProvider (use cases, depends only on ports)
container.py → InfrastructureProvider (Prisma, Redis, JWT) + create_container()
"""
