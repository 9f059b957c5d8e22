"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/            → Topic / Post / Comment persistence
- session_resolver.py      → Request context → authenticated identity
- invalidation_notifier.py → "cached view at this path is stale" signal
"""

from discuss.domain.ports.session_resolver import RequestContext, SessionResolver
from discuss.domain.ports.invalidation_notifier import InvalidationNotifier

__all__ = [
    "RequestContext",
    "SessionResolver",
    "InvalidationNotifier",
]
