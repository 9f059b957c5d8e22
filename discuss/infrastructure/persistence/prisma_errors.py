"""
Prisma error translation.

Every repository call runs inside store_operation(), which maps Prisma
client errors to the domain StorageError so the application layer never
sees a Prisma type:

    UniqueViolationError -> StorageError(unique_violation=True)
    PrismaError          -> StorageError
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from prisma.errors import PrismaError, UniqueViolationError

from discuss.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_operation(operation: str) -> AsyncIterator[None]:
    try:
        yield
    except UniqueViolationError as e:
        logger.info(f"DB unique constraint violated during {operation}: {e}")
        raise StorageError(str(e), operation, unique_violation=True) from e
    except PrismaError as e:
        logger.error(f"DB {operation} failed: {e}")
        raise StorageError(str(e), operation) from e
