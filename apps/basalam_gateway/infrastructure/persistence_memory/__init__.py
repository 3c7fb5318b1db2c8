"""In-Memory Persistence Layer."""

from apps.basalam_gateway.infrastructure.persistence_memory.state_store_memory import (
    InMemoryAttemptStore,
)

__all__ = ["InMemoryAttemptStore"]
