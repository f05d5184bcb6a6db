"""Repository adapters: the Delivery API client and an in-memory repository."""

from .cda_client import ContentDeliveryClient, ContentfulAPIError
from .memory_repo import InMemoryRepository

__all__ = [
    "ContentDeliveryClient",
    "ContentfulAPIError",
    "InMemoryRepository",
]
