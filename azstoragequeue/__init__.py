"""azstoragequeue - Thin result-returning facade over Azure Storage Queues."""

__version__ = "1.0.0"

from azstoragequeue.core.config import QueueConfig, config
from azstoragequeue.core.models import QueueError, QueueErrorKind, QueueMessage, QueueResult
from azstoragequeue.queue.client import StorageQueueClient

__all__ = [
    "config",
    "QueueConfig",
    "QueueError",
    "QueueErrorKind",
    "QueueMessage",
    "QueueResult",
    "StorageQueueClient",
    "__version__",
]
