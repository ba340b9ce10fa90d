"""Storage queue operations for azstoragequeue."""

from azstoragequeue.queue.client import StorageQueueClient
from azstoragequeue.queue.monitor import QueueMonitor

__all__ = ["StorageQueueClient", "QueueMonitor"]
