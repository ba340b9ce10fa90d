"""Configuration and data models for azstoragequeue."""

from azstoragequeue.core.config import QueueConfig, config
from azstoragequeue.core.models import QueueError, QueueErrorKind, QueueMessage, QueueResult, QueueStatus

__all__ = ["config", "QueueConfig", "QueueError", "QueueErrorKind", "QueueMessage", "QueueResult", "QueueStatus"]
