"""Queue length monitoring.

Counts are the service's approximate figures and can lag recent activity.
"""

from azstoragequeue.core.config import QueueConfig, config
from azstoragequeue.core.models import QueueStatus
from azstoragequeue.queue.client import StorageQueueClient


class QueueMonitor:
    """Monitor approximate length of one or more queues."""

    def __init__(self, queue_names: list[str], queue_config: QueueConfig | None = None):
        if not queue_names:
            raise ValueError("queue_names must contain at least one queue")

        queue_config = queue_config or config
        self.queues = [StorageQueueClient(name, queue_config) for name in queue_names]

    def get_status(self) -> list[QueueStatus]:
        """
        Get current queue status.

        Returns:
            One QueueStatus per monitored queue, in the order given
        """
        statuses = []

        for queue in self.queues:
            result = queue.get_approximate_queue_length()
            statuses.append(
                QueueStatus(
                    queue_name=queue.queue_name,
                    approximate_message_count=result.value if result.ok else None,
                    error=result.error,
                )
            )

        return statuses
