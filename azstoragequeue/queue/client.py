"""Azure Storage Queue client wrapper.

Every SDK failure is caught here and returned as a QueueResult, including the
ValueError the SDK raises from its local argument checks. Other errors still raise.
"""

import logging
from collections.abc import Callable
from typing import Any

from azure.core.exceptions import AzureError, ResourceExistsError
from azure.storage.queue import QueueClient

from azstoragequeue.core.config import QueueConfig, config
from azstoragequeue.core.models import QueueMessage, QueueResult
from azstoragequeue.queue.errors import to_queue_error

logger = logging.getLogger(__name__)


class StorageQueueClient:
    """High-level operations on a single storage queue."""

    def __init__(
        self,
        queue_name: str | None = None,
        queue_config: QueueConfig | None = None,
        client: QueueClient | None = None,
    ):
        """
        Args:
            queue_name: Queue to operate on (falls back to queue_config.queue_name)
            queue_config: Account configuration (falls back to the environment-loaded config)
            client: Prebuilt azure QueueClient, mainly for tests

        Raises:
            ValueError: If no queue name or no credentials are available
        """
        self.config = queue_config or config
        name = queue_name or self.config.queue_name
        if not name or not isinstance(name, str):
            raise ValueError("queue_name must be a non-empty string")

        self._queue_name = name
        self.queue = client or QueueClient.from_connection_string(
            self.config.get_connection_string(),
            queue_name=name,
        )

    @property
    def queue_name(self) -> str:
        return self._queue_name

    def _call(self, operation: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> QueueResult:
        try:
            value = func(*args, **kwargs)
        except (AzureError, ValueError) as e:
            error = to_queue_error(e)
            logger.error(f"{operation} failed on queue {self._queue_name}: {error}")
            return QueueResult.failure(error)
        return QueueResult.success(value)

    def create_queue(self, metadata: dict[str, str] | None = None) -> QueueResult[bool]:
        """
        Create the queue if it does not exist yet.

        Args:
            metadata: Optional name-value pairs stored with the queue at creation

        Returns:
            QueueResult with value True once the queue exists (created or already there)
        """
        try:
            self.queue.create_queue(metadata=metadata)
        except ResourceExistsError:
            logger.debug(f"Queue {self._queue_name} already exists")
            return QueueResult.success(True)
        except (AzureError, ValueError) as e:
            error = to_queue_error(e)
            logger.error(f"create_queue failed on queue {self._queue_name}: {error}")
            return QueueResult.failure(error)

        logger.info(f"Ensured queue exists: {self._queue_name}")
        return QueueResult.success(True)

    def send_message(self, body: str) -> QueueResult[QueueMessage]:
        """
        Enqueue a message.

        Args:
            body: Message content, passed to the service unchanged

        Returns:
            QueueResult with the message as acknowledged by the service
        """
        ensured = self.create_queue()
        if not ensured.ok:
            return ensured

        result = self._call("send_message", self.queue.send_message, body)
        if result.ok:
            result.value = QueueMessage.from_azure(result.value)
            logger.info(f"Sent message {result.value.message_id} to {self._queue_name}")
        return result

    def get_approximate_queue_length(self) -> QueueResult[int]:
        """
        Get the service's estimate of the number of messages in the queue.

        The count is eventually consistent and may lag recent sends and deletes.

        Returns:
            QueueResult with the approximate message count
        """
        ensured = self.create_queue()
        if not ensured.ok:
            return ensured

        result = self._call("get_queue_properties", self.queue.get_queue_properties)
        if result.ok:
            result.value = result.value.approximate_message_count
            logger.debug(f"Queue {self._queue_name} holds approximately {result.value} messages")
        return result

    def get_queue_length(self) -> QueueResult[int]:
        """Same as get_approximate_queue_length; the count is approximate."""
        return self.get_approximate_queue_length()

    def peek_messages(self, number_of_messages: int = 1) -> QueueResult[list[QueueMessage]]:
        """
        Look at messages at the front of the queue without leasing them.

        Args:
            number_of_messages: Maximum number of messages to return

        Returns:
            QueueResult with up to number_of_messages messages, without pop receipts
        """
        ensured = self.create_queue()
        if not ensured.ok:
            return ensured

        result = self._call("peek_messages", self.queue.peek_messages, max_messages=number_of_messages)
        if result.ok:
            result.value = [QueueMessage.from_azure(m) for m in result.value]
        return result

    def receive_messages(
        self,
        number_of_messages: int = 1,
        visibility_timeout: int | None = None,
    ) -> QueueResult[list[QueueMessage]]:
        """
        Read messages and lease them for the visibility timeout.

        Args:
            number_of_messages: Maximum number of messages to return
            visibility_timeout: Lease length in seconds (service default when None)

        Returns:
            QueueResult with up to number_of_messages messages, each carrying a pop receipt
        """
        ensured = self.create_queue()
        if not ensured.ok:
            return ensured

        return self._receive(number_of_messages, visibility_timeout)

    def _receive(self, number_of_messages: int, visibility_timeout: int | None = None) -> QueueResult:
        # receive_messages pages lazily, so the list() must run inside the guarded call
        def fetch() -> list[QueueMessage]:
            pages = self.queue.receive_messages(
                max_messages=number_of_messages,
                visibility_timeout=visibility_timeout,
            )
            return [QueueMessage.from_azure(m) for m in pages]

        result = self._call("receive_messages", fetch)
        if result.ok:
            logger.debug(f"Received {len(result.value)} message(s) from {self._queue_name}")
        return result

    def delete_message(self, message_id: str, pop_receipt: str) -> QueueResult[bool]:
        """
        Delete a leased message.

        Args:
            message_id: Identifier assigned by the service
            pop_receipt: Receipt from the read that leased the message

        Returns:
            QueueResult with value True; a stale receipt yields a not_found failure
        """
        ensured = self.create_queue()
        if not ensured.ok:
            return ensured

        return self._delete(message_id, pop_receipt)

    def _delete(self, message_id: str, pop_receipt: str) -> QueueResult:
        result = self._call("delete_message", self.queue.delete_message, message_id, pop_receipt)
        if result.ok:
            result.value = True
            logger.info(f"Deleted message {message_id} from {self._queue_name}")
        return result

    def dequeue_next_message(self) -> QueueResult[QueueMessage]:
        """
        Read the next message and delete it.

        Returns:
            QueueResult with the deleted message, or value None when the queue was empty
        """
        ensured = self.create_queue()
        if not ensured.ok:
            return ensured

        received = self._receive(1)
        if not received.ok:
            return received

        if not received.value:
            logger.debug(f"Queue {self._queue_name} is empty, nothing to dequeue")
            return QueueResult.success(None)

        message = received.value[0]
        deleted = self._delete(message.message_id, message.pop_receipt)
        if not deleted.ok:
            return deleted

        return QueueResult.success(message)

    def delete_queue(self) -> QueueResult[bool]:
        """
        Delete the queue and all of its messages.

        Returns:
            QueueResult with value True; deleting a missing queue is a not_found failure
        """
        result = self._call("delete_queue", self.queue.delete_queue)
        if result.ok:
            result.value = True
            logger.info(f"Deleted queue: {self._queue_name}")
        return result
