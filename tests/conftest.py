"""Shared pytest fixtures."""

import os
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from azure.core.exceptions import ResourceExistsError, ResourceNotFoundError

# Set credentials before importing azstoragequeue so the module-level config is usable
os.environ.setdefault("AZURE_QUEUE_ACCOUNT_NAME", "devstoreaccount1")
os.environ.setdefault("AZURE_QUEUE_ACCOUNT_KEY", "dGVzdC1rZXk=")

from azstoragequeue.core.config import QueueConfig  # noqa: E402
from azstoragequeue.queue.client import StorageQueueClient  # noqa: E402

QUEUE_NAME = "test-queue"


def make_error(error_class, status_code: int | None, error_code: str | None, message: str):
    """Build an azure-core exception shaped like the ones azure-storage-queue raises."""
    error = error_class(message=f"{message}\nRequestId:00000000-0000-0000-0000-000000000000\nErrorCode:{error_code}")
    error.status_code = status_code
    error.error_code = error_code
    return error


class FakeQueueClient:
    """In-memory stand-in for azure.storage.queue.QueueClient.

    Leases never expire; a message stays invisible until deleted.
    """

    def __init__(self, queue_name: str):
        self.queue_name = queue_name
        self.exists = False
        self.metadata = None
        self.messages = []  # visible and leased, oldest first
        self.leases = {}  # message id -> current pop receipt

    def _require_queue(self):
        if not self.exists:
            raise make_error(ResourceNotFoundError, 404, "QueueNotFound", "The specified queue does not exist.")

    def create_queue(self, metadata=None, **kwargs):
        if self.exists:
            if (metadata or None) != (self.metadata or None):
                raise make_error(ResourceExistsError, 409, "QueueAlreadyExists", "The specified queue already exists.")
            return None
        self.exists = True
        self.metadata = metadata
        return None

    def delete_queue(self, **kwargs):
        self._require_queue()
        self.exists = False
        self.messages = []
        self.leases = {}

    def send_message(self, content, **kwargs):
        self._require_queue()
        now = datetime.now(timezone.utc)
        message = SimpleNamespace(
            id=str(uuid.uuid4()),
            content=content,
            pop_receipt=str(uuid.uuid4()),
            dequeue_count=None,
            inserted_on=now,
            expires_on=now + timedelta(days=7),
            next_visible_on=now,
        )
        self.messages.append(message)
        return message

    def get_queue_properties(self, **kwargs):
        self._require_queue()
        return SimpleNamespace(
            name=self.queue_name,
            metadata=self.metadata,
            approximate_message_count=len(self.messages),
        )

    def _visible(self):
        return [m for m in self.messages if m.id not in self.leases]

    def peek_messages(self, max_messages=None, **kwargs):
        if max_messages is not None and not 1 <= max_messages <= 32:
            raise ValueError("Number of messages to peek should be between 1 and 32")
        self._require_queue()
        visible = self._visible()[: max_messages or 1]
        return [
            SimpleNamespace(
                id=m.id,
                content=m.content,
                pop_receipt=None,
                dequeue_count=m.dequeue_count or 0,
                inserted_on=m.inserted_on,
                expires_on=m.expires_on,
                next_visible_on=None,
            )
            for m in visible
        ]

    def receive_messages(self, max_messages=None, visibility_timeout=None, **kwargs):
        self._require_queue()
        leased = []
        for message in self._visible()[: max_messages or 1]:
            receipt = str(uuid.uuid4())
            self.leases[message.id] = receipt
            message.dequeue_count = (message.dequeue_count or 0) + 1
            leased.append(
                SimpleNamespace(
                    id=message.id,
                    content=message.content,
                    pop_receipt=receipt,
                    dequeue_count=message.dequeue_count,
                    inserted_on=message.inserted_on,
                    expires_on=message.expires_on,
                    next_visible_on=datetime.now(timezone.utc) + timedelta(seconds=visibility_timeout or 30),
                )
            )
        return iter(leased)

    def delete_message(self, message, pop_receipt=None, **kwargs):
        if pop_receipt is None:
            raise ValueError("pop_receipt must be present")
        self._require_queue()
        if self.leases.get(message) != pop_receipt:
            raise make_error(ResourceNotFoundError, 404, "MessageNotFound", "The specified message does not exist.")
        del self.leases[message]
        self.messages = [m for m in self.messages if m.id != message]


@pytest.fixture
def fake_queue():
    """Empty, not yet created, in-memory queue."""
    return FakeQueueClient(QUEUE_NAME)


@pytest.fixture
def queue_config():
    """Explicit configuration that ignores .env files."""
    return QueueConfig(
        account_name="devstoreaccount1",
        account_key="dGVzdC1rZXk=",
        _env_file=None,
    )


@pytest.fixture
def storage_queue(fake_queue, queue_config):
    """StorageQueueClient backed by the in-memory queue."""
    return StorageQueueClient(QUEUE_NAME, queue_config, client=fake_queue)


@pytest.fixture(autouse=True)
def reset_env():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
