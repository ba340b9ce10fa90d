"""Map azure-core exceptions onto QueueError."""

from azure.core.exceptions import (
    AzureError,
    ClientAuthenticationError,
    HttpResponseError,
    ResourceExistsError,
    ResourceNotFoundError,
)

from azstoragequeue.core.models import QueueError, QueueErrorKind


def _kind_for(error: AzureError, status_code: int | None) -> QueueErrorKind:
    if isinstance(error, ResourceNotFoundError) or status_code == 404:
        return QueueErrorKind.NOT_FOUND
    if isinstance(error, ResourceExistsError) or status_code == 409:
        return QueueErrorKind.CONFLICT
    if isinstance(error, ClientAuthenticationError) or status_code in (401, 403):
        return QueueErrorKind.AUTHENTICATION
    if isinstance(error, HttpResponseError):
        return QueueErrorKind.SERVICE
    return QueueErrorKind.TRANSPORT


def to_queue_error(error: AzureError | ValueError) -> QueueError:
    """
    Convert an SDK exception into a QueueError.

    Args:
        error: Exception raised by azure-storage-queue; ValueError comes from its local argument checks

    Returns:
        QueueError with kind, provider code and message
    """
    if not isinstance(error, AzureError):
        return QueueError(kind=QueueErrorKind.INVALID_ARGUMENT, code=type(error).__name__, message=str(error))

    status_code = getattr(error, "status_code", None)
    error_code = getattr(error, "error_code", None)

    if error_code:
        code = str(error_code)
    elif status_code is not None:
        code = str(status_code)
    else:
        code = type(error).__name__

    # Storage errors append RequestId/Time/ErrorCode lines after the human-readable text
    text = str(error.message or error)
    message = text.splitlines()[0] if text else ""

    return QueueError(
        kind=_kind_for(error, status_code),
        code=code,
        message=message,
        status_code=status_code,
    )

