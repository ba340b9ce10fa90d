"""Command line access to a storage queue.

Example:
    azqueue --queue tasks send '{"job": 1}'
    azqueue --queue tasks receive -n 5
    azqueue --queue tasks dequeue
    azqueue status tasks tasks-poison
"""

import argparse
import json
import logging
import sys

from azstoragequeue.core.config import QueueConfig
from azstoragequeue.core.models import QueueResult
from azstoragequeue.queue.client import StorageQueueClient
from azstoragequeue.queue.monitor import QueueMonitor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="azqueue",
        description="Operate on an Azure Storage Queue",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--queue", "-q", help="Queue name (default: AZURE_QUEUE_QUEUE_NAME)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Create the queue if missing")
    create.add_argument(
        "--metadata", "-m", action="append", default=[], metavar="KEY=VALUE", help="Queue metadata (repeatable)"
    )

    send = commands.add_parser("send", help="Enqueue a message")
    send.add_argument("body", help="Message body")

    peek = commands.add_parser("peek", help="Peek at messages without leasing them")
    peek.add_argument("--number", "-n", type=int, default=1, help="Number of messages (default: 1)")

    receive = commands.add_parser("receive", help="Read and lease messages")
    receive.add_argument("--number", "-n", type=int, default=1, help="Number of messages (default: 1)")
    receive.add_argument("--visibility-timeout", "-t", type=int, default=None, help="Lease length in seconds")

    delete_message = commands.add_parser("delete-message", help="Delete a leased message")
    delete_message.add_argument("message_id")
    delete_message.add_argument("pop_receipt")

    commands.add_parser("dequeue", help="Read and delete the next message")
    commands.add_parser("length", help="Approximate message count")
    commands.add_parser("delete-queue", help="Delete the queue")

    status = commands.add_parser("status", help="Approximate message count of several queues")
    status.add_argument("queues", nargs="+", help="Queue names")

    return parser


def parse_metadata(pairs: list[str]) -> dict[str, str] | None:
    """Turn KEY=VALUE strings into a metadata dict."""
    if not pairs:
        return None

    metadata = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid metadata '{pair}', expected KEY=VALUE")
        metadata[key] = value
    return metadata


def run_command(args: argparse.Namespace, queue_config: QueueConfig) -> QueueResult:
    client = StorageQueueClient(args.queue, queue_config)

    if args.command == "create":
        return client.create_queue(parse_metadata(args.metadata))
    if args.command == "send":
        return client.send_message(args.body)
    if args.command == "peek":
        return client.peek_messages(args.number)
    if args.command == "receive":
        return client.receive_messages(args.number, args.visibility_timeout)
    if args.command == "delete-message":
        return client.delete_message(args.message_id, args.pop_receipt)
    if args.command == "dequeue":
        return client.dequeue_next_message()
    if args.command == "length":
        return client.get_approximate_queue_length()
    if args.command == "delete-queue":
        return client.delete_queue()

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # azure-core logs every HTTP request at INFO
    logging.getLogger("azure").setLevel(logging.WARNING)

    try:
        queue_config = QueueConfig()

        if args.command == "status":
            statuses = QueueMonitor(args.queues, queue_config).get_status()
            print(json.dumps([s.model_dump(mode="json") for s in statuses], indent=2))
            return 1 if any(s.error for s in statuses) else 0

        result = run_command(args, queue_config)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    print(result.model_dump_json(indent=2))
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
