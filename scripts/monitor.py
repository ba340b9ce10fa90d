#!/usr/bin/env python3
"""Monitor storage queue lengths using the azstoragequeue package.

Example:
    python scripts/monitor.py tasks
    python scripts/monitor.py tasks tasks-poison --watch --interval 5
"""

import argparse
import os
import sys
import time
from datetime import datetime
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from azstoragequeue.core.models import QueueStatus
from azstoragequeue.queue.monitor import QueueMonitor


def clear_screen():
    """Clear terminal screen."""
    os.system("cls" if os.name == "nt" else "clear")


def print_queue_status(status: QueueStatus):
    """Print queue status."""
    print(f"\n📊 {status.queue_name}")
    print("─" * 60)
    if status.error:
        print(f"  ❌ {status.error}")
    else:
        print(f"  Approximately {status.approximate_message_count:>8,} messages")


def main():
    parser = argparse.ArgumentParser(description="Monitor storage queue lengths")
    parser.add_argument("queues", nargs="+", help="Queue names to monitor")
    parser.add_argument("--watch", "-w", action="store_true", help="Continuous monitoring mode")
    parser.add_argument("--interval", "-i", type=int, default=10, help="Refresh interval in seconds (default: 10)")

    args = parser.parse_args()

    try:
        monitor = QueueMonitor(args.queues)
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    while True:
        if args.watch:
            clear_screen()

        print("\n" + "=" * 60)
        print("azstoragequeue - Queue Monitor")
        print("=" * 60)
        print(f"\n{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

        for status in monitor.get_status():
            print_queue_status(status)

        if not args.watch:
            break

        print(f"\nRefreshing in {args.interval} seconds... (Ctrl+C to exit)")
        time.sleep(args.interval)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\n⚠️  Monitoring stopped")
        sys.exit(0)
