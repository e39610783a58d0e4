"""Threads: waiting for them, sharing a counter and sending values over a channel."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from queue import SimpleQueue

CLOSED = object()
"""Marker each sender puts on the channel after its last value."""

_SENDERS = 2


def spawn_and_join(count: int, delay: float) -> int:
    """Start count threads that sleep and report, wait for all, return how many finished."""

    def work(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    handles = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for handle in handles:
        handle.start()

    completed = 0
    for handle in handles:
        handle.join()
        completed += 1

    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    """A counter of completed jobs, guarded by a lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


def run_jobs(count: int, delay: float) -> JobStatus:
    """Run count jobs in threads, each adding one to a shared status."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=job) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with status.lock:
            print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass(frozen=True)
class Queue:
    """Ten values split into two halves."""

    length: int = 10
    first_half: tuple[int, ...] = (1, 2, 3, 4, 5)
    second_half: tuple[int, ...] = (6, 7, 8, 9, 10)


def send_tx(queue: Queue, channel: SimpleQueue, delay: float) -> list[threading.Thread]:
    """Send both halves on the channel from two threads; each ends with CLOSED."""

    def send(values: tuple[int, ...]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(delay)
        channel.put(CLOSED)

    senders = [
        threading.Thread(target=send, args=(half,))
        for half in (queue.first_half, queue.second_half)
    ]
    for sender in senders:
        sender.start()
    return senders


def receive_all(queue: Queue, delay: float) -> list[int]:
    """Receive every value sent for queue; raise if the count differs from its length."""
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel, delay)

    received = []
    open_senders = _SENDERS
    while open_senders:
        value = channel.get()
        if value is CLOSED:
            open_senders -= 1
            continue
        print(f"Got: {value}")
        received.append(value)
    for sender in senders:
        sender.join()

    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers, expected {queue.length}"
        )
    return received