"""Greedy algorithms: fractional knapsack, optimal page replacement, SJF."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """Something that can go into the knapsack, whole or in part."""

    value: float
    weight: float


def fractional_knapsack(capacity, items):
    """Largest value that fits into capacity when items may be split.

    Items are taken in order of falling value per unit of weight; the first
    one that does not fit whole is taken in part and the filling stops.
    Raises ValueError for a negative capacity or a non-positive weight.
    """
    items = list(items)
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    for item in items:
        if item.weight <= 0:
            raise ValueError(f"item weight must be positive, got {item.weight!r}")
    carried = 0
    total = 0.0
    for item in sorted(items, key=lambda it: it.value / it.weight, reverse=True):
        if carried + item.weight <= capacity:
            carried += item.weight
            total += item.value
        else:
            total += item.value * ((capacity - carried) / item.weight)
            break
    return total


@dataclass(frozen=True)
class PageStats:
    """Outcome of a page replacement run."""

    hits: int
    misses: int


def _victim(frames, pages, start):
    """Slot whose page is needed farthest in the future, or never again."""
    farthest, chosen = start, -1
    for slot, page in enumerate(frames):
        try:
            next_use = pages.index(page, start)
        except ValueError:
            return slot
        if next_use > farthest:
            farthest, chosen = next_use, slot
    return 0 if chosen == -1 else chosen


def optimal_page_replacement(pages, frame_count):
    """Count hits and misses of the optimal (farthest future use) policy.

    Raises ValueError when frame_count is below 1.
    """
    if frame_count < 1:
        raise ValueError("at least one frame is required")
    pages = list(pages)
    frames = []
    hits = 0
    for index, page in enumerate(pages):
        if page in frames:
            hits += 1
        elif len(frames) < frame_count:
            frames.append(page)
        else:
            frames[_victim(frames, pages, index + 1)] = page
    return PageStats(hits=hits, misses=len(pages) - hits)


@dataclass(frozen=True)
class Process:
    """A job to schedule."""

    pid: int
    arrival: int
    burst: int


@dataclass(frozen=True)
class ScheduledProcess:
    """A job with the times the schedule gave it."""

    pid: int
    arrival: int
    burst: int
    completion: int
    waiting: int
    turnaround: int


def shortest_job_first(processes):
    """Non-preemptive shortest-job-first schedule, in execution order.

    The earliest arrival runs first. After that, among jobs that have
    arrived by the time the processor frees up, the shortest runs next, a
    tie going to the one standing later in the queue. When nothing has
    arrived yet the processor idles until the next arrival.
    """
    pending = sorted(processes, key=lambda process: process.arrival)
    schedule = []
    clock = None
    while pending:
        chosen = 0
        if clock is not None:
            ready = [k for k, job in enumerate(pending) if job.arrival <= clock]
            if ready:
                chosen = min(ready, key=lambda k: (pending[k].burst, -k))
        pending[0], pending[chosen] = pending[chosen], pending[0]
        job = pending.pop(0)
        start = job.arrival if clock is None else max(clock, job.arrival)
        completion = start + job.burst
        turnaround = completion - job.arrival
        schedule.append(
            ScheduledProcess(
                pid=job.pid,
                arrival=job.arrival,
                burst=job.burst,
                completion=completion,
                waiting=turnaround - job.burst,
                turnaround=turnaround,
            )
        )
        clock = completion
    return schedule