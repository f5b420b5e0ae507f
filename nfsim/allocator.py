"""Next-fit allocation state machine.

The allocator owns a list of fixed memory blocks and a list of process
requests. Each call to ``step()`` places the next process in the first block
that fits, scanning from just after the last block that received an
allocation and wrapping around to block 0.
"""
import logging
from collections import namedtuple

logger = logging.getLogger("NFSim")


class Outcome:
    ALLOCATED = "Allocated"
    REJECTED = "Rejected"


class StepResult(namedtuple(
        "StepResult",
        ["process_index", "process_size", "outcome", "block_index", "blocks_remaining"])):
    __slots__ = ()

    @property
    def allocated(self):
        return self.outcome == Outcome.ALLOCATED

Snapshot = namedtuple(
    "Snapshot",
    ["block_capacities", "allocations", "block_sizes", "process_sizes", "cursor", "next_process"]
)


class Allocator:
    def __init__(self, block_sizes=None, process_sizes=None):
        self.reset()
        if block_sizes is not None and process_sizes is not None:
            self.initialize(block_sizes, process_sizes)

    def initialize(self, block_sizes, process_sizes):
        """Start a new run over the given block and process sizes."""
        self.block_sizes = tuple(block_sizes)
        self.blocks = list(self.block_sizes)  # Remaining capacity per block
        self.processes = tuple(process_sizes)
        self.allocation = [None] * len(self.processes)
        self.last_allocated_block = None
        self.current_process = 0
        logger.info(f"Allocator initialized with blocks {list(self.block_sizes)} and processes {list(self.processes)}")

    def reset(self):
        self.block_sizes = ()
        self.blocks = []
        self.processes = ()
        self.allocation = []
        self.last_allocated_block = None
        self.current_process = 0
        logger.info("Allocator reset")

    def is_complete(self):
        return self.current_process >= len(self.processes)

    def _scan_order(self):
        start = 0 if self.last_allocated_block is None else self.last_allocated_block + 1
        count = len(self.blocks)
        return [(start + i) % count for i in range(count)]

    def step(self):
        """Try to place the next process. Returns None once every process has been handled."""
        if self.is_complete():
            return None

        pid = self.current_process
        size = self.processes[pid]
        target = None

        for index in self._scan_order():
            if self.blocks[index] >= size:
                target = index
                break

        if target is not None:
            self.blocks[target] -= size
            self.allocation[pid] = target
            self.last_allocated_block = target
            outcome = Outcome.ALLOCATED
            logger.info(f"Allocated {size}KB for process {pid + 1} in block {target + 1} ({self.blocks[target]}KB left)")
        else:
            outcome = Outcome.REJECTED
            logger.warning(f"Failed to allocate {size}KB for process {pid + 1}: No suitable block found")

        # Move on even after a rejection; the process is not retried
        self.current_process += 1
        if self.is_complete():
            logger.info("All processes handled, simulation complete")

        return StepResult(pid, size, outcome, target, tuple(self.blocks))

    def snapshot(self):
        return Snapshot(
            block_capacities=tuple(self.blocks),
            allocations=tuple(self.allocation),
            block_sizes=self.block_sizes,
            process_sizes=self.processes,
            cursor=self.last_allocated_block,
            next_process=self.current_process
        )

    def fragmentation(self):
        """Share of total memory that is free but not part of the largest free block."""
        total_size = sum(self.block_sizes)
        if not self.blocks or total_size <= 0:
            return 0

        total_free = sum(self.blocks)
        largest_free = max(self.blocks)

        if total_free == 0:
            return 0

        return (total_free - largest_free) / total_size
