from .config import Config

INVALID_INPUT_MESSAGE = "Invalid input. Please enter valid numbers."
REJECTION_TITLE = "Not Enough Space"


def block_lines(snapshot):
    return [
        f"Block {i + 1}: {capacity} {Config.UNIT} (Free)"
        for i, capacity in enumerate(snapshot.block_capacities)
    ]


def process_lines(snapshot):
    lines = []
    for i, size in enumerate(snapshot.process_sizes):
        block = snapshot.allocations[i]
        if block is not None:
            lines.append(f"Process {i + 1}: {size} {Config.UNIT} -> Block {block + 1}")
        else:
            lines.append(f"Process {i + 1}: {size} {Config.UNIT} (Unallocated)")
    return lines


def rejection_message(result):
    return (f"Process {result.process_index + 1} ({result.process_size} {Config.UNIT}) "
            "cannot be allocated to any block.")


def step_message(result):
    """Status bar text for one step."""
    if result.allocated:
        return (f"Process {result.process_index + 1} ({result.process_size} {Config.UNIT}) "
                f"allocated to Block {result.block_index + 1}")
    return rejection_message(result)
