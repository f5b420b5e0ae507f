from .allocator import Allocator, Outcome, Snapshot, StepResult
from .parsing import InputValidationError, parse_input, parse_sizes

__all__ = [
    "Allocator",
    "InputValidationError",
    "Outcome",
    "Snapshot",
    "StepResult",
    "parse_input",
    "parse_sizes",
]
