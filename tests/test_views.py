from nfsim.allocator import Allocator
from nfsim.views import (
    INVALID_INPUT_MESSAGE,
    block_lines,
    process_lines,
    rejection_message,
    step_message,
)
from conftest import run_to_completion


class TestViews:
    """Test cases for the list and status texts"""

    def test_initial_lines(self, example_allocator):
        snapshot = example_allocator.snapshot()

        assert block_lines(snapshot)[0] == "Block 1: 100 KB (Free)"
        assert process_lines(snapshot) == [
            "Process 1: 212 KB (Unallocated)",
            "Process 2: 417 KB (Unallocated)",
            "Process 3: 112 KB (Unallocated)",
            "Process 4: 426 KB (Unallocated)",
        ]

    def test_final_lines(self, example_allocator):
        run_to_completion(example_allocator)
        snapshot = example_allocator.snapshot()

        assert block_lines(snapshot) == [
            "Block 1: 100 KB (Free)",
            "Block 2: 176 KB (Free)",
            "Block 3: 200 KB (Free)",
            "Block 4: 300 KB (Free)",
            "Block 5: 183 KB (Free)",
        ]
        assert process_lines(snapshot) == [
            "Process 1: 212 KB -> Block 2",
            "Process 2: 417 KB -> Block 5",
            "Process 3: 112 KB -> Block 2",
            "Process 4: 426 KB (Unallocated)",
        ]

    def test_empty_snapshot(self):
        snapshot = Allocator().snapshot()

        assert block_lines(snapshot) == []
        assert process_lines(snapshot) == []

    def test_messages(self, example_allocator):
        results = run_to_completion(example_allocator)

        assert step_message(results[0]) == "Process 1 (212 KB) allocated to Block 2"
        assert rejection_message(results[3]) == "Process 4 (426 KB) cannot be allocated to any block."
        assert step_message(results[3]) == rejection_message(results[3])

    def test_invalid_input_message(self):
        assert INVALID_INPUT_MESSAGE == "Invalid input. Please enter valid numbers."
