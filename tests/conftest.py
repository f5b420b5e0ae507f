import pytest

from nfsim.allocator import Allocator

EXAMPLE_BLOCKS = [100, 500, 200, 300, 600]
EXAMPLE_PROCESSES = [212, 417, 112, 426]


@pytest.fixture
def allocator():
    return Allocator()


@pytest.fixture
def example_allocator():
    return Allocator(EXAMPLE_BLOCKS, EXAMPLE_PROCESSES)


def run_to_completion(allocator):
    results = []
    while not allocator.is_complete():
        results.append(allocator.step())
    return results
