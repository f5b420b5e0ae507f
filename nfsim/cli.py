import argparse
import sys

from .allocator import Allocator
from .config import Config, setup_logging
from .parsing import InputValidationError, parse_input
from .views import block_lines, process_lines, step_message


def build_parser():
    parser = argparse.ArgumentParser(prog="nfsim", description="Next-Fit memory allocation simulator")
    parser.add_argument("--blocks", default="", help='Memory block sizes in KB, e.g. "100,500,200,300,600"')
    parser.add_argument("--processes", default="", help='Process sizes in KB, e.g. "212,417,112,426"')
    parser.add_argument("--headless", action="store_true", help="Print the step trace instead of opening a window")
    parser.add_argument("--fps", type=int, default=Config.FPS, help="Frame rate of the window")
    parser.add_argument("--log-file", help="Log file (default: timestamped nfsim_log_*.log)")
    return parser


def run_headless(block_text, process_text, out=None):
    """Run a whole simulation on the terminal. Returns the exit status."""
    out = out or sys.stdout
    try:
        blocks, processes = parse_input(block_text, process_text)
    except InputValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    allocator = Allocator(blocks, processes)
    while not allocator.is_complete():
        result = allocator.step()
        print(step_message(result), file=out)

    snapshot = allocator.snapshot()
    print("", file=out)
    print("Memory Blocks:", file=out)
    for line in block_lines(snapshot):
        print(f"  {line}", file=out)
    print("Processes:", file=out)
    for line in process_lines(snapshot):
        print(f"  {line}", file=out)
    print(f"Fragmentation: {allocator.fragmentation():.2%}", file=out)
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file)
    Config.FPS = args.fps

    if args.headless:
        return run_headless(args.blocks, args.processes)

    # Imported here so the headless path works without a display
    from .app import NFSim
    NFSim(args.blocks, args.processes).run()
    return 0
