"""Line-oriented replay mode.

Each line of input is treated as a full command line. A failing line is
reported and the loop moves on to the next one.
"""
import sys
from typing import Callable, Iterable, List, Optional

from optn.logging.calc_logger import CalcLogger


def run_repl(lines: Iterable[str], handle: Callable[[List[str]], int],
             logger: Optional[CalcLogger] = None) -> int:
    """Run every non-blank line through the command handler.

    Args:
        lines: Input lines, typically sys.stdin
        handle: Callable taking the split arguments and returning an exit status
        logger: Optional logger for failures and the session summary

    Returns:
        0 once the input is exhausted
    """
    processed = 0
    failed = 0

    for line in lines:
        args = line.split()
        if not args:
            continue

        processed += 1
        try:
            status = handle(args)
        except Exception as e:
            if logger:
                logger.log_error("Replay line failed", error=e, context={"line": line.strip()})
            print(f"ERROR: {e}", file=sys.stderr)
            status = 1

        if status != 0:
            failed += 1
        print("\n")

    if logger:
        logger.log_info("Replay finished", {"lines": processed, "failed": failed})
    return 0
