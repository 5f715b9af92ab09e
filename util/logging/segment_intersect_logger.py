"""
Logging wrapper for Circle.segmentIntersect calls.

This module monkey patches Circle.segmentIntersect to log every call for
debugging and test case extraction (e.g. near-tangent queries, where the
distance from the center to the line is almost equal to the radius).

Usage:
    from util.logging.segment_intersect_logger import enable_logging, disable_logging

    enable_logging(log_file='segment_intersect_calls.log')
    # Run your experiments...
    disable_logging()
"""

import functools
import time
import json
from typing import Optional, List, Tuple
from pathlib import Path


class SegmentIntersectLogger:
    """Logger for Circle.segmentIntersect calls."""

    def __init__(self, log_file: str = "segment_intersect_calls.log"):
        self.log_file = log_file
        self.call_count = 0
        self.enabled = False
        self.original_function = None
        self.log_handle = None

    def _inputs(self, circle, pa, pb, tangent_tol) -> dict:
        return {
            "center": list(circle.center),
            "radius": circle.radius,
            "pa": list(pa),
            "pb": list(pb),
            "tangent_tol": tangent_tol,
        }

    def _write(self, log_entry: dict):
        if not self.enabled or self.log_handle is None:
            return
        # Write as JSON line (one JSON object per line for easy parsing)
        self.log_handle.write(json.dumps(log_entry) + "\n")
        self.log_handle.flush()

    def _log_call(
        self,
        circle,
        pa: List[float],
        pb: List[float],
        tangent_tol: float,
        start_time: float,
        end_time: float,
        result: Tuple[List[List[float]], int],
    ):
        """Log a single function call."""
        intersects, nint = result
        distance = circle.lineDistance(pa, pb)

        log_entry = {
            "call_id": self.call_count,
            "timestamp": time.time(),
            "execution_time_seconds": end_time - start_time,
            "status": "success",
            "inputs": self._inputs(circle, pa, pb, tangent_tol),
            "outputs": {
                "nint": nint,
                "intersects": intersects,
                "distance": distance,
                "gap": distance - circle.radius,
            },
        }
        self._write(log_entry)

    def wrapper(self, circle, pa, pb, tangent_tol=0.0):
        """Wrapper function that logs calls to segmentIntersect."""
        self.call_count += 1
        start_time = time.time()

        try:
            result = self.original_function(circle, pa, pb, tangent_tol)
        except Exception as e:
            end_time = time.time()
            log_entry = {
                "call_id": self.call_count,
                "timestamp": time.time(),
                "execution_time_seconds": end_time - start_time,
                "status": "exception",
                "inputs": self._inputs(circle, pa, pb, tangent_tol),
                "error_type": type(e).__name__,
                "error": str(e),
            }
            self._write(log_entry)
            raise

        end_time = time.time()
        self._log_call(circle, pa, pb, tangent_tol, start_time, end_time, result)
        return result

    def enable(self, log_file: Optional[str] = None):
        """Enable logging by monkey patching Circle.segmentIntersect."""
        if self.enabled:
            print(
                "Warning: Logging is already enabled. Disable first before re-enabling."
            )
            return

        if log_file:
            self.log_file = log_file

        from main.structs.circle import Circle

        self.original_function = Circle.segmentIntersect
        self.call_count = 0

        # Open log file for writing
        log_path = Path(self.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        self.log_handle = open(log_path, "w")

        # Write header comment
        self.log_handle.write("# segmentIntersect call log\n")
        self.log_handle.write(f"# Started at: {time.strftime('%Y-%m-%d %H:%M:%S')}\n")
        self.log_handle.write("# Format: One JSON object per line\n")
        self.log_handle.write("#\n")

        # Bound methods don't bind as instance methods, so patch in a plain function
        @functools.wraps(self.original_function)
        def patched(circle, pa, pb, tangent_tol=0.0):
            return self.wrapper(circle, pa, pb, tangent_tol)

        Circle.segmentIntersect = patched

        self.enabled = True
        print(f"✓ Logging enabled: calls will be logged to {self.log_file}")

    def disable(self):
        """Disable logging and restore original function."""
        if not self.enabled:
            print("Warning: Logging is not currently enabled.")
            return

        from main.structs.circle import Circle

        Circle.segmentIntersect = self.original_function

        if self.log_handle:
            self.log_handle.write(
                f"# Logging stopped at: {time.strftime('%Y-%m-%d %H:%M:%S')}\n"
            )
            self.log_handle.write(f"# Total calls logged: {self.call_count}\n")
            self.log_handle.close()
            self.log_handle = None

        self.enabled = False
        print(f"✓ Logging disabled: {self.call_count} calls logged to {self.log_file}")

    def get_stats(self) -> dict:
        """Get statistics about logged calls."""
        if not self.enabled or self.call_count == 0:
            return {"total_calls": 0}

        stats = {
            "total_calls": self.call_count,
            "log_file": self.log_file,
        }

        nint_counts = {0: 0, 1: 0, 2: 0}
        exception_count = 0
        total_time = 0.0
        max_time = 0.0

        with open(self.log_file, "r") as f:
            for line in f:
                if not line.strip() or line.strip().startswith("#"):
                    continue
                try:
                    entry = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if entry.get("status") == "exception":
                    exception_count += 1
                else:
                    nint = entry.get("outputs", {}).get("nint")
                    if nint in nint_counts:
                        nint_counts[nint] += 1

                exec_time = entry.get("execution_time_seconds", 0)
                total_time += exec_time
                max_time = max(max_time, exec_time)

        stats.update(
            {
                "nint_counts": nint_counts,
                "exception_count": exception_count,
                "avg_execution_time": total_time / self.call_count,
                "max_execution_time": max_time,
                "total_execution_time": total_time,
            }
        )
        return stats


# Global logger instance
_logger = SegmentIntersectLogger()


def enable_logging(log_file: str = "segment_intersect_calls.log"):
    """Enable logging of segmentIntersect calls."""
    _logger.enable(log_file)


def disable_logging():
    """Disable logging and restore original function."""
    _logger.disable()


def get_stats() -> dict:
    """Get statistics about logged calls."""
    return _logger.get_stats()


def is_enabled() -> bool:
    """Check if logging is currently enabled."""
    return _logger.enabled
