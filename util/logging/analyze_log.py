"""
Analyze segmentIntersect call log files to extract challenging test cases.

Usage:
    python -m util.logging.analyze_log segment_intersect_calls.log
    python -m util.logging.analyze_log segment_intersect_calls.log --extract-exceptions
    python -m util.logging.analyze_log segment_intersect_calls.log --extract-tangent --gap-threshold 1e-9
    python -m util.logging.analyze_log segment_intersect_calls.log --extract-slow --threshold 0.01
"""

import json
import argparse
from typing import List, Dict, Any


def load_log_entries(log_file: str) -> List[Dict[str, Any]]:
    """Load all log entries from a log file."""
    entries = []
    with open(log_file, "r") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                entry = json.loads(line)
                entries.append(entry)
            except json.JSONDecodeError as e:
                print(f"Warning: Could not parse line: {line[:100]}... Error: {e}")
    return entries


def summarize(entries: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Count calls by outcome and collect timing."""
    nint_counts = {0: 0, 1: 0, 2: 0}
    for e in entries:
        if e.get("status") == "success":
            nint = e.get("outputs", {}).get("nint")
            if nint in nint_counts:
                nint_counts[nint] += 1

    execution_times = [e.get("execution_time_seconds", 0) for e in entries]
    return {
        "total": len(entries),
        "nint_counts": nint_counts,
        "exceptions": sum(1 for e in entries if e.get("status") == "exception"),
        "avg_time": (
            sum(execution_times) / len(execution_times) if execution_times else 0
        ),
        "max_time": max(execution_times) if execution_times else 0,
        "total_time": sum(execution_times),
    }


def print_summary(entries: List[Dict[str, Any]]):
    """Print summary statistics."""
    summary = summarize(entries)
    total = summary["total"]
    if total == 0:
        print("No entries in log file")
        return

    print("=" * 80)
    print("LOG FILE SUMMARY")
    print("=" * 80)
    print(f"Total calls: {total}")
    for nint, count in summary["nint_counts"].items():
        print(f"  {nint} intersection(s): {count} ({100*count/total:.1f}%)")
    exceptions = summary["exceptions"]
    print(f"  ⚠ Exceptions: {exceptions} ({100*exceptions/total:.1f}%)")
    print()
    print("Execution time:")
    print(f"  Average: {summary['avg_time']:.2e}s")
    print(f"  Maximum: {summary['max_time']:.2e}s")
    print(f"  Total: {summary['total_time']:.4f}s")
    print()


def extract_exception_cases(entries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Extract all calls that raised."""
    return [e for e in entries if e.get("status") == "exception"]


def extract_slow_cases(
    entries: List[Dict[str, Any]], threshold: float = 0.01
) -> List[Dict[str, Any]]:
    """Extract cases that took longer than threshold seconds."""
    return [e for e in entries if e.get("execution_time_seconds", 0) > threshold]


def extract_near_tangent_cases(
    entries: List[Dict[str, Any]], gap_threshold: float = 1e-9
) -> List[Dict[str, Any]]:
    """Extract cases where the line passes within gap_threshold of tangency."""
    result = []
    for e in entries:
        gap = e.get("outputs", {}).get("gap")
        if gap is not None and abs(gap) <= gap_threshold:
            result.append(e)
    return result


def format_test_case(entry: Dict[str, Any]) -> str:
    """Format a log entry as a test case."""
    inputs = entry.get("inputs", {})
    outputs = entry.get("outputs", {})
    call_id = entry.get("call_id", "unknown")
    status = entry.get("status", "unknown")

    if status == "exception":
        description = f"From log: raised {entry.get('error_type')}: {entry.get('error')}"
    else:
        description = (
            f"From log: nint={outputs.get('nint')}, gap={outputs.get('gap')}"
        )

    return f"""IntersectCase(
    name="case_from_log_{call_id}",
    center={inputs.get('center')},
    radius={inputs.get('radius')},
    pa={inputs.get('pa')},
    pb={inputs.get('pb')},
    tangent_tol={inputs.get('tangent_tol')},
    description={description!r}
),"""


def unique_by_call_id(entries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    seen_ids = set()
    unique = []
    for e in entries:
        call_id = e.get("call_id")
        if call_id not in seen_ids:
            seen_ids.add(call_id)
            unique.append(e)
    return unique


def main(argv=None):
    parser = argparse.ArgumentParser(description="Analyze segmentIntersect call logs")
    parser.add_argument("log_file", help="Path to log file")
    parser.add_argument(
        "--extract-exceptions",
        action="store_true",
        help="Extract calls that raised",
    )
    parser.add_argument(
        "--extract-slow", action="store_true", help="Extract slow test cases"
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=0.01,
        help="Time threshold for slow cases (seconds)",
    )
    parser.add_argument(
        "--extract-tangent",
        action="store_true",
        help="Extract near-tangent cases",
    )
    parser.add_argument(
        "--gap-threshold",
        type=float,
        default=1e-9,
        help="Maximum |distance - radius| for near-tangent cases",
    )
    parser.add_argument(
        "--output", type=str, help="Output file for extracted test cases"
    )

    args = parser.parse_args(argv)

    # Load entries
    print(f"Loading log file: {args.log_file}")
    entries = load_log_entries(args.log_file)
    print(f"Loaded {len(entries)} entries\n")

    print_summary(entries)

    # Extract cases based on flags
    extracted = []

    if args.extract_exceptions:
        raised = extract_exception_cases(entries)
        print(f"Found {len(raised)} exception cases")
        extracted.extend(raised)

    if args.extract_slow:
        slow = extract_slow_cases(entries, args.threshold)
        print(f"Found {len(slow)} slow cases (>{args.threshold}s)")
        extracted.extend(slow)

    if args.extract_tangent:
        tangent = extract_near_tangent_cases(entries, args.gap_threshold)
        print(f"Found {len(tangent)} near-tangent cases (|gap|<={args.gap_threshold})")
        extracted.extend(tangent)

    unique_extracted = unique_by_call_id(extracted)

    if unique_extracted:
        print(f"\nTotal unique extracted cases: {len(unique_extracted)}")

        # Format as test cases
        test_cases = [format_test_case(e) for e in unique_extracted]

        if args.output:
            with open(args.output, "w") as f:
                f.write("# Extracted test cases from log file\n")
                f.write("# Format: IntersectCase objects for test_circle_cases.py\n\n")
                for tc in test_cases:
                    f.write(tc + "\n\n")
            print(f"\n✓ Test cases written to {args.output}")
        else:
            print("\n" + "=" * 80)
            print("EXTRACTED TEST CASES")
            print("=" * 80)
            for tc in test_cases:
                print(tc)
                print()

    return unique_extracted


if __name__ == "__main__":
    main()
