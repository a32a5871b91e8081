import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Union

from tqdm import tqdm

from day16.network import Network
from day16.parse import Name, ParseError
from day16.search import MAX_TIME, START, STRATEGIES, best_state

SAMPLE_INPUT = Path(__file__).with_name("input-sample.txt")
# The search recurses once per turn
MAX_TURNS = 500


def solve(
    path: Path = SAMPLE_INPUT,
    max_turns: int = MAX_TIME,
    start: Union[str, Name] = START,
    strategy: str = "manual",
) -> int:
    net = Network.from_file(path)
    return best_state(net, max_turns, start, strategy).pressure


def bench(
    net: Network,
    iterations: int,
    max_turns: int = MAX_TIME,
    start: Union[str, Name] = START,
) -> dict[str, tuple[int, float]]:
    """Runs every strategy `iterations` times, returning the pressure found
    and the mean seconds per run for each."""
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    results: dict[str, tuple[int, float]] = {}
    for strategy in STRATEGIES:
        pressure = 0
        total = 0.0
        for _ in tqdm(range(iterations), desc=strategy):
            started = time.perf_counter()
            pressure = best_state(net, max_turns, start, strategy).pressure
            total += time.perf_counter() - started
        results[strategy] = (pressure, total / iterations)
    return results


def _cmd_solve(args: argparse.Namespace) -> int:
    net = Network.from_file(args.input)
    state = best_state(net, args.turns, args.start, args.strategy)
    print(state.pressure)
    if args.verbose:
        print("opened:", ", ".join(str(name) for name in state.opened()))
    return 0


def _cmd_bench(args: argparse.Namespace) -> int:
    net = Network.from_file(args.input)
    results = bench(net, args.iterations, args.turns, args.start)
    for strategy, (pressure, seconds) in results.items():
        print(f"{strategy}: pressure={pressure} mean={seconds:.6f}s")
    if len({pressure for pressure, _ in results.values()}) > 1:
        print("strategies disagree on the best pressure", file=sys.stderr)
        return 1
    return 0


def _turns(value: str) -> int:
    turns = int(value)
    if not 0 <= turns <= MAX_TURNS:
        raise argparse.ArgumentTypeError(f"turns must be between 0 and {MAX_TURNS}")
    return turns


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="day16", description="Find the most pressure that can be released"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("input", nargs="?", type=Path, default=SAMPLE_INPUT)
        p.add_argument("--turns", type=_turns, default=MAX_TIME)
        p.add_argument("--start", type=Name, default=START)

    p_solve = sub.add_parser("solve", help="Print the best pressure")
    add_common(p_solve)
    p_solve.add_argument("--strategy", choices=sorted(STRATEGIES), default="manual")
    p_solve.add_argument("-v", "--verbose", action="store_true")
    p_solve.set_defaults(func=_cmd_solve)

    p_bench = sub.add_parser("bench", help="Time every search strategy")
    add_common(p_bench)
    p_bench.add_argument("--iterations", type=int, default=10)
    p_bench.set_defaults(func=_cmd_bench)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
