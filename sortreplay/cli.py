"""Command-line front end: record a sorting trace, inspect it, or play it back."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import random
import sys
from typing import Optional, Sequence

from .algorithms import available_algorithms
from .api import (
    InvalidInputError,
    create_player,
    dump_trace,
    generate_trace,
    replay_trace,
    trace_stats,
)
from .array_generators import ArrayPattern, generate_array
from .player_types import PlayerConfig, PlayerState
from .scheduler import AsyncioScheduler
from .trace_types import AlgorithmTrace
from . import constants


DEMO_ARRAY = [3, 1, 4, 1, 5, 9, 2, 6]


def _parse_array(raw: str) -> list[float | int]:
    values: list[float | int] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            values.append(int(token))
        except ValueError:
            values.append(float(token))
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortreplay",
        description="Record a sorting algorithm's operations and replay them",
    )
    parser.add_argument("--algorithm", "-a", default=constants.DEFAULT_ALGORITHM,
                        choices=available_algorithms(),
                        help=f"Sorting algorithm (default: {constants.DEFAULT_ALGORITHM})")
    parser.add_argument("--array", default=None,
                        help="Comma-separated input numbers, e.g. 3,1,2")
    parser.add_argument("--pattern", "-p", default=None,
                        choices=[p.value for p in ArrayPattern],
                        help="Generate the input instead of passing --array")
    parser.add_argument("--size", "-n", type=int, default=10,
                        help="Generated array size (default: 10)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for generated arrays")
    parser.add_argument("--trace-only", action="store_true",
                        help="Only print the recorded operations")
    parser.add_argument("--stats", action="store_true",
                        help="Print operation counts by type")
    parser.add_argument("--step", type=int, default=None,
                        help="Print the array as it stands after STEP operations")
    parser.add_argument("--json", action="store_true",
                        help="Print the full trace as JSON")
    parser.add_argument("--play", action="store_true",
                        help="Play the trace back frame by frame")
    parser.add_argument("--speed", type=float, default=constants.DEFAULT_SPEED,
                        help="Playback speed multiplier, clamped to [0.25, 4]")
    parser.add_argument("--tick-ms", type=float, default=constants.BASE_TICK_MS,
                        help="Milliseconds per step at speed 1 (default: 1000)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable INFO logging")
    return parser


def _format_frame(state: PlayerState) -> str:
    op = state.operations[state.current_step - 1] if state.current_step else None
    label = str(op) if op is not None else "start"
    return (
        f"[{state.current_step:>{len(str(state.total_steps))}}/{state.total_steps}] "
        f"{list(state.current_array)}  {label}"
    )


async def play_trace(trace: AlgorithmTrace, config: PlayerConfig) -> PlayerState:
    """Play *trace* on the running loop, printing every frame; return the last state."""
    finished = asyncio.Event()
    player = create_player(trace, scheduler=AsyncioScheduler(), config=config)
    last_step = -1

    def on_state(state: PlayerState) -> None:
        nonlocal last_step
        if state.current_step != last_step:
            last_step = state.current_step
            print(_format_frame(state))
        if not state.is_playing and state.current_step == state.total_steps:
            finished.set()

    on_state(player.get_state())
    player.subscribe(on_state)
    player.play()
    if player.total_steps:
        await finished.wait()
    final = player.get_state()
    player.destroy()
    return final


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if args.array is not None:
        try:
            array = _parse_array(args.array)
        except ValueError as exc:
            parser.error(f"--array: {exc}")
    elif args.pattern is not None:
        array = generate_array(args.pattern, args.size, rng=random.Random(args.seed))
    else:
        print("No input provided. Using built-in demo array.\n")
        array = list(DEMO_ARRAY)

    try:
        trace = generate_trace(array, algorithm=args.algorithm)
    except InvalidInputError as exc:
        for error in exc.errors:
            print(f"error: {error}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(trace.to_dict(), indent=2))
        return 0

    if args.trace_only:
        print("═══ Operations ═══")
        print(dump_trace(trace))
        return 0

    if args.stats:
        print("═══ Operation counts ═══")
        for name, count in sorted(trace_stats(trace).items()):
            print(f"  {name:<10} {count:>6}")
        return 0

    if args.step is not None:
        print(replay_trace(trace, args.step))
        return 0

    if args.play:
        config = PlayerConfig(speed=args.speed, base_tick_ms=args.tick_ms)
        asyncio.run(play_trace(trace, config))
        return 0

    meta = trace.metadata
    print(f"Algorithm:  {meta.name} ({'stable' if meta.stable else 'unstable'}, "
          f"{'in place' if meta.in_place else 'not in place'})")
    print(f"Time:       best {meta.time_complexity.best}, "
          f"average {meta.time_complexity.average}, worst {meta.time_complexity.worst}")
    print(f"Space:      {meta.space_complexity}")
    print(f"Input:      {list(trace.original_array)}")
    print(f"Operations: {len(trace)}")
    print(f"Sorted:     {list(trace.final_array)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
