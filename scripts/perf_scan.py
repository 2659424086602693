#!/usr/bin/env python3
"""Simple performance baseline for plainlatin folding."""

from __future__ import annotations

import argparse
import json
import random
import time
from typing import Dict, List

from plainlatin.normalize import SCRATCH_SIZE, normalize, normalize_into
from plainlatin.types import Axis


_PLAIN_SENTENCES = [
    "This document provides a brief overview of the project.",
    "Installation steps are listed below for your convenience.",
    "Please see the documentation for more details.",
]

_FOLDED_SNIPPETS = [
    "Crème brûlée at the Straße café.",
    "Ærøskøbing ‽ “quoted” — ﬁne ﬂow…",
    "①②③ Ｆｕｌｌｗｉｄｔｈ • bullet",
]


def _build_text(target_chars: int, fold_every: int) -> str:
    chunks: List[str] = []
    total = 0
    i = 0
    while total < target_chars:
        if fold_every and i % fold_every == 0:
            chunk = random.choice(_FOLDED_SNIPPETS)
        else:
            chunk = random.choice(_PLAIN_SENTENCES)
        chunks.append(chunk)
        total += len(chunk) + 1
        i += 1
    return " ".join(chunks)


def _run_case(text: str, axis: Axis, runs: int, reuse: bool) -> Dict[str, float]:
    durations: List[float] = []
    buffer: List[str] = []
    scratch = [""] * SCRATCH_SIZE
    for _ in range(runs):
        start = time.perf_counter()
        if reuse:
            buffer.clear()
            normalize_into(buffer, scratch, axis, text)
        else:
            normalize(axis, text)
        durations.append(time.perf_counter() - start)
    durations.sort()
    return {
        "min_ms": durations[0] * 1000.0,
        "p50_ms": durations[len(durations) // 2] * 1000.0,
        "max_ms": durations[-1] * 1000.0,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="plainlatin fold perf baseline.")
    parser.add_argument("--sizes", nargs="+", type=int, default=[100_000, 500_000, 1_000_000])
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--fold-every", type=int, default=10)
    parser.add_argument(
        "--reuse-buffer",
        action="store_true",
        help="Exercise normalize_into with a reused buffer instead of normalize.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="",
        help="Optional path to write results as JSON.",
    )
    args = parser.parse_args()

    print("plainlatin perf baseline")
    print(f"sizes={args.sizes} chars, runs={args.runs}, fold_every={args.fold_every}")

    results: Dict[str, Dict[str, Dict[str, float]]] = {}
    for size in args.sizes:
        text = _build_text(size, args.fold_every)
        print(f"\nsize={size} chars")
        size_key = str(size)
        results[size_key] = {}
        for axis in Axis:
            stats = _run_case(text, axis, args.runs, args.reuse_buffer)
            results[size_key][axis.value] = stats
            print(
                f"  axis={axis.value} min={stats['min_ms']:.2f}ms "
                f"p50={stats['p50_ms']:.2f}ms max={stats['max_ms']:.2f}ms"
            )
    if args.output:
        output_path = args.output
        with open(output_path, "w", encoding="utf-8") as handle:
            json.dump(
                {
                    "sizes": args.sizes,
                    "runs": args.runs,
                    "fold_every": args.fold_every,
                    "reuse_buffer": args.reuse_buffer,
                    "results": results,
                },
                handle,
                indent=2,
                sort_keys=True,
            )
        print(f"\nWrote results to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
