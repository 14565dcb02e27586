#!/usr/bin/env python3
"""Run the tour solvers on one instance and report tour, cost and timings.

CLI examples:
    tsp-exact                                   # built-in 10-city instance, all methods
    tsp-exact --methods branch_and_bound --iterations 5
    tsp-exact --file gr17.dat --anchor 0 --exclude-anchor --json
    tsp-exact --file br17.atsp --methods brute_force,branch_and_bound --limit 30 --summary
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Dict, List, Optional

from .benchmark import DEFAULT_METHODS, RunRecord, run_method, summarize
from .errors import InvalidInstanceError
from .instances import DEFAULT_ANCHOR, default_locations, default_weights
from .location import numbered_locations
from .parsers import parse_instance


def load(path: Optional[str]):
    """Return (instance name, weights, locations) for a file or the built-in instance."""
    if path is None:
        return 'default', default_weights(), default_locations()
    weights = parse_instance(path)
    return os.path.basename(path), weights, numbered_locations(weights.size)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description='Exact and greedy TSP solvers (brute force, nearest neighbour, branch and bound)')
    ap.add_argument('--file', help='AMPL .dat or TSPLIB EXPLICIT instance (default: built-in Canadian cities)')
    ap.add_argument('--anchor', type=int, help='Index of the start/end location (default: last location)')
    ap.add_argument('--methods', help=f"Comma list of methods to run (default: all of {','.join(DEFAULT_METHODS)})")
    ap.add_argument('--iterations', type=int, default=1, help='Runs per method, used for average timings')
    ap.add_argument('--limit', type=float, help='Time limit seconds per exact search run')
    ap.add_argument('--exclude-anchor', action='store_true',
                    help='Branch and bound permutes only the non-anchor locations, like brute force')
    ap.add_argument('--max-results', type=int, help='Keep at most this many complete tours in branch and bound')
    ap.add_argument('--json', action='store_true', help='Emit JSON array of run records to stdout instead of plain text')
    ap.add_argument('--summary', action='store_true', help='Print a per-method summary table')
    ap.add_argument('--verbose', action='store_true', help='Debug logging from the solvers')
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')

    methods = list(DEFAULT_METHODS)
    if args.methods:
        methods = [m.strip() for m in args.methods.split(',') if m.strip()]
        missing = [m for m in methods if m not in DEFAULT_METHODS]
        if missing:
            print(f'[error] unknown method names: {missing}')
            print(f'Known: {list(DEFAULT_METHODS)}')
            return 1
    if args.iterations < 1:
        print('[error] --iterations must be at least 1')
        return 1

    try:
        name, weights, locations = load(args.file)
    except (OSError, ValueError) as e:
        print(f'{str(args.file):20s} PARSE_ERROR {e}')
        return 1
    if args.anchor is not None:
        anchor = args.anchor
    elif args.file is None:
        anchor = DEFAULT_ANCHOR
    else:
        anchor = weights.size - 1

    options = dict(time_limit=args.limit, include_anchor=not args.exclude_anchor,
                   max_results=args.max_results)
    records: List[RunRecord] = []
    totals: Dict[str, float] = {m: 0.0 for m in methods}
    for it in range(1, args.iterations + 1):
        for method in methods:
            try:
                rec = run_method(method, weights, locations, anchor, instance=name, run=it, **options)
            except InvalidInstanceError as e:
                print(f'{name:20s} ERROR {e}')
                return 1
            records.append(rec)
            totals[method] += rec.runtime
            if not args.json:
                stops = ' -> '.join(locations[i].name for i in rec.tour)
                print(f'{method}:')
                print(f'\t{stops}')
                print(f'\tCost: {rec.cost}  Complete permutations: {rec.completed}  Pruned: {rec.pruned}')
                print(f'\tTime: {rec.runtime * 1000:.1f}ms  status={rec.status}')

    if args.json:
        print(json.dumps([r.__dict__ for r in records]))
        return 0

    print()
    for method in methods:
        print(f'\t{method:20s} avg {totals[method] / args.iterations * 1000:.1f}ms')
    if args.summary:
        print('\nSummary:')
        print(summarize(records).to_string(index=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
