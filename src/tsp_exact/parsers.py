"""Readers for distance-matrix instance files.

Two formats are understood:
 - AMPL .dat with ``set NODES`` and a ``param dist :`` matrix block
 - TSPLIB files with ``EDGE_WEIGHT_TYPE: EXPLICIT`` (FULL_MATRIX,
   LOWER_DIAG_ROW, UPPER_DIAG_ROW, UPPER_ROW). Triangular formats are
   mirrored into a symmetric matrix.
"""
from __future__ import annotations

import os
from typing import List, Optional

import numpy as np

from .weights import Weights


def parse_tsp_dat(path: str) -> Weights:
    """Parse AMPL .dat with 'set NODES' and 'param dist :' matrix."""
    with open(path, 'r') as f:
        content = f.read().splitlines()
    rows: List[List[float]] = []
    in_matrix = False
    header_consumed = False
    for line in content:
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('param dist'):
            in_matrix = True
            # header may share the line: "param dist : 1 2 3 :="
            header_consumed = line.endswith(':=')
            continue
        if in_matrix:
            if line.startswith(';'):
                break
            parts = line.split()
            # column header line: "1 2 3 ... :="
            if not header_consumed:
                header_consumed = True
                continue
            if parts[0].isdigit():
                numeric_tokens = []
                for tok in parts[1:]:
                    if tok.startswith('#') or tok == ';':
                        break
                    numeric_tokens.append(tok)
                rows.append([_number(x, path) for x in numeric_tokens])
                if parts[-1] == ';':
                    break
    if not rows:
        raise ValueError(f"No 'param dist' matrix found in {path}")
    if len({len(r) for r in rows}) != 1 or len(rows) != len(rows[0]):
        raise ValueError(f"Distance matrix not square in {path}: {len(rows)} rows of lengths {sorted({len(r) for r in rows})}")
    return Weights(rows)


def parse_tsplib_explicit(path: str) -> Weights:
    """Parse a TSPLIB/ATSP file whose weights are listed explicitly."""
    with open(path, 'r') as f:
        lines = f.readlines()

    dimension: Optional[int] = None
    edge_weight_type = None
    edge_weight_format = None
    for line in lines:
        line = line.strip()
        if line.startswith('DIMENSION'):
            dimension = int(line.split(':')[1].strip())
        elif line.startswith('EDGE_WEIGHT_TYPE'):
            edge_weight_type = line.split(':')[1].strip()
        elif line.startswith('EDGE_WEIGHT_FORMAT'):
            edge_weight_format = line.split(':')[1].strip()

    if dimension is None:
        raise ValueError(f"Could not find DIMENSION in {path}")
    if edge_weight_type != 'EXPLICIT':
        raise ValueError(f"Unsupported EDGE_WEIGHT_TYPE in {path}: {edge_weight_type}")

    weight_data: List[float] = []
    in_weight_section = False
    for line in lines:
        line = line.strip()
        if line == 'EDGE_WEIGHT_SECTION':
            in_weight_section = True
            continue
        if not in_weight_section or not line:
            continue
        if line == 'EOF' or line[0].isalpha():
            break
        weight_data.extend(_number(tok, path) for tok in line.split())

    fmt = edge_weight_format or 'FULL_MATRIX'
    cells = _cells(fmt, dimension, path)
    if len(weight_data) < len(cells):
        raise ValueError(f"{path}: expected {len(cells)} weights for {fmt}, found {len(weight_data)}")

    dist = np.zeros((dimension, dimension))
    for (i, j), value in zip(cells, weight_data):
        dist[i, j] = value
        if fmt != 'FULL_MATRIX':
            dist[j, i] = value
    if all(float(v).is_integer() for v in weight_data):
        dist = dist.astype(int)
    return Weights(dist)


def parse_instance(path: str) -> Weights:
    """Dispatch on file extension: .dat is AMPL, anything else TSPLIB."""
    if os.path.splitext(path)[1].lower() == '.dat':
        return parse_tsp_dat(path)
    return parse_tsplib_explicit(path)


def _cells(fmt: str, n: int, path: str):
    if fmt == 'FULL_MATRIX':
        return [(i, j) for i in range(n) for j in range(n)]
    if fmt == 'LOWER_DIAG_ROW':
        return [(i, j) for i in range(n) for j in range(i + 1)]
    if fmt == 'UPPER_DIAG_ROW':
        return [(i, j) for i in range(n) for j in range(i, n)]
    if fmt == 'UPPER_ROW':
        return [(i, j) for i in range(n) for j in range(i + 1, n)]
    raise ValueError(f"Unsupported EDGE_WEIGHT_FORMAT in {path}: {fmt}")


def _number(tok: str, path: str):
    try:
        return int(tok)
    except ValueError:
        pass
    try:
        return float(tok)
    except ValueError:
        raise ValueError(f"Non-numeric weight {tok!r} in {path}") from None
