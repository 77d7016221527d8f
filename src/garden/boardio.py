# src/garden/boardio.py
# TSV in/out for region maps and 0/1 mark masks: one grid row per line.

import csv
from typing import List, Sequence

def write_tsv(rows: Sequence[Sequence[int]], path: str) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t", lineterminator="\n")
        for r in rows:
            w.writerow([int(v) for v in r])

def read_tsv(path: str) -> List[List[int]]:
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    if not rows or any(len(r) != len(rows) for r in rows):
        raise ValueError(f"{path}: expected a square grid, got {len(rows)} rows")
    return rows

def flatten(rows: Sequence[Sequence[int]]) -> List[int]:
    return [v for r in rows for v in r]

def read_marks(path: str) -> List[bool]:
    """Load a 0/1 TSV as a row-major candidate."""
    return [v != 0 for v in flatten(read_tsv(path))]

def mask_rows(mask: Sequence[bool], size: int) -> List[List[int]]:
    return [[1 if mask[r * size + c] else 0 for c in range(size)] for r in range(size)]
