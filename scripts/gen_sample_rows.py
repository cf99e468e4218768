#!/usr/bin/env python3
"""Synthetic request rows for exercising the exporter.

Writes the pre-parsed row format the exporter reads (``.json`` list of objects
or a flat ``.xlsx`` / ``.csv`` table) with a realistic mix of request types,
including rows the validity filter rejects:
- Unknown request types
- rows with no subscription and VM Type "N/A"
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

REQUEST_TYPES = [
    "Zonal Enablement",
    "Region Enablement",
    "Region Enablement & Quota Increase",
    "Quota Increase",
    "Region Limit Increase",
    "Reserved Instances",
    "Unknown",
]
REQUEST_TYPE_WEIGHTS = [0.2, 0.15, 0.1, 0.3, 0.1, 0.1, 0.05]
STATUSES = ["Approved", "Fulfilled", "Backlogged", "Pending Customer Response", "Pending"]
REGIONS = ["eastus", "eastus2", "westus", "westeurope", "brazilsouth", "southeastasia"]
VM_TYPES = ["Standard_D2s_v5", "Standard_E4s_v5", "Standard_F8s_v2", "Standard_NC6s_v3", "N/A"]


def generate_rows(rows: int, seed: int = 42) -> list[dict[str, Any]]:
    """Generate *rows* request rows (reproducible for a given seed)."""
    rng = np.random.default_rng(seed)
    request_types = rng.choice(REQUEST_TYPES, rows, p=REQUEST_TYPE_WEIGHTS)
    statuses = rng.choice(STATUSES, rows)
    regions = rng.choice(REGIONS, rows)
    vm_types = rng.choice(VM_TYPES, rows)
    zones = rng.integers(1, 4, rows)
    cores = rng.integers(1, 64, rows) * 4
    has_subscription = rng.random(rows) > 0.25

    generated: list[dict[str, Any]] = []
    for i in range(rows):
        generated.append(
            {
                "Original ID": str(100_000 + i),
                "Subscription ID": f"sub-{rng.integers(10_000, 99_999)}" if has_subscription[i] else "",
                "Request Type": str(request_types[i]),
                "VM Type": str(vm_types[i]),
                "Region": str(regions[i]),
                "Zone": str(zones[i]),
                "Cores": int(cores[i]),
                "Status": str(statuses[i]),
            }
        )
    return generated


def write_rows(output_path: Path, rows: list[dict[str, Any]]) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    suffix = output_path.suffix.lower()
    if suffix == ".json":
        output_path.write_text(json.dumps(rows, ensure_ascii=False, indent=2), encoding="utf-8")
    elif suffix == ".xlsx":
        pd.DataFrame(rows).to_excel(output_path, index=False, engine="openpyxl")
    elif suffix == ".csv":
        pd.DataFrame(rows).to_csv(output_path, index=False)
    else:
        raise ValueError(f"unsupported output format: {output_path.suffix}")
    print(f"Created {output_path} ({len(rows):,} rows)")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate synthetic quota request rows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/rows.json
  %(prog)s data/rows.xlsx --rows 20000 --seed 7
        """,
    )
    parser.add_argument("output", type=Path, help="Output file (.json, .xlsx or .csv)")
    parser.add_argument("--rows", type=int, default=1_000, help="Number of rows (default: 1,000)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--dry-run", action="store_true", help="Show the plan without writing")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1

    print("Dataset generation plan:")
    print(f"  Output file: {args.output}")
    print(f"  Rows: {args.rows:,}")
    print(f"  Random seed: {args.seed}")
    if args.dry_run:
        print("\n[DRY RUN] Would generate rows but not write them.")
        return 0

    try:
        write_rows(args.output, generate_rows(args.rows, args.seed))
    except (OSError, ValueError) as e:
        print(f"\nError generating dataset: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
