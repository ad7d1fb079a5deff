#!/usr/bin/env python3
"""Benchmark suite comparing PyHybrid's linear and tree backings."""

import argparse
import json
import random
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pyhybrid import HybridDict


class Metrics:
    def __init__(self):
        self.write_latencies: List[float] = []
        self.read_latencies: List[float] = []
        self.range_latencies: List[float] = []

    def to_dict(self) -> Dict:
        return {
            name: {
                "p50": float(np.percentile(values, 50)),
                "p95": float(np.percentile(values, 95)),
                "p99": float(np.percentile(values, 99)),
            }
            for name, values in (
                ("write_latencies", self.write_latencies),
                ("read_latencies", self.read_latencies),
                ("range_latencies", self.range_latencies),
            )
            if values
        }


def plot_latencies(results: Dict[str, Metrics], output_path: Path):
    fig = go.Figure()
    for label, metrics in results.items():
        fig.add_trace(go.Box(y=metrics.write_latencies, name=f"{label} insert", boxpoints="outliers"))
        fig.add_trace(go.Box(y=metrics.read_latencies, name=f"{label} lookup", boxpoints="outliers"))
    fig.update_layout(
        title="PyHybrid Latency Distribution",
        yaxis_title="Latency (ms)",
        boxmode="group",
    )
    fig.write_html(output_path)


class BenchmarkSuite:
    def __init__(self, num_entries: int, seed: int):
        self.num_entries = num_entries
        self._rng = random.Random(seed)
        self._keys = self._rng.sample(range(10_000_000, 100_000_000), num_entries)

    def run(self, threshold: int, label: str) -> Metrics:
        metrics = Metrics()
        hdict = HybridDict.configure(threshold, rng=random.Random(0))

        for key in tqdm(self._keys, desc=f"{label} insert"):
            value = hdict.generate_value()
            start = time.perf_counter()
            hdict.insert(key, value)
            metrics.write_latencies.append((time.perf_counter() - start) * 1000)

        for key in tqdm(self._keys, desc=f"{label} lookup"):
            start = time.perf_counter()
            hdict.lookup(key)
            metrics.read_latencies.append((time.perf_counter() - start) * 1000)

        ordered = sorted(self._keys)
        for _ in tqdm(range(min(100, self.num_entries)), desc=f"{label} range"):
            low, high = sorted(self._rng.sample(ordered, 2)) if len(ordered) > 1 else (0, 0)
            start = time.perf_counter()
            hdict.range_count(low, high)
            metrics.range_latencies.append((time.perf_counter() - start) * 1000)

        return metrics


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=5000, help="Number of entries")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for keys")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.seed)
    results = {
        "linear": suite.run(threshold=0, label="linear"),
        "tree": suite.run(threshold=args.size + 501, label="tree"),
    }

    plot_latencies(results, args.output / "pyhybrid_latencies.html")

    with open(args.output / "metrics.json", "w") as f:
        json.dump({label: m.to_dict() for label, m in results.items()}, f, indent=2)


if __name__ == "__main__":
    main()
