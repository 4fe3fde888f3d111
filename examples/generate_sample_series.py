#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Creates a generated data series and a preview plot of its regression line.

The committed sample_series.txt is a test fixture and is left untouched.
"""

import matplotlib.pyplot as plt
import numpy as np
from pathlib import Path

from dataplot.parsers import SeriesParser

# Output folder
output_dir = Path(__file__).parent
output_dir.mkdir(parents=True, exist_ok=True)

SLOPE = 1.5
INTERCEPT = 2.0
SERIES_FILE = "generated_series.txt"
PLOT_FILE = "generated_series.png"

# 1. Noisy linear samples, with a few malformed lines mixed in
def create_sample_series(count=40, seed=7):
    rng = np.random.default_rng(seed)
    x = np.linspace(0, 20, count)
    y = SLOPE * x + INTERCEPT + rng.normal(0, 1.5, count)

    lines = [f"{xi:.3f},{yi:.3f}" for xi, yi in zip(x, y)]
    lines.insert(5, "not a sample")
    lines.insert(12, "")
    lines.insert(20, "7.5,n/a")
    lines.insert(30, "12.0,20.1,reserved")

    series_path = output_dir / SERIES_FILE
    series_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"✓ {SERIES_FILE} created")
    return series_path

# 2. Read the file back the way the service does
def load_series(series_path):
    records = SeriesParser().parse_file(series_path)
    print(f"✓ {len(records)} points read from {series_path.name}")
    x = np.array([record["x"] for record in records])
    y = np.array([record["y"] for record in records])
    return x, y

# 3. Preview plot
def create_preview_plot(x, y):
    slope, intercept = np.polyfit(x, y, 1)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.scatter(x, y, color='tab:blue', label='samples')
    ax.plot(x, slope * x + intercept, 'r-', linewidth=2,
            label=f'y = {slope:.3f}x + {intercept:.3f}')

    ax.set_xlabel('x', fontsize=12, fontweight='bold')
    ax.set_ylabel('y', fontsize=12, fontweight='bold')
    ax.set_title('Sample series', fontsize=16, fontweight='bold', pad=20)
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper left', fontsize=10)

    plt.tight_layout()
    plt.savefig(output_dir / PLOT_FILE, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"✓ {PLOT_FILE} created")

if __name__ == "__main__":
    x, y = load_series(create_sample_series())
    create_preview_plot(x, y)
