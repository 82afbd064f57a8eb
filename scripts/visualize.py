#!/usr/bin/env python3
"""
Plots for closest-pair benchmark results.

Reads the per-instance CSV written by `closest-pair-bench --output` and draws:
- operation counts vs n (log-log) against n(n-1)/2 and n log2 n
- running time vs n
- one point set per family with its closest-pair distance in the title
"""

import argparse
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from closest_pair import closest_pair
from closest_pair.benchmark import fit_scaling_law
from closest_pair.generators import generate

plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10
plt.rcParams['figure.figsize'] = (10, 6)

COLORS = {
    'dc': '#377eb8',            # Blue - O(n log n)
    'brute_force': '#e41a1c',   # Red - O(n^2)
}

LABELS = {
    'dc': 'Divide and conquer O(n log n)',
    'brute_force': 'Brute force O(n^2)',
}


def mean_by_n(df, column):
    data = df[['n', column]].dropna()
    data = data.groupby('n')[column].mean().reset_index().sort_values('n')
    mask = (data['n'] > 0) & (data[column] > 0)
    return data['n'].values[mask], data[column].values[mask]


def plot_operation_counts(df, output_dir, metric='basic_ops'):
    """Operation counts of both solvers with fitted exponents and reference curves."""
    fig, ax = plt.subplots(figsize=(10, 6))

    for alg in ['dc', 'brute_force']:
        n_vals, v_vals = mean_by_n(df, f'{alg}_{metric}')
        if len(n_vals) < 2:
            continue
        a, b, r2 = fit_scaling_law(n_vals, v_vals)
        ax.plot(n_vals, v_vals, 'o-', color=COLORS[alg], linewidth=2, markersize=6,
                label=f'{LABELS[alg]}: $n^{{{b:.2f}}}$ ($R^2={r2:.3f}$)')

    n_ref = np.logspace(np.log10(max(2, df['n'].min())), np.log10(df['n'].max()), 100)
    ax.plot(n_ref, n_ref * (n_ref - 1) / 2, ':', color='gray', alpha=0.7, linewidth=1, label='n(n-1)/2')
    ax.plot(n_ref, n_ref * np.log2(n_ref), '-.', color='gray', alpha=0.7, linewidth=1, label='n log2 n')

    ax.set_xlabel('Number of Points (n)')
    ax.set_ylabel(metric.replace('_', ' ').title())
    ax.set_title('Closest Pair: Operation Counts')
    ax.legend(loc='upper left')
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(Path(output_dir) / f'operations_{metric}.png', dpi=150, bbox_inches='tight')
    plt.close()


def plot_times(df, output_dir):
    """Mean running time per n, one line per solver and family."""
    fig, ax = plt.subplots(figsize=(10, 6))

    for family in df['family'].unique():
        subset = df[df['family'] == family]
        for alg in ['dc', 'brute_force']:
            n_vals, t_vals = mean_by_n(subset, f'{alg}_ms')
            if len(n_vals) == 0:
                continue
            style = 'o-' if alg == 'dc' else 's--'
            ax.plot(n_vals, t_vals, style, color=COLORS[alg], alpha=0.7, linewidth=1.5,
                    markersize=5, label=f'{LABELS[alg].split(" O(")[0]} ({family})')

    ax.set_xlabel('Number of Points (n)')
    ax.set_ylabel('Time (ms)')
    ax.set_title('Closest Pair: Running Time')
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.legend(loc='upper left', fontsize=8)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(Path(output_dir) / 'benchmark_times.png', dpi=150, bbox_inches='tight')
    plt.close()


def plot_point_sets(families, n, output_dir, seed=0):
    """Scatter one instance of each family."""
    fig, axes = plt.subplots(1, len(families), figsize=(4 * len(families), 4))
    if len(families) == 1:
        axes = [axes]

    for ax, family in zip(axes, families):
        pts = np.array(generate(family, n, seed))
        d = closest_pair(pts.tolist())
        ax.scatter(pts[:, 0], pts[:, 1], c='black', s=6)
        ax.set_aspect('equal')
        ax.set_title(f'{family} (d={d:.3g})')

    plt.suptitle(f'Point Families, n={n}', fontsize=14)
    plt.tight_layout()
    plt.savefig(Path(output_dir) / 'point_sets.png', dpi=150, bbox_inches='tight')
    plt.close()


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--input', type=Path, default=Path('results') / 'benchmark_results.csv')
    parser.add_argument('--output', type=Path, default=Path('results') / 'figures')
    parser.add_argument('--sample-size', type=int, default=200)
    args = parser.parse_args()

    if not args.input.exists():
        print(f"Error: Benchmark results not found at {args.input}")
        sys.exit(1)
    args.output.mkdir(parents=True, exist_ok=True)

    df = pd.read_csv(args.input)
    print(f"Loaded {len(df)} benchmark results")
    print(f"Sizes: {sorted(df['n'].unique())}")

    print("  - Operation counts...")
    plot_operation_counts(df, args.output, 'basic_ops')
    plot_operation_counts(df, args.output, 'distance_evals')

    print("  - Running times...")
    plot_times(df, args.output)

    print("  - Point sets...")
    plot_point_sets(sorted(df['family'].unique()), args.sample_size, args.output)

    print(f"\nDone! Figures saved to {args.output}")


if __name__ == '__main__':
    main()
