"""
HashMap Demo — Populate, overwrite, resize, remove, clear, and bucket visualizations.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Bucket occupancy report
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from hash_map import HashMap

VIZ_DIR = Path(__file__).parent / "viz"

FRUITS_AND_THINGS = [
    ("apple", "red"),
    ("banana", "yellow"),
    ("carrot", "orange"),
    ("dog", "brown"),
    ("elephant", "gray"),
    ("frog", "green"),
    ("grape", "purple"),
    ("hat", "black"),
    ("ice cream", "white"),
    ("jacket", "blue"),
    ("kite", "pink"),
    ("lion", "golden"),
]


def bucket_lengths(m):
    """Chain length of every bucket, unallocated buckets counted as 0."""
    return np.array(
        [0 if bucket is None else len(bucket) for bucket in m._buckets],
        dtype=int,
    )


def chain_stats(m):
    lengths = bucket_lengths(m)
    used = lengths[lengths > 0]
    return {
        "capacity": m.capacity,
        "size": m.length(),
        "load": m.length() / m.capacity,
        "max_chain": int(lengths.max()) if lengths.size else 0,
        "mean_chain": float(used.mean()) if used.size else 0.0,
        "empty_buckets": int((lengths == 0).sum()),
    }


def print_stats(label, m):
    stats = chain_stats(m)
    print(f"{label}: size={stats['size']} capacity={stats['capacity']} "
          f"load={stats['load']:.4f} max_chain={stats['max_chain']} "
          f"mean_chain={stats['mean_chain']:.2f} empty={stats['empty_buckets']}")


def plot_occupancy(ax, m, title):
    lengths = bucket_lengths(m)
    ax.bar(np.arange(lengths.size), lengths, color="steelblue", edgecolor="black")
    ax.set_xlabel("Bucket index")
    ax.set_ylabel("Entries")
    ax.set_title(title)
    ax.grid(True, alpha=0.3, axis="y")


def example_1_populate():
    print("=" * 60)
    print("Example 1: Initializing and Populating")
    print("=" * 60)

    m = HashMap(0.75)
    for key, value in FRUITS_AND_THINGS:
        m.set(key, value)

    print(f"Current length:   {m.length()}")
    print(f"Current capacity: {m.capacity}")
    print(f"Current entries:  {m.entries()}")
    print_stats("Buckets", m)
    return m


def example_2_overwrite(m):
    print("\n" + "=" * 60)
    print("Example 2: Overwriting Existing Keys")
    print("=" * 60)

    m.set("apple", "dark red")
    m.set("dog", "dark brown")

    print(f"Length after overwrite: {m.length()}")
    print(f"Value for 'apple':      {m.get('apple')}")
    print(f"Current capacity:       {m.capacity}")
    return m


def example_3_resize(m):
    print("\n" + "=" * 60)
    print("Example 3: Triggering Resize")
    print("=" * 60)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    plot_occupancy(axes[0], m, f"Before resize (capacity {m.capacity})")

    m.set("moon", "silver")

    print(f"Length after resize:       {m.length()}")
    print(f"New capacity after resize: {m.capacity}")
    print(f"Has 'moon' key:            {m.has('moon')}")
    print(f"Current entries:           {m.entries()}")
    print_stats("Buckets", m)

    plot_occupancy(axes[1], m, f"After resize (capacity {m.capacity})")
    fig.tight_layout()
    return fig, m


def example_4_remove_and_clear(m):
    print("\n" + "=" * 60)
    print("Example 4: Other Methods After Resize, then Clearing")
    print("=" * 60)

    print(f"Removing 'grape':      {m.remove('grape')}")
    print(f"Has 'grape' key:       {m.has('grape')}")
    print(f"Length after removal:  {m.length()}")
    print(f"All keys:   {m.keys()}")
    print(f"All values: {m.values()}")

    m.clear()
    print(f"Length after clear:    {m.length()}")
    print(f"Entries after clear:   {m.entries()}")
    print(f"Capacity after clear:  {m.capacity}")
    return m


def example_5_distribution(n_keys=2000):
    """Chain-length histogram for a larger synthetic key set."""
    print("\n" + "=" * 60)
    print(f"Example 5: Chain Lengths for {n_keys} Keys")
    print("=" * 60)

    m = HashMap(0.75)
    for i in range(n_keys):
        m.set(f"user-{i:05d}", i)
    print_stats("Buckets", m)

    lengths = bucket_lengths(m)
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.hist(lengths, bins=np.arange(lengths.max() + 2) - 0.5,
            color="darkorange", edgecolor="black")
    ax.set_xlabel("Chain length")
    ax.set_ylabel("Buckets")
    ax.set_title(f"{n_keys} keys, capacity {m.capacity}")
    ax.grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    return fig, m


def generate_pdf_report(figures, path):
    with PdfPages(path) as pdf:
        for _, fig in figures:
            pdf.savefig(fig)
    print(f"\nReport written to {path}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Exercise the string-keyed HashMap.")
    parser.add_argument("--no-plots", action="store_true",
                        help="Skip writing viz/*.png and report.pdf")
    parser.add_argument("--verbose", action="store_true",
                        help="Show the map's resize logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    m = example_1_populate()
    example_2_overwrite(m)
    fig_resize, m = example_3_resize(m)
    example_4_remove_and_clear(m)
    fig_dist, _ = example_5_distribution()

    figures = [("Resize", fig_resize), ("Distribution", fig_dist)]
    if not args.no_plots:
        VIZ_DIR.mkdir(exist_ok=True)
        fig_resize.savefig(VIZ_DIR / "01_resize.png", dpi=150)
        fig_dist.savefig(VIZ_DIR / "02_chain_lengths.png", dpi=150)
        generate_pdf_report(figures, VIZ_DIR.parent / "report.pdf")
    for _, fig in figures:
        plt.close(fig)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
