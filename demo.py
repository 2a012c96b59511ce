"""
Heap Demo - Worked examples, complexity measurements, and visualizations.

Generates:
- viz/*.png - Individual visualization files
- report.pdf - Summary PDF report
"""

import os
import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import heap
from binary_heap import BinaryHeap
from priority_queue import PriorityQueue

SEED = 42
SIZES = [2 ** k for k in range(6, 16)]

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


class CountingHeap(BinaryHeap):
    """BinaryHeap that counts calls to less and swap."""

    def __init__(self, key=None):
        super().__init__(key)
        self.compares = 0
        self.swaps = 0

    def less(self, i, j):
        self.compares += 1
        return super().less(i, j)

    def swap(self, i, j):
        self.swaps += 1
        super().swap(i, j)


def draw_tree(ax, values, title):
    """Draw an array-backed heap as a binary tree."""
    n = len(values)
    depth = int(np.floor(np.log2(n))) + 1 if n else 1
    positions = {}
    for i in range(n):
        level = int(np.floor(np.log2(i + 1)))
        offset = i - (2 ** level - 1)
        slots = 2 ** level
        positions[i] = ((offset + 0.5) / slots, depth - level)
    for i in range(1, n):
        x0, y0 = positions[(i - 1) // 2]
        x1, y1 = positions[i]
        ax.plot([x0, x1], [y0, y1], "-", color="gray", linewidth=1, zorder=1)
    for i, (x, y) in positions.items():
        ax.scatter(x, y, s=700, color="steelblue", zorder=2)
        ax.text(x, y, str(values[i]), ha="center", va="center", color="white",
                fontsize=11, fontweight="bold", zorder=3)
    ax.set_title(title)
    ax.set_xlim(-0.05, 1.05)
    ax.set_ylim(0.3, depth + 0.7)
    ax.axis("off")


def example_1_concrete_scenario():
    """Init over [5, 2, 8, 1, 9, 3] then pop four times."""
    print("=" * 60)
    print("Example 1: Init + Pop on [5, 2, 8, 1, 9, 3]")
    print("=" * 60)

    values = [5, 2, 8, 1, 9, 3]
    h = BinaryHeap.from_array(values)
    layout = [h[i] for i in range(len(h))]
    print(f"Input:        {values}")
    print(f"Heap layout:  {layout}")

    popped = [h.pop() for _ in range(4)]
    remaining = [h[i] for i in range(len(h))]
    print(f"Popped:       {popped}")
    print(f"Remaining:    {remaining}  (valid heap: {heap.is_heap(h)})")

    fig, axes = plt.subplots(1, 3, figsize=(14, 4))
    draw_tree(axes[0], values, "Input (unordered)")
    draw_tree(axes[1], layout, "After init")
    draw_tree(axes[2], remaining, f"After popping {popped}")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_concrete_scenario.png", dpi=150)
    plt.close(fig)

    return fig, popped


def example_2_init_vs_push():
    """Bottom-up init is O(n); n pushes are O(n log n) in the worst case."""
    print("\n" + "=" * 60)
    print("Example 2: Init vs Repeated Push (comparisons)")
    print("=" * 60)

    init_compares = []
    push_compares = []
    for n in SIZES:
        values = list(range(n, 0, -1))

        built = CountingHeap()
        built._data = list(values)
        heap.init(built)
        init_compares.append(built.compares)

        pushed = CountingHeap()
        for v in values:
            pushed.push(v)
        push_compares.append(pushed.compares)

        print(f"n={n:6d}  init: {built.compares:8d}  ({built.compares / n:.2f}/n)"
              f"  push: {pushed.compares:9d}  ({pushed.compares / n:.2f}/n)")

    sizes = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(13, 5))

    ax = axes[0]
    ax.loglog(sizes, init_compares, "o-", label="init (bottom-up)", color="steelblue")
    ax.loglog(sizes, push_compares, "s-", label="n x push", color="coral")
    ax.loglog(sizes, 2 * sizes, "--", color="gray", label="2n")
    ax.loglog(sizes, sizes * np.log2(sizes), ":", color="black", label="n log2 n")
    ax.set_xlabel("n")
    ax.set_ylabel("comparisons")
    ax.set_title("Comparisons on descending input")
    ax.legend()
    ax.grid(True, which="both", alpha=0.3)

    ax = axes[1]
    ax.semilogx(sizes, np.array(init_compares) / sizes, "o-", label="init / n", color="steelblue")
    ax.semilogx(sizes, np.array(push_compares) / sizes, "s-", label="push / n", color="coral")
    ax.set_xlabel("n")
    ax.set_ylabel("comparisons per element")
    ax.set_title("Per-element cost: flat vs logarithmic")
    ax.legend()
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_init_vs_push.png", dpi=150)
    plt.close(fig)

    return fig, (init_compares, push_compares)


def example_3_heap_sort():
    """Heap sort via init + repeated pop, checked against numpy."""
    print("\n" + "=" * 60)
    print("Example 3: Heap Sort vs numpy.sort")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    timings = []
    for n in SIZES[:8]:
        values = rng.normal(size=n)

        start = time.perf_counter()
        h = BinaryHeap.from_array(list(values))
        result = np.array([h.pop() for _ in range(n)])
        elapsed = time.perf_counter() - start

        np.testing.assert_array_equal(result, np.sort(values))
        timings.append(elapsed)
        print(f"n={n:6d}  heap sort: {elapsed * 1e3:8.2f} ms  (matches numpy.sort)")

    sizes = np.array(SIZES[:8])
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.loglog(sizes, timings, "o-", color="steelblue", label="init + n pops")
    scale = timings[-1] / (sizes[-1] * np.log2(sizes[-1]))
    ax.loglog(sizes, scale * sizes * np.log2(sizes), "--", color="gray", label="~ n log n")
    ax.set_xlabel("n")
    ax.set_ylabel("seconds")
    ax.set_title("Heap Sort Wall Time")
    ax.legend()
    ax.grid(True, which="both", alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_heap_sort.png", dpi=150)
    plt.close(fig)

    return fig, timings


def example_4_priority_updates():
    """Reprioritize queued tasks with fix instead of remove + push."""
    print("\n" + "=" * 60)
    print("Example 4: Priority Queue with Updates")
    print("=" * 60)

    pq = PriorityQueue()
    tasks = {name: pq.push(name, p) for name, p in
             [("compile", 3), ("test", 4), ("lint", 2), ("deploy", 5), ("docs", 6)]}
    print("Queued:", sorted((t.priority, t.value) for t in tasks.values()))

    pq.update(tasks["deploy"], priority=1)
    print("deploy escalated to priority 1")
    pq.remove(tasks["docs"])
    print("docs cancelled")

    order = []
    while pq:
        item = pq.pop()
        order.append((item.value, item.priority))
    print("Run order:", order)

    fig, ax = plt.subplots(figsize=(8, 4))
    names = [name for name, _ in order]
    priorities = [p for _, p in order]
    ax.barh(range(len(order)), priorities, color="steelblue")
    ax.set_yticks(range(len(order)))
    ax.set_yticklabels(names)
    ax.invert_yaxis()
    ax.set_xlabel("priority (lower runs first)")
    ax.set_title("Pop Order After Update and Remove")
    ax.grid(True, axis="x", alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_priority_updates.png", dpi=150)
    plt.close(fig)

    return fig, order


def generate_pdf_report(figures_data):
    """Collect the saved figures into a single PDF."""
    pdf_path = Path(__file__).parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Binary Min-Heap Report", fontsize=20, ha="center", fontweight="bold")
        summary_text = """
Heap engine over a caller-owned collection (len, less, swap, append, remove_last).

Operations:
  - init     O(n)      bottom-up sift-down from the last parent
  - push     O(log n)  append then sift-up
  - pop      O(log n)  swap root with last, sift-down, remove last
  - remove   O(log n)  swap with last, sift-down or else sift-up
  - fix      O(log n)  sift-down or else sift-up in place

Key Findings:
  1. init stays under 2 comparisons per element at every size
  2. n pushes of descending input grow like n log n
  3. init + n pops reproduces numpy.sort exactly
  4. fix reorders a queued task without reinsertion
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, filename in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / filename)
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 24 + "HEAP DEMO" + " " * 25 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_concrete_scenario()
    example_2_init_vs_push()
    example_3_heap_sort()
    example_4_priority_updates()

    generate_pdf_report([
        ("Example 1: Concrete Scenario", "01_concrete_scenario.png"),
        ("Example 2: Init vs Push", "02_init_vs_push.png"),
        ("Example 3: Heap Sort", "03_heap_sort.png"),
        ("Example 4: Priority Updates", "04_priority_updates.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
