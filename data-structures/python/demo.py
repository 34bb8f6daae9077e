"""
Heap Priority Queue Demo -- Worked example, build vs repeated enqueue
comparison counts, timing, and capacity growth.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from heap_priority_queue import HeapPriorityQueue

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "dark": "#2c3e50",
}

SIZES = [2 ** k for k in range(6, 15)]


class Counted:
    """Integer wrapper that counts ``<`` comparisons."""

    comparisons = 0

    def __init__(self, value):
        self.value = value

    def __lt__(self, other):
        Counted.comparisons += 1
        return self.value < other.value


def count_build(values):
    Counted.comparisons = 0
    HeapPriorityQueue.from_array(Counted(v) for v in values)
    return Counted.comparisons


def count_enqueue(values):
    Counted.comparisons = 0
    heap = HeapPriorityQueue()
    for v in values:
        heap.enqueue(Counted(v))
    return Counted.comparisons


# ---------------------------------------------------------------------------
# Example 1: Round trip
# ---------------------------------------------------------------------------
def example_1_round_trip():
    print("=" * 60)
    print("Example 1: Enqueue then drain")
    print("=" * 60)

    heap = HeapPriorityQueue()
    for v in [3, 1, 4, 1, 5, 9, 2, 6]:
        heap.enqueue(v)
    print("Raw array order: ", end="")
    heap.print()

    drained = []
    while not heap.empty():
        drained.append(heap.dequeue())
    print(f"Dequeue order:   {drained}")


# ---------------------------------------------------------------------------
# Example 2: Comparison counts
# ---------------------------------------------------------------------------
def example_2_comparison_counts():
    print("\n" + "=" * 60)
    print("Example 2: Comparisons, build vs repeated enqueue")
    print("=" * 60)

    build_counts, enqueue_counts = [], []
    for n in SIZES:
        # Ascending input is the worst case for repeated enqueue.
        values = np.sort(np.random.randint(0, 10 * n, size=n)).tolist()
        build_counts.append(count_build(values))
        enqueue_counts.append(count_enqueue(values))
        print(f"  n={n:>6}  build={build_counts[-1]:>8}  enqueue={enqueue_counts[-1]:>8}")

    sizes = np.array(SIZES)
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, build_counts, "o-", color=COLORS["green"], label="build (linear)")
    ax.plot(sizes, enqueue_counts, "s-", color=COLORS["red"], label="n x enqueue")
    ax.plot(sizes, 2 * sizes, "--", color=COLORS["dark"], alpha=0.5, label="2n")
    ax.plot(sizes, sizes * np.log2(sizes), ":", color=COLORS["blue"], label="n log2 n")
    ax.set_xscale("log", base=2)
    ax.set_yscale("log")
    ax.set_xlabel("n")
    ax.set_ylabel("comparisons")
    ax.set_title("Heap construction cost (ascending input)")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_comparison_counts.png", dpi=150)
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 3: Timing
# ---------------------------------------------------------------------------
def example_3_timing():
    print("\n" + "=" * 60)
    print("Example 3: Wall-clock, build vs enqueue vs drain")
    print("=" * 60)

    build_t, enqueue_t, drain_t = [], [], []
    for n in SIZES:
        values = np.random.randint(0, 10 * n, size=n).tolist()

        start = time.perf_counter()
        heap = HeapPriorityQueue.from_array(values)
        build_t.append(time.perf_counter() - start)

        start = time.perf_counter()
        other = HeapPriorityQueue()
        for v in values:
            other.enqueue(v)
        enqueue_t.append(time.perf_counter() - start)

        start = time.perf_counter()
        while not heap.empty():
            heap.dequeue()
        drain_t.append(time.perf_counter() - start)
        print(f"  n={n:>6}  build={build_t[-1] * 1e3:7.2f}ms  "
              f"enqueue={enqueue_t[-1] * 1e3:7.2f}ms  drain={drain_t[-1] * 1e3:7.2f}ms")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(SIZES, np.array(build_t) * 1e3, "o-", color=COLORS["green"], label="build")
    ax.plot(SIZES, np.array(enqueue_t) * 1e3, "s-", color=COLORS["red"], label="n x enqueue")
    ax.plot(SIZES, np.array(drain_t) * 1e3, "^-", color=COLORS["blue"], label="drain")
    ax.set_xscale("log", base=2)
    ax.set_yscale("log")
    ax.set_xlabel("n")
    ax.set_ylabel("time (ms)")
    ax.set_title("Heap operation timing")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_timing.png", dpi=150)
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 4: Capacity growth
# ---------------------------------------------------------------------------
def example_4_capacity_growth():
    print("\n" + "=" * 60)
    print("Example 4: Capacity doubling")
    print("=" * 60)

    heap = HeapPriorityQueue()
    sizes, capacities = [], []
    for v in np.random.randint(0, 1000, size=1000).tolist():
        heap.enqueue(v)
        sizes.append(heap.size())
        capacities.append(heap.capacity())
    print(f"  final size={heap.size()}  capacity={heap.capacity()}")
    heap.clear()
    print(f"  after clear: size={heap.size()}  capacity={heap.capacity()}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.step(sizes, capacities, where="post", color=COLORS["blue"], label="capacity")
    ax.plot(sizes, sizes, "--", color=COLORS["dark"], alpha=0.5, label="size")
    ax.set_xlabel("elements enqueued")
    ax.set_ylabel("slots")
    ax.set_title("Buffer growth (default capacity 100)")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_capacity_growth.png", dpi=150)
    plt.close(fig)


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig = plt.figure(figsize=(8.5, 11))
        fig.text(0.5, 0.6, "Heap Priority Queue", ha="center", fontsize=24, fontweight="bold")
        fig.text(0.5, 0.5, "Max-heap: enqueue, dequeue, linear-time build",
                 ha="center", fontsize=12)
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = viz_file.stem.split("_", 1)[1].replace("_", " ").title()
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Heap Priority Queue Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_round_trip()
    example_2_comparison_counts()
    example_3_timing()
    example_4_capacity_growth()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
