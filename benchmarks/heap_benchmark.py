"""Timing benchmark for MinHeap operations."""

import csv
import random
import statistics
import time

from structkit import MinHeap

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_add(data):
    heap = MinHeap()
    for item in data:
        heap.add(item)
    return heap


def bench_heapify(data):
    return MinHeap(it=data)


def bench_remove_min(data):
    heap = MinHeap(it=data)
    while heap:
        heap.remove_min()
    return heap


def bench_comparator(data):
    heap = MinHeap(comparator=lambda a, b: b - a)
    for item in data:
        heap.add(item)
    while heap:
        heap.remove_min()
    return heap

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100):
    """Run exponential performance tests for MinHeap operations."""
    operations = {
        "add": bench_add,
        "heapify": bench_heapify,
        "remove_min": bench_remove_min,
        "comparator": bench_comparator,
    }

    input_sizes = [base_input * (2 ** i) for i in range(10)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(["Input Size", "Operation", "Average Time (ms)", "Standard Deviation (ms)"])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"])
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | Std: {std_time:.3f} ms")

    print(f"\nBenchmark completed. Results saved to {output_file}")


if __name__ == "__main__":
    OUTPUT_CSV = "min_heap_performance.csv"
    run_benchmarks(OUTPUT_CSV, base_input=100)
