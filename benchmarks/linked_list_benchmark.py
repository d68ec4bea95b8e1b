"""Timing benchmark for LinkedList operations.

``splice`` should stay flat as the input grows; ``get_node`` grows linearly.
"""

import csv
import random
import statistics
import time

from structkit import LinkedList

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Time only `operation(lst, other)`; building the lists is excluded."""
    times = []
    for _ in range(iterations):
        lst = LinkedList(generate_random_list(input_size))
        other = LinkedList(generate_random_list(input_size))
        start = time.perf_counter()
        operation(lst, other)
        end = time.perf_counter()
        times.append((end - start) * 1000)

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_splice(lst, other):
    lst.splice_after(lst.get_first(), other)


def bench_get_node(lst, other):
    lst.get_node(lst.size() // 2)


def bench_equals(lst, other):
    return lst == other


def bench_drain(lst, other):
    while not lst.is_empty():
        lst.remove_first()

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100):
    operations = {
        "splice": bench_splice,
        "get_node": bench_get_node,
        "equals": bench_equals,
        "drain": bench_drain,
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
    OUTPUT_CSV = "linked_list_performance.csv"
    run_benchmarks(OUTPUT_CSV, base_input=100)
