"""Timing benchmark for HashMap operations.

Run with ``python benchmarks/hash_map_benchmark.py``; results go to a CSV file
in the working directory.
"""

import csv
import random
import statistics
import sys
import time

from structkit import HashMap

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int):
    """Generate a list of random key-value pairs."""
    return [(random.randint(0, size * 10), random.randint(0, 1000000)) for _ in range(size)]


def build_map(data, initial_capacity: int = 10, threshold: float = 0.75) -> HashMap:
    hm = HashMap(initial_capacity, threshold)
    for k, v in data:
        hm.put(k, v)
    return hm


def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def measure_space(hm: HashMap) -> int:
    """Rough footprint of the map: the object, its table and every entry."""
    total = sys.getsizeof(hm) + sys.getsizeof(hm._table)
    for entry in hm.entries():
        total += sys.getsizeof(entry) + sys.getsizeof(entry.key) + sys.getsizeof(entry.value)
    return total

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_put(data):
    return build_map(data)


def bench_put_presized(data):
    return build_map(data, initial_capacity=max(1, int(len(data) / 0.75) + 1))


def bench_get(data):
    hm = build_map(data)
    for k, _ in data:
        hm.get(k)
    return hm


def bench_contains_value(data):
    hm = build_map(data)
    for _, v in data[:3]:
        hm.contains_value(v)
    return hm


def bench_remove(data):
    hm = build_map(data)
    for k, _ in data:
        hm.remove(k)
    return hm

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100):
    """Run exponential performance tests for HashMap operations."""
    operations = {
        "put": bench_put,
        "put_presized": bench_put_presized,
        "get": bench_get,
        "contains_value": bench_contains_value,
        "remove": bench_remove,
    }

    input_sizes = [base_input * (2 ** i) for i in range(10)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Buckets",
            "Space (bytes)",
        ])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size)
                hm = op_func(generate_random_pairs(size))
                space = measure_space(hm)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", hm.buckets(), space])
                print(f"{op_name:<15} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Buckets: {hm.buckets():<8} | Space: {space} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    OUTPUT_CSV = "hash_map_performance.csv"
    run_benchmarks(OUTPUT_CSV, base_input=100)
