import gc
import logging
import os

import psutil
from memory_profiler import profile

from fmindex.bwt import bwt_transform, inverse_bwt
from fmindex.fm_index import build_fm_index
from fmindex.suffix_array import bwt_suffix_array
from tests.test_patterns import generate_random_patterns
from utils.utils import time_function

logger = logging.getLogger(__name__)

BLOCK_LENGTHS = [100, 500, 1000, 5000]

def get_process_memory():
    """Get current memory usage in MB"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024

class BenchmarkResults:
    def __init__(self):
        self.suffix_array_times = {}
        self.transform_times = {}
        self.fm_index_times = {}
        self.inverse_times = {}
        self.construction_memory = {}
        self.total_time = 0
        self.peak_memory = 0

@time_function
def timed_suffix_array(block, method):
    return bwt_suffix_array(block, method=method)

@time_function
def timed_transform(block, suffix_array):
    return bwt_transform(block, suffix_array)

@time_function
def timed_fm_index(bwt):
    return build_fm_index(bwt)

@time_function
def timed_inverse(bwt):
    return inverse_bwt(bwt)

@profile
def benchmark_construction(block, method=None):
    """Measure suffix array, BWT and FM-index construction time and memory"""
    gc.collect()  # Clear memory before start

    initial_memory = get_process_memory()

    suffix_array, sa_time = timed_suffix_array(block, method)
    bwt, bwt_time = timed_transform(block, suffix_array)
    _, fm_time = timed_fm_index(bwt)

    construction_memory = get_process_memory() - initial_memory

    return bwt, (sa_time, bwt_time, fm_time), construction_memory

def run_full_benchmark(text, block_lengths=BLOCK_LENGTHS, iterations=3, method=None):
    """Run complete benchmark suite with multiple iterations"""
    results = BenchmarkResults()

    blocks = generate_random_patterns(text, block_lengths, seed=0)

    print("\nBenchmarking BWT / FM-index construction...")
    for block in blocks:
        sa_times, bwt_times, fm_times, inv_times, memory = [], [], [], [], []

        print(f"\nBlock length: {len(block)}")
        for i in range(iterations):
            bwt, (sa_time, bwt_time, fm_time), used = benchmark_construction(block, method)
            recovered, inv_time = timed_inverse(bwt)
            if recovered != list(block):
                logger.error("round trip mismatch for block of length %d", len(block))

            sa_times.append(sa_time)
            bwt_times.append(bwt_time)
            fm_times.append(fm_time)
            inv_times.append(inv_time)
            memory.append(used)
            print(f"Iteration {i+1}: SA={sa_time:.4f}s, BWT={bwt_time:.4f}s, "
                  f"FM={fm_time:.4f}s, inverse={inv_time:.4f}s, Memory={used:.2f}MB")

        # Store average results
        length = len(block)
        results.suffix_array_times[length] = sum(sa_times) / iterations
        results.transform_times[length] = sum(bwt_times) / iterations
        results.fm_index_times[length] = sum(fm_times) / iterations
        results.inverse_times[length] = sum(inv_times) / iterations
        results.construction_memory[length] = sum(memory) / iterations

    # Calculate totals
    results.total_time = sum(
        sum(table.values())
        for table in (results.suffix_array_times, results.transform_times,
                      results.fm_index_times, results.inverse_times)
    ) * iterations
    results.peak_memory = max(results.construction_memory.values(), default=0)

    return results

def print_benchmark_summary(results):
    """Print formatted benchmark results"""
    print("\n=== Benchmark Summary ===")
    print("\nAverages per block:")
    print("Length | SA (s)   | BWT (s)  | FM (s)   | Inverse (s) | Memory (MB)")
    print("-" * 70)
    for length in sorted(results.suffix_array_times.keys()):
        print(f"{length:>6} | {results.suffix_array_times[length]:>8.4f} | "
              f"{results.transform_times[length]:>8.4f} | {results.fm_index_times[length]:>8.4f} | "
              f"{results.inverse_times[length]:>11.4f} | {results.construction_memory[length]:>10.2f}")

    print("\nOverall:")
    print(f"Total Time: {results.total_time:.4f} seconds")
    print(f"Peak Memory: {results.peak_memory:.2f} MB")

if __name__ == "__main__":
    # Example usage
    test_text = b"mississippi" * 1000  # Create larger test text
    results = run_full_benchmark(test_text)
    print_benchmark_summary(results)
