import time
import json
import random
import statistics
from tqdm import tqdm
import config
from sharerecon import Point, decode, encode, reconstruct


def make_shares(threshold, count, secret_digits=60, base=36):
    """Evaluate a random integer polynomial at x = 1..count"""
    coefficients = [random.randrange(10 ** secret_digits) for _ in range(threshold)]
    shares = []
    for x in range(1, count + 1):
        y = 0
        for coefficient in reversed(coefficients):
            y = y * x + coefficient
        shares.append((x, encode(y, base)))
    return coefficients[0], shares


class PerformanceTest:
    def __init__(self):
        self.results = {
            "decode": [],
            "reconstruct": []
        }

    def run_decode_tests(self, num_runs=config.Config.PERFORMANCE_SAMPLES, base=36):
        """Time radix decoding of large share values"""
        print("\n=== Radix Decoding Performance ===")
        _, shares = make_shares(threshold=5, count=5)
        times = []
        for _ in tqdm(range(num_runs)):
            start = time.perf_counter()
            for _, digits in shares:
                decode(digits, base)
            end = time.perf_counter()
            times.append(end - start)
        self.results["decode"] = times
        print(f"Decode: {statistics.mean(times)*1000:.2f} ms avg")

    def run_reconstruct_tests(self, num_runs=config.Config.PERFORMANCE_SAMPLES, threshold=5):
        """Time Lagrange reconstruction from k of k+2 shares"""
        print("\n=== Reconstruction Performance ===")
        times = []
        for _ in tqdm(range(num_runs)):
            secret, shares = make_shares(threshold, threshold + 2)
            points = [Point(x, decode(digits, 36)) for x, digits in shares]
            start = time.perf_counter()
            recovered = reconstruct(points, threshold)
            end = time.perf_counter()
            if int(recovered) != secret:
                raise AssertionError(f"Reconstructed {recovered}, expected {secret}")
            times.append(end - start)
        self.results["reconstruct"] = times
        print(f"Reconstruct: {statistics.mean(times)*1000:.2f} ms avg")

    def save_results(self, filename="performance_results.json"):
        with open(filename, "w") as f:
            json.dump(self.results, f, indent=2)
        print(f"Results saved to {filename}")


if __name__ == "__main__":
    tester = PerformanceTest()
    tester.run_decode_tests()
    tester.run_reconstruct_tests()
    tester.save_results()
