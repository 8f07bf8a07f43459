"""
Microbenchmark: cost of x/dx/is_done per regime.
Run:
  python benchmarks/bench_eval.py
"""
import time
import numpy as np
from spring_sim import SpringDescription, SpringSimulation

SPRINGS = {
    "critical": SpringDescription.with_damping_ratio(1.0, 100.0),
    "under": SpringDescription(1.0, 100.0, 5.0),
    "over": SpringDescription(1.0, 100.0, 50.0),
}


def run(spring: SpringDescription, frames: int = 20_000):
    sim = SpringSimulation(spring, start=0.0, end=1.0, velocity=0.0)
    times = [i / 60 for i in range(frames)]

    t0 = time.perf_counter()
    for t in times:
        sim.x(t)
        sim.dx(t)
        sim.is_done(t)
    t1 = time.perf_counter()

    # vectorized evaluation of the same frames through the solution
    arr = np.array(times)
    t2 = time.perf_counter()
    sim.x(arr)
    sim.dx(arr)
    t3 = time.perf_counter()

    return (t1 - t0) / frames, (t3 - t2) / frames


if __name__ == "__main__":
    for name, spring in SPRINGS.items():
        per_frame, per_frame_vec = run(spring)
        print(f"{name:9s} frame={1e6*per_frame:7.2f} us  vectorized={1e9*per_frame_vec:7.1f} ns")
