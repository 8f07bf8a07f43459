import json
import logging
import tempfile
from pathlib import Path

from spring_sim import sample_trajectory
from spring_sim.io import load_simulation, trajectory_to_json

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

config = {
    "spring": {"mass": 1.0, "stiffness": 180.0, "ratio": 0.7},
    "start": 0.0,
    "end": 300.0,
    "velocity": 0.0,
}

with tempfile.TemporaryDirectory() as tmp:
    path = Path(tmp) / "slide_in.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    sim = load_simulation(str(path))

traj = sample_trajectory(sim, frame_dt=1/60)
data = trajectory_to_json(traj)
print(sim, "->", len(data["times"]), "frames, done:", data["done"])
