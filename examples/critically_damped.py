# examples/critically_damped.py
from spring_sim import SpringDescription, SpringSimulation, sample_trajectory

spring = SpringDescription.with_damping_ratio(mass=1.0, stiffness=100.0, ratio=1.0)
sim = SpringSimulation(spring, start=0.0, end=1.0, velocity=0.0)

traj = sample_trajectory(sim, frame_dt=1/60)

print("spring:", spring)
print("regime:", sim.type.name)
print("frames:", len(traj), "settled at t =", traj.duration)
print("final x:", traj.positions[-1], "dx:", traj.velocities[-1])
