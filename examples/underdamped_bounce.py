from spring_sim import SpringDescription, SpringSimulation

# Bouncy spring: damping ratio 0.25
spring = SpringDescription(mass=1.0, stiffness=100.0, damping=5.0)
sim = SpringSimulation(spring, start=0.0, end=1.0, velocity=0.0)

t = 0.0
while not sim.is_done(t):
    print(f"t={t:.4f}  x={sim.x(t):.4f}  v={sim.dx(t):.4f}")
    t += 1/30

print("settled after", round(t, 3), "s:", sim)
