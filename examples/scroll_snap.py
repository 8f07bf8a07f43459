from spring_sim import ScrollSpringSimulation, SpringDescription, SpringSimulation, settle_time

# Overscroll of 120 px pulled back to the edge at 0
spring = SpringDescription.with_damping_ratio(mass=0.5, stiffness=100.0, ratio=1.1)
plain = SpringSimulation(spring, start=120.0, end=0.0, velocity=-400.0)
scroll = ScrollSpringSimulation(spring, start=120.0, end=0.0, velocity=-400.0)

t = settle_time(scroll)
print("settled at t =", t)
print("plain x:", plain.x(t), " exact edge:", plain.x(t) == 0.0)
print("scroll x:", scroll.x(t), " exact edge:", scroll.x(t) == 0.0)
