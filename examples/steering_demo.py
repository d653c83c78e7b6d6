"""Basic steering usage example.

Demonstrates:
- World creation and agent spawning
- Attaching and blending behaviours
- Integrating forces and writing positions back
- Recording history and drawing debug overlays
"""

from steerecs import (
    FleeBehaviour,
    PursueBehaviour,
    Position,
    Vector2D,
    Velocity,
    WanderingBehaviour,
    WanderSettings,
    World,
    WorldSettings,
)
from steerecs.core.vector import operations as vec

MAX_SPEED = 2.0


class PrintSurface:
    """DebugSurface that prints instead of drawing."""

    def draw_circle(self, center, radius, colour=None):
        print(f"  circle at ({center.x:.1f}, {center.y:.1f}) r={radius} {colour or ''}")

    def draw_line(self, start, end, colour=None):
        print(f"  line ({start.x:.1f}, {start.y:.1f}) -> ({end.x:.1f}, {end.y:.1f}) {colour or ''}")


def integrate(world: World, forces: dict) -> None:
    """Euler step with a speed cap."""
    for entity, force in forces.items():
        handle = world.agent(entity)
        velocity = vec.add(handle.velocity(), force)
        if velocity.magnitude() > MAX_SPEED:
            velocity.normalise()
            velocity.multiply(MAX_SPEED)
        world.place(entity, vec.add(handle.position(), velocity), velocity)


def main():
    world = World(WorldSettings(width=400, height=300, seed=7))
    history = world.record_history()

    sheep = world.spawn(Position(200, 150), Velocity(1, 0))
    wolf = world.spawn(Position(50, 50), Velocity(0, 1))

    world.attach(sheep, WanderingBehaviour(WanderSettings(angle_jitter=15), rng=world.rng))
    # Sheep keep away from the wolf den
    world.attach(sheep, FleeBehaviour(Vector2D(50, 50)), weight=0.5)
    world.attach(wolf, PursueBehaviour(world.agent(sheep), look_ahead=5))

    for tick in range(1, 21):
        integrate(world, world.tick())
        sheep_at = world.agent(sheep).position()
        wolf_at = world.agent(wolf).position()
        print(f"tick {tick}: sheep {sheep_at!r} wolf {wolf_at!r}")

    print("Debug overlay:")
    world.debug_draw(PrintSurface())
    print(f"Recorded ticks {history.get_tick_range()}")


if __name__ == "__main__":
    main()
