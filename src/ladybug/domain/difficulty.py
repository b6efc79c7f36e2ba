from ladybug.domain.constants import MAX_SPEED, SPEED_GROWTH


def advance_speed(speed: float, dt: float) -> float:
    """Linear ramp, capped. Only reset by starting a new run."""
    return min(speed + SPEED_GROWTH * dt, MAX_SPEED)
