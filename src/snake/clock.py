# clock.py


class TickTimer:
    """
    Decides when the game should step, independently of the frame rate.

    Ticks are counted from `start_ms`, so a late frame produces one tick
    (not a burst) and the cadence never drifts.
    """

    def __init__(self, ticks_per_second: int, start_ms: int = 0):
        if ticks_per_second <= 0:
            raise ValueError(f"ticks_per_second must be positive, got {ticks_per_second}")
        self.ms_per_tick = 1000 / ticks_per_second
        self.reset(start_ms)

    def reset(self, now_ms: int) -> None:
        self.start_ms = now_ms
        self.tick = 0

    def due(self, now_ms: int) -> bool:
        current = int((now_ms - self.start_ms) // self.ms_per_tick)
        if current > self.tick:
            self.tick = current
            return True
        return False
