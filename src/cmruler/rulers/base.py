class BaseRuler:
    """Linear mapping between a data range [window_start, window_stop] and a pixel length."""

    def __init__(self, window_start: float, window_stop: float, length: float = 1.0) -> None:
        """Create ruler spanning [window_start, window_stop] over `length` points."""
        self.window_start = window_start
        self.window_stop = window_stop
        self.window_length = self.window_stop - self.window_start
        self.length = length

    def transform(self, value: float) -> float:
        """Convert data value to pixel position."""
        if self.window_length == 0:
            return 0.0
        return (value - self.window_start) / self.window_length * self.length

    def get_value_at(self, x: float) -> float:
        """Convert pixel position to data value. Positions outside [0, length] map outside the window."""
        if self.length == 0:
            return self.window_start
        return self.window_start + x / self.length * self.window_length

    def get_delta_width(self, delta: float) -> float:
        """Convert pixel delta to data value delta."""
        if self.length == 0:
            return 0.0
        return self.window_length * (delta / self.length)

    def contains(self, value: float) -> bool:
        return self.window_start <= value <= self.window_stop
