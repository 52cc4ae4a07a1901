"""Domain errors."""


class InvalidRateConfiguration(ValueError):
    """A requested rate cannot be normalized against its burst ceiling."""

    def __init__(self, events: float, period: float, burst: int, message: str | None = None) -> None:
        self.events = events
        self.period = period
        self.burst = burst
        if message is None:
            message = (
                f"Configured rate of {events:f} events per {period:f} ms cannot satisfy "
                f"the requirement of {burst} burst events at a time"
            )
        super().__init__(message)
