__all__ = ["ReductionBudgetExceeded"]


class ReductionBudgetExceeded(RuntimeError):
    """Raised when a reduction fires more beta steps than its `Fuel` allows."""

    def __init__(self, limit: int):
        super().__init__(f"reduction budget of {limit} beta steps exceeded")
        self.limit = limit
