from scoring.normalize import round_to


class WeightedAverage:
    """Weighted mean over the values that are actually present.

    None values are left out of both the numerator and the denominator, so
    missing data shifts emphasis to what remains instead of dragging the
    result toward zero.
    """

    def __init__(self):
        self._weighted_sum = 0.0
        self._total_weight = 0.0
        self.count = 0

    def add(self, value: float | None, weight: float) -> bool:
        if value is None:
            return False
        self._weighted_sum += value * weight
        self._total_weight += weight
        self.count += 1
        return True

    def result(self) -> float | None:
        if self._total_weight <= 0:
            return None
        return round_to(self._weighted_sum / self._total_weight)
