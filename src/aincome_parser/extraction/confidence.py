from aincome_parser.models import FALLBACK_CONFIDENCE_CEILING

BASELINE = 0.5


class ConfidenceAggregator:
    """
    Accumulates confidence adjustments starting from the rule-based floor.

    Adjustments are summed as they arrive and only the final value is clamped,
    so a penalty can cancel a bonus that would otherwise have hit the ceiling.
    """

    def __init__(self, baseline: float = BASELINE, ceiling: float = FALLBACK_CONFIDENCE_CEILING):
        self.ceiling = ceiling
        self._total = baseline

    def add(self, delta: float) -> None:
        self._total += delta

    @property
    def value(self) -> float:
        return round(min(max(self._total, 0.0), self.ceiling), 2)
