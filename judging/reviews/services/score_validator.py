from typing import Optional

from judging.core.config import settings
from judging.core.errors import InvalidScore


class ScoreValidator:
    """Inclusive score bounds; a missing bound is not checked."""

    def __init__(self, minimum: Optional[int] = None, maximum: Optional[int] = None):
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f"Score minimum {minimum} is above maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def from_settings(cls) -> "ScoreValidator":
        return cls(settings.SCORE_MIN, settings.SCORE_MAX)

    def validate(self, score: int) -> int:
        if self.minimum is not None and score < self.minimum:
            raise InvalidScore(f"Score must be at least {self.minimum}")
        if self.maximum is not None and score > self.maximum:
            raise InvalidScore(f"Score must be at most {self.maximum}")
        return score
