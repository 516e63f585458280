from types import MappingProxyType


QUALITY_BONUS = MappingProxyType({
    "excellent": 30,
    "good": 20,
    "average": 10,
    "poor": 0,
})


def _hours_base_score(hours: float) -> int:
    # Optimal is 7-9 hours; order matters at the shared boundaries.
    if 7 <= hours <= 9:
        return 70
    if 6 <= hours < 7:
        return 55
    if 9 < hours <= 10:
        return 60
    if 5 <= hours < 6:
        return 40
    if hours > 10:
        return 45
    return 25


def calculate_sleep_score(hours: float, quality: str) -> int:
    """Turn logged sleep hours and a quality rating into a 0-100 score."""
    return min(100, _hours_base_score(hours) + QUALITY_BONUS.get(quality, 0))
