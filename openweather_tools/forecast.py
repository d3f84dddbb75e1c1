# ABOUTME: Pure aggregation of 3-hourly forecast samples into calendar-day summaries.
# ABOUTME: Buckets samples by UTC date, then reduces each bucket to min/max and a majority condition.

import logging
from collections import defaultdict
from datetime import date, datetime, timezone

from openweather_tools.models import DailyForecast, DailySample, Units

logger = logging.getLogger(__name__)

MIN_DAYS = 1
MAX_DAYS = 5  # provider horizon for the 3-hourly forecast


def clamp_days(days: int) -> int:
    """Clamp a requested day count into [MIN_DAYS, MAX_DAYS]. Never fails."""
    return max(MIN_DAYS, min(days, MAX_DAYS))


def get_path(data, *keys):
    """Walk nested dicts/lists, returning None at the first missing step instead of raising."""
    for key in keys:
        if isinstance(key, int):
            if not isinstance(data, list) or not -len(data) <= key < len(data):
                return None
        elif not isinstance(data, dict):
            return None
        elif key not in data:
            return None
        data = data[key]
    return data


def as_float(value) -> float | None:
    """Coerce a JSON number to float. Anything else (including bools) is absent."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def first_description(item) -> str:
    """Description of the first ``weather`` entry, or "unknown"."""
    description = get_path(item, "weather", 0, "description")
    return description if isinstance(description, str) else "unknown"


def sample_date(timestamp: int) -> date:
    """UTC calendar date of a Unix timestamp."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date()


def parse_samples(items: list) -> list[DailySample]:
    """Turn raw forecast ``list`` entries into DailySamples.

    Entries without a usable ``dt`` (missing, non-numeric, or outside the range a
    datetime can represent) cannot be placed on a day and are skipped.
    """
    samples = []
    for item in items:
        dt = get_path(item, "dt")
        if isinstance(dt, bool) or not isinstance(dt, (int, float)):
            continue
        try:
            day = sample_date(int(dt))
        except (OverflowError, OSError, ValueError):
            logger.warning("Skipping forecast sample with out-of-range dt: %s", dt)
            continue
        samples.append(
            DailySample(
                date=day,
                temp_min=as_float(get_path(item, "main", "temp_min")),
                temp_max=as_float(get_path(item, "main", "temp_max")),
                description=first_description(item),
            )
        )
    return samples


def bucket_samples(samples: list[DailySample]) -> dict[date, list[DailySample]]:
    """Group samples by date, keeping arrival order inside each bucket."""
    buckets: dict[date, list[DailySample]] = defaultdict(list)
    for sample in samples:
        buckets[sample.date].append(sample)
    return dict(buckets)


def majority_description(descriptions: list[str]) -> str:
    """Most frequent description, compared case-insensitively.

    The returned text is the first spelling seen for the winning group. Ties go to the
    group whose first occurrence came earliest.
    """
    counts: dict[str, int] = {}
    representative: dict[str, str] = {}
    for text in descriptions:
        key = text.casefold()
        if key not in counts:
            counts[key] = 0
            representative[key] = text
        counts[key] += 1
    if not counts:
        return "unknown"
    # max() keeps the first maximal key, and dicts iterate in insertion order
    winner = max(counts, key=counts.__getitem__)
    return representative[winner]


def summarize_day(day: date, bucket: list[DailySample], units: Units) -> DailyForecast:
    """Reduce one day's bucket to a DailyForecast. Pure function of its inputs."""
    mins = [s.temp_min for s in bucket if s.temp_min is not None]
    maxes = [s.temp_max for s in bucket if s.temp_max is not None]
    return DailyForecast(
        date=day,
        units=units,
        min_temp=min(mins) if mins else None,
        max_temp=max(maxes) if maxes else None,
        summary=majority_description([s.description for s in bucket]),
    )


def aggregate_forecast(samples: list[DailySample], units: Units, days: int) -> list[DailyForecast]:
    """Roll samples up into at most ``days`` calendar days, earliest first.

    Returns fewer days when the samples cover fewer distinct dates.
    """
    buckets = bucket_samples(samples)
    selected = sorted(buckets)[:days]
    return [summarize_day(day, buckets[day], units) for day in selected]
