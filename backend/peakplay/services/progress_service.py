"""Progress tracking - gap-filled score history and trends for charting."""

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from peakplay.models import Student, SkillHistory
from peakplay.schemas import (
    TimeSeriesPoint,
    TrendSummary,
    FilledSeries,
    SeriesSummary,
    ProgressResponse,
)
from peakplay.services.scoring_service import score_status

logger = logging.getLogger(__name__)

HISTORY_CATEGORIES = ("physical", "nutrition", "mental", "wellness", "technique", "tactical")


def _score_field(category: str) -> str:
    if category not in HISTORY_CATEGORIES:
        raise ValueError(
            f"Unknown category '{category}'. Expected one of: {', '.join(HISTORY_CATEGORIES)}"
        )
    return f"{category}_score"


def fill_data_gaps(points: List[TimeSeriesPoint], start: date, end: date) -> List[TimeSeriesPoint]:
    """
    Return exactly one point per calendar day in [start, end], oldest first.

    Days without a stored point get all six scores as None so charts can tell
    "not measured" apart from a measured zero. Points outside the window are
    dropped; when two points share a date the later one in the input wins.
    """
    if start > end:
        raise ValueError(f"start date {start} is after end date {end}")

    by_date: Dict[date, TimeSeriesPoint] = {}
    for point in points:
        if start <= point.date <= end:
            by_date[point.date] = point

    filled = []
    curr = start
    while curr <= end:
        filled.append(by_date.get(curr) or TimeSeriesPoint(date=curr))
        curr += timedelta(days=1)

    return filled


def calculate_trend(points: List[TimeSeriesPoint], category: str) -> TrendSummary:
    """
    Trend of one category between its two most recent measurements.

    "Previous" is the measurement before the latest one among non-null
    points, not the calendar day before, so a trend still shows after a gap.
    """
    field = _score_field(category)
    values = [getattr(p, field) for p in points if getattr(p, field) is not None]

    if not values:
        return TrendSummary(category=category)

    current = values[-1]
    if len(values) < 2:
        return TrendSummary(category=category, current=current)

    previous = values[-2]
    trend = current - previous

    return TrendSummary(
        category=category,
        current=current,
        previous=previous,
        trend=trend,
        trend_percentage=(trend / previous * 100) if previous > 0 else 0,
    )


def fill_and_trend(
    points: List[TimeSeriesPoint],
    start: date,
    end: date,
    category: str,
) -> FilledSeries:
    """Gap-fill the window and compute the category trend over it."""
    series = fill_data_gaps(points, start, end)
    trend = calculate_trend(series, category)

    return FilledSeries(
        series=series,
        current=trend.current,
        trend=trend.trend,
        trend_percentage=trend.trend_percentage,
    )


def summarize_series(points: List[TimeSeriesPoint], category: str) -> SeriesSummary:
    """Average, best, worst and count of the measured values of a category."""
    field = _score_field(category)
    values = [getattr(p, field) for p in points if getattr(p, field) is not None]

    if not values:
        return SeriesSummary(
            category=category,
            average=0,
            max_score=0,
            min_score=0,
            data_points=0,
            status=score_status(None),
        )

    return SeriesSummary(
        category=category,
        average=round(sum(values) / len(values), 1),
        max_score=max(values),
        min_score=min(values),
        data_points=len(values),
        status=score_status(values[-1]),
    )


class ProgressService:
    """Service for reading score history and shaping it for charts."""

    def __init__(self, db: Session):
        self.db = db

    def resolve_window(
        self,
        days: int = 30,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> tuple:
        """Explicit dates win; otherwise the last `days` days ending today."""
        end = end_date or date.today()
        start = start_date or end - timedelta(days=max(days, 1) - 1)
        if start > end:
            raise ValueError(f"start date {start} is after end date {end}")
        return start, end

    def get_history(
        self,
        student: Student,
        days: int = 30,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[TimeSeriesPoint]:
        """Stored history points in the window, oldest first."""
        start, end = self.resolve_window(days, start_date, end_date)

        rows = (
            self.db.query(SkillHistory)
            .filter(
                SkillHistory.student_id == student.id,
                SkillHistory.date >= start,
                SkillHistory.date <= end,
            )
            .order_by(SkillHistory.date.asc())
            .all()
        )

        return [TimeSeriesPoint.model_validate(row) for row in rows]

    def get_progress(
        self,
        student: Student,
        category: str,
        days: int = 30,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ProgressResponse:
        """Gap-filled series with trend and summary for one category."""
        _score_field(category)
        start, end = self.resolve_window(days, start_date, end_date)
        history = self.get_history(student, start_date=start, end_date=end)

        filled = fill_and_trend(history, start, end, category)
        logger.debug(
            "Progress for student %s (%s): %d stored of %d days",
            student.id, category, len(history), len(filled.series),
        )

        return ProgressResponse(
            student_id=student.id,
            category=category,
            start_date=start,
            end_date=end,
            series=filled.series,
            current=filled.current,
            trend=filled.trend,
            trend_percentage=filled.trend_percentage,
            summary=summarize_series(filled.series, category),
        )
