"""
Price analytics engine.

Turns a product's raw price series into the derived views the dashboard
displays: summary statistics, trailing calendar windows and a down-sampled
chart series.

Series are pandas DataFrames with the columns ``date``, ``price_min`` and
``price_max`` in ascending date order, as returned by PriceHistoryRepository.
The engine never re-sorts or mutates its input.

Validity:
    A record is valid when both prices are strictly positive. Invalid records
    are excluded from statistics but still count as data.

Lookup outcomes:
    - None: no price data for the product (NOT_FOUND)
    - empty DataFrame: price data exists but holds no records (EMPTY)
    - non-empty DataFrame: AVAILABLE
"""

import logging
import math
from datetime import date, datetime
from typing import Dict, List, Optional, Union

import pandas as pd
import pytz
from fastapi import HTTPException

from .base_service import BaseService
from ..config import app_config
from ..models import ChartPoint, PriceRecord, PriceSeriesStatus, PriceSummary, TimeWindow
from ..repositories import records_to_frame

logger = logging.getLogger(__name__)

# Calendar offsets for each trailing window
WINDOW_OFFSETS = {
    TimeWindow.ONE_MONTH: pd.DateOffset(months=1),
    TimeWindow.THREE_MONTHS: pd.DateOffset(months=3),
    TimeWindow.ONE_YEAR: pd.DateOffset(years=1),
}

DEFAULT_MAX_POINTS = 365


def _as_frame(series) -> Optional[pd.DataFrame]:
    """Accept a DataFrame, a list of records or None."""
    if series is None or isinstance(series, pd.DataFrame):
        return series
    return records_to_frame(series)


def _to_record(row: pd.Series) -> PriceRecord:
    return PriceRecord(
        date=str(row['date']),
        price_min=float(row['price_min']),
        price_max=float(row['price_max'])
    )


class PriceAnalyticsService(BaseService):
    """Stateless price series analytics."""

    def __init__(self, max_points: int = None, timezone: str = None):
        """Initialize with chart and calendar settings from configuration."""
        super().__init__()
        self.max_points = (
            max_points if max_points is not None else app_config.analytics.max_chart_points)
        self.timezone = timezone if timezone is not None else app_config.analytics.timezone

    def validate_input(self, **kwargs) -> bool:
        """Validate window and chart size parameters."""
        window = kwargs.get('window')
        max_points = kwargs.get('max_points')

        if window is not None:
            try:
                TimeWindow(window)
            except ValueError:
                raise HTTPException(
                    status_code=400,
                    detail=f"Window must be one of: {', '.join(w.value for w in TimeWindow)}"
                )

        if max_points is not None and (max_points < 1 or max_points > 10000):
            raise HTTPException(
                status_code=400,
                detail="Max points must be between 1 and 10000"
            )

        return True

    def today(self) -> date:
        """Current calendar date in the configured market timezone."""
        return datetime.now(pytz.timezone(self.timezone)).date()

    @staticmethod
    def compute_summary(series) -> PriceSummary:
        """
        Compute summary statistics over a price series.

        Args:
            series: Price series DataFrame, list of records, or None when the
                product has no price data.

        Returns:
            PriceSummary. ``latest`` is the last raw record in sequence order
            regardless of its validity; ``average``/``min``/``max`` cover
            valid records only and are 0 with ``has_valid_data`` False when
            there are none.
        """
        df = _as_frame(series)

        if df is None:
            return PriceSummary(
                status=PriceSeriesStatus.NOT_FOUND,
                has_data=False,
                has_valid_data=False
            )

        if df.empty:
            return PriceSummary(
                status=PriceSeriesStatus.EMPTY,
                has_data=False,
                has_valid_data=False
            )

        latest = _to_record(df.iloc[-1])
        valid = df[(df['price_min'] > 0) & (df['price_max'] > 0)]

        if valid.empty:
            return PriceSummary(
                status=PriceSeriesStatus.AVAILABLE,
                has_data=True,
                has_valid_data=False,
                latest=latest,
                total_count=len(df)
            )

        midpoints = (valid['price_min'] + valid['price_max']) / 2

        return PriceSummary(
            status=PriceSeriesStatus.AVAILABLE,
            has_data=True,
            has_valid_data=True,
            latest=latest,
            average=float(midpoints.mean()),
            min=float(valid['price_min'].min()),
            max=float(valid['price_max'].max()),
            valid_count=len(valid),
            total_count=len(df)
        )

    @staticmethod
    def window_cutoff(window: Union[TimeWindow, str], reference_date: date) -> Optional[pd.Timestamp]:
        """
        Start of a trailing window: the same day-of-month N calendar months or
        years before the reference date, clamped to month end (Mar 31 -> Feb 28/29).

        Returns None for the all-time window.
        """
        window = TimeWindow(window)
        if window == TimeWindow.ALL:
            return None
        return pd.Timestamp(reference_date) - WINDOW_OFFSETS[window]

    def local_dates(self, dates: pd.Series) -> pd.Series:
        """
        Parse ISO-8601 date strings to calendar dates.

        Bare dates and naive timestamps keep their written date. Timestamps
        with a UTC offset are converted to the market timezone first.
        Unparseable values become NaT.
        """
        tz = pytz.timezone(self.timezone)

        def to_local(value):
            ts = pd.to_datetime(value, errors='coerce', format='ISO8601')
            if pd.isna(ts):
                return pd.NaT
            if ts.tzinfo is not None:
                ts = ts.tz_convert(tz).tz_localize(None)
            return ts.normalize()

        return pd.to_datetime(dates.map(to_local))

    def filter_by_window(
        self,
        series,
        window: Union[TimeWindow, str],
        reference_date: date = None
    ) -> pd.DataFrame:
        """
        Keep records dated on or after the window cutoff, order preserved.

        Dates are parsed and compared as calendar dates (see local_dates);
        records whose date cannot be parsed never fall inside a bounded window.

        Raises:
            ValueError: If the window is unknown.
        """
        window = TimeWindow(window)
        df = _as_frame(series)
        if df is None:
            df = records_to_frame([])

        if window == TimeWindow.ALL or df.empty:
            return df.copy()

        cutoff = self.window_cutoff(window, reference_date or self.today())
        dates = self.local_dates(df['date'])

        return df[(dates >= cutoff).to_numpy()].reset_index(drop=True)

    def downsample_for_chart(self, series, max_points: int = None) -> List[ChartPoint]:
        """
        Map a series to chart points, decimating it by position when it holds
        more than ``max_points`` records.

        Keeps indices 0, stride, 2*stride, ... with
        stride = ceil(len / max_points). Skipped records are dropped, not
        averaged; the last record survives only when its index is a multiple
        of the stride.

        Raises:
            ValueError: If max_points is below 1.
        """
        max_points = max_points if max_points is not None else self.max_points
        if max_points < 1:
            raise ValueError("max_points must be at least 1")

        df = _as_frame(series)
        if df is None or df.empty:
            return []

        if len(df) > max_points:
            stride = math.ceil(len(df) / max_points)
            df = df.iloc[::stride]

        points = []
        for _, row in df.iterrows():
            price_min = float(row['price_min'])
            price_max = float(row['price_max'])
            points.append(ChartPoint(
                date=str(row['date']),
                min=price_min,
                max=price_max,
                avg=(price_min + price_max) / 2
            ))

        return points

    def build_window_charts(
        self,
        series,
        reference_date: date = None,
        max_points: int = None
    ) -> Dict[str, List[ChartPoint]]:
        """Windowed, down-sampled chart series for every TimeWindow."""
        reference_date = reference_date or self.today()
        charts = {}
        for window in TimeWindow:
            windowed = self.filter_by_window(series, window, reference_date)
            charts[window.value] = self.downsample_for_chart(
                windowed, max_points)

        logger.debug(
            "Built window charts: "
            + ", ".join(f"{key}={len(points)}" for key, points in charts.items()))
        return charts
