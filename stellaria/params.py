"""Query parameters for the APOD endpoint.

Parameters are staged on an :class:`ApodParamsBuilder` and turned into an
immutable :class:`ApodParams` by :meth:`ApodParamsBuilder.build`. Exactly one
query mode ends up in the result: a single date, an inclusive date range, or a
random count. Staging a second mode replaces the first.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime

from .exceptions import (
    ApodParamsError,
    InvalidCountError,
    InvalidDateError,
    InvalidRangeError,
)

DATE_FORMAT = "%Y-%m-%d"
FIRST_APOD_DATE = date(1995, 6, 16)
MAX_COUNT = 100

Clock = Callable[[], date]


def utc_today() -> date:
    """Return the current calendar date in UTC."""
    return datetime.now(tz=UTC).date()


@dataclass(frozen=True)
class SingleDate:
    """Picture published on one day."""

    date: date


@dataclass(frozen=True)
class DateRange:
    """Pictures published between two days, both inclusive."""

    start_date: date
    end_date: date


@dataclass(frozen=True)
class Count:
    """A number of randomly chosen pictures."""

    count: int


ApodMode = SingleDate | DateRange | Count


@dataclass(frozen=True)
class ApodParams:
    """Validated APOD query, produced by :meth:`ApodParamsBuilder.build`."""

    mode: ApodMode
    thumbs: bool = False

    @staticmethod
    def builder(clock: Clock | None = None) -> ApodParamsBuilder:
        return ApodParamsBuilder(clock=clock)

    def to_query(self) -> dict[str, str]:
        """Serialize into query-string pairs, without the API key."""
        query: dict[str, str] = {}
        mode = self.mode
        if isinstance(mode, SingleDate):
            query["date"] = mode.date.strftime(DATE_FORMAT)
        elif isinstance(mode, DateRange):
            query["start_date"] = mode.start_date.strftime(DATE_FORMAT)
            query["end_date"] = mode.end_date.strftime(DATE_FORMAT)
        else:
            query["count"] = str(mode.count)
        query["thumbs"] = "true" if self.thumbs else "false"
        return query

    @classmethod
    def from_query(
        cls, query: Mapping[str, str], clock: Clock | None = None
    ) -> ApodParams:
        """Parse query-string pairs back into validated params.

        A query string carries no call order, so more than one mode (or half
        a date range) is rejected instead of resolved.
        """
        builder = cls.builder(clock=clock)
        selected = [
            key
            for key, present in (
                ("date", "date" in query),
                ("date range", "start_date" in query or "end_date" in query),
                ("count", "count" in query),
            )
            if present
        ]
        if len(selected) > 1:
            raise ApodParamsError(f"Conflicting APOD parameters: {', '.join(selected)}")

        if "date" in query:
            builder.date(_parse_date(query["date"], "date"))
        elif "start_date" in query or "end_date" in query:
            if "start_date" not in query or "end_date" not in query:
                raise ApodParamsError("start_date and end_date must be given together")
            builder.date_range(
                _parse_date(query["start_date"], "start_date"),
                _parse_date(query["end_date"], "end_date"),
            )
        elif "count" in query:
            try:
                count = int(query["count"])
            except (TypeError, ValueError) as exc:
                raise InvalidCountError(f"Invalid count: {query['count']!r}") from exc
            builder.count(count)

        thumbs = str(query.get("thumbs", "false")).lower()
        if thumbs not in ("true", "false"):
            raise ApodParamsError(f"Invalid thumbs flag: {query['thumbs']!r}")
        builder.thumbs(thumbs == "true")
        return builder.build()


def _check_date(value: object, field: str) -> None:
    # datetime is a date subclass but does not compare with date
    if isinstance(value, datetime) or not isinstance(value, date):
        raise InvalidDateError(f"{field} must be a calendar date, got {value!r}")


def _parse_date(value: str, field: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise ApodParamsError(f"Invalid {field}: {value!r}, expected YYYY-MM-DD") from exc


class ApodParamsBuilder:
    """Stage APOD query fields before validating them in :meth:`build`."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or utc_today
        self._mode: ApodMode | None = None
        self._thumbs = False

    def thumbs(self, thumbs: bool = True) -> ApodParamsBuilder:
        """Ask for a thumbnail URL on video entries."""
        self._thumbs = bool(thumbs)
        return self

    def date(self, day: date) -> ApodParamsBuilder:
        self._mode = SingleDate(day)
        return self

    def date_range(self, start_date: date, end_date: date) -> ApodParamsBuilder:
        self._mode = DateRange(start_date, end_date)
        return self

    def count(self, count: int) -> ApodParamsBuilder:
        self._mode = Count(count)
        return self

    def build(self) -> ApodParams:
        """Validate the staged fields and return immutable params.

        Raises a subclass of :class:`ApodParamsError` when the staged mode is
        invalid. The builder is left as it was, so it can be fixed and built
        again.
        """
        today = self._clock()
        mode = self._mode
        if mode is None:
            mode = SingleDate(today)
        elif isinstance(mode, SingleDate):
            _check_date(mode.date, "date")
            if not FIRST_APOD_DATE <= mode.date <= today:
                raise InvalidDateError(
                    f"Date must be between {FIRST_APOD_DATE:%b %d, %Y} "
                    f"and {today:%b %d, %Y}."
                )
        elif isinstance(mode, DateRange):
            _check_date(mode.start_date, "start_date")
            _check_date(mode.end_date, "end_date")
            if mode.start_date > mode.end_date:
                raise InvalidRangeError("Start date cannot be greater than end date")
        elif isinstance(mode, Count):
            # bool is an int subclass
            if isinstance(mode.count, bool) or not isinstance(mode.count, int):
                raise InvalidCountError(f"Count must be an integer, got {mode.count!r}")
            if not 1 <= mode.count <= MAX_COUNT:
                raise InvalidCountError(
                    f"Count must be positive and cannot exceed {MAX_COUNT}"
                )
        return ApodParams(mode=mode, thumbs=self._thumbs)
