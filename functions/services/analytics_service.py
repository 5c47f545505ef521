"""Analytics Aggregation Service for BuildMarket.

Records analytics events in an in-memory EventStore and derives reports from
them on demand:

- Admin dashboard metrics (role counts, active users, searches, enquiries,
  payments, conversion funnel, daily time series)
- Partner and dealer analytics
- Per-user activity reports

Tracking is fire-and-forget: a failure is logged and never reaches the
caller. Reports are recomputed from the event log on each call.
"""

import math
from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import structlog

from config.settings import settings
from models.analytics import (
    PAYMENT_EVENTS,
    SEARCH_EVENTS,
    ActiveUsers,
    AdminDashboardMetrics,
    AggregationPeriod,
    AnalyticsAggregation,
    AnalyticsEvent,
    AnalyticsEventPayload,
    AnalyticsTimeSeries,
    ConversionFunnel,
    ConversionRates,
    DashboardTimeSeries,
    DealerAnalytics,
    PartnerAnalytics,
    PaymentSummary,
    Period,
    UserActivityReport,
    UserCounts,
    to_utc,
)
from services.event_store import EventStore
from utils.background import fire_and_forget
from utils.rounding import round_half_up

logger = structlog.get_logger(__name__)

# Metadata keys never stored (compared case-insensitively)
PII_KEYS = frozenset({"email", "phone", "name", "address"})

# userRole (lowercased) -> dashboard bucket
ROLE_BUCKETS = {
    "general_user": "general",
    "partner": "partner",
    "dealer": "dealer",
    "admin": "admin",
}

ENTITY_PARTNER = "partner"
ENTITY_DEALER = "dealer"

DAILY_ACTIVE_WINDOW = timedelta(days=1)
MONTHLY_ACTIVE_WINDOW = timedelta(days=30)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _conversion_rate(numerator: int, denominator: int) -> float:
    """Percentage to 2 decimals, 0 when the denominator is 0."""
    if denominator <= 0:
        return 0
    return math.floor((numerator / denominator) * 10000 + 0.5) / 100


def _payment_amount(metadata: Mapping[str, Any]) -> Union[int, float]:
    """Numeric metadata amount, or 0 when missing or non-numeric."""
    amount = metadata.get("amount")
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return 0
    return amount


def _calendar_days(start: datetime, end: datetime) -> List[str]:
    """Every UTC calendar day from start to end inclusive, as YYYY-MM-DD."""
    day = start.date()
    last = end.date()
    days = []
    while day <= last:
        days.append(day.isoformat())
        day += timedelta(days=1)
    return days


# =============================================================================
# EXTERNAL COLLABORATOR DATA
# =============================================================================


class EntityInsights(ABC):
    """Data about partners and dealers that lives outside the event log."""

    @abstractmethod
    def average_response_hours(self, entity_type: str, entity_id: str, responded: int) -> float:
        """Average hours to respond to an enquiry."""

    @abstractmethod
    def feedback(self, entity_type: str, entity_id: str) -> Tuple[float, int]:
        """Feedback (rating, count)."""

    @abstractmethod
    def average_distance_km(self, dealer_id: str) -> float:
        """Average distance between a dealer and enquiring users."""


class PlaceholderInsights(EntityInsights):
    """Fixed values used until enquiry timing, feedback and location services exist."""

    RESPONSE_HOURS = {ENTITY_PARTNER: 24, ENTITY_DEALER: 18}
    FEEDBACK = {ENTITY_PARTNER: (4.5, 10), ENTITY_DEALER: (4.3, 8)}
    DEALER_DISTANCE_KM = 5.2

    def average_response_hours(self, entity_type: str, entity_id: str, responded: int) -> float:
        if responded <= 0:
            return 0
        return self.RESPONSE_HOURS.get(entity_type, 0)

    def feedback(self, entity_type: str, entity_id: str) -> Tuple[float, int]:
        return self.FEEDBACK.get(entity_type, (0.0, 0))

    def average_distance_km(self, dealer_id: str) -> float:
        return self.DEALER_DISTANCE_KM


# =============================================================================
# SERVICE
# =============================================================================


class AnalyticsService:
    """Event tracking and aggregation over an EventStore.

    Args:
        store: Event store to use; a new one is created if omitted.
        clock: Returns the current UTC time (active-user windows are
            measured back from it).
        insights: Source of response-time, feedback and distance data.
    """

    def __init__(
        self,
        store: Optional[EventStore] = None,
        clock: Optional[Callable[[], datetime]] = None,
        insights: Optional[EntityInsights] = None
    ):
        self.store = store if store is not None else EventStore()
        self._clock = clock or _utcnow
        self.insights = insights or PlaceholderInsights()

    def now(self) -> datetime:
        return to_utc(self._clock())

    # -------------------------------------------------------------------------
    # Tracking
    # -------------------------------------------------------------------------

    @staticmethod
    def sanitize_metadata(metadata: Mapping[str, Any]) -> Dict[str, Any]:
        """Drop PII-named keys from event metadata."""
        return {
            key: value for key, value in metadata.items()
            if str(key).lower() not in PII_KEYS
        }

    async def track_event(self, payload: Union[AnalyticsEventPayload, Mapping[str, Any]]) -> None:
        """Record an event. Never raises; failures are logged and dropped.

        Args:
            payload: Event model or a mapping in its shape (camelCase or
                snake_case keys).
        """
        try:
            if isinstance(payload, AnalyticsEventPayload):
                data = payload.model_dump()
            else:
                data = dict(payload)
            data["metadata"] = self.sanitize_metadata(data.get("metadata") or {})
            event = AnalyticsEventPayload.model_validate(data)

            self.store.append(event)

            if settings.analytics_debug_logging:
                logger.debug(
                    "analytics_event_tracked",
                    event=event.event.value,
                    user_id=f"{event.user_id[:8]}..." if event.user_id else None,
                    role=event.user_role,
                    timestamp=event.timestamp.isoformat(),
                )
        except Exception as e:
            logger.error(
                "analytics_track_failed",
                error=str(e),
                error_type=type(e).__name__
            )

    def track_event_nowait(self, payload: Union[AnalyticsEventPayload, Mapping[str, Any]]):
        """Hand tracking off without waiting for it.

        Returns:
            The scheduled asyncio.Task inside a running loop, else None.
        """
        return fire_and_forget(self.track_event(payload), name="analytics_track_event")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_events(
        self,
        event: Optional[Union[AnalyticsEvent, str]] = None,
        user_id: Optional[str] = None,
        user_role: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        limit: Optional[int] = None
    ) -> List[AnalyticsEventPayload]:
        """Filter stored events, newest first.

        The date range is inclusive at both ends. ``limit`` truncates after
        sorting; None or 0 returns every match.
        """
        event_kind = AnalyticsEvent(event) if event is not None else None
        start = to_utc(start_date) if start_date is not None else None
        end = to_utc(end_date) if end_date is not None else None

        filtered = [
            e for e in self.store.snapshot()
            if (event_kind is None or e.event == event_kind)
            and (user_id is None or e.user_id == user_id)
            and (user_role is None or e.user_role == user_role)
            and (start is None or e.timestamp >= start)
            and (end is None or e.timestamp <= end)
        ]

        filtered.sort(key=lambda e: e.timestamp, reverse=True)

        if limit:
            filtered = filtered[:limit]

        return filtered

    def get_admin_dashboard_metrics(self, start_date: datetime, end_date: datetime) -> AdminDashboardMetrics:
        """Platform-wide metrics for the admin dashboard."""
        start, end = to_utc(start_date), to_utc(end_date)
        events = self.get_events(start_date=start, end_date=end)
        now = self.now()
        daily_cutoff = now - DAILY_ACTIVE_WINDOW
        monthly_cutoff = now - MONTHLY_ACTIVE_WINDOW

        role_counts: Dict[str, int] = defaultdict(int)
        seen_role_users = set()
        daily_active = set()
        monthly_active = set()
        search_events = []
        enquiry_events = []
        payments_total = payments_successful = payments_failed = 0
        revenue = 0
        profile_views = 0

        for e in events:
            if e.user_role and (e.user_role, e.user_id) not in seen_role_users:
                seen_role_users.add((e.user_role, e.user_id))
                bucket = ROLE_BUCKETS.get(e.user_role.lower())
                if bucket:
                    role_counts[bucket] += 1

            if e.user_id:
                if e.timestamp >= daily_cutoff:
                    daily_active.add(e.user_id)
                if e.timestamp >= monthly_cutoff:
                    monthly_active.add(e.user_id)

            if e.event in SEARCH_EVENTS:
                search_events.append(e)
            elif e.event == AnalyticsEvent.ENQUIRY_SUBMITTED:
                enquiry_events.append(e)
            elif e.event == AnalyticsEvent.PROFILE_VIEWED:
                profile_views += 1

            if e.event in PAYMENT_EVENTS:
                payments_total += 1
                if e.event == AnalyticsEvent.PAYMENT_SUCCESS:
                    payments_successful += 1
                    revenue += _payment_amount(e.metadata)
                elif e.event == AnalyticsEvent.PAYMENT_FAILED:
                    payments_failed += 1

        period = Period(start=start, end=end)
        funnel = ConversionFunnel(
            searches=len(search_events),
            profile_views=profile_views,
            enquiries=len(enquiry_events),
            payments=payments_successful,
            period=period,
            conversion_rates=ConversionRates(
                search_to_view=_conversion_rate(profile_views, len(search_events)),
                view_to_enquiry=_conversion_rate(len(enquiry_events), profile_views),
                enquiry_to_payment=_conversion_rate(payments_successful, len(enquiry_events)),
            ),
        )

        metrics = AdminDashboardMetrics(
            total_users=UserCounts(**role_counts),
            active_users=ActiveUsers(daily=len(daily_active), monthly=len(monthly_active)),
            searches=self._aggregate_daily(search_events, start, end),
            enquiries=self._aggregate_daily(enquiry_events, start, end),
            payments=PaymentSummary(
                total=payments_total,
                successful=payments_successful,
                failed=payments_failed,
                revenue=revenue,
                currency=settings.currency,
            ),
            conversion_funnel=funnel,
            time_series=self._generate_time_series(events, start, end),
        )

        logger.info(
            "admin_dashboard_metrics_computed",
            events=len(events),
            days=len(metrics.time_series.users),
            revenue=revenue,
        )
        return metrics

    def get_partner_analytics(self, partner_id: str, start_date: datetime, end_date: datetime) -> PartnerAnalytics:
        """Profile, enquiry and promotion metrics for one partner."""
        start, end = to_utc(start_date), to_utc(end_date)
        events = self.get_events(start_date=start, end_date=end)

        profile_views = self._count_entity_events(events, AnalyticsEvent.PROFILE_VIEWED, partner_id, ENTITY_PARTNER)
        received = self._count_entity_events(events, AnalyticsEvent.ENQUIRY_SUBMITTED, partner_id, ENTITY_PARTNER)
        responded = self._count_entity_events(events, AnalyticsEvent.ENQUIRY_RESPONDED, partner_id, ENTITY_PARTNER)
        promoted_views = sum(
            1 for e in events
            if e.event == AnalyticsEvent.PROFILE_VIEWED
            and e.metadata.get("entityId") == partner_id
            and e.metadata.get("isPromoted") is True
        )
        rating, feedback_count = self.insights.feedback(ENTITY_PARTNER, partner_id)

        return PartnerAnalytics(
            partner_id=partner_id,
            period=Period(start=start, end=end),
            profile_views=profile_views,
            enquiries_received=received,
            enquiries_responded=responded,
            response_rate=self._response_rate(responded, received),
            average_response_time=self.insights.average_response_hours(ENTITY_PARTNER, partner_id, responded),
            feedback_rating=rating,
            feedback_count=feedback_count,
            paid_promotion_views=promoted_views,
        )

    def get_dealer_analytics(self, dealer_id: str, start_date: datetime, end_date: datetime) -> DealerAnalytics:
        """Profile, map-click and enquiry metrics for one dealer."""
        start, end = to_utc(start_date), to_utc(end_date)
        events = self.get_events(start_date=start, end_date=end)

        views = [
            e for e in events
            if self._matches_entity(e, AnalyticsEvent.PROFILE_VIEWED, dealer_id, ENTITY_DEALER)
        ]
        map_clicks = sum(1 for e in views if e.metadata.get("source") == "map")
        received = self._count_entity_events(events, AnalyticsEvent.ENQUIRY_SUBMITTED, dealer_id, ENTITY_DEALER)
        responded = self._count_entity_events(events, AnalyticsEvent.ENQUIRY_RESPONDED, dealer_id, ENTITY_DEALER)
        rating, feedback_count = self.insights.feedback(ENTITY_DEALER, dealer_id)

        return DealerAnalytics(
            dealer_id=dealer_id,
            period=Period(start=start, end=end),
            profile_views=len(views),
            map_clicks=map_clicks,
            enquiries_received=received,
            enquiries_responded=responded,
            response_rate=self._response_rate(responded, received),
            average_response_time=self.insights.average_response_hours(ENTITY_DEALER, dealer_id, responded),
            feedback_rating=rating,
            feedback_count=feedback_count,
            average_distance=self.insights.average_distance_km(dealer_id),
        )

    def get_user_activity_report(
        self,
        start_date: datetime,
        end_date: datetime,
        user_id: Optional[str] = None
    ) -> List[UserActivityReport]:
        """Per-user activity totals for users seen in the range, ordered by user id."""
        start, end = to_utc(start_date), to_utc(end_date)
        events = self.get_events(user_id=user_id, start_date=start, end_date=end)
        period = Period(start=start, end=end)

        reports: Dict[str, UserActivityReport] = {}
        for e in events:
            if not e.user_id:
                continue
            report = reports.get(e.user_id)
            if report is None:
                report = reports[e.user_id] = UserActivityReport(user_id=e.user_id, period=period)
            # Events arrive newest first, so the first role seen is the latest
            if report.role is None and e.user_role:
                report.role = e.user_role.lower()

            if e.event == AnalyticsEvent.USER_LOGIN:
                report.total_logins += 1
                if report.last_login is None or e.timestamp > report.last_login:
                    report.last_login = e.timestamp
            elif e.event in SEARCH_EVENTS:
                report.total_searches += 1
            elif e.event == AnalyticsEvent.ENQUIRY_SUBMITTED:
                report.total_enquiries += 1
            elif e.event == AnalyticsEvent.PAYMENT_SUCCESS:
                report.total_payments += 1
                report.total_spent += _payment_amount(e.metadata)

        return [reports[key] for key in sorted(reports)]

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _matches_entity(
        e: AnalyticsEventPayload,
        event: AnalyticsEvent,
        entity_id: str,
        entity_type: str
    ) -> bool:
        return (
            e.event == event
            and e.metadata.get("entityId") == entity_id
            and e.metadata.get("entityType") == entity_type
        )

    def _count_entity_events(
        self,
        events: Iterable[AnalyticsEventPayload],
        event: AnalyticsEvent,
        entity_id: str,
        entity_type: str
    ) -> int:
        return sum(1 for e in events if self._matches_entity(e, event, entity_id, entity_type))

    @staticmethod
    def _response_rate(responded: int, received: int) -> float:
        if received <= 0:
            return 0
        return round_half_up((responded / received) * 100, 2)

    @staticmethod
    def _aggregate_daily(
        events: List[AnalyticsEventPayload],
        start: datetime,
        end: datetime
    ) -> AnalyticsAggregation:
        breakdown: Dict[str, int] = defaultdict(int)
        for e in events:
            breakdown[e.date_key] += 1
        return AnalyticsAggregation(
            total=len(events),
            period=AggregationPeriod.DAILY,
            start_date=start,
            end_date=end,
            breakdown=dict(breakdown),
        )

    @staticmethod
    def _generate_time_series(
        events: List[AnalyticsEventPayload],
        start: datetime,
        end: datetime
    ) -> DashboardTimeSeries:
        """Daily users/searches/enquiries/revenue, zero-filled for every day."""
        days = {
            key: {"users": set(), "searches": 0, "enquiries": 0, "revenue": 0}
            for key in _calendar_days(start, end)
        }

        for e in events:
            bucket = days.get(e.date_key)
            if bucket is None:
                continue
            if e.user_id:
                bucket["users"].add(e.user_id)
            if e.event in SEARCH_EVENTS:
                bucket["searches"] += 1
            if e.event == AnalyticsEvent.ENQUIRY_SUBMITTED:
                bucket["enquiries"] += 1
            if e.event == AnalyticsEvent.PAYMENT_SUCCESS:
                bucket["revenue"] += _payment_amount(e.metadata)

        ordered = sorted(days)
        return DashboardTimeSeries(
            users=[AnalyticsTimeSeries(date=key, value=len(days[key]["users"])) for key in ordered],
            searches=[AnalyticsTimeSeries(date=key, value=days[key]["searches"]) for key in ordered],
            enquiries=[AnalyticsTimeSeries(date=key, value=days[key]["enquiries"]) for key in ordered],
            revenue=[AnalyticsTimeSeries(date=key, value=days[key]["revenue"]) for key in ordered],
        )


# Process-wide instance for application code; tests construct their own
analytics_service = AnalyticsService()
