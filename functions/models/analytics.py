"""Analytics models for BuildMarket.

Event payloads recorded by the analytics service and the aggregate
reports derived from them. Reports are recomputed on every query.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, field_validator

from models.base import CamelModel


# =============================================================================
# EVENT TAXONOMY
# =============================================================================


class AnalyticsEvent(str, Enum):
    """Event names. Emitters must use these verbatim."""

    # User Events
    APP_INSTALL = "app_install"
    APP_FIRST_OPEN = "app_first_open"
    USER_LOGIN = "user_login"
    USER_LOGOUT = "user_logout"

    # Search Events
    PARTNER_SEARCH = "partner_search"
    DEALER_SEARCH = "dealer_search"
    SEARCH_SAVED = "search_saved"

    # Profile Events
    PROFILE_VIEWED = "profile_viewed"
    PROFILE_UPDATED = "profile_updated"

    # Enquiry Events
    ENQUIRY_SUBMITTED = "enquiry_submitted"
    ENQUIRY_RESPONDED = "enquiry_responded"

    # Calculator Events
    CALCULATOR_USED = "calculator_used"
    BUDGET_ESTIMATION_USED = "budget_estimation_used"

    # Payment Events
    PAYMENT_INITIATED = "payment_initiated"
    PAYMENT_SUCCESS = "payment_success"
    PAYMENT_FAILED = "payment_failed"

    # Admin Events
    PARTNER_APPROVED = "partner_approved"
    PARTNER_REJECTED = "partner_rejected"
    DEALER_APPROVED = "dealer_approved"
    DEALER_REJECTED = "dealer_rejected"
    CONTENT_UPDATED = "content_updated"
    MANUAL_OVERRIDE = "manual_override"

    # Feedback Events
    FEEDBACK_SUBMITTED = "feedback_submitted"
    FEEDBACK_MODERATED = "feedback_moderated"


SEARCH_EVENTS = frozenset({AnalyticsEvent.PARTNER_SEARCH, AnalyticsEvent.DEALER_SEARCH})
PAYMENT_EVENTS = frozenset({
    AnalyticsEvent.PAYMENT_INITIATED,
    AnalyticsEvent.PAYMENT_SUCCESS,
    AnalyticsEvent.PAYMENT_FAILED,
})


class AggregationPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ALL = "all"


def to_utc(value: datetime) -> datetime:
    """Normalise a datetime to aware UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# =============================================================================
# EVENT PAYLOAD
# =============================================================================


class AnalyticsEventPayload(CamelModel):
    """A single tracked event. Metadata must carry ids only, never PII."""

    event: AnalyticsEvent
    user_id: Optional[str] = Field(default=None, alias="userId")
    user_role: Optional[str] = Field(default=None, alias="userRole")
    timestamp: datetime
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("timestamp")
    @classmethod
    def normalise_timestamp(cls, v: datetime) -> datetime:
        return to_utc(v)

    @field_validator("metadata", mode="before")
    @classmethod
    def default_metadata(cls, v):
        return {} if v is None else v

    @property
    def date_key(self) -> str:
        """UTC calendar day, YYYY-MM-DD."""
        return self.timestamp.date().isoformat()


# =============================================================================
# AGGREGATES
# =============================================================================


class Period(CamelModel):
    start: datetime
    end: datetime


class AnalyticsTimeSeries(CamelModel):
    date: str = Field(..., description="Calendar day, YYYY-MM-DD")
    value: Union[int, float]
    label: Optional[str] = None


class AnalyticsAggregation(CamelModel):
    total: int
    period: AggregationPeriod = AggregationPeriod.DAILY
    start_date: Optional[datetime] = Field(default=None, alias="startDate")
    end_date: Optional[datetime] = Field(default=None, alias="endDate")
    breakdown: Dict[str, int] = Field(default_factory=dict, description="Count per day")


class ConversionRates(CamelModel):
    """Stage-to-stage conversion percentages."""

    search_to_view: float = Field(..., alias="searchToView")
    view_to_enquiry: float = Field(..., alias="viewToEnquiry")
    enquiry_to_payment: float = Field(..., alias="enquiryToPayment")


class ConversionFunnel(CamelModel):
    searches: int
    profile_views: int = Field(..., alias="profileViews")
    enquiries: int
    payments: int
    period: Period
    conversion_rates: ConversionRates = Field(..., alias="conversionRates")


class UserCounts(CamelModel):
    general: int = 0
    partner: int = 0
    dealer: int = 0
    admin: int = 0


class ActiveUsers(CamelModel):
    daily: int
    monthly: int


class PaymentSummary(CamelModel):
    total: int
    successful: int
    failed: int
    revenue: Union[int, float]
    currency: str


class DashboardTimeSeries(CamelModel):
    users: List[AnalyticsTimeSeries]
    searches: List[AnalyticsTimeSeries]
    enquiries: List[AnalyticsTimeSeries]
    revenue: List[AnalyticsTimeSeries]


class AdminDashboardMetrics(CamelModel):
    total_users: UserCounts = Field(..., alias="totalUsers")
    active_users: ActiveUsers = Field(..., alias="activeUsers")
    searches: AnalyticsAggregation
    enquiries: AnalyticsAggregation
    payments: PaymentSummary
    conversion_funnel: ConversionFunnel = Field(..., alias="conversionFunnel")
    time_series: DashboardTimeSeries = Field(..., alias="timeSeries")


# =============================================================================
# ENTITY-SCOPED REPORTS
# =============================================================================


class PartnerAnalytics(CamelModel):
    partner_id: str = Field(..., alias="partnerId")
    period: Period
    profile_views: int = Field(..., alias="profileViews")
    enquiries_received: int = Field(..., alias="enquiriesReceived")
    enquiries_responded: int = Field(..., alias="enquiriesResponded")
    response_rate: float = Field(..., alias="responseRate", description="Percentage")
    average_response_time: float = Field(..., alias="averageResponseTime", description="Hours")
    feedback_rating: float = Field(..., alias="feedbackRating")
    feedback_count: int = Field(..., alias="feedbackCount")
    paid_promotion_views: Optional[int] = Field(default=None, alias="paidPromotionViews")


class DealerAnalytics(CamelModel):
    dealer_id: str = Field(..., alias="dealerId")
    period: Period
    profile_views: int = Field(..., alias="profileViews")
    map_clicks: int = Field(..., alias="mapClicks")
    enquiries_received: int = Field(..., alias="enquiriesReceived")
    enquiries_responded: int = Field(..., alias="enquiriesResponded")
    response_rate: float = Field(..., alias="responseRate", description="Percentage")
    average_response_time: float = Field(..., alias="averageResponseTime", description="Hours")
    feedback_rating: float = Field(..., alias="feedbackRating")
    feedback_count: int = Field(..., alias="feedbackCount")
    average_distance: float = Field(..., alias="averageDistance", description="Kilometres")


class UserActivityReport(CamelModel):
    user_id: str = Field(..., alias="userId")
    role: Optional[str] = None
    total_logins: int = Field(default=0, alias="totalLogins")
    last_login: Optional[datetime] = Field(default=None, alias="lastLogin")
    total_searches: int = Field(default=0, alias="totalSearches")
    total_enquiries: int = Field(default=0, alias="totalEnquiries")
    total_payments: int = Field(default=0, alias="totalPayments")
    total_spent: Union[int, float] = Field(default=0, alias="totalSpent")
    period: Period
