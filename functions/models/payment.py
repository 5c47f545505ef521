"""Payment models for BuildMarket.

Amounts are in the smallest currency unit (paise for INR).
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from models.base import CamelModel


class PaymentStatus(str, Enum):
    """Payment intent lifecycle state."""

    CREATED = "created"
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"


class PaymentProvider(str, Enum):
    RAZORPAY = "razorpay"
    STRIPE = "stripe"


class PaymentService(str, Enum):
    """Paid products offered on the marketplace."""

    # General user services
    BUDGET_ESTIMATION_REPORT = "budget_estimation_report"
    PREMIUM_CALCULATOR = "premium_calculator"
    VISUALIZATION_SERVICE = "visualization_service"

    # Partner/dealer services
    FEATURED_LISTING = "featured_listing"
    SUBSCRIPTION_BASIC = "subscription_basic"
    SUBSCRIPTION_PREMIUM = "subscription_premium"


class PaymentType(str, Enum):
    ONE_TIME = "one_time"
    SUBSCRIPTION = "subscription"


class ServicePricing(CamelModel):
    service: PaymentService
    amount: int = Field(..., description="Price in paise")
    currency: str = "INR"
    name: str
    description: str
    type: PaymentType
    duration_days: Optional[int] = Field(default=None, alias="durationDays")


class PaymentCallback(CamelModel):
    """Provider callback after checkout."""

    payment_intent_id: str = Field(default="", alias="paymentIntentId")
    provider_order_id: str = Field(default="", alias="providerOrderId")
    provider_payment_id: str = Field(default="", alias="providerPaymentId")
    signature: str = ""
    status: str = "success"
    amount: int = 0
    currency: str = "INR"
    metadata: Optional[Dict[str, Any]] = None
