"""Service pricing table for marketplace payments.

Amounts are in paise. Admins may override prices elsewhere; these are the
defaults.
"""

from typing import Dict, Union

from config.errors import BuildMarketError, ErrorCode
from models.payment import PaymentService, PaymentType, ServicePricing
from utils.formatters import RUPEE, format_indian_number

DEFAULT_SERVICE_PRICING: Dict[PaymentService, ServicePricing] = {
    PaymentService.BUDGET_ESTIMATION_REPORT: ServicePricing(
        service=PaymentService.BUDGET_ESTIMATION_REPORT,
        amount=50000,  # ₹500.00
        name="Budget Estimation Report",
        description="Detailed budget estimation report with cost breakdown",
        type=PaymentType.ONE_TIME,
    ),
    PaymentService.PREMIUM_CALCULATOR: ServicePricing(
        service=PaymentService.PREMIUM_CALCULATOR,
        amount=100000,  # ₹1,000.00
        name="Premium Calculator Access",
        description="Unlimited access to premium construction calculators",
        type=PaymentType.ONE_TIME,
    ),
    PaymentService.VISUALIZATION_SERVICE: ServicePricing(
        service=PaymentService.VISUALIZATION_SERVICE,
        amount=250000,  # ₹2,500.00
        name="VR/3D Visualization Service",
        description="Professional VR/3D visualization of your construction project",
        type=PaymentType.ONE_TIME,
    ),
    PaymentService.FEATURED_LISTING: ServicePricing(
        service=PaymentService.FEATURED_LISTING,
        amount=500000,  # ₹5,000.00
        name="Featured Listing",
        description="Feature your profile prominently for 30 days",
        type=PaymentType.ONE_TIME,
        duration_days=30,
    ),
    PaymentService.SUBSCRIPTION_BASIC: ServicePricing(
        service=PaymentService.SUBSCRIPTION_BASIC,
        amount=1000000,  # ₹10,000.00
        name="Basic Subscription",
        description="Basic subscription plan with essential features",
        type=PaymentType.SUBSCRIPTION,
        duration_days=30,
    ),
    PaymentService.SUBSCRIPTION_PREMIUM: ServicePricing(
        service=PaymentService.SUBSCRIPTION_PREMIUM,
        amount=2000000,  # ₹20,000.00
        name="Premium Subscription",
        description="Premium subscription plan with all features",
        type=PaymentType.SUBSCRIPTION,
        duration_days=30,
    ),
}


def get_service_pricing(service: Union[PaymentService, str]) -> ServicePricing:
    """Pricing entry for a service.

    Raises:
        BuildMarketError: PAYMENT_UNKNOWN_SERVICE if the service is unknown.
    """
    try:
        return DEFAULT_SERVICE_PRICING[PaymentService(service)]
    except ValueError:
        raise BuildMarketError(
            code=ErrorCode.PAYMENT_UNKNOWN_SERVICE,
            message=f"Unknown payment service: {service}",
            details={"service": str(service)}
        )


def format_amount(amount: int, currency: str = "INR") -> str:
    """Format a paise amount for display, e.g. ₹1,00,000.00."""
    if currency == "INR":
        return f"{RUPEE}{format_indian_number(amount / 100, 2, 2)}"
    return f"{amount / 100:.2f} {currency}"
