"""Input validation for payment operations.

Amounts are in paise. Validators return a ValidationResult and never raise.
"""

from typing import Dict, FrozenSet, Union

from pydantic import ValidationError as PydanticValidationError

from models.payment import PaymentCallback, PaymentService, PaymentStatus
from validators.result import ValidationResult

MIN_AMOUNT_PAISE = 100
MAX_AMOUNT_PAISE = 100_000_000
SUPPORTED_CURRENCIES = ("INR", "USD", "EUR")

# Allowed next states per payment status; refunded and cancelled are terminal
VALID_TRANSITIONS: Dict[PaymentStatus, FrozenSet[PaymentStatus]] = {
    PaymentStatus.CREATED: frozenset({PaymentStatus.PENDING, PaymentStatus.CANCELLED}),
    PaymentStatus.PENDING: frozenset({PaymentStatus.SUCCESS, PaymentStatus.FAILED, PaymentStatus.CANCELLED}),
    PaymentStatus.SUCCESS: frozenset({PaymentStatus.REFUNDED}),
    PaymentStatus.FAILED: frozenset({PaymentStatus.CREATED}),  # retry
    PaymentStatus.REFUNDED: frozenset(),
    PaymentStatus.CANCELLED: frozenset(),
}


def validate_amount(amount: int) -> ValidationResult:
    """Validate a payment amount in paise: at least ₹1.00, at most ₹10,00,000.00."""
    if amount <= 0:
        return ValidationResult.fail("Amount must be greater than 0")

    if amount < MIN_AMOUNT_PAISE:
        return ValidationResult.fail("Minimum payment amount is ₹1.00")

    if amount > MAX_AMOUNT_PAISE:
        return ValidationResult.fail("Amount exceeds maximum allowed")

    return ValidationResult.ok()


def validate_service(service: Union[PaymentService, str]) -> ValidationResult:
    try:
        PaymentService(service)
    except ValueError:
        return ValidationResult.fail("Invalid payment service")
    return ValidationResult.ok()


def _status_value(status: Union[PaymentStatus, str]) -> str:
    return status.value if isinstance(status, PaymentStatus) else str(status)


def validate_status_transition(
    current_status: Union[PaymentStatus, str],
    new_status: Union[PaymentStatus, str]
) -> ValidationResult:
    """Check a status change against the payment allow-list."""
    try:
        allowed = VALID_TRANSITIONS.get(PaymentStatus(current_status), frozenset())
        target = PaymentStatus(new_status)
    except ValueError:
        allowed, target = frozenset(), None

    if target not in allowed:
        return ValidationResult.fail(
            f"Cannot transition from {_status_value(current_status)} to {_status_value(new_status)}"
        )

    return ValidationResult.ok()


def validate_currency(currency: str) -> ValidationResult:
    if not currency or currency.upper() not in SUPPORTED_CURRENCIES:
        return ValidationResult.fail("Unsupported currency")
    return ValidationResult.ok()


def validate_callback_data(callback: Union[PaymentCallback, dict]) -> ValidationResult:
    """Check that a provider callback carries ids, signature and amount."""
    if isinstance(callback, dict):
        try:
            callback = PaymentCallback.model_validate(callback)
        except PydanticValidationError:
            return ValidationResult.fail("Invalid callback data")

    if not callback.payment_intent_id:
        return ValidationResult.fail("Payment intent ID is required")

    if not callback.provider_order_id:
        return ValidationResult.fail("Provider order ID is required")

    if not callback.provider_payment_id:
        return ValidationResult.fail("Provider payment ID is required")

    if not callback.signature:
        return ValidationResult.fail("Signature is required")

    if not callback.amount or callback.amount <= 0:
        return ValidationResult.fail("Valid amount is required")

    return ValidationResult.ok()
