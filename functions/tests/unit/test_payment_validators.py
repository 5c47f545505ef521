"""
Unit Tests for payment validators.

Tests:
- Amount bounds in paise
- Status transition allow-list
- Service, currency and callback checks
"""

import itertools

import pytest

from models.payment import PaymentCallback, PaymentService, PaymentStatus
from validators.payment_validators import (
    VALID_TRANSITIONS,
    validate_amount,
    validate_callback_data,
    validate_currency,
    validate_service,
    validate_status_transition,
)


# =============================================================================
# Amount
# =============================================================================


@pytest.mark.parametrize("amount,error", [
    (0, "Amount must be greater than 0"),
    (-100, "Amount must be greater than 0"),
    (99, "Minimum payment amount is ₹1.00"),
    (100_000_001, "Amount exceeds maximum allowed"),
])
def test_amount_invalid(amount, error):
    assert validate_amount(amount).error == error


@pytest.mark.parametrize("amount", [100, 50000, 100_000_000])
def test_amount_valid(amount):
    assert validate_amount(amount).valid


# =============================================================================
# Status transitions
# =============================================================================


ALLOWED = {
    ("created", "pending"),
    ("created", "cancelled"),
    ("pending", "success"),
    ("pending", "failed"),
    ("pending", "cancelled"),
    ("success", "refunded"),
    ("failed", "created"),
}


@pytest.mark.parametrize(
    "current,new",
    list(itertools.product([s.value for s in PaymentStatus], repeat=2)),
)
def test_status_transition_matches_allow_list(current, new):
    result = validate_status_transition(current, new)

    assert result.valid == ((current, new) in ALLOWED)
    if not result.valid:
        assert result.error == f"Cannot transition from {current} to {new}"


def test_terminal_states_have_no_transitions():
    assert VALID_TRANSITIONS[PaymentStatus.REFUNDED] == frozenset()
    assert VALID_TRANSITIONS[PaymentStatus.CANCELLED] == frozenset()


def test_status_transition_accepts_enum_members():
    assert validate_status_transition(PaymentStatus.PENDING, PaymentStatus.SUCCESS).valid
    assert (
        validate_status_transition(PaymentStatus.SUCCESS, PaymentStatus.PENDING).error
        == "Cannot transition from success to pending"
    )


def test_status_transition_unknown_status():
    assert not validate_status_transition("created", "teleported").valid


# =============================================================================
# Service & currency
# =============================================================================


def test_service():
    assert validate_service(PaymentService.FEATURED_LISTING).valid
    assert validate_service("subscription_premium").valid
    assert validate_service("gold_plan").error == "Invalid payment service"


@pytest.mark.parametrize("currency", ["INR", "usd", "Eur"])
def test_currency_supported(currency):
    assert validate_currency(currency).valid


@pytest.mark.parametrize("currency", ["GBP", ""])
def test_currency_unsupported(currency):
    assert validate_currency(currency).error == "Unsupported currency"


# =============================================================================
# Callback
# =============================================================================


@pytest.fixture
def callback_data():
    return {
        "paymentIntentId": "pi_123",
        "providerOrderId": "order_456",
        "providerPaymentId": "pay_789",
        "signature": "sig",
        "status": "success",
        "amount": 50000,
        "currency": "INR",
    }


def test_callback_valid(callback_data):
    assert validate_callback_data(callback_data).valid
    assert validate_callback_data(PaymentCallback.model_validate(callback_data)).valid


@pytest.mark.parametrize("field,error", [
    ("paymentIntentId", "Payment intent ID is required"),
    ("providerOrderId", "Provider order ID is required"),
    ("providerPaymentId", "Provider payment ID is required"),
    ("signature", "Signature is required"),
])
def test_callback_missing_field(callback_data, field, error):
    del callback_data[field]

    assert validate_callback_data(callback_data).error == error


def test_callback_requires_positive_amount(callback_data):
    callback_data["amount"] = 0

    assert validate_callback_data(callback_data).error == "Valid amount is required"


def test_callback_malformed(callback_data):
    callback_data["amount"] = "lots"

    assert validate_callback_data(callback_data).error == "Invalid callback data"
