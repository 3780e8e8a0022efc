"""
API Models - Pydantic models for the Swish wire format.

Field names are snake_case in Python and camelCase on the wire. Optional
request fields that are None are omitted from the JSON body entirely,
because Swish treats an explicit null differently from an absent field.
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Currency(str, Enum):
    """Currencies accepted by Swish."""

    SEK = "SEK"  # Only currency Swish supports


class Status(str, Enum):
    """Lifecycle status reported by Swish for a payment or refund."""

    CREATED = "CREATED"
    PAID = "PAID"
    ERROR = "ERROR"
    VALIDATED = "VALIDATED"
    INITIATED = "INITIATED"


class ErrorCode(str, Enum):
    """Error codes returned by the payment request and refund endpoints."""

    FF08 = "FF08"  # PayeePaymentReference is invalid
    FF10 = "FF10"  # Bank system processing error
    RP01 = "RP01"  # Payee alias is missing or empty
    RP02 = "RP02"  # Wrong formatted message
    RP03 = "RP03"  # Callback URL is missing or does not use https
    RP04 = "RP04"  # No payment request found related to a token
    RP06 = "RP06"  # Another active payment request already exists for this payerAlias
    RP09 = "RP09"  # The given instruction UUID is not available
    BE18 = "BE18"  # Payer alias is invalid
    PA01 = "PA01"  # Parameter is not correct
    PA02 = "PA02"  # Amount value is missing or not a valid number
    AM02 = "AM02"  # Amount value is too large
    AM03 = "AM03"  # Invalid or missing currency
    AM06 = "AM06"  # Amount value is too low
    ACMT01 = "ACMT01"  # Counterpart is not activated
    ACMT03 = "ACMT03"  # Payer not enrolled
    ACMT07 = "ACMT07"  # Payee not enrolled
    RF02 = "RF02"  # Original payment not found or more than 13 months old
    RF03 = "RF03"  # Payer alias does not match the payee alias of the original payment
    RF04 = "RF04"  # Payer organization number does not match the original payment
    RF06 = "RF06"  # Payer SSN does not match the original payment payee SSN
    RF07 = "RF07"  # Transaction declined
    RF08 = "RF08"  # Amount exceeds the original payment minus previous refunds
    RF09 = "RF09"  # Refund already in progress
    TM01 = "TM01"  # Swish timed out before the payment was started
    DS24 = "DS24"  # Swish timed out waiting for an answer from the banks
    VR01 = "VR01"  # Payer does not meet the age limit
    VR02 = "VR02"  # Payer alias is not linked to the required identity
    BANKIDCL = "BANKIDCL"  # Payer cancelled BankID signing
    BANKIDONGOING = "BANKIDONGOING"  # BankID already in use
    BANKIDUNKN = "BANKIDUNKN"  # BankID cannot authorize the payment


class SwishModel(BaseModel):
    """Base for camelCase wire models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """JSON-compatible dict as sent to Swish, None fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """JSON body as sent to Swish, None fields omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


# ============================================================================
# Request Models
# ============================================================================


class PaymentParams(SwishModel):
    """POST /paymentrequests request body.

    payee_alias is always replaced with the merchant number by SwishClient.
    """

    payee_payment_reference: str | None = None
    payer_alias: str | None = None  # Set for e-commerce, omit for m-commerce
    payee_alias: str = ""
    amount: float = Field(gt=0, allow_inf_nan=False)
    currency: Currency = Currency.SEK
    message: str | None = None
    callback_url: str


class RefundParams(SwishModel):
    """POST /refunds request body.

    payer_alias is always replaced with the merchant number by SwishClient.
    """

    payer_payment_reference: str | None = None
    original_payment_reference: str
    payment_reference: str | None = None
    payer_alias: str = ""
    payee_alias: str | None = None
    amount: float = Field(gt=0, allow_inf_nan=False)
    currency: Currency = Currency.SEK
    message: str | None = None
    callback_url: str


# ============================================================================
# Response Models
# ============================================================================


class Payment(SwishModel):
    """GET /paymentrequests/{id} response body."""

    id: str
    amount: float
    payee_payment_reference: str | None = None
    payment_reference: str | None = None
    payer_alias: str | None = None
    payee_alias: str | None = None
    message: str | None = None
    status: Status | None = None
    date_created: str
    currency: Currency
    date_paid: str | None = None
    error_code: str | None = None
    error_message: str | None = None


class Refund(SwishModel):
    """GET /refunds/{id} response body."""

    id: str
    amount: float
    payer_payment_reference: str | None = None
    # Swish has spelled this key with a lower-case "p" in refund responses
    original_payment_reference: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "originalPaymentReference",
            "originalpaymentReference",
            "original_payment_reference",
        ),
    )
    payer_alias: str | None = None
    payee_alias: str | None = None
    message: str | None = None
    status: Status | None = None
    date_created: str
    currency: Currency
    date_paid: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    additional_information: str | None = None


class ProviderErrorPayload(SwishModel):
    """One error object as Swish returns it; HTTP status is not part of it."""

    error_code: ErrorCode | None = None
    error_message: str
    additional_information: str | None = None
