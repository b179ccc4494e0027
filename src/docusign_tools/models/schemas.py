"""Pydantic models for DocuSign eSignature API payloads.

DocuSign serializes booleans and numbers as strings and omits empty
properties, so scalar fields are optional strings.
"""

from typing import Any, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class DocuSignModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase wire names."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_body(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict using wire names, skipping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ErrorDetails(DocuSignModel):
    """Error code and message, as returned in DocuSign error bodies."""

    error_code: Optional[str] = None
    message: Optional[str] = None


class ConnectEventData(DocuSignModel):
    """Payload format settings for Connect event notifications."""

    format: Optional[str] = None
    include_data: Optional[list[str]] = None
    version: Optional[str] = None


class ConnectCustomConfiguration(DocuSignModel):
    """A DocuSign Custom Connect definition."""

    connect_id: Optional[str] = None
    name: Optional[str] = None
    url_to_publish_to: Optional[str] = None
    configuration_type: Optional[str] = None
    delivery_mode: Optional[str] = None
    all_users: Optional[str] = None
    allow_envelope_publish: Optional[str] = None
    enable_log: Optional[str] = None
    include_documents: Optional[str] = None
    include_certificate_of_completion: Optional[str] = None
    include_envelope_void_reason: Optional[str] = None
    include_sender_account_as_custom_field: Optional[str] = None
    include_time_zone_information: Optional[str] = None
    requires_acknowledgement: Optional[str] = None
    sign_message_with_x509_certificate: Optional[str] = None
    use_soap_interface: Optional[str] = None
    soap_namespace: Optional[str] = None
    user_name: Optional[str] = None
    password: Optional[str] = None
    sender_override: Optional[str] = None
    sender_selectable_items: Optional[list[str]] = None
    envelope_events: Optional[list[str]] = None
    recipient_events: Optional[list[str]] = None
    user_ids: Optional[list[str]] = None
    event_data: Optional[ConnectEventData] = None

    @property
    def is_enabled(self) -> bool:
        """Whether envelopes are published to the listener URL."""
        return (self.allow_envelope_publish or "").lower() == "true"


class ConnectConfigResults(DocuSignModel):
    """List of Connect configurations for an account."""

    configurations: list[ConnectCustomConfiguration] = []
    total_records: Optional[str] = None


class UserInfo(DocuSignModel):
    """A user visible to the Connect service."""

    user_id: Optional[str] = None
    user_name: Optional[str] = None
    email: Optional[str] = None
    user_status: Optional[str] = None
    user_type: Optional[str] = None
    login_status: Optional[str] = None
    membership_id: Optional[str] = None
    uri: Optional[str] = None
    activation_access_code: Optional[str] = None
    send_activation_email: Optional[str] = None
    error_details: Optional[ErrorDetails] = None


class IntegratedUserInfoList(DocuSignModel):
    """A page of users returned by the Connect users query."""

    users: list[UserInfo] = []
    all_users_selected: Optional[str] = None
    end_position: Optional[str] = None
    next_uri: Optional[str] = None
    previous_uri: Optional[str] = None
    result_set_size: Optional[str] = None
    start_position: Optional[str] = None
    total_set_size: Optional[str] = None


class BillingPaymentItem(DocuSignModel):
    """A single billing payment."""

    amount: Optional[str] = None
    description: Optional[str] = None
    payment_date: Optional[str] = None
    payment_id: Optional[str] = None
    payment_number: Optional[str] = None


class BillingPaymentsResponse(DocuSignModel):
    """A list of billing payments."""

    billing_payments: list[BillingPaymentItem] = []
    next_uri: Optional[str] = None
    previous_uri: Optional[str] = None


class BillingPaymentRequest(DocuSignModel):
    """Payment to post against a past due invoice."""

    invoice_id: Optional[str] = None
    payment_amount: Optional[str] = None
    payment_id: Optional[str] = None


class BillingPaymentResponse(DocuSignModel):
    """Result of posting a payment."""

    billing_payments: list[BillingPaymentItem] = []
