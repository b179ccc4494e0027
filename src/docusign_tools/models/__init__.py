"""Data models for DocuSign API payloads."""

from .schemas import (
    DocuSignModel,
    ErrorDetails,
    ConnectEventData,
    ConnectCustomConfiguration,
    ConnectConfigResults,
    UserInfo,
    IntegratedUserInfoList,
    BillingPaymentItem,
    BillingPaymentsResponse,
    BillingPaymentRequest,
    BillingPaymentResponse,
)

__all__ = [
    "DocuSignModel",
    "ErrorDetails",
    "ConnectEventData",
    "ConnectCustomConfiguration",
    "ConnectConfigResults",
    "UserInfo",
    "IntegratedUserInfoList",
    "BillingPaymentItem",
    "BillingPaymentsResponse",
    "BillingPaymentRequest",
    "BillingPaymentResponse",
]
