"""Billing payments API module."""

from ..models import BillingPaymentItem, BillingPaymentRequest, BillingPaymentResponse, BillingPaymentsResponse
from .client import DocuSignClient
from .urls import build_query, encode_path


class PaymentsAPI:
    """API for account billing payments. Requires account administrator privileges."""

    def __init__(self, client: DocuSignClient):
        self.client = client

    async def list_payments(
        self,
        account_id: str,
        from_date: str = "",
        to_date: str = "",
    ) -> BillingPaymentsResponse:
        """
        List payments for an account.

        Without from_date or to_date the server returns the last 365 days.

        Args:
            account_id: Account ID
            from_date: Date/time of the earliest payment to retrieve
            to_date: Date/time of the latest payment to retrieve

        Returns:
            BillingPaymentsResponse
        """
        query = build_query([
            ("from_date", from_date),
            ("to_date", to_date),
        ])
        url = f"/v2.1/accounts/{encode_path(account_id)}/billing_payments?{query}"
        return await self.client.get(url, BillingPaymentsResponse)

    async def post_payment(self, account_id: str, request: BillingPaymentRequest) -> BillingPaymentResponse:
        """
        Post a payment to a past due invoice.

        The server only accepts this when the invoice's paymentAllowed flag
        is true; nothing is checked locally.
        """
        url = f"/v2.1/accounts/{encode_path(account_id)}/billing_payments"
        return await self.client.post(url, request, BillingPaymentResponse)

    async def get_payment(self, account_id: str, payment_id: str) -> BillingPaymentItem:
        """Get a single payment."""
        url = f"/v2.1/accounts/{encode_path(account_id)}/billing_payments/{encode_path(payment_id)}"
        return await self.client.get(url, BillingPaymentItem)
