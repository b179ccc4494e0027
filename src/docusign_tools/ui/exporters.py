"""CSV export utilities for billing payments."""

import csv
from datetime import datetime
from decimal import Decimal
from io import StringIO
from typing import Optional

from ..models import BillingPaymentItem
from .tables import parse_amount


def generate_csv_filename(report_type: str) -> str:
    """
    Generate timestamp-based filename for CSV export.

    Args:
        report_type: Type of export (e.g., 'payments')

    Returns:
        Filename with timestamp (e.g., 'payments_20260129T143045.csv')
    """
    timestamp = datetime.now().strftime('%Y%m%dT%H%M%S')
    return f"{report_type}_{timestamp}.csv"


def export_payments_csv(payments: list[BillingPaymentItem], output: Optional[str]) -> str:
    """
    Export billing payments to CSV.

    Args:
        payments: Payments to export
        output: Optional output file path (auto-generates if None)

    Returns:
        Path to the exported CSV file
    """
    filepath = output or generate_csv_filename('payments')

    buffer = StringIO()
    writer = csv.writer(buffer)

    writer.writerow([
        "Payment ID",
        "Payment Number",
        "Date",
        "Description",
        "Amount",
    ])

    for payment in payments:
        writer.writerow([
            payment.payment_id or "",
            payment.payment_number or "",
            payment.payment_date or "",
            payment.description or "",
            f"{parse_amount(payment.amount):.2f}",
        ])

    total = sum((parse_amount(p.amount) for p in payments), Decimal("0"))
    writer.writerow(["TOTAL", "", "", "", f"{total:.2f}"])

    with open(filepath, "w", newline='') as f:
        f.write(buffer.getvalue())

    return filepath
