"""UI components for terminal output."""

from .tables import ConnectConfigTable, ConnectUserTable, PaymentTable
from .exporters import export_payments_csv

__all__ = [
    "ConnectConfigTable",
    "ConnectUserTable",
    "PaymentTable",
    "export_payments_csv",
]
