"""DocuSign API modules."""

from .client import DocuSignClient
from .connect import ConnectConfigurationsAPI
from .payments import PaymentsAPI

__all__ = [
    "DocuSignClient",
    "ConnectConfigurationsAPI",
    "PaymentsAPI",
]
