"""Rich table formatters for CLI output."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..models import BillingPaymentItem, ConnectCustomConfiguration, UserInfo


def parse_amount(value: Optional[str]) -> Decimal:
    """Parse a DocuSign amount string, treating blanks and junk as zero."""
    if not value:
        return Decimal("0")
    try:
        return Decimal(value.replace(",", ""))
    except InvalidOperation:
        return Decimal("0")


class ConnectConfigTable:
    """Rich table formatter for Connect configurations."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_table(
        self,
        configurations: list[ConnectCustomConfiguration],
        title: Optional[str] = None,
    ) -> Table:
        """Create a Rich table from Connect configurations."""
        table = Table(title=title)

        table.add_column("Connect ID", style="cyan", no_wrap=True)
        table.add_column("Name", style="green")
        table.add_column("Type", style="dim")
        table.add_column("URL", style="blue", max_width=50)
        table.add_column("Enabled", justify="center")
        table.add_column("All Users", justify="center")

        for cfg in configurations:
            enabled = Text("yes", style="green") if cfg.is_enabled else Text("no", style="red")
            table.add_row(
                cfg.connect_id or "-",
                cfg.name or "-",
                cfg.configuration_type or "-",
                cfg.url_to_publish_to or "-",
                enabled,
                cfg.all_users or "-",
            )

        return table

    def print_table(
        self,
        configurations: list[ConnectCustomConfiguration],
        title: Optional[str] = None,
    ) -> None:
        """Print the Connect configurations table."""
        self.console.print(self.create_table(configurations, title))

    def print_detail(self, cfg: ConnectCustomConfiguration) -> None:
        """Print detailed Connect configuration information."""
        self.console.print()
        self.console.print(f"[bold]Connect configuration {cfg.name or cfg.connect_id}[/bold]")
        self.console.print(f"  Connect ID: [cyan]{cfg.connect_id or 'N/A'}[/cyan]")
        self.console.print(f"  URL: [blue]{cfg.url_to_publish_to or 'N/A'}[/blue]")
        self.console.print(f"  Type: {cfg.configuration_type or 'N/A'}")
        self.console.print(f"  Delivery mode: {cfg.delivery_mode or 'N/A'}")
        self.console.print(f"  Enabled: {'yes' if cfg.is_enabled else 'no'}")
        self.console.print(f"  All users: {cfg.all_users or 'N/A'}")
        if cfg.envelope_events:
            self.console.print(f"  Envelope events: {', '.join(cfg.envelope_events)}")
        if cfg.recipient_events:
            self.console.print(f"  Recipient events: {', '.join(cfg.recipient_events)}")
        if cfg.event_data:
            self.console.print(
                f"  Event data: {cfg.event_data.format or '-'} {cfg.event_data.version or ''}".rstrip()
            )


class ConnectUserTable:
    """Rich table formatter for users visible to a Connect configuration."""

    STATUS_COLORS = {
        "active": "green",
        "activationrequired": "yellow",
        "activationsent": "cyan",
        "closed": "dim",
        "disabled": "red",
    }

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def get_status_style(self, status: str) -> str:
        """Get Rich style for user status."""
        return self.STATUS_COLORS.get(status.lower(), "white")

    def create_table(self, users: list[UserInfo], title: Optional[str] = None) -> Table:
        """Create a Rich table from users."""
        table = Table(title=title)

        table.add_column("User ID", style="cyan", no_wrap=True)
        table.add_column("Name", style="green")
        table.add_column("Email")
        table.add_column("Status", justify="center")

        for user in users:
            status = user.user_status or "-"
            table.add_row(
                user.user_id or "-",
                user.user_name or "-",
                user.email or "-",
                Text(status, style=self.get_status_style(status)),
            )

        return table

    def print_table(self, users: list[UserInfo], title: Optional[str] = None) -> None:
        """Print the users table."""
        self.console.print(self.create_table(users, title))


class PaymentTable:
    """Rich table formatter for billing payments."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_table(
        self,
        payments: list[BillingPaymentItem],
        title: Optional[str] = None,
    ) -> Table:
        """Create a Rich table from payments."""
        table = Table(title=title, show_footer=True)

        table.add_column("Payment ID", style="cyan", no_wrap=True)
        table.add_column("Number", style="dim")
        table.add_column("Date", style="dim")
        table.add_column("Description")
        table.add_column("Amount", justify="right", style="green")

        total_amount = Decimal("0")
        for payment in payments:
            amount = parse_amount(payment.amount)
            total_amount += amount
            table.add_row(
                payment.payment_id or "-",
                payment.payment_number or "-",
                payment.payment_date or "-",
                payment.description or "-",
                f"${amount:.2f}",
            )

        table.columns[3].footer = Text("TOTAL", style="bold")
        table.columns[4].footer = Text(f"${total_amount:.2f}", style="bold green")

        return table

    def print_table(
        self,
        payments: list[BillingPaymentItem],
        title: Optional[str] = None,
    ) -> None:
        """Print the payments table."""
        self.console.print(self.create_table(payments, title))

    def print_payment_detail(self, payment: BillingPaymentItem) -> None:
        """Print detailed payment information."""
        self.console.print()
        self.console.print(f"[bold]Payment {payment.payment_number or payment.payment_id}[/bold]")
        self.console.print(f"  Payment ID: [cyan]{payment.payment_id or 'N/A'}[/cyan]")
        self.console.print(f"  Date: {payment.payment_date or 'N/A'}")
        self.console.print(f"  Description: {payment.description or 'N/A'}")
        self.console.print(f"  [bold green]Amount:[/bold green] ${parse_amount(payment.amount):.2f}")
