"""CLI entry point for DocuSign tools."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console

from .api.client import DocuSignClient
from .api.connect import ConnectConfigurationsAPI
from .api.payments import PaymentsAPI
from .config import Config, load_config, load_settings_file, save_settings
from .models import BillingPaymentRequest, ConnectCustomConfiguration, DocuSignModel
from .ui.exporters import export_payments_csv
from .ui.tables import ConnectConfigTable, ConnectUserTable, PaymentTable

console = Console()

account_option = click.option(
    "--account-id",
    "-a",
    help="Account ID (defaults to DOCUSIGN_ACCOUNT_ID or the settings file)",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")


def get_config(ctx: click.Context) -> Config:
    """Load configuration and apply global CLI flags."""
    config = load_config()
    config.verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    return config


def run_api(config: Config, api_cls, method: str, *args, **kwargs):
    """Run one API coroutine on a fresh client."""

    async def call():
        async with DocuSignClient(config) as client:
            return await getattr(api_cls(client), method)(*args, **kwargs)

    return asyncio.run(call())


def print_json(model: DocuSignModel) -> None:
    """Print a model as JSON using DocuSign wire names."""
    print(json.dumps(model.to_body(), indent=2))


def read_configuration_file(path: str) -> ConnectCustomConfiguration:
    """Load a Connect configuration from a JSON file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise click.BadParameter(f"Could not read {path}: {e}", param_hint="--file")
    try:
        return ConnectCustomConfiguration.model_validate_json(text)
    except ValidationError as e:
        raise click.BadParameter(f"Invalid Connect configuration in {path}: {e}", param_hint="--file")


@click.group()
@click.version_option(package_name="docusign-tools")
@click.option("--verbose", "-v", is_flag=True, help="Trace API requests to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """DocuSign CLI tools for Connect configurations and billing payments."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.group()
def connect():
    """Connect configuration commands."""
    pass


@connect.command("list")
@account_option
@json_option
@click.pass_context
def connect_list(ctx: click.Context, account_id: Optional[str], as_json: bool):
    """List Custom Connect configurations."""
    config = get_config(ctx)
    account_id = config.require_account_id(account_id)

    results = run_api(config, ConnectConfigurationsAPI, "get_config", account_id)

    if as_json:
        print_json(results)
        return

    if not results.configurations:
        console.print("[yellow]No Connect configurations found.[/yellow]")
        return

    ConnectConfigTable(console).print_table(results.configurations, title="Connect configurations")


@connect.command("show")
@click.argument("connect_id")
@account_option
@json_option
@click.pass_context
def connect_show(ctx: click.Context, connect_id: str, account_id: Optional[str], as_json: bool):
    """Show details for a Connect configuration."""
    config = get_config(ctx)
    account_id = config.require_account_id(account_id)

    results = run_api(config, ConnectConfigurationsAPI, "get_config_by_id", account_id, connect_id)

    if as_json:
        print_json(results)
        return

    if not results.configurations:
        console.print(f"[red]Connect configuration '{connect_id}' not found.[/red]")
        sys.exit(1)

    table = ConnectConfigTable(console)
    for cfg in results.configurations:
        table.print_detail(cfg)


@connect.command("create")
@click.option("--file", "-f", "path", required=True, type=click.Path(exists=True, dir_okay=False), help="JSON configuration file")
@account_option
@json_option
@click.pass_context
def connect_create(ctx: click.Context, path: str, account_id: Optional[str], as_json: bool):
    """Create a Connect configuration from a JSON file."""
    config = get_config(ctx)
    account_id = config.require_account_id(account_id)
    body = read_configuration_file(path)

    created = run_api(config, ConnectConfigurationsAPI, "post_configuration", account_id, body)

    if as_json:
        print_json(created)
        return

    console.print(f"[green]Created Connect configuration {created.connect_id}[/green]")


@connect.command("update")
@click.option("--file", "-f", "path", required=True, type=click.Path(exists=True, dir_okay=False), help="JSON configuration file")
@click.option("--connect-id", help="Connect ID to update (overrides the file)")
@account_option
@json_option
@click.pass_context
def connect_update(ctx: click.Context, path: str, connect_id: Optional[str], account_id: Optional[str], as_json: bool):
    """Update a Connect configuration from a JSON file."""
    config = get_config(ctx)
    account_id = config.require_account_id(account_id)
    body = read_configuration_file(path)
    if connect_id:
        body = body.model_copy(update={"connect_id": connect_id})
    if not body.connect_id:
        raise click.UsageError("The configuration needs a connectId (or pass --connect-id)")

    updated = run_api(config, ConnectConfigurationsAPI, "put_configuration", account_id, body)

    if as_json:
        print_json(updated)
        return

    console.print(f"[green]Updated Connect configuration {updated.connect_id or body.connect_id}[/green]")


@connect.command("delete")
@click.argument("connect_id")
@account_option
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def connect_delete(ctx: click.Context, connect_id: str, account_id: Optional[str], yes: bool):
    """Delete a Connect configuration."""
    config = get_config(ctx)
    account_id = config.require_account_id(account_id)

    if not yes:
        click.confirm(f"Delete Connect configuration {connect_id}?", abort=True)

    run_api(config, ConnectConfigurationsAPI, "delete_config", account_id, connect_id)
    console.print(f"[green]Deleted Connect configuration {connect_id}[/green]")


@connect.command("users")
@click.argument("connect_id")
@account_option
@click.option("--count", default="", help="Maximum number of users to return")
@click.option("--email", "email_substring", default="", help="Filter by full or partial email")
@click.option("--include-users", "list_included_users", default="", help="'true' to list only users included in the configuration")
@click.option("--start", "start_position", default="", help="Start position in the result set")
@click.option("--status", default="", help="Comma-separated statuses (Active, Closed, Disabled, ...)")
@click.option("--user-name", "user_name_substring", default="", help="Filter by full or partial user name")
@json_option
@click.pass_context
def connect_users(
    ctx: click.Context,
    connect_id: str,
    account_id: Optional[str],
    count: str,
    email_substring: str,
    list_included_users: str,
    start_position: str,
    status: str,
    user_name_substring: str,
    as_json: bool,
):
    """List users visible to a Connect configuration."""
    config = get_config(ctx)
    account_id = config.require_account_id(account_id)

    users = run_api(
        config,
        ConnectConfigurationsAPI,
        "get_users",
        account_id,
        connect_id,
        count=count,
        email_substring=email_substring,
        list_included_users=list_included_users,
        start_position=start_position,
        status=status,
        user_name_substring=user_name_substring,
    )

    if as_json:
        print_json(users)
        return

    if not users.users:
        console.print("[yellow]No users found.[/yellow]")
        return

    ConnectUserTable(console).print_table(users.users, title=f"Connect users - {connect_id}")
    if users.total_set_size:
        console.print(f"[dim]Showing {users.result_set_size or len(users.users)} of {users.total_set_size}[/dim]")


@cli.group()
def payments():
    """Billing payment commands."""
    pass


@payments.command("list")
@account_option
@click.option("--from-date", default="", help="Earliest payment date (defaults to 365 days ago)")
@click.option("--to-date", default="", help="Latest payment date")
@json_option
@click.option("--export", type=click.Choice(["csv"]), help="Export format")
@click.option("--output", "-o", help="Output file path (default: auto-generated)")
@click.pass_context
def payments_list(
    ctx: click.Context,
    account_id: Optional[str],
    from_date: str,
    to_date: str,
    as_json: bool,
    export: Optional[str],
    output: Optional[str],
):
    """List billing payments."""
    config = get_config(ctx)
    account_id = config.require_account_id(account_id)

    response = run_api(config, PaymentsAPI, "list_payments", account_id, from_date=from_date, to_date=to_date)

    if export == "csv":
        filepath = export_payments_csv(response.billing_payments, output)
        console.print(f"[green]Exported {len(response.billing_payments)} payments to {filepath}[/green]")
        return

    if as_json:
        print_json(response)
        return

    if not response.billing_payments:
        console.print("[yellow]No payments found.[/yellow]")
        return

    PaymentTable(console).print_table(response.billing_payments, title="Billing payments")


@payments.command("show")
@click.argument("payment_id")
@account_option
@json_option
@click.pass_context
def payments_show(ctx: click.Context, payment_id: str, account_id: Optional[str], as_json: bool):
    """Show a billing payment."""
    config = get_config(ctx)
    account_id = config.require_account_id(account_id)

    payment = run_api(config, PaymentsAPI, "get_payment", account_id, payment_id)

    if as_json:
        print_json(payment)
        return

    PaymentTable(console).print_payment_detail(payment)


@payments.command("post")
@click.option("--invoice-id", required=True, help="Past due invoice to pay")
@click.option("--amount", required=True, help="Payment amount")
@click.option("--payment-id", help="Payment ID")
@account_option
@json_option
@click.pass_context
def payments_post(
    ctx: click.Context,
    invoice_id: str,
    amount: str,
    payment_id: Optional[str],
    account_id: Optional[str],
    as_json: bool,
):
    """Post a payment to a past due invoice."""
    config = get_config(ctx)
    account_id = config.require_account_id(account_id)
    request = BillingPaymentRequest(invoice_id=invoice_id, payment_amount=amount, payment_id=payment_id)

    response = run_api(config, PaymentsAPI, "post_payment", account_id, request)

    if as_json:
        print_json(response)
        return

    console.print(f"[green]Payment posted to invoice {invoice_id}[/green]")
    if response.billing_payments:
        PaymentTable(console).print_table(response.billing_payments)


@cli.group("config")
def config_group():
    """Configuration commands."""
    pass


@config_group.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Show the resolved configuration."""
    config = get_config(ctx)
    console.print("[bold]DocuSign configuration[/bold]")
    console.print(f"  Base URL: [cyan]{config.base_url}[/cyan]")
    console.print(f"  Account ID: {config.account_id or '[dim]Not set[/dim]'}")
    console.print(f"  Timeout: {config.timeout:g}s")
    console.print(f"  Access token: {config.masked_token}")


@config_group.command("set")
@click.option("--base-url", help="API base URL, e.g. https://www.docusign.net/restapi")
@click.option("--account-id", help="Default account ID")
@click.option("--timeout", type=float, help="Request timeout in seconds")
def config_set(base_url: Optional[str], account_id: Optional[str], timeout: Optional[float]):
    """Save default settings to the settings file."""
    if base_url is None and account_id is None and timeout is None:
        raise click.UsageError("Nothing to set. Pass --base-url, --account-id or --timeout")

    path = save_settings(base_url=base_url, account_id=account_id, timeout=timeout)
    console.print(f"[green]Saved settings to {path}[/green]")
    for key, value in sorted(load_settings_file(path).items()):
        console.print(f"  {key}: {value}")


if __name__ == "__main__":
    cli()
