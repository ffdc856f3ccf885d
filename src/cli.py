"""Command-line entry point.

Usage: payment-optimizer orders.json paymentmethods.json

Prints one "<method id> <amount>" line per payment method with spend.

Exit status:
  0  every order is paid
  1  the input files could not be loaded or validated
  2  no combination of payment methods pays every order
"""
import sys

import click

from config.settings import settings
from src.po_common.errors import AppError
from src.po_common.logging_config import configure_logging
from src.po_payment.application.schemas import OptimizeRequest
from src.po_payment.application.service import PaymentOptimizationService
from src.po_payment.infrastructure.loader import load_orders, load_payment_methods

NO_SOLUTION = "No complete assignment: the payment method limits cannot pay every order."
NOTHING_CHARGED = "All orders paid, nothing charged."

EXIT_INPUT_ERROR = 1
EXIT_NO_SOLUTION = 2


@click.command()
@click.argument("orders_path", type=click.Path(dir_okay=False))
@click.argument("methods_path", type=click.Path(dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, help="Narrate the search on stderr.")
@click.option("--max-orders", type=int, default=None,
              help="Safety cap on the batch size; the search is exponential in the number "
                   f"of orders. 0 disables the cap (default {settings.MAX_ORDERS}).")
def main(orders_path: str, methods_path: str, verbose: bool, max_orders: int | None) -> None:
    """Choose payment methods for ORDERS_PATH that maximize the total discount."""
    configure_logging("DEBUG" if verbose else "WARNING")
    try:
        request = OptimizeRequest(
            orders=load_orders(orders_path),
            payment_methods=load_payment_methods(methods_path),
        )
        report = PaymentOptimizationService(max_orders=max_orders).optimize(request)
    except AppError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(EXIT_INPUT_ERROR)

    if not report.solved:
        click.echo(NO_SOLUTION)
        sys.exit(EXIT_NO_SOLUTION)

    lines = [f"{method_id} {amount}"
             for method_id, amount in report.totals.items()
             if amount != "0.00"]
    if not lines:
        click.echo(NOTHING_CHARGED)
        return
    for line in lines:
        click.echo(line)


if __name__ == "__main__":
    main()
