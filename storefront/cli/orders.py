import logging
import sys
from collections.abc import Sequence

from storefront.cli._io import default_orders_file, ensure_file
from storefront.cli.exitcodes import EXIT_OK, EXIT_ORDER_ISSUES, exit_code_from_issues
from storefront.core.config import AppConfig
from storefront.delivery.registry import DeliveryRegistry
from storefront.orders.book import OrderBook
from storefront.orders.loader import DefaultOrdersLoader
from storefront.orders.samples import sample_orders
from storefront.orders.validator import DefaultOrdersValidator, OrderIssue
from storefront.reporting.renderers.json import JsonOrderRenderer
from storefront.reporting.renderers.text import TextOrderRenderer

logger = logging.getLogger(__name__)


def load_book(orders: str | None) -> OrderBook:
    """
    Orders file given explicitly, else orders.yaml/.yml/.json in the current
    directory, else the built-in sample orders.
    """
    path = ensure_file(orders) if orders is not None else default_orders_file()
    if path is None:
        logger.info("no orders file found, using sample orders")
        return sample_orders()
    logger.info("loading orders from %s", path)
    registry = DeliveryRegistry.with_builtins()
    registry.load_entrypoints()
    return DefaultOrdersLoader(registry).load(path)


def render_issues(issues: Sequence[OrderIssue]) -> str:
    if not issues:
        return "✓ No issues\n"
    lines = [f"✗ {len(issues)} issues", ""]
    for i in issues:
        lines.append(f"  ! {i.code} [order {i.order_number}]")
        lines.append(f"    {i.message}")
    return "\n".join(lines) + "\n"


def show(
    *,
    orders: str | None,
    fmt: str,
    config: AppConfig,
    verbosity: str = "normal",
    strict: bool = False,
) -> int:
    book = load_book(orders)

    if strict:
        issues = DefaultOrdersValidator().validate(book)
        if issues:
            print(render_issues(issues), end="", file=sys.stderr)
            return EXIT_ORDER_ISSUES

    summaries = book.summaries(config.reference_date())

    if fmt == "json":
        out = JsonOrderRenderer().render(summaries)
    else:
        out = TextOrderRenderer(
            verbosity=verbosity,  # type: ignore[arg-type]
            currency=config.currency,
            date_format=config.date_format,
            color=config.color,
        ).render(summaries)
    print(out, end="")

    return EXIT_OK


def validate(*, orders: str | None, fmt: str = "text") -> int:
    book = load_book(orders)
    issues = DefaultOrdersValidator().validate(book)

    if fmt == "json":
        print(JsonOrderRenderer().render_issues(issues, order_count=len(book)), end="")
    else:
        print(render_issues(issues), end="")

    return exit_code_from_issues(issues)
