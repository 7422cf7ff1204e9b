import argparse
import sys

from storefront._version import __version__
from storefront.cli import orders, profile
from storefront.cli._io import default_config_file, ensure_file
from storefront.cli.exitcodes import EXIT_ERROR
from storefront.core.config import AppConfig, load_config, parse_date
from storefront.utils.log import LEVELS, configure_logging


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="storefront", description="Storefront: shop orders and delivery costs")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--config", default=None, help="Settings file (default: ./storefront.yaml if present).")
    p.add_argument("--log-level", dest="log_level", choices=LEVELS, default="warning", help="Log level (stderr).")

    sub = p.add_subparsers(dest="cmd", required=True)

    # orders
    ord_p = sub.add_parser("orders", help="Order operations.")
    ord_sub = ord_p.add_subparsers(dest="orders_cmd", required=True)

    show_p = ord_sub.add_parser("show", help="Render order summaries.")
    show_p.add_argument("--orders", default=None, help="Orders file (default: ./orders.yaml, else sample orders).")
    show_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")
    show_p.add_argument("--today", default=None, help="Reference date for delivery estimates (YYYY-MM-DD).")
    show_p.add_argument("--strict", action="store_true", help="Refuse to render orders with content issues.")
    show_p.add_argument(
        "--color", action=argparse.BooleanOptionalAction, default=None, help="Highlight delivery details."
    )
    verbosity = show_p.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="One line per order.")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Include raw delivery fields.")

    val_p = ord_sub.add_parser("validate", help="Check orders for suspicious content.")
    val_p.add_argument("--orders", default=None, help="Orders file (default: ./orders.yaml, else sample orders).")
    val_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")

    # profile
    sub.add_parser("profile", help="Fill in a user profile interactively.")

    return p


def _resolve_config(args: argparse.Namespace) -> AppConfig:
    config_path = ensure_file(args.config) if args.config is not None else default_config_file()
    config = load_config(config_path)

    overrides: dict = {}
    if getattr(args, "today", None) is not None:
        overrides["today"] = parse_date(args.today)
    if getattr(args, "color", None) is not None:
        overrides["color"] = args.color
    return config.merged(overrides) if overrides else config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.cmd == "orders":
            config = _resolve_config(args)
            if args.orders_cmd == "show":
                verbosity = "quiet" if args.quiet else ("verbose" if args.verbose else "normal")
                return orders.show(
                    orders=args.orders,
                    fmt=args.format,
                    config=config,
                    verbosity=verbosity,
                    strict=args.strict,
                )
            if args.orders_cmd == "validate":
                return orders.validate(orders=args.orders, fmt=args.format)

        if args.cmd == "profile":
            return profile.run()

        print("Unknown command.", file=sys.stderr)
        return EXIT_ERROR

    except Exception as e:
        print(f"storefront: error: {e}", file=sys.stderr)
        return EXIT_ERROR
