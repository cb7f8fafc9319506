"""
Desk CLI: queue a batch of customers and print them in service order.

Usage examples:
  python -m scripts.desk_cli --customer "Bob,ACC-1,Printer jam,1" --customer "Sue,ACC-2,Outage,9"
  python -m scripts.desk_cli --max-size 3 --customer "Tim,ACC-3,Password reset"
"""

from __future__ import annotations

import argparse
import sys

from app.bootstrap import build_app
from app.config import Settings, configure_logging, load_settings
from data.models.customer import Customer
from flow.scheduler import run_service_loop
from logic.service_desk import DEFAULT_MAX_SIZE


def parse_customer(raw: str) -> Customer:
    parts = raw.split(",")
    if len(parts) not in (3, 4):
        raise argparse.ArgumentTypeError(f"expected NAME,ACCOUNT,PROBLEM[,PRIORITY], got {raw!r}")
    priority = 0
    if len(parts) == 4:
        try:
            priority = int(parts[3])
        except ValueError:
            raise argparse.ArgumentTypeError(f"priority must be an integer, got {parts[3]!r}") from None
    return Customer.from_fields(parts[0], parts[1], parts[2], priority)


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Serve a batch of customers by priority")
    parser.add_argument(
        "--max-size",
        type=int,
        default=settings.max_size,
        help=f"Desk capacity; <= 0 means {DEFAULT_MAX_SIZE} (default: SERVICE_DESK_MAX_SIZE or {DEFAULT_MAX_SIZE})",
    )
    parser.add_argument(
        "--customer",
        type=parse_customer,
        action="append",
        default=[],
        help="NAME,ACCOUNT,PROBLEM[,PRIORITY]; larger priority is served first",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper())
    ctx = build_app(Settings(max_size=args.max_size, log_level=args.log_level.upper()))

    for customer in args.customer:
        if not ctx.desk.add_new_customer(customer):
            print(f"Rejected (desk full): {customer}", file=sys.stderr)

    run_service_loop(ctx, on_served=print)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
