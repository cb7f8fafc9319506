import logging
import sys

from app.bootstrap import build_app
from app.config import configure_logging, load_settings
from data.models.customer import Customer
from flow.scheduler import run_service_loop


def _prompt_customer() -> Customer | None:
    name = input("Customer Name: ").strip()
    if not name:
        return None
    account_id = input("Account Id: ")
    problem = input("Problem: ")
    raw_priority = input("Priority: ").strip()
    try:
        priority = int(raw_priority) if raw_priority else 0
    except ValueError:
        logging.warning(f"Invalid priority {raw_priority!r}; using 0")
        priority = 0
    return Customer.from_fields(name, account_id, problem, priority)


def main() -> int:
    settings = load_settings()
    configure_logging(settings.log_level)
    ctx = build_app(settings)

    # Collect customers until a blank name is entered
    while True:
        customer = _prompt_customer()
        if customer is None:
            break
        ctx.desk.add_new_customer(customer)
        print(ctx.desk)

    logging.info(f"Initial size of service desk: {len(ctx.desk)}")
    run_service_loop(ctx, on_served=print)
    return 0


if __name__ == "__main__":
    sys.exit(main())
