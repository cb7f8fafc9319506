import logging
from collections.abc import Callable

from data.models.customer import Customer
from utils.time import seconds_since


def run_service_loop(ctx, on_served: Callable[[Customer], None] | None = None) -> list[Customer]:
    """Serve customers from the desk until nobody is waiting."""
    served: list[Customer] = []
    while True:
        next_priority = ctx.desk.next_priority()
        logging.debug(f"Next service desk priority: {next_priority}")
        if next_priority is None:
            logging.info("No customers waiting")
            break
        customer = ctx.desk.serve_customer()
        if customer is None:
            break
        served.append(customer)
        if on_served is not None:
            on_served(customer)
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            try:
                wait_s = seconds_since(customer.arrived_at)
            except Exception:
                logging.debug(f"Failed to parse arrived_at {customer.arrived_at!r}; assuming no wait.")
                wait_s = 0.0
            logging.debug(f"Customer {customer.name} waited {wait_s:.3f}s")
    logging.info(f"Service loop finished: served {len(served)} customers")
    return served
