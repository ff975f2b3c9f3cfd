"""
Application context.

One AppContext is created at process start and passed explicitly to
whatever needs the shared builders, directors, factories or settings. It
takes the place of global single-instance objects.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from crafter.config import Settings
from crafter.factories import ComponentFactory, VariantFactory, family_factory, payment_factory, vehicle_factory
from crafter.models.payment import PaymentProcessor
from crafter.models.vehicle import Vehicle
from crafter.workflow.builders import CustomerBuilder, PartsBuilder
from crafter.workflow.director import CustomerDirector, ProductDirector


@dataclass
class AppContext:
    """
    Long-lived handle to the shared construction components.

    The builders inside are single-owner: code holding the context must not
    drive them from several threads at once.
    """

    settings: Settings
    logger: logging.Logger
    customer_builder: CustomerBuilder
    customer_director: CustomerDirector
    parts_builder: PartsBuilder
    product_director: ProductDirector
    vehicles: VariantFactory[Vehicle] = field(default=vehicle_factory)
    payments: VariantFactory[PaymentProcessor] = field(default=payment_factory)
    families: VariantFactory[ComponentFactory] = field(default=family_factory)

    def log(self, message: str) -> None:
        """Record an application-level message."""
        self.logger.info(message)


def create_context(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
) -> AppContext:
    """
    Build the application context.

    Call once at startup and pass the result around.

    Args:
        settings: Runtime settings (defaults to Settings())
        logger: Logger for application messages (defaults to the "crafter" logger)

    Returns:
        A fully wired AppContext
    """
    settings = settings or Settings()
    customer_builder = CustomerBuilder(strict=settings.strict)
    parts_builder = PartsBuilder(strict=settings.strict)
    return AppContext(
        settings=settings,
        logger=logger or logging.getLogger("crafter"),
        customer_builder=customer_builder,
        customer_director=CustomerDirector(customer_builder),
        parts_builder=parts_builder,
        product_director=ProductDirector(parts_builder),
    )
