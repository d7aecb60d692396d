"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.infrastructure.auth import Session, sign_in
from storefront.infrastructure.config import StorefrontConfig
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Everything a command needs, built once per invocation."""

    config: StorefrontConfig
    session: Session
    products: JsonProductRepository
    orders: JsonOrderRepository


def build_container(config: StorefrontConfig) -> Container:
    """Sign in, then open the collections the session is scoped to."""
    session = sign_in(config.app_id, config.auth_token)
    collections = session.collections_dir(config.data_dir)
    logger.info("Signed in as %s, using collections under %s", session.user_id, collections)
    return Container(
        config=config,
        session=session,
        products=JsonProductRepository(collections / "products.json", actor=session.user_id),
        orders=JsonOrderRepository(collections / "orders.json", actor=session.user_id),
    )
