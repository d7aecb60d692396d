"""Per-invocation state shared by all CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.config import StorefrontConfig
from storefront.infrastructure.errors import StorefrontError

logger = logging.getLogger(__name__)


@dataclass
class CliState:
    config: StorefrontConfig
    container: Container | None = None


def get_container() -> Container:
    """Sign in and open the store on first use."""
    ctx = click.get_current_context()
    state = ctx.find_object(CliState)
    if state is None:
        state = ctx.obj = CliState(config=StorefrontConfig.from_env())
    if state.container is None:
        try:
            state.container = build_container(state.config)
        except StorefrontError as exc:
            raise click.ClickException(f"Could not connect to the store: {exc}")
    return state.container


@contextmanager
def reported(action: str) -> Iterator[None]:
    """Turn domain and store failures into a user-facing error.

    Business rule violations are shown as-is. Store failures have already
    been logged where they happened and are reported as "<action> failed".
    """
    try:
        yield
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except StorefrontError as exc:
        logger.debug("%s failed", action, exc_info=True)
        raise click.ClickException(f"{action} failed: {exc}")
