from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

from football_feed.ingestion.providers.base.errors import (
    EmptyResultError,
    ProviderError,
    ProviderRequestError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Tier = tuple[str, Callable[[], Awaitable[Sequence[T]]]]


async def first_non_empty(tiers: Sequence[Tier[T]], *, dataset: str) -> tuple[str, list[T]] | None:
    """
    Run `tiers` strictly in order and return (label, items) of the first one
    that yields at least one item.

    A tier fails on any ProviderError or an empty result and the next one is
    tried immediately; there is no retry within a tier. Returns None when all
    tiers fail.
    """
    for label, attempt in tiers:
        logger.debug("%s: trying %s", dataset, label)
        try:
            items = list(await attempt())
            if not items:
                raise EmptyResultError(f"{label} returned no {dataset}")
        except ProviderRequestError as e:
            logger.info("%s: %s failed (status=%s): %s", dataset, label, e.status_code, e)
            continue
        except ProviderError as e:
            logger.info("%s: %s failed: %s", dataset, label, e)
            continue
        except Exception:
            logger.exception("%s: %s raised unexpectedly", dataset, label)
            continue

        logger.info("%s: using %d item(s) from %s", dataset, len(items), label)
        return label, items

    return None
