"""Resolve a client-supplied identifier to a single product.

A term is either a surrogate key in canonical UUID form or a human-readable
title/slug. UUID terms are looked up by exact id; anything else matches
`UPPER(title) = UPPER(term) OR LOWER(slug) = LOWER(term)`.
"""

import re
from typing import Any

from loguru import logger

from src.shop.core.errors import NotFound
from src.shop.entities.service.product import Product, ProductRepository

# Canonical 8-4-4-4-12 textual form, any version, either case
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_uuid(term: str) -> bool:
    return UUID_PATTERN.fullmatch(term) is not None


def resolve(repository: ProductRepository, term: str, log: Any = logger) -> Product:
    """Return the product addressed by `term` or raise NotFound.

    When a title/slug term matches several rows, the row whose slug matches
    wins; failing that the earliest created row is returned.
    """
    if is_uuid(term):
        product = repository.get(term.lower())
        if product is None:
            raise NotFound(term)
        return product

    matches = repository.find_by_title_or_slug(term)
    if not matches:
        raise NotFound(term)

    if len(matches) > 1:
        log.warning("Term {!r} matched {} products; preferring slug match", term, len(matches))
        for product in matches:
            if product.slug is not None and product.slug.lower() == term.lower():
                return product

    return matches[0]
