"""
Referential Integrity - Uniqueness and foreign-key checks for id-keyed catalogs.

Every catalog (phases, goals, fields, field sets, piece sets, dice, ...)
goes through the same two checks:
1. Ids are unique (accumulated into a set, first collision fails)
2. Every cross-reference resolves to an id in the target catalog

Catalogs plug in by supplying an id extractor and, optionally,
reference extractors. Nothing here knows about any concrete entity type.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Iterable, Mapping, TypeVar

from ..errors import DuplicateIdError, UnknownReferenceError

T = TypeVar("T")

IdOf = Callable[[Any], Hashable]
RefsOf = Callable[[Any], Iterable[Hashable]]


def check_unique(
    entities: Iterable[T],
    id_of: Callable[[T], Hashable],
    catalog: str,
) -> set[Hashable]:
    """
    Check that every entity id is unique.

    Returns the collected id set so it can serve as `known_ids`
    for reference checks.

    Raises DuplicateIdError on the first collision.
    """
    seen: set[Hashable] = set()
    for entity in entities:
        entity_id = id_of(entity)
        if entity_id in seen:
            raise DuplicateIdError(catalog, entity_id)
        seen.add(entity_id)
    return seen


def check_references(
    entities: Iterable[T],
    refs_of: Callable[[T], Iterable[Hashable]],
    known_ids: set[Hashable] | frozenset[Hashable],
    catalog: str,
    id_of: Callable[[T], Hashable] | None = None,
) -> None:
    """
    Check that every referenced id is known.

    Raises UnknownReferenceError(catalog, from_id, referenced_id) on the first miss.
    `from_id` is the referencing entity's id when `id_of` is given,
    otherwise the entity itself.
    """
    for entity in entities:
        for referenced_id in refs_of(entity):
            if referenced_id not in known_ids:
                from_id = id_of(entity) if id_of else entity
                raise UnknownReferenceError(catalog, from_id, referenced_id)


@dataclass
class CatalogRule:
    """
    Integrity rule for one catalog.

    references: (refs_of, target_catalog) pairs, where target_catalog
    names another CatalogRule in the same group.
    """
    catalog: str
    entities: list[Any]
    id_of: IdOf
    references: list[tuple[RefsOf, str]] = field(default_factory=list)


def check_catalogs(
    rules: list[CatalogRule],
    external_ids: Mapping[str, set[Hashable]] | None = None,
) -> dict[str, set[Hashable]]:
    """
    Run a group of catalog rules.

    Uniqueness is checked for every catalog first, so references may
    point forward to any catalog in the group. `external_ids` supplies
    id spaces owned by catalogs outside the group.

    Returns the id set collected per catalog.
    """
    known: dict[str, set[Hashable]] = dict(external_ids or {})

    for rule in rules:
        known[rule.catalog] = check_unique(rule.entities, rule.id_of, rule.catalog)

    for rule in rules:
        for refs_of, target in rule.references:
            if target not in known:
                raise KeyError(f"No catalog named '{target}' in this group")
            check_references(
                rule.entities, refs_of, known[target], rule.catalog, id_of=rule.id_of
            )

    return known
