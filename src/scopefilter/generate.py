"""Building filters from raw user-supplied lists."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from scopefilter.includes_excludes import WILDCARD, IncludesExcludes, IncludesExcludesBuilder
from scopefilter.resources import GroupResource, ResourceResolver

logger = logging.getLogger(__name__)


def generate_includes_excludes(
    includes: Sequence[str],
    excludes: Sequence[str],
    map_func: Callable[[str], str],
) -> IncludesExcludes:
    """
    Build an `IncludesExcludes` by passing each item through `map_func`.

    `*` in includes is kept as is and `*` in excludes is dropped (it is never
    valid there; validation reports it). Items that `map_func` maps to an
    empty string are omitted.
    """
    builder = IncludesExcludesBuilder()

    for item in includes:
        if item == WILDCARD:
            builder.includes(item)
            continue

        key = map_func(item)
        if not key:
            continue
        builder.includes(key)

    for item in excludes:
        if item == WILDCARD:
            continue

        key = map_func(item)
        if not key:
            continue
        builder.excludes(key)

    return builder.build()


def get_resource_includes_excludes(
    resolver: ResourceResolver,
    includes: Sequence[str],
    excludes: Sequence[str],
) -> IncludesExcludes:
    """
    Resolve resource names to fully-qualified group-resource names (e.g.
    `deploy` to `deployments.apps`) and build an `IncludesExcludes` from them.

    Names the resolver can't resolve are kept unchanged. Dropping them could
    leave includes empty, which would include everything.
    """

    def resolve(item: str) -> str:
        try:
            gvr = resolver.resource_for(GroupResource.parse(item).with_version(""))
        except Exception as e:
            logger.warning("Unable to resolve resource %r, using it as is: %s", item, e)
            return item
        return str(gvr.group_resource())

    return generate_includes_excludes(includes, excludes, resolve)
