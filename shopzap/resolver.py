from typing import Optional, Sequence, Tuple

from loguru import logger

from shopzap.directory import BaseDirectory
from shopzap.exceptions import DirectoryError, LookupUnavailable, NotFound
from shopzap.models import (
    StoreRecord, ResolvedRoute, LookupField, MatchMode
)
from shopzap.routing import (
    extract_store_identifier, should_redirect, subdomain_from_host
)

LookupStrategy = Tuple[LookupField, MatchMode]

# Tried in order, first hit wins. Only a username hit is canonical; name
# hits are legacy links and get redirected to the username.
LOOKUP_STRATEGIES: Tuple[LookupStrategy, ...] = (
    ('username', 'exact'),
    ('name', 'exact'),
    ('name', 'iexact'),
)


class Resolver:
    """Resolves a store identifier to the canonical store.

    Args:
        directory: Store directory to run the lookups against.
        strategies: Prioritised `(field, match)` pairs.
        include_inactive: Whether inactive stores may be resolved.
    """
    def __init__(
        self,
        directory: BaseDirectory,
        strategies: Sequence[LookupStrategy] = LOOKUP_STRATEGIES,
        include_inactive: bool = False
    ):
        self.directory = directory
        self.strategies = tuple(strategies)
        self.include_inactive = include_inactive

    def lookup(
        self,
        identifier: str
    ) -> Optional[Tuple[StoreRecord, LookupField]]:
        normalized = identifier.lower()

        for field, match in self.strategies:
            logger.debug(f"Looking up store by {field} {match} '{normalized}'")
            try:
                store = self.directory.find_one(
                    field=field,
                    value=normalized,
                    match=match,
                    active_only=not self.include_inactive
                )
            except DirectoryError as e:
                logger.error(
                    f'Store lookup for "{identifier}" failed on '
                    f'{field} {match}: {e}'
                )
                raise LookupUnavailable(identifier) from e

            if store is not None:
                return store, field

        return None

    def resolve(self, identifier: str) -> ResolvedRoute:
        if not identifier:
            raise ValueError("Store identifier must be a non-empty string")

        hit = self.lookup(identifier)

        if hit is None:
            logger.info(f'Store "{identifier}" not found')
            raise NotFound(identifier)

        store, field = hit

        redirect_needed = (
            field != 'username'
            and should_redirect(identifier, store)
        )

        if redirect_needed:
            logger.info(
                f'Store "{identifier}" found by {field}, '
                f'redirecting to "{store.username}"'
            )
        else:
            logger.info(f'Store "{identifier}" found by {field}')

        return ResolvedRoute(
            identifier=identifier,
            store=store,
            redirect_needed=redirect_needed,
            final_username=store.username,
            matched_by=field
        )

    def resolve_path(self, path: str) -> ResolvedRoute:
        """Resolves the identifier of a `/store/<identifier>/...` path."""
        identifier = extract_store_identifier(path)
        if identifier is None:
            raise NotFound(path)
        return self.resolve(identifier)

    def resolve_host(self, hostname: str) -> ResolvedRoute:
        """Resolves the store label of a subdomain host."""
        identifier = subdomain_from_host(hostname)
        if identifier is None:
            raise NotFound(hostname)
        return self.resolve(identifier)
