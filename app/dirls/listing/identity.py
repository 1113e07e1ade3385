"""Resolution of numeric user and group ids to names.

Lookups are memoized per resolver instance. A resolver is created once
per run and discarded afterwards, so the caches never outlive a single
invocation.
"""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

# Errors for unknown or out-of-range ids, or a platform without pwd/grp
_LOOKUP_ERRORS: tuple[type[Exception], ...] = (KeyError, OverflowError, ValueError, ImportError)


def lookup_user_name(uid: int) -> str:
    """Look up a user name in the system password database."""
    import pwd

    return pwd.getpwuid(uid).pw_name


def lookup_group_name(gid: int) -> str:
    """Look up a group name in the system group database."""
    import grp

    return grp.getgrgid(gid).gr_name


class IdentityResolver:
    """Maps numeric uids and gids to display names.

    Each distinct id is looked up at most once. Ids that cannot be
    resolved fall back to their decimal representation, which is cached
    as well.

    Args:
        user_lookup: Callable returning the user name for a uid.
        group_lookup: Callable returning the group name for a gid.
    """

    def __init__(
        self,
        *,
        user_lookup: Callable[[int], str] = lookup_user_name,
        group_lookup: Callable[[int], str] = lookup_group_name,
    ) -> None:
        self._user_lookup = user_lookup
        self._group_lookup = group_lookup
        self.users: dict[int, str] = {}
        self.groups: dict[int, str] = {}

    def resolve_user(self, uid: int) -> str:
        """Get the display name for a user id."""
        return self._resolve(uid, self.users, self._user_lookup, "user")

    def resolve_group(self, gid: int) -> str:
        """Get the display name for a group id."""
        return self._resolve(gid, self.groups, self._group_lookup, "group")

    @staticmethod
    def _resolve(
        ident: int,
        cache: dict[int, str],
        lookup: Callable[[int], str],
        kind: str,
    ) -> str:
        if ident in cache:
            return cache[ident]

        try:
            name = lookup(ident)
        except _LOOKUP_ERRORS:
            logger.debug("No %s name for id %d, using numeric id", kind, ident)
            name = str(ident)

        cache[ident] = name
        return name
