"""Tool for deriving positional column identities."""

from collections.abc import Sequence

from ...core.constants import COLUMNS


def assign_identity(parent_identity: str | None, index: int) -> str:
    """
    Derive the identity of a column from its position.

    Root columns are ``col_<index>``; a child is
    ``<parent identity>_child_<index>``. Header text plays no part, so
    duplicated or blank headers still get distinct keys.

    Args:
        parent_identity: Identity of the parent column, None for roots
        index: Zero-based position among its siblings

    Returns:
        The column identity
    """
    if index < 0:
        raise ValueError(f"Sibling index must be non-negative, got {index}")
    if parent_identity is None:
        return f"{COLUMNS.ROOT_IDENTITY_PREFIX}{index}"
    return f"{parent_identity}{COLUMNS.CHILD_IDENTITY_SEPARATOR}{index}"


def identity_for_path(path: Sequence[int]) -> str:
    """Identity of the node reached by following sibling indices from the root."""
    if not path:
        raise ValueError("Path must contain at least the root index")

    identity = None
    for index in path:
        identity = assign_identity(identity, index)
    return identity


def is_descendant_identity(identity: str, ancestor: str) -> bool:
    """True when ``identity`` names a column nested under ``ancestor``."""
    return identity.startswith(f"{ancestor}{COLUMNS.CHILD_IDENTITY_SEPARATOR}")
