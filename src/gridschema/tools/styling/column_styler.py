"""Tools for assigning style classes to header columns."""

from collections.abc import Sequence

from ...core.constants import DEFAULT_COLOR_ORDER
from ...core.exceptions import UnknownColumnError
from ...models.column import ColumnNode, HeaderTree


def apply_column_style(tree: HeaderTree, identity: str, class_name: str | None) -> list[str]:
    """
    Set the style class of a column and every column nested beneath it.

    Uses the tree's identity index, so only the affected nodes are touched.
    Callers must re-serialize the tree afterwards to keep generated code in
    sync.

    Args:
        tree: Header tree to restyle in place
        identity: Identity of the column to restyle
        class_name: New style class; empty or None clears it

    Returns:
        Identities that were updated, the target first

    Raises:
        UnknownColumnError: If no column has that identity
    """
    if tree.find(identity) is None:
        raise UnknownColumnError(identity)

    updated = [identity, *tree.descendants_of(identity)]
    for target in updated:
        tree.find(target).class_name = class_name or None
    return updated


def assign_default_colors(
    tree: HeaderTree,
    start_col: int,
    color_order: Sequence[str] = DEFAULT_COLOR_ORDER,
    inherit_parent_color: bool = True,
) -> None:
    """Color columns from a palette cycled by their offset from ``start_col``.

    A merge reaching left of the range is colored as if it started at
    ``start_col``.

    With ``inherit_parent_color`` every sub-column takes its root's class;
    otherwise each column is colored by its own position.
    """
    if not color_order:
        raise ValueError("color_order must contain at least one class")

    def color_for(column: ColumnNode) -> str:
        offset = max(column.start_col, start_col) - start_col
        return color_order[offset % len(color_order)]

    for root in tree.columns:
        root_color = color_for(root)
        for node in root.walk():
            node.class_name = root_color if inherit_parent_color else color_for(node)
