"""Column schema models: titles, column nodes and the header tree."""

from collections.abc import Iterator
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..core.constants import COLUMNS


class LiteralTitle(BaseModel):
    """Header text emitted verbatim as a string literal."""

    model_config = ConfigDict(strict=True, frozen=True)

    kind: Literal["literal"] = "literal"
    text: str = Field("", description="Display text")


class LocalizationRef(BaseModel):
    """Header text emitted as a call to the localization function."""

    model_config = ConfigDict(strict=True, frozen=True)

    kind: Literal["localized"] = "localized"
    key: str = Field(..., min_length=1, description="Translation key")

    @property
    def text(self) -> str:
        return self.key


ColumnTitle = Annotated[LiteralTitle | LocalizationRef, Field(discriminator="kind")]


class ColumnNode(BaseModel):
    """One header column; a leaf binds data, a branch groups sub-columns."""

    model_config = ConfigDict(strict=True)

    title: ColumnTitle = Field(default_factory=LiteralTitle, description="Header title")
    align: str | None = Field(COLUMNS.DEFAULT_ALIGN, description="Cell alignment")
    data_index: str | None = Field(None, description="Identity used to look up row values")
    key: str | None = Field(None, description="Identity used as the column key")
    class_name: str | None = Field(None, description="Style class, empty when unassigned")
    children: list["ColumnNode"] = Field(default_factory=list, description="Sub-columns")

    # Source position of the originating header cell or merge region
    row: int = Field(0, ge=0, description="Header row the node was read from")
    end_row: int = Field(0, ge=0, description="Last row covered by the header cell")
    start_col: int = Field(0, ge=0, description="First column covered")
    end_col: int = Field(0, ge=0, description="Last column covered (inclusive)")

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def identity(self) -> str | None:
        """The node's unique key."""
        return self.key if self.key is not None else self.data_index

    @property
    def title_text(self) -> str:
        return self.title.text

    def walk(self) -> Iterator["ColumnNode"]:
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


ColumnNode.model_rebuild()


class HeaderTree(BaseModel):
    """Ordered root columns of one header range, with a flat identity index.

    The index and each node's descendant identities are computed once at
    construction, so restyling a column and its sub-columns is a direct
    lookup rather than a scan of the tree.
    """

    model_config = ConfigDict(strict=True)

    columns: list[ColumnNode] = Field(default_factory=list, description="Root columns")

    _index: dict[str, ColumnNode] = PrivateAttr(default_factory=dict)
    _descendants: dict[str, tuple[str, ...]] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        for root in self.columns:
            self._register(root)

    def _register(self, node: ColumnNode) -> tuple[str, ...]:
        identity = node.identity
        if identity is None:
            raise ValueError(f"Column {node.title_text!r} has no identity")
        if identity in self._index:
            raise ValueError(f"Duplicate column identity {identity!r}")
        self._index[identity] = node

        descendants: list[str] = []
        for child in node.children:
            descendants.append(child.identity)
            descendants.extend(self._register(child))

        self._descendants[identity] = tuple(descendants)
        return self._descendants[identity]

    def find(self, identity: str) -> ColumnNode | None:
        """Look up a node by identity."""
        return self._index.get(identity)

    def descendants_of(self, identity: str) -> tuple[str, ...]:
        """Identities of every node below ``identity``, in pre-order."""
        return self._descendants.get(identity, ())

    def identities(self) -> list[str]:
        """All identities in pre-order."""
        return [node.identity for node in self.walk()]

    def walk(self) -> Iterator[ColumnNode]:
        for root in self.columns:
            yield from root.walk()

    def leaves(self) -> list[ColumnNode]:
        """Leaf columns, left to right."""
        return [node for node in self.walk() if node.is_leaf]

    @property
    def header_end_row(self) -> int | None:
        """Last sheet row occupied by the header, None for an empty tree."""
        rows = [node.end_row for node in self.walk()]
        return max(rows) if rows else None
