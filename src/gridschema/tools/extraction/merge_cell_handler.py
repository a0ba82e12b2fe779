"""Tool for looking up merged cells during a header traversal."""

from collections.abc import Iterable

from ...core.exceptions import MalformedMergeRegionError
from ...models.table import MergeRegion


class MergeIndex:
    """
    Answers which merge region, if any, covers a given cell.

    Regions are kept in sheet order and searched linearly; regions never
    overlap, so the first match is the only match. Regions are taken as
    given: one whose columns run backwards only fails a lookup that lands
    inside it, since the scan could not advance past it.
    """

    def __init__(self, regions: Iterable[MergeRegion]):
        self.regions = list(regions)
        self._column_inverted = [
            region
            for region in self.regions
            if region.end_col < region.start_col and region.start_row <= region.end_row
        ]

    def find_covering(self, row: int, col: int) -> MergeRegion | None:
        """
        Return the region containing ``(row, col)``, or None.

        Raises:
            MalformedMergeRegionError: If ``(row, col)`` falls inside a region
                whose end column precedes its start column
        """
        for region in self._column_inverted:
            if region.start_row <= row <= region.end_row and (
                region.end_col <= col <= region.start_col
            ):
                raise MalformedMergeRegionError(
                    f"Merge region {region.signature} ends before it starts"
                )

        for region in self.regions:
            if region.contains(row, col):
                return region
        return None

    def __len__(self) -> int:
        return len(self.regions)


class ProcessedMerges:
    """
    Signatures of merge regions already consumed by one traversal.

    Create one per top-level build and pass it down the recursion. Sharing
    an instance between independent builds causes spurious skips.
    """

    def __init__(self):
        self._signatures: set[str] = set()

    def is_processed(self, region: MergeRegion) -> bool:
        return region.signature in self._signatures

    def mark_processed(self, region: MergeRegion) -> None:
        self._signatures.add(region.signature)

    def __contains__(self, region: MergeRegion) -> bool:
        return self.is_processed(region)

    def __len__(self) -> int:
        return len(self._signatures)
