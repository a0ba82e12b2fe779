"""Result models for header builds."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .column import HeaderTree
from .table import TableConfig, TableRange


class TableSchema(BaseModel):
    """A successfully built header: its tree, generated code and data rows."""

    model_config = ConfigDict(strict=True)

    config: TableConfig = Field(..., description="The request this table was built from")
    range: TableRange = Field(..., description="Resolved header range")
    tree: HeaderTree = Field(..., description="Column schema")
    code: str = Field(..., description="Generated column definitions")
    rows: list[dict[str, Any]] = Field(
        default_factory=list, description="Data rows keyed by leaf identity"
    )

    @property
    def sheet_name(self) -> str:
        return self.config.sheet


class BuildResult(BaseModel):
    """Outcome of building one requested range: a table or an error."""

    model_config = ConfigDict(strict=True)

    config: TableConfig = Field(..., description="The request")
    table: TableSchema | None = Field(None, description="Built table on success")
    error: str | None = Field(None, description="Error message on failure")
    error_type: str | None = Field(None, description="Exception class name on failure")

    @property
    def succeeded(self) -> bool:
        return self.table is not None


class SessionResult(BaseModel):
    """Outcomes of a batch of range builds, in request order."""

    model_config = ConfigDict(strict=True)

    results: list[BuildResult] = Field(default_factory=list, description="Per-range outcomes")

    @property
    def tables(self) -> list[TableSchema]:
        return [result.table for result in self.results if result.table is not None]

    @property
    def errors(self) -> list[BuildResult]:
        return [result for result in self.results if not result.succeeded]

    @property
    def succeeded(self) -> bool:
        """True when every requested range was built."""
        return not self.errors
