"""Main GridSchema class."""

from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from .config import Config
from .core.exceptions import (
    ConfigurationError,
    GridSchemaError,
    MissingWorkbookError,
    SheetNotFoundError,
    TableNotFoundError,
)
from .models import (
    BuildResult,
    FileData,
    HeaderTree,
    SessionResult,
    SheetData,
    TableConfig,
    TableSchema,
)
from .readers import read_workbook
from .tools.extraction import extract_table_rows, parse_header, resolve_range
from .tools.generation import generate_columns_code, render_columns_module
from .tools.styling import apply_column_style, assign_default_colors
from .utils.logging_context import (
    OperationContext,
    SheetContext,
    TableContext,
    configure_logging,
    get_contextual_logger,
)

logger = get_contextual_logger(__name__)


class GridSchema:
    """Builds column schemas and their source code from spreadsheet headers."""

    def __init__(self, config: Config | None = None, **kwargs):
        """Initialize GridSchema.

        Args:
            config: Configuration object. If None, loads from environment.
            **kwargs: Config overrides

        Raises:
            ConfigurationError: If an override fails validation
        """
        if config is None:
            config = Config.from_env()

        for key, value in kwargs.items():
            if hasattr(config, key):
                try:
                    setattr(config, key, value)
                except ValidationError as e:
                    raise ConfigurationError(str(e)) from e

        self.config = config
        configure_logging(config.log_level, config.log_file)

        self._workbook: FileData | None = None
        self._tables: list[TableSchema] = []

        logger.info(f"GridSchema initialized with config: {config}")

    # Workbook

    def load_workbook(self, file_path: str | Path) -> FileData:
        """Read a workbook file and make it the active workbook.

        Raises:
            ReaderError: If the file cannot be read
        """
        return self.use_workbook(read_workbook(file_path))

    def use_workbook(self, file_data: FileData) -> FileData:
        """Make an already-loaded workbook the active one, discarding built tables."""
        self._workbook = file_data
        self._tables = []
        logger.info(f"Using workbook with sheets: {file_data.get_sheet_names()}")
        return file_data

    def _require_workbook(self) -> FileData:
        if self._workbook is None:
            raise MissingWorkbookError("No workbook loaded; call load_workbook() first")
        return self._workbook

    @property
    def workbook(self) -> FileData:
        """The active workbook."""
        return self._require_workbook()

    @property
    def sheet_names(self) -> list[str]:
        return self.workbook.get_sheet_names()

    @property
    def tables(self) -> list[TableSchema]:
        """Tables from the most recent batch build."""
        return list(self._tables)

    # Building

    def build_table(self, table_config: TableConfig) -> TableSchema:
        """
        Build the column tree and code for one requested range.

        Either a complete table is returned or an exception is raised; no
        partial tree is kept.

        Raises:
            MissingWorkbookError: If no workbook is loaded
            SheetNotFoundError: If the sheet does not exist
            InvalidAddressError: If either corner address is malformed
            InvalidRangeError: If the range is inverted
            MalformedMergeRegionError: If the sheet holds an unusable merge
        """
        workbook = self._require_workbook()

        with SheetContext(table_config.sheet), OperationContext("build"):
            sheet = workbook.get_sheet_by_name(table_config.sheet)
            if sheet is None:
                raise SheetNotFoundError(table_config.sheet, workbook.get_sheet_names())

            table_range = resolve_range(table_config.start_cell, table_config.end_cell)

            with TableContext(table_range.excel_range):
                tree = parse_header(
                    sheet,
                    table_range,
                    localize=self.config.localize_titles,
                    align=self.config.default_align,
                )
                if self.config.auto_color:
                    assign_default_colors(
                        tree,
                        table_range.start_col,
                        self.config.color_order,
                        self.config.inherit_parent_color,
                    )

                rows = self._extract_rows(sheet, tree) if self.config.extract_rows else []
                logger.info(
                    f"Built {len(tree.columns)} root columns, {len(tree.leaves())} leaves"
                )

                return TableSchema(
                    config=table_config,
                    range=table_range,
                    tree=tree,
                    code=self.render_code(tree),
                    rows=rows,
                )

    def build_tables(self, table_configs: Iterable[TableConfig]) -> SessionResult:
        """
        Build every requested range independently.

        A failing range is logged and recorded in its BuildResult; the other
        ranges still build. The successful tables replace the session's
        current tables.

        Raises:
            MissingWorkbookError: If no workbook is loaded
        """
        self._require_workbook()

        results = []
        for table_config in table_configs:
            try:
                table = self.build_table(table_config)
            except GridSchemaError as e:
                logger.warning(f"Failed to build {table_config.label}: {e}")
                results.append(
                    BuildResult(config=table_config, error=str(e), error_type=type(e).__name__)
                )
            else:
                results.append(BuildResult(config=table_config, table=table))

        session = SessionResult(results=results)
        self._tables = session.tables
        return session

    # Styling and code

    def apply_style(
        self, identity: str, class_name: str | None, table_index: int = 0
    ) -> TableSchema:
        """
        Restyle a column and its sub-columns, then regenerate the table's code.

        Raises:
            MissingWorkbookError: If no workbook is loaded
            UnknownColumnError: If the identity is not in the table
            TableNotFoundError: If there is no table at ``table_index``
        """
        table = self._get_table(table_index)

        with SheetContext(table.sheet_name), TableContext(table.range.excel_range):
            with OperationContext("style"):
                updated = apply_column_style(table.tree, identity, class_name)
                table.code = self.render_code(table.tree)
                logger.info(f"Applied {class_name!r} to {len(updated)} columns")

        return table

    def generate_code(self, table_index: int = 0) -> str:
        """Return the generated code of a built table.

        Raises:
            MissingWorkbookError: If no workbook is loaded
            TableNotFoundError: If there is no table at ``table_index``
        """
        return self._get_table(table_index).code

    def _get_table(self, table_index: int) -> TableSchema:
        self._require_workbook()
        if not 0 <= table_index < len(self._tables):
            raise TableNotFoundError(table_index, len(self._tables))
        return self._tables[table_index]

    def render_code(self, tree: HeaderTree) -> str:
        """Serialize a tree using the configured formatting."""
        code = generate_columns_code(
            tree.columns,
            indent=self.config.indent,
            localization_function=self.config.localization_function,
            render_signature=self.config.render_signature,
        )
        if self.config.wrap_in_module:
            code = render_columns_module(code, indent=self.config.indent)
        return code

    def _extract_rows(self, sheet: SheetData, tree: HeaderTree) -> list[dict]:
        header_end_row = tree.header_end_row
        if header_end_row is None:
            return []
        return extract_table_rows(sheet, tree, header_end_row + 1, sheet.max_row)
