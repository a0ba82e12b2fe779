"""Configuration model for GridSchema."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.constants import CODE_GENERATION, COLUMNS, DEFAULT_COLOR_ORDER
from .core.exceptions import ConfigurationError


class Config(BaseModel):
    """Configuration for GridSchema."""

    model_config = ConfigDict(validate_assignment=True)

    # Column Construction
    default_align: str = Field(COLUMNS.DEFAULT_ALIGN, description="Alignment for every column")
    localize_titles: bool = Field(
        True, description="Emit header titles as localization calls instead of literals"
    )

    # Styling
    auto_color: bool = Field(
        False, description="Assign palette classes to columns by position"
    )
    color_order: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COLOR_ORDER),
        description="Palette of style classes cycled by column position",
    )
    inherit_parent_color: bool = Field(
        True, description="Sub-columns take their parent's palette class"
    )

    # Code Generation
    localization_function: str = Field(
        CODE_GENERATION.LOCALIZATION_FUNCTION, description="Function wrapping localized titles"
    )
    indent: str = Field(CODE_GENERATION.INDENT, description="Indent unit per nesting level")
    render_signature: str = Field(
        CODE_GENERATION.RENDER_SIGNATURE, description="Pass-through renderer for leaf columns"
    )
    wrap_in_module: bool = Field(
        False, description="Wrap generated columns in a complete module exporting a hook"
    )

    # Data Rows
    extract_rows: bool = Field(True, description="Extract data rows beneath each header")

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")

    @field_validator("color_order")
    @classmethod
    def _validate_color_order(cls, value: list[str]) -> list[str]:
        if not value or not all(name.strip() for name in value):
            raise ValueError("color_order must be a non-empty list of class names")
        return value

    @field_validator("indent")
    @classmethod
    def _validate_indent(cls, value: str) -> str:
        if not value or value.strip():
            raise ValueError("indent must be non-empty whitespace")
        return value

    @field_validator("localization_function")
    @classmethod
    def _validate_localization_function(cls, value: str) -> str:
        if not value.replace(".", "_").isidentifier():
            raise ValueError(f"{value!r} is not a valid function name")
        return value

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from environment variables.

        Raises:
            ConfigurationError: If any variable holds an invalid value
        """
        import os

        from dotenv import load_dotenv

        # Load .env file if it exists (will not override existing env vars)
        load_dotenv()

        def flag(name: str, default: str) -> bool:
            return os.getenv(name, default).lower() == "true"

        values = {
            "default_align": os.getenv("GRIDSCHEMA_DEFAULT_ALIGN", COLUMNS.DEFAULT_ALIGN),
            "localize_titles": flag("GRIDSCHEMA_LOCALIZE_TITLES", "true"),
            "auto_color": flag("GRIDSCHEMA_AUTO_COLOR", "false"),
            "inherit_parent_color": flag("GRIDSCHEMA_INHERIT_PARENT_COLOR", "true"),
            "localization_function": os.getenv(
                "GRIDSCHEMA_LOCALIZATION_FUNCTION", CODE_GENERATION.LOCALIZATION_FUNCTION
            ),
            "wrap_in_module": flag("GRIDSCHEMA_WRAP_IN_MODULE", "false"),
            "extract_rows": flag("GRIDSCHEMA_EXTRACT_ROWS", "true"),
            "log_level": os.getenv("GRIDSCHEMA_LOG_LEVEL", "INFO"),
            "log_file": os.getenv("GRIDSCHEMA_LOG_FILE"),
        }

        color_order = os.getenv("GRIDSCHEMA_COLOR_ORDER")
        if color_order is not None:
            values["color_order"] = [name.strip() for name in color_order.split(",")]

        indent_width = os.getenv("GRIDSCHEMA_INDENT_WIDTH")
        if indent_width is not None:
            if not indent_width.isdigit():
                raise ConfigurationError(
                    f"GRIDSCHEMA_INDENT_WIDTH must be a positive integer, got {indent_width!r}"
                )
            values["indent"] = " " * int(indent_width)

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
