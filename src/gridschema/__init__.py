"""GridSchema - Column schemas and source code from merged spreadsheet headers."""

__version__ = "0.1.0"

from gridschema.config import Config
from gridschema.gridschema import GridSchema
from gridschema.models import ColumnNode, HeaderTree, TableConfig, TableSchema

__all__ = ["GridSchema", "Config", "ColumnNode", "HeaderTree", "TableConfig", "TableSchema"]
