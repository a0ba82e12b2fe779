"""Tool for serializing a column tree into column-definition source code."""

import json
from collections.abc import Sequence

from ...core.constants import CODE_GENERATION
from ...models.column import ColumnNode, ColumnTitle, LocalizationRef


def generate_columns_code(
    columns: Sequence[ColumnNode],
    *,
    indent: str = CODE_GENERATION.INDENT,
    localization_function: str = CODE_GENERATION.LOCALIZATION_FUNCTION,
    render_signature: str = CODE_GENERATION.RENDER_SIGNATURE,
) -> str:
    """
    Serialize columns into a nested array of object literals.

    Fields are emitted in a fixed order: title, align, dataIndex, key,
    className, then either ``render`` (leaves) or ``children`` (branches).
    Leaves get a pass-through renderer so they display the raw cell value;
    branches never do. Output is deterministic for a given tree.

    Args:
        columns: Root columns, usually ``HeaderTree.columns``
        indent: Indent unit per nesting level
        localization_function: Name of the function wrapping localized titles
        render_signature: Source of the pass-through cell renderer

    Returns:
        Source text of the array literal
    """
    return _render_array(columns, 0, indent, localization_function, render_signature)


def render_columns_module(
    columns_code: str,
    *,
    indent: str = CODE_GENERATION.INDENT,
    hook_name: str = CODE_GENERATION.HOOK_NAME,
    columns_type: str = CODE_GENERATION.COLUMNS_TYPE,
) -> str:
    """Wrap a serialized column array into a module exporting a columns hook."""
    body = columns_code.replace("\n", f"\n{indent}")
    return (
        "import React from 'react';\n"
        "import { ColumnsType } from 'antd/es/table';\n"
        "\n"
        f"const {hook_name} = () => {{\n"
        f"{indent}const columns: {columns_type} = {body};\n"
        f"{indent}return columns;\n"
        "}\n"
        "\n"
        f"export default {hook_name};\n"
    )


def _render_array(
    columns: Sequence[ColumnNode],
    level: int,
    indent: str,
    localization_function: str,
    render_signature: str,
) -> str:
    if not columns:
        return "[]"

    entries = [
        _render_object(column, level + 1, indent, localization_function, render_signature)
        for column in columns
    ]
    return "[\n" + ",\n".join(entries) + "\n" + indent * level + "]"


def _render_object(
    column: ColumnNode,
    level: int,
    indent: str,
    localization_function: str,
    render_signature: str,
) -> str:
    fields = [("title", _render_title(column.title, localization_function))]

    if column.align is not None:
        fields.append(("align", _literal(column.align)))
    if column.data_index is not None:
        fields.append(("dataIndex", _literal(column.data_index)))
    if column.key is not None:
        fields.append(("key", _literal(column.key)))
    if column.class_name:
        fields.append(("className", _literal(column.class_name)))

    if column.children:
        children = _render_array(
            column.children, level + 1, indent, localization_function, render_signature
        )
        fields.append(("children", children))
    else:
        fields.append(("render", render_signature))

    pad = indent * level
    field_pad = indent * (level + 1)
    lines = [f"{field_pad}{name}: {value}" for name, value in fields]
    return f"{pad}{{\n" + ",\n".join(lines) + f"\n{pad}}}"


def _render_title(title: ColumnTitle, localization_function: str) -> str:
    if isinstance(title, LocalizationRef):
        return f"{localization_function}({_literal(title.key)})"
    return _literal(title.text)


def _literal(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)
