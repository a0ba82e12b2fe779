"""Unit tests for column source code generation."""

from gridschema.models.column import ColumnNode, HeaderTree, LiteralTitle, LocalizationRef
from gridschema.tools.extraction import parse_header
from gridschema.tools.generation import generate_columns_code, render_columns_module

SIMPLE_HEADER_CODE = """[
  {
    title: t("Name"),
    align: "center",
    dataIndex: "col_0",
    key: "col_0",
    render: (value, record, index) => value
  },
  {
    title: t("Age"),
    align: "center",
    dataIndex: "col_1",
    key: "col_1",
    render: (value, record, index) => value
  },
  {
    title: t("City"),
    align: "center",
    dataIndex: "col_2",
    key: "col_2",
    render: (value, record, index) => value
  }
]"""

GROUPED_HEADER_CODE = """[
  {
    title: t("Contact"),
    align: "center",
    dataIndex: "col_0",
    key: "col_0",
    children: [
      {
        title: t("Phone"),
        align: "center",
        dataIndex: "col_0_child_0",
        key: "col_0_child_0",
        render: (value, record, index) => value
      },
      {
        title: t("Email"),
        align: "center",
        dataIndex: "col_0_child_1",
        key: "col_0_child_1",
        render: (value, record, index) => value
      }
    ]
  },
  {
    title: t("Age"),
    align: "center",
    dataIndex: "col_1",
    key: "col_1",
    render: (value, record, index) => value
  }
]"""


def _leaf(title, identity="col_0", **kwargs) -> ColumnNode:
    return ColumnNode(title=title, data_index=identity, key=identity, **kwargs)


class TestGenerateColumnsCode:
    """Test generate_columns_code."""

    def test_single_row_header(self, simple_header_sheet, header_range):
        """Test leaves each get a pass-through renderer and no children."""
        tree = parse_header(simple_header_sheet, header_range)

        code = generate_columns_code(tree.columns)

        assert code == SIMPLE_HEADER_CODE
        assert "children" not in code

    def test_grouped_header(self, grouped_header_sheet, header_range):
        """Test branches nest their children and carry no renderer."""
        tree = parse_header(grouped_header_sheet, header_range)

        assert generate_columns_code(tree.columns) == GROUPED_HEADER_CODE

    def test_renderer_only_on_leaves(self, nested_header_sheet, nested_range):
        tree = parse_header(nested_header_sheet, nested_range)

        code = generate_columns_code(tree.columns)

        assert code.count("render:") == len(tree.leaves())
        assert code.count("children:") == len(tree.identities()) - len(tree.leaves())

    def test_deterministic(self, nested_header_sheet, nested_range):
        """Test identical trees serialize byte-for-byte identically."""
        first = generate_columns_code(parse_header(nested_header_sheet, nested_range).columns)
        second = generate_columns_code(parse_header(nested_header_sheet, nested_range).columns)

        assert first == second

    def test_empty_tree(self):
        assert generate_columns_code([]) == "[]"
        assert generate_columns_code(HeaderTree().columns) == "[]"

    def test_empty_title_is_empty_literal(self):
        """Test a blank header emits an empty string, never a localization call."""
        code = generate_columns_code([_leaf(LiteralTitle())])

        assert '    title: "",' in code

    def test_literal_title_escaped(self):
        """Test literal titles are valid string literals."""
        code = generate_columns_code([_leaf(LiteralTitle(text='Size "XL"\\n'))])

        assert 'title: "Size \\"XL\\"\\\\n",' in code

    def test_localized_title_escaped(self):
        code = generate_columns_code([_leaf(LocalizationRef(key='Say "hi"'))])

        assert 'title: t("Say \\"hi\\""),' in code

    def test_non_ascii_title_kept(self):
        code = generate_columns_code([_leaf(LiteralTitle(text="Größe"))])

        assert 'title: "Größe",' in code

    def test_optional_fields_omitted(self):
        """Test align, identity and class fields appear only when present."""
        column = ColumnNode(title=LiteralTitle(text="Bare"), align=None)

        code = generate_columns_code([column])

        assert "align" not in code
        assert "dataIndex" not in code
        assert "key:" not in code
        assert "className" not in code

    def test_class_name_emitted_when_set(self):
        code = generate_columns_code([_leaf(LiteralTitle(text="A"), class_name="td_red")])

        assert '    className: "td_red",\n    render:' in code

    def test_empty_class_name_omitted(self):
        code = generate_columns_code([_leaf(LiteralTitle(text="A"), class_name="")])

        assert "className" not in code

    def test_custom_formatting(self):
        """Test indent, localization function and renderer are configurable."""
        code = generate_columns_code(
            [_leaf(LocalizationRef(key="Name"))],
            indent="    ",
            localization_function="i18n.t",
            render_signature="(value) => value",
        )

        assert code == (
            "[\n"
            "    {\n"
            '        title: i18n.t("Name"),\n'
            '        align: "center",\n'
            '        dataIndex: "col_0",\n'
            '        key: "col_0",\n'
            "        render: (value) => value\n"
            "    }\n"
            "]"
        )

    def test_no_trailing_separator(self, grouped_header_sheet, header_range):
        """Test siblings are separated but the last entry has no trailing comma."""
        code = generate_columns_code(parse_header(grouped_header_sheet, header_range).columns)

        assert ",\n]" not in code
        assert "},\n  {" in code
        assert "}\n    ]" in code


class TestRenderColumnsModule:
    """Test render_columns_module."""

    def test_wraps_array_in_hook(self):
        columns_code = generate_columns_code([_leaf(LocalizationRef(key="Name"))])

        module = render_columns_module(columns_code)

        assert module == (
            "import React from 'react';\n"
            "import { ColumnsType } from 'antd/es/table';\n"
            "\n"
            "const useColumns = () => {\n"
            "  const columns: ColumnsType<any> = [\n"
            "    {\n"
            '      title: t("Name"),\n'
            '      align: "center",\n'
            '      dataIndex: "col_0",\n'
            '      key: "col_0",\n'
            "      render: (value, record, index) => value\n"
            "    }\n"
            "  ];\n"
            "  return columns;\n"
            "}\n"
            "\n"
            "export default useColumns;\n"
        )

    def test_custom_hook_name(self):
        module = render_columns_module("[]", hook_name="useReportColumns")

        assert "const useReportColumns = () => {" in module
        assert "export default useReportColumns;" in module
        assert "const columns: ColumnsType<any> = [];" in module
