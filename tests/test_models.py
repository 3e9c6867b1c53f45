"""Tests for path token and statement models."""

import pytest
from pygron.models import (
    IndexToken,
    KeyToken,
    RootToken,
    Statement,
    StatementKind,
    Statements,
    compare,
    is_bare_identifier,
    render_path,
    render_scalar,
)
from pygron.value_model import JSONNumber


ROOT = RootToken()


class TestPathTokens:
    """Tests for path token rendering."""

    def test_root_renders_fixed_name(self):
        """Test the root token renders as its name."""
        assert RootToken().render() == "json"
        assert RootToken("data").render() == "data"

    def test_bare_key_renders_dotted(self):
        """Test identifier-like keys render as dotted segments."""
        assert KeyToken("name").render() == ".name"
        assert KeyToken("_private9").render() == "._private9"

    @pytest.mark.parametrize("name,expected", [
        ("a.b", '["a.b"]'),
        ("content-type", '["content-type"]'),
        ("1abc", '["1abc"]'),
        ("", '[""]'),
        ('say "hi"', '["say \\"hi\\""]'),
        ("café", '["café"]'),
    ])
    def test_other_keys_render_bracketed(self, name, expected):
        """Test keys that are not bare identifiers are quoted and escaped."""
        assert KeyToken(name).render() == expected

    def test_index_renders_decimal(self):
        """Test index tokens render in brackets."""
        assert IndexToken(0).render() == "[0]"
        assert IndexToken(42).render() == "[42]"

    def test_index_rejects_negative(self):
        """Test negative indices are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            IndexToken(-1)

    def test_index_rejects_bool(self):
        """Test booleans are not accepted as indices."""
        with pytest.raises(ValueError):
            IndexToken(True)

    def test_is_bare_identifier(self):
        """Test the bare identifier pattern."""
        assert is_bare_identifier("abc")
        assert is_bare_identifier("_")
        assert not is_bare_identifier("a-b")
        assert not is_bare_identifier("9a")
        assert not is_bare_identifier("café")

    def test_render_path(self):
        """Test rendering a whole path."""
        path = (ROOT, KeyToken("a"), IndexToken(2), KeyToken("x y"))
        assert render_path(path) == 'json.a[2]["x y"]'


class TestStatement:
    """Tests for Statement rendering and validation."""

    def test_render_empty_object(self):
        """Test rendering an empty object declaration."""
        assert Statement.empty_object([ROOT]).render() == "json = {};"

    def test_render_empty_array(self):
        """Test rendering an empty array declaration."""
        statement = Statement.empty_array([ROOT, KeyToken("list")])
        assert statement.render() == "json.list = [];"

    @pytest.mark.parametrize("value,expected", [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-12, "-12"),
        (1.5, "1.5"),
        (1e100, "1e+100"),
        ("text", '"text"'),
        ("a\nb", '"a\\nb"'),
        ("\ud800x", '"\\ud800x"'),
        ("\U0001f600", '"\U0001f600"'),
        (JSONNumber("1E5"), "1E5"),
        (JSONNumber("1e400"), "1e400"),
    ])
    def test_render_scalar(self, value, expected):
        """Test scalar literal rendering."""
        assert render_scalar(value) == expected
        assert Statement.scalar([ROOT], value).render() == f"json = {expected};"

    def test_render_scalar_rejects_containers(self):
        """Test containers are not scalars."""
        with pytest.raises(ValueError):
            render_scalar([])

    def test_path_must_start_with_root(self):
        """Test statements require a leading root token."""
        with pytest.raises(ValueError, match="RootToken"):
            Statement.scalar([KeyToken("a")], 1)

    def test_root_only_first(self):
        """Test the root token cannot appear later in a path."""
        with pytest.raises(ValueError):
            Statement.scalar([ROOT, ROOT], 1)

    def test_empty_markers_carry_no_value(self):
        """Test empty-container statements reject a value."""
        with pytest.raises(ValueError):
            Statement((ROOT,), StatementKind.EMPTY_OBJECT, 1)

    def test_str_is_render(self):
        """Test str() gives the canonical form."""
        statement = Statement.scalar([ROOT, KeyToken("a")], "b")
        assert str(statement) == 'json.a = "b";'


class TestOrdering:
    """Tests for statement comparison and sorting."""

    def test_prefix_sorts_first(self):
        """Test a container declaration precedes its children."""
        parent = Statement.empty_object([ROOT, KeyToken("a")])
        child = Statement.scalar([ROOT, KeyToken("a"), KeyToken("b")], 1)
        assert compare(parent, child) == -1
        assert compare(child, parent) == 1

    def test_keys_compare_by_codepoint(self):
        """Test keys are ordered by codepoint."""
        upper = Statement.scalar([ROOT, KeyToken("B")], 1)
        lower = Statement.scalar([ROOT, KeyToken("a")], 1)
        assert compare(upper, lower) == -1

    def test_indices_compare_numerically(self):
        """Test indices are ordered by number, not text."""
        two = Statement.scalar([ROOT, IndexToken(2)], 1)
        ten = Statement.scalar([ROOT, IndexToken(10)], 1)
        assert compare(two, ten) == -1

    def test_keys_before_indices(self):
        """Test the key/index tie-break."""
        key = Statement.scalar([ROOT, KeyToken("z")], 1)
        index = Statement.scalar([ROOT, IndexToken(0)], 1)
        assert compare(key, index) == -1

    def test_kind_tie_break(self):
        """Test same-path statements order by kind."""
        obj = Statement.empty_object([ROOT])
        arr = Statement.empty_array([ROOT])
        scalar = Statement.scalar([ROOT], 1)
        assert compare(obj, arr) == -1
        assert compare(arr, scalar) == -1
        assert compare(scalar, scalar) == 0

    def test_sort_collection(self):
        """Test sorting a collection in place."""
        statements = Statements([
            Statement.scalar([ROOT, KeyToken("b")], 2),
            Statement.scalar([ROOT, KeyToken("a"), IndexToken(10)], 1),
            Statement.empty_object([ROOT]),
            Statement.empty_array([ROOT, KeyToken("a")]),
            Statement.scalar([ROOT, KeyToken("a"), IndexToken(9)], 1),
        ])

        statements.sort()

        assert statements.render_lines() == [
            "json = {};",
            "json.a = [];",
            "json.a[9] = 1;",
            "json.a[10] = 1;",
            "json.b = 2;",
        ]

    def test_sorted_returns_copy(self):
        """Test sorted() leaves the original order alone."""
        statements = Statements([
            Statement.scalar([ROOT, KeyToken("b")], 2),
            Statement.empty_object([ROOT]),
        ])
        result = statements.sorted()

        assert isinstance(result, Statements)
        assert result[0].kind == StatementKind.EMPTY_OBJECT
        assert statements[0].kind == StatementKind.SCALAR

    def test_add_and_to_value(self):
        """Test building a collection and merging it."""
        statements = Statements()
        statements.add(Statement.empty_object([ROOT]))
        statements.add(Statement.scalar([ROOT, KeyToken("a")], 1))

        assert statements.to_value() == {"a": 1}
