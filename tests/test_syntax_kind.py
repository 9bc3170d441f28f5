import pytest

from tagscript.ast import Tag, format_tag
from tagscript.diagnostics import TagScriptError
from tagscript.syntax import OPERATIVE_NAMES, TAG_NAMES, OperativeKind, TagKind, operative_kind_for_name, tag_kind_for_name
from tagscript.text import TextPosition


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("out", "output"),
        ("var", "variable"),
        ("in", "input"),
        ("elif", "elseif"),
    ],
)
def test_statement_aliases_share_kind(alias: str, canonical: str) -> None:
    assert tag_kind_for_name(alias) == tag_kind_for_name(canonical)
    assert tag_kind_for_name(alias) != TagKind.UNIVERSAL


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("sum", "add"),
        ("compare", "equals"),
        ("power", "raise"),
    ],
)
def test_operative_aliases_share_kind(alias: str, canonical: str) -> None:
    assert operative_kind_for_name(alias) == operative_kind_for_name(canonical)
    assert tag_kind_for_name(alias) == TagKind.OPERATIVE


def test_every_operative_name_is_an_operative_tag() -> None:
    for name in OPERATIVE_NAMES:
        assert TAG_NAMES[name] == TagKind.OPERATIVE


def test_unknown_names_are_universal() -> None:
    assert tag_kind_for_name("blink") == TagKind.UNIVERSAL
    assert tag_kind_for_name("OUTPUT") == TagKind.UNIVERSAL
    assert operative_kind_for_name("output") is None


def test_operative_arity() -> None:
    assert OperativeKind.NEGATE.arity == 1
    assert all(kind.arity == 2 for kind in OperativeKind if kind != OperativeKind.NEGATE)


def test_kind_helpers() -> None:
    assert TagKind.LITERAL_TEXT.is_literal
    assert not TagKind.GET.is_literal
    assert TagKind.ELSE.is_conditional_branch
    assert not TagKind.WHILE.is_conditional_branch


def test_tag_kind_is_derived_at_construction() -> None:
    tag = Tag("compare", {"x": "1"}, (Tag.number_literal("1"), Tag.number_literal("2")))

    assert tag.kind == TagKind.OPERATIVE
    assert tag.operative_kind == OperativeKind.EQUALS
    assert Tag("get").operative_kind is None


def test_tag_is_immutable() -> None:
    tag = Tag("get", {"name": "x"})

    with pytest.raises(TypeError):
        tag.attributes["name"] = "y"  # type: ignore[index]


def test_require_attribute_reports_tag_position() -> None:
    tag = Tag("variable", {"name": "x"}, position=TextPosition(3, 2))

    with pytest.raises(TagScriptError) as excinfo:
        tag.require_attribute("type")

    assert excinfo.value.code == 4004
    assert excinfo.value.diagnostic.position == TextPosition(3, 2)
    assert excinfo.value.diagnostic.length == len("variable")


def test_children_of_kind() -> None:
    tag = Tag("if", children=(Tag("condition"), Tag("output"), Tag("condition")))

    assert len(tag.children_of_kind(TagKind.CONDITION)) == 2


def test_format_tag() -> None:
    program = Tag.program([Tag("output", {"no-autobreak": ""}, (Tag.text_literal("hi"),))])

    assert format_tag(program) == "\n".join(
        [
            "<program>",
            '\t<output no-autobreak="">',
            '\t\t<text-lit body="hi"/>',
            "\t</output>",
            "</program>",
        ]
    )
