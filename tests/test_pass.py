"""
Tests for valid YAML inputs.

Validates that well-formed documents parse successfully and produce the
expected Python objects.
"""

import instyaml

from .conftest import YamlTestCase


def test_yaml_documents(yaml_pass_cases: list[YamlTestCase]) -> None:
    """
    Validates documents covering mappings, sequences and their nesting.
    """
    for case in yaml_pass_cases:
        assert instyaml.loads(case.input_data) == case.expected_output, (
            case.description
        )


def test_basic_yaml_values(basic_yaml_values: list[YamlTestCase]) -> None:
    """
    Validates coercion of unquoted scalars and preservation of quoted ones.
    """
    for case in basic_yaml_values:
        result = instyaml.loads(case.input_data)
        assert result == case.expected_output, case.description
        # bool is a subclass of int, compare types explicitly
        assert type(result["v"]) is type(case.expected_output["v"]), (
            case.description
        )


def test_empty_documents() -> None:
    """
    Validates documents without any node.
    """
    assert instyaml.loads("") == {}
    assert instyaml.loads("\n\n") == {}
    assert instyaml.loads("   \n\t\n") == {}
    assert instyaml.loads("# just a comment\n") == {}


def test_whitespace_handling() -> None:
    """
    Validates spacing around keys, colons and values.
    """
    assert instyaml.loads("a   :   b   ") == {"a": "b"}
    assert instyaml.loads("a:b") == {"a": "b"}
    assert instyaml.loads("a:\tb\t") == {"a": "b"}
    assert instyaml.loads("-\tx") == ["x"]
    assert instyaml.loads("a: 1\n\n\nb: 2") == {"a": 1.0, "b": 2.0}


def test_missing_final_linebreak() -> None:
    """
    Validates that the last line needs no terminating linebreak.
    """
    assert instyaml.loads("a: 1") == {"a": 1.0}
    assert instyaml.loads("- x") == ["x"]
    assert instyaml.loads("a: 'q'") == {"a": "q"}
    assert instyaml.loads("a: 1 # c") == {"a": 1.0}


def test_insertion_order_preserved() -> None:
    """
    Validates that mapping keys keep their source order.
    """
    result = instyaml.loads("zeta: 1\nalpha: 2\nmid: 3\n")
    assert list(result) == ["zeta", "alpha", "mid"]


def test_duplicate_key_replaces_value() -> None:
    """
    Validates that a repeated key keeps its first position but last value.
    """
    result = instyaml.loads("a: 1\nb: 2\na: 3\n")
    assert result == {"a": 3.0, "b": 2.0}
    assert list(result) == ["a", "b"]
