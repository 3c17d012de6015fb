"""
Pytest configuration and shared fixtures for instyaml tests.

Provides immutable test data fixtures shared by the pass and fail suites.
"""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass(frozen=True)
class YamlTestCase:
    """
    Immutable container for YAML test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_reason: str = ""


@pytest.fixture
def yaml_fail_cases() -> list[YamlTestCase]:
    """
    Provides documents that must fail parsing with a specific reason.
    """
    fail_docs = [
        ("over-indented property", "a: 1\n  b: 2\n", "invalid indentation"),
        ("dedent to unknown level", "a:\n  b: 1\n c: 2\n", "invalid indentation"),
        ("property after item", "- a\nb: 1\n", "invalid mix of collections"),
        ("item after property", "a: 1\n- b\n", "invalid mix of collections"),
        ("symbol in key", "a$: 1\n", "invalid character"),
        ("text after closing quote", "a: 'x' y\n", "invalid character"),
        ("dash before word", "-x\n", "invalid character"),
        ("dash before word in item", "- -x\n", "invalid character"),
        ("second word before colon", "a b: 1\n", "invalid character"),
        ("key without colon", "key\nother: 1\n", "invalid linebreak"),
        ("quote broken by newline", "a: 'x\nb: 1\n", "invalid linebreak"),
        ("lone carriage return", "a: 1\rb: 2\n", "invalid linebreak"),
        ("comment in key", "a#: 1\n", "invalid comment"),
        ("comment before colon", "a # c\n", "invalid comment"),
        ("unterminated quoted value", "a: 'x", "missing closing quote"),
        ("unterminated quoted key", '"a', "missing closing quote"),
        ("key at end of file", "key", "unexpected end of file"),
        ("block scalar without content", "t: |\n", "invalid folded value"),
        (
            "block scalar followed by sibling",
            "t: >-\nu: 1\n",
            "invalid folded value",
        ),
    ]

    return [
        YamlTestCase(
            description=description,
            input_data=doc,
            should_fail=True,
            expected_reason=reason,
        )
        for description, doc, reason in fail_docs
    ]


@pytest.fixture
def yaml_pass_cases() -> list[YamlTestCase]:
    """
    Provides documents that must parse into the given structure.
    """
    return [
        YamlTestCase(
            "simple sequence",
            "- first\n- second\n- third\n",
            False,
            ["first", "second", "third"],
        ),
        YamlTestCase(
            "simple mapping",
            "lastname: Doe\nfirstname: John\nage: unknown\n",
            False,
            {"lastname": "Doe", "firstname": "John", "age": "unknown"},
        ),
        YamlTestCase(
            "typed scalars",
            "numeric: 1.0\nboolean: true\nexplicit-null: null\n",
            False,
            {"numeric": 1.0, "boolean": True, "explicit-null": None},
        ),
        YamlTestCase(
            "literal block",
            "story: |\n  line one\n  line two\n",
            False,
            {"story": "line one\nline two\n"},
        ),
        YamlTestCase(
            "nested mapping",
            "person:\n  name: Jane\n  address:\n    city: Berlin\nactive: yes\n",
            False,
            {
                "person": {"name": "Jane", "address": {"city": "Berlin"}},
                "active": True,
            },
        ),
        YamlTestCase(
            "sequence under key",
            "tags:\n  - red\n  - green\ncount: 2\n",
            False,
            {"tags": ["red", "green"], "count": 2.0},
        ),
        YamlTestCase(
            "mappings in sequence",
            "- name: a\n  size: 1\n- name: b\n  size: 2\n",
            False,
            [{"name": "a", "size": 1.0}, {"name": "b", "size": 2.0}],
        ),
        YamlTestCase(
            "mapping below lone dash",
            "-\n  name: a\n-\n  name: b\n",
            False,
            [{"name": "a"}, {"name": "b"}],
        ),
        YamlTestCase(
            "nested sequences on one line",
            "- - a\n  - b\n- - c\n",
            False,
            [["a", "b"], ["c"]],
        ),
        YamlTestCase(
            "compact nested mapping",
            "a: b: c\n",
            False,
            {"a": {"b": "c"}},
        ),
        YamlTestCase(
            "comments everywhere",
            "# leading\na: 1 # trailing\n\n  # indented\nb: 'x' # after quote\n",
            False,
            {"a": 1.0, "b": "x"},
        ),
        YamlTestCase(
            "empty nested mapping",
            "a:\nb: 1\n",
            False,
            {"a": {}, "b": 1.0},
        ),
        YamlTestCase(
            "windows linebreaks",
            "a: 1\r\nb:\r\n  - x\r\n  - 'y'\r\n",
            False,
            {"a": 1.0, "b": ["x", "y"]},
        ),
    ]


@pytest.fixture
def basic_yaml_values() -> list[YamlTestCase]:
    """
    Provides single property documents for scalar coercion.
    """
    return [
        YamlTestCase("null value", "v: null", False, {"v": None}),
        YamlTestCase("capitalized null", "v: Null", False, {"v": "Null"}),
        YamlTestCase("true boolean", "v: true", False, {"v": True}),
        YamlTestCase("yes boolean", "v: YES", False, {"v": True}),
        YamlTestCase("y boolean", "v: y", False, {"v": True}),
        YamlTestCase("on boolean", "v: On", False, {"v": True}),
        YamlTestCase("false boolean", "v: False", False, {"v": False}),
        YamlTestCase("no boolean", "v: no", False, {"v": False}),
        YamlTestCase("n boolean", "v: N", False, {"v": False}),
        YamlTestCase("off boolean", "v: off", False, {"v": False}),
        YamlTestCase("integer", "v: 42", False, {"v": 42.0}),
        YamlTestCase("negative integer", "v: -17", False, {"v": -17.0}),
        YamlTestCase("float", "v: 3.14", False, {"v": 3.14}),
        YamlTestCase("fraction only", "v: .5", False, {"v": 0.5}),
        YamlTestCase("positive sign", "v: +3", False, {"v": 3.0}),
        YamlTestCase("trailing dot", "v: 1.", False, {"v": "1."}),
        YamlTestCase("exponent", "v: 1e5", False, {"v": "1e5"}),
        YamlTestCase("version string", "v: 1.2.3", False, {"v": "1.2.3"}),
        YamlTestCase("plain string", "v: hello world", False, {"v": "hello world"}),
        YamlTestCase("quoted number", "v: '42'", False, {"v": "42"}),
        YamlTestCase("quoted boolean", 'v: "yes"', False, {"v": "yes"}),
        YamlTestCase("empty quoted", "v: ''", False, {"v": ""}),
        YamlTestCase("quoted padding", "v: '  x  '", False, {"v": "  x  "}),
    ]
