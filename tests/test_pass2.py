"""
Deep nesting test with sequences opened on a single line.

Validates parsing of a deeply nested sequence structure to ensure the
parser handles significant nesting levels.
"""

import instyaml

YAML = "- " * 19 + "Not too deep\n"


def test_parse() -> None:
    """
    Validates YAML parsing and round-trip encoding for deeply nested sequences.

    Tests parser's ability to handle significant nesting depth (19 levels)
    and proper reconstruction through serialization.
    """
    # Test parsing
    res = instyaml.loads(YAML)

    expected: object = "Not too deep"
    for _ in range(19):
        expected = [expected]
    assert res == expected

    # Test round-trip encoding
    out = instyaml.dumps(res)
    assert res == instyaml.loads(out)
