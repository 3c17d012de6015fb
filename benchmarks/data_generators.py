"""
Test data generators for YAML parsing benchmarks.

Every data set comes in three renderings of the same tree:
- the native document, written with comments, compact notations, quoted keys
  and block scalars where the data set is about those features
- a plain block rendering from `instyaml.dumps` that other YAML parsers accept
- the equivalent JSON for the JSON parsers
"""

import json
import random
import string
from dataclasses import dataclass
from typing import Any

import instyaml

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5

DATA_TYPES = [
    "small_document",
    "mixed_sequence",
    "nested_structure",
    "service_config",
    "block_scalars",
]

_SMALL_DOCUMENT = """\
# person record
lastname: Doe
firstname: John
age: 42
active: yes
"nick name": 'JD #1'
address: street: Main St 1
         city: Springfield
story: |
  line one
  line two
"""

_SMALL_DATA = {
    "lastname": "Doe",
    "firstname": "John",
    "age": 42,
    "active": True,
    "nick name": "JD #1",
    "address": {"street": "Main St 1", "city": "Springfield"},
    "story": "line one\nline two\n",
}


@dataclass(frozen=True)
class BenchmarkDocuments:
    """One data set rendered for each kind of parser."""

    yaml_text: str
    portable_yaml: str
    json_text: str


def generate_test_documents(data_type: str) -> BenchmarkDocuments:
    """Generates benchmark documents based on specified type."""
    generators = {
        "small_document": _generate_small_document,
        "mixed_sequence": _generate_mixed_sequence,
        "nested_structure": _generate_nested_structure,
        "service_config": _generate_service_config,
        "block_scalars": _generate_block_scalars,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    yaml_text, data = generators[data_type]()
    return BenchmarkDocuments(
        yaml_text=yaml_text,
        portable_yaml=instyaml.dumps(data),
        json_text=json.dumps(data),
    )


def _generate_small_document() -> tuple[str, Any]:
    """Returns a small hand-written document (< 1KB)."""
    return _SMALL_DOCUMENT, _SMALL_DATA


def _generate_mixed_sequence() -> tuple[str, Any]:
    """Generates a long sequence of scalars and small mappings."""
    items: list[Any] = []

    for i in range(200):
        choice = random.randint(1, 6)
        if choice == _INT_TYPE:
            items.append(random.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            items.append(round(random.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            items.append(_random_string(random.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            items.append(random.choice([True, False]))
        elif choice == _NULL_TYPE:
            items.append(None)
        else:
            items.append({"index": i, "value": _random_string(10)})

    return instyaml.dumps(items), items


def _generate_nested_structure() -> tuple[str, Any]:
    """Generates deeply nested mappings and sequences."""

    def create_level(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"leaf": _random_string(10)}

        return {
            "depth": depth,
            "children": [create_level(depth - 1) for _ in range(3)],
            "nested": create_level(depth - 1),
        }

    data = create_level(6)  # 6 levels deep
    return instyaml.dumps(data), data


def _generate_service_config() -> tuple[str, Any]:
    """
    Generates a commented registry of services.

    Uses compact `key: nested: value` and `key: - item` notations, quoted keys
    and values, trailing comments and quoted keys inside sequence items.
    """
    lines = ["# generated service registry", ""]
    data: dict[str, Any] = {}

    for i in range(40):
        key = f"service_{i}"
        name = _random_string(8)
        replicas = random.randint(1, 9)
        tags = [f"tag{_random_string(4)}" for _ in range(3)]
        enabled = i % 2 == 1

        lines += [
            f"# service {i}",
            f"{key}:",
            f"  name: {name}",
            f"  port: {8000 + i}  # listening port",
            f"  enabled: {'yes' if enabled else 'off'}",
            f"  \"display name\": '{name} #{i}'",
            f"  limits: cpu: {replicas}",
            f"          memory: {replicas * 256}",
            f"  tags: - {tags[0]}",
            *(f"        - {tag}" for tag in tags[1:]),
            "  endpoints:",
            f'    - "path": /api/v{i}',
            "      method: GET",
            "",
        ]
        data[key] = {
            "name": name,
            "port": 8000 + i,
            "enabled": enabled,
            "display name": f"{name} #{i}",
            "limits": {"cpu": replicas, "memory": replicas * 256},
            "tags": tags,
            "endpoints": [{"path": f"/api/v{i}", "method": "GET"}],
        }

    return "\n".join(lines), data


def _generate_block_scalars() -> tuple[str, Any]:
    """Generates folded and literal block scalars with CRLF line endings."""
    lines: list[str] = []
    data: dict[str, Any] = {}

    for i in range(30):
        key = f"note_{i}"
        paragraphs = [
            [_random_string(random.randint(3, 9)) for _ in range(6)]
            for _ in range(3)
        ]
        steps = [_random_string(6) for _ in range(4)]

        lines += [f"{key}:", "  summary: >"]
        for index, words in enumerate(paragraphs):
            if index:
                lines.append("")
            lines.append("    " + " ".join(words[:3]))
            lines.append("    " + " ".join(words[3:]))

        lines += [
            "  script: |-",
            "    set -e",
            f"    # note {i}",
            "    for step in steps:",
            *(f"      run {step}" for step in steps),
            "    done",
        ]

        data[key] = {
            "summary": "\n".join(" ".join(words) for words in paragraphs) + "\n",
            "script": "\n".join(
                [
                    "set -e",
                    f"# note {i}",
                    "for step in steps:",
                    *(f"  run {step}" for step in steps),
                    "done",
                ]
            ),
        }

    return "\r\n".join(lines) + "\r\n", data


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
