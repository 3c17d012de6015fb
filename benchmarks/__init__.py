"""
Benchmark suite for instyaml parsing performance.

Compares instyaml against other YAML and JSON loaders including:
- PyYAML safe_load on the same YAML documents
- Python standard library json, orjson and ujson on the equivalent JSON

Measures parsing speed and memory usage across different data types.
"""
