"""
Benchmark suite for jsonfmt formatting performance.

Compares jsonfmt against decode-and-re-encode formatting with:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures formatting speed and memory usage across different data types.
"""
