"""
Test documents for JSON formatting benchmarks.

Builds compact JSON text that stresses different parts of the formatter:
- Container-heavy documents (wide objects, deep nesting)
- String-heavy content with escapes and surrogate pairs
- Number-heavy arrays whose lexemes must be carried through verbatim
"""

import json
import random
import string
from typing import Any

# Seeded so every run formats the same documents
_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_ASTRAL_PROBABILITY = 0.05

DATA_TYPES = (
    "small_object",
    "wide_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
    "number_heavy",
)


def generate_test_data(data_type: str) -> str:
    """Generates compact JSON text for the given benchmark data type."""
    generators = {
        "small_object": _generate_small_object,
        "wide_object": _generate_wide_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "number_heavy": _generate_number_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def _compact(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"))


def _generate_small_object(rng: random.Random) -> str:
    """Generates a small configuration-like object (< 1KB)."""
    data = {
        "service": "billing-api",
        "replicas": 3,
        "enabled": True,
        "timeout_s": 2.5,
        "owner": None,
        "tags": ["payments", "tier-1"],
        "limits": {"cpu": "500m", "memory": "256Mi"},
    }
    return _compact(data)


def _generate_wide_object(rng: random.Random) -> str:
    """Generates an object with many members of short scalar values."""
    data = {
        f"field_{i:04d}": rng.choice(
            [
                rng.randint(-10_000, 10_000),
                _random_string(rng, 12),
                rng.choice([True, False]),
                None,
            ]
        )
        for i in range(1000)
    }
    return _compact(data)


def _generate_mixed_array(rng: random.Random) -> str:
    """Generates an array of records mixing every value kind."""
    records = [
        {
            "id": f"evt_{i:06d}",
            "kind": rng.choice(["login", "logout", "purchase", "refund"]),
            "amount": round(rng.uniform(1.0, 1000.0), 2),
            "flags": [rng.choice([True, False]) for _ in range(3)],
            "note": None if rng.random() < 0.5 else _random_string(rng, 20),
            "labels": {},
        }
        for i in range(300)
    ]
    return _compact(records)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a tree of objects and arrays several levels deep."""

    def create_node(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"leaf": _random_string(rng, 8)}

        return {
            "depth": depth,
            "children": [create_node(depth - 1) for _ in range(3)],
            "empty": [],
        }

    # Narrow chain that drives the indent width up
    chain: Any = "bottom"
    for _ in range(100):
        chain = [chain]

    return _compact({"tree": create_node(6), "chain": chain})


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates strings full of escapes, control characters and emoji."""

    def create_string() -> str:
        chars = []
        for _ in range(60):
            roll = rng.random()
            if roll < _ASTRAL_PROBABILITY:
                chars.append(chr(rng.randint(0x1F600, 0x1F64F)))
            elif roll < _ESCAPE_PROBABILITY:
                chars.append(rng.choice('"\\/\b\f\n\r\t\x01\x1f'))
            else:
                chars.append(rng.choice(string.ascii_letters + " éü"))
        return "".join(chars)

    data = {
        "strings": [create_string() for _ in range(200)],
        "keyed": {create_string()[:20]: create_string() for _ in range(50)},
    }
    # ensure_ascii writes astral characters as \uXXXX surrogate pairs
    return json.dumps(data, separators=(",", ":"), ensure_ascii=True)


def _generate_number_heavy(rng: random.Random) -> str:
    """Generates arrays of number lexemes in every JSON number form."""

    def create_lexeme() -> str:
        sign = rng.choice(["", "-"])
        integer = rng.choice(["0", str(rng.randint(1, 10**9))])
        fraction = rng.choice(["", f".{rng.randint(0, 999999):06d}"])
        exponent = rng.choice(
            ["", f"e{rng.randint(-30, 30)}", f"E+{rng.randint(0, 30)}"]
        )
        return f"{sign}{integer}{fraction}{exponent}"

    rows = [
        "[" + ",".join(create_lexeme() for _ in range(20)) + "]"
        for _ in range(100)
    ]
    return "[" + ",".join(rows) + "]"


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random ASCII string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
