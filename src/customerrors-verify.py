#!/usr/bin/env python
# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "customerrors",
# ]
# ///
"""
Quick verification that customerrors is working correctly.
"""

from __future__ import annotations

from customerrors import AbstractError, Block

errors = Block(
    {"NotFound": [True, "missing"], "Invalid": ["NotFound", "bad input"]},
    "api",
    "Base",
    True,
)

Invalid = errors.get("Invalid")
assert Invalid is errors.get("Invalid")
assert Invalid.parent_type is errors.get("NotFound")
print(f"✅ Resolved {Invalid!r} via {errors!r}")

try:
    errors.raise_("NotFound")
except errors.get("Base") as e:
    assert str(e) == "missing"
    print(f"✅ Raised {e.name}: {e}")

try:
    errors.get("Base")()
except AbstractError as e:
    print(f"✅ Abstract base refused: {e}")
