#!/usr/bin/env python
# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "customerrors",
# ]
# ///
"""
customerrors demonstration: a small HTTP-flavoured error hierarchy.
"""

from __future__ import annotations

from customerrors import AbstractError, Block, ErrorNotFound, create


# Example 1: a single class with a custom constructor
def _with_status(self, message=None, status=500):
    self.message = message or self.default_message
    self.status = status


HttpError = create(
    name="http.HttpError",
    default_message="HTTP failure",
    construct=_with_status,
)
NotAcceptable = HttpError.inherit("http.NotAcceptable", "Not acceptable")


# Example 2: a declarative block, resolved on demand
def _with_field(self, message=None, field=None):
    self.message = message or self.default_message
    self.field = field


api = Block(
    {
        "NotFound": [True, "missing"],
        "Invalid": ["NotFound", "bad input"],
        "BadField": {"parent": "Invalid", "construct": _with_field},
        "Timeout": [False, "too slow"],
    },
    namespace="api",
    lazy=True,
)


def main() -> None:
    try:
        raise NotAcceptable(status=406)
    except HttpError as e:
        print(f"🚫 {e.name}: {e} (status {e.status})")

    try:
        api.raise_("Invalid")
    except api.get("NotFound") as e:
        print(f"🔍 {e.name}: {e}")

    try:
        raise api.get("BadField")("wrong type", field="age")
    except api.get("Base") as e:
        print(f"📝 {e.name}: {e} [field={e.field}]")

    try:
        api.get("Base")()
    except AbstractError as e:
        print(f"⛔ {e}")

    try:
        api.get("Unknown")
    except ErrorNotFound as e:
        print(f"❓ {e}")

    api.create_all()
    print(f"✅ {api!r}")


if __name__ == "__main__":
    main()
