# SPDX-License-Identifier: MIT
"""Helpers for narrowing untyped data parsed from TOML/YAML/JSON.

Parsers hand back plain ``object`` trees; these helpers validate shape at
runtime and narrow the static type at the same time.
"""

from __future__ import annotations

from typing import TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None
