# deoptlens/enums/ic_type.py
from __future__ import annotations

from enum import Enum


class IcType(str, Enum):
    LoadIC = "LoadIC"
    StoreIC = "StoreIC"
    KeyedLoadIC = "KeyedLoadIC"
    KeyedStoreIC = "KeyedStoreIC"
    LoadGlobalIC = "LoadGlobalIC"
    StoreGlobalIC = "StoreGlobalIC"
    StoreInArrayLiteralIC = "StoreInArrayLiteralIC"


def format_ic_type(ic_type: IcType) -> str:
    return ic_type.value
