# deoptlens/enums/symbol_kind.py
from enum import Enum


class SymbolKind(str, Enum):
    """
    Kind of source symbol a function entry was attributed to.
    """
    Function = "function"
    Class = "class"
    Namespace = "namespace"
    Enum = "enum"
    Method = "method"
    Property = "property"
    Field = "field"
    Constructor = "constructor"
