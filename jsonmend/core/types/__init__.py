# jsonmend/core/types/__init__.py

"""Type definitions for jsonmend

Pure type aliases with no implementation logic.
"""

# Local imports
from jsonmend.core.types.json import JSONDict
from jsonmend.core.types.json import JSONList
from jsonmend.core.types.json import JSONPrimitive
from jsonmend.core.types.json import JSONType

__all__ = [
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
]
