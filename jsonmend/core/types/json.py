# jsonmend/core/types/json.py

"""JSON type definitions for parsed documents using Python 3.13 features."""

# JSON Type Usage Guide:
# - JSONDict: an object member mapping; dict insertion order is the document order
# - JSONList: an array
# - JSONType: any parsed value, including nested data reached through a path
# - NEVER use Any - a parsed document is always one of these

type JSONPrimitive = str | int | float | bool | None

# Recursive definition; the aliases are evaluated lazily so no quotes are needed
type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
