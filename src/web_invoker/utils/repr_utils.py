# utils/repr_utils.py
from typing import Any, Optional


def format_repr_value(value: Any) -> str:
    """Formats a value for display within a class representation"""
    return repr(value) if isinstance(value, str) else str(value)


def generate_repr(obj: Any, exclude: Optional[set[str]] = None) -> str:
    """
    Helper function for generating a human readable representation of an object from its public attributes.
    Each attribute is placed on its own line and aligned with the opening parenthesis.

    Args:
        obj (Any): the object to represent
        exclude (Optional[set[str]]): attribute names to leave out of the representation

    Returns:
        str: a string of the form `ClassName(attr1=value1,\\n          attr2=value2)`
    """
    class_name = obj.__class__.__name__
    exclude = exclude or set()
    attributes = {
        key: value for key, value in vars(obj).items() if not key.startswith("_") and key not in exclude
    }
    padding = " " * (len(class_name) + 1)
    components = f",\n{padding}".join(f"{key}={format_repr_value(value)}" for key, value in attributes.items())
    return f"{class_name}({components})"
