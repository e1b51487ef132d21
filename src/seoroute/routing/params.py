"""Placeholder converters for the fallback route template.

A placeholder is ``{name}`` or ``{name:type}``. Ids are percent-quoted
when generated, so a single segment always suffices.
"""


# (regex_pattern, python_type) for each supported converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"\d+", int),
}


def parse_placeholder(part: str) -> tuple[str, str]:
    """Split ``{name:type}`` into ``(name, type)``; type defaults to ``str``.

    Raises ``KeyError`` if *type* is not a registered converter.
    """
    inner = part[1:-1]
    if ":" in inner:
        name, param_type = inner.split(":", 1)
    else:
        name, param_type = inner, "str"
    CONVERTERS[param_type]
    return name, param_type
