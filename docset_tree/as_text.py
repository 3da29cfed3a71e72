"""Logic for flattening tag text values into plain strings."""


def as_text(v: object) -> str:
    """Convert a tag value to a string, handling None, lists and ``{"doc": ...}``."""
    if v is None:
        return ""
    if isinstance(v, str):
        return v.strip()
    if isinstance(v, dict):
        return as_text(v.get("doc"))
    if isinstance(v, list):
        return "\n".join(as_text(x) for x in v if as_text(x))
    return str(v).strip()
