"""Logic for splitting documented argument types into type lists."""

import logging

logger = logging.getLogger(__name__)


def parse_type_list(
    type_str: str, member_name: str, warnings: list[str] | None = None
) -> list[str]:
    """Split a ``a|b`` type string into its alternatives.

    A ``a,b`` string is the deprecated spelling: it is kept as a single
    compound type and a warning is emitted (and appended to ``warnings``).
    """
    if "|" in type_str:
        return [t.strip(" ") for t in type_str.split("|")]

    if "," in type_str:
        msg = (
            f"you're using ',' to separate types in {member_name}, use '|' instead"
        )
        logger.warning(msg)
        if warnings is not None:
            warnings.append(msg)

    return [type_str]
