"""Call and value signatures of documentation nodes.

A method or event node carries exactly one signature today: each docset
documents one call shape, and overloads are not merged. ``Node.signatures``
stays a list so that merging several shapes later only touches
``build_call_signature`` callers.
"""

from dataclasses import dataclass
from typing import Any

from docset_tree.docset import Param, ReturnSpec
from docset_tree.type_list import parse_type_list


@dataclass
class Argument:
    """One argument of a call signature."""

    name: str
    description: str
    types: list[str]
    optional: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the interchange representation."""
        return {
            "name": self.name,
            "description": self.description,
            "types": list(self.types),
            "optional": self.optional,
        }


@dataclass
class ReturnInfo:
    """Return value of a signature."""

    type: str
    is_array: bool = False
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the interchange representation."""
        return {
            "type": self.type,
            "isArray": self.is_array,
            "description": self.description,
        }


@dataclass
class Signature:
    """A call shape; ``arguments`` is None for value signatures."""

    arguments: list[Argument] | None
    returns: ReturnInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the interchange representation."""
        return {
            "arguments": (
                None
                if self.arguments is None
                else [a.to_dict() for a in self.arguments]
            ),
            "return": None if self.returns is None else self.returns.to_dict(),
        }


def parse_return(spec: ReturnSpec) -> ReturnInfo:
    """Turn a documented return into ReturnInfo; ``[T]`` is an array of T."""
    type_str = spec.type
    if type_str.startswith("[") and type_str.endswith("]"):
        return ReturnInfo(type_str[1:-1], is_array=True, description=spec.description)
    return ReturnInfo(type_str, is_array=False, description=spec.description)


def build_call_signature(
    params: list[Param] | None,
    returns: ReturnSpec | None,
    member_name: str,
    warnings: list[str] | None = None,
) -> Signature:
    """Build the signature of a method or event from its docset."""
    arguments = [
        Argument(
            name=p.name,
            description=p.doc,
            types=parse_type_list(p.type, member_name, warnings),
            optional=p.optional,
        )
        for p in params or []
    ]
    return Signature(
        arguments=arguments,
        returns=None if returns is None else parse_return(returns),
    )


def build_value_signature(value_type: str | None) -> Signature:
    """Build the synthetic signature of a property, attribute or binding."""
    return Signature(
        arguments=None,
        returns=ReturnInfo(value_type or "", is_array=False),
    )
