"""Pure-function helpers for ``%{name}`` placeholder tokens.

This module is intentionally free of external dependencies so that it
can be unit-tested without fakes. Substitution itself is left to the
executor; here tokens are only produced and scanned.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_PLACEHOLDER_RE: re.Pattern[str] = re.compile(r"%\{(\w+)\}")


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A named token emitted into a template in place of a raw value.

    Attributes:
        name: Key of the bound value in the builder's params map.
        suffix: Literal text appended after the token (e.g. ``"s"`` for
            epoch-second time comparisons).
    """

    name: str
    suffix: str = ""

    def __str__(self) -> str:
        return f"%{{{self.name}}}{self.suffix}"


def find_placeholders(template: str) -> list[str]:
    """Return placeholder names in order of first appearance.

    Args:
        template: Rendered query text.

    Returns:
        De-duplicated list of names referenced as ``%{name}``.
    """
    return list(dict.fromkeys(_PLACEHOLDER_RE.findall(template)))


def find_unbound_placeholders(template: str, params: Mapping[str, Any]) -> list[str]:
    """Return placeholder names in *template* with no key in *params*.

    Args:
        template: Rendered query text.
        params: Parameter map that will be handed to the executor.

    Returns:
        Missing names, in order of first appearance (empty when all bound).
    """
    return [name for name in find_placeholders(template) if name not in params]
