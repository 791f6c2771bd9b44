from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from ..models.ticket import UNKNOWN, is_blank

"""Field alias resolution.

Spreadsheet exports name the same column differently ("Technology/Platform",
"Technology", "technology" ...). FIELD_ALIASES lists, per logical field, the
header spellings to probe in priority order. The normalizer, the aggregator
and the selection engine all go through ``resolve`` so they agree on which
column backs a field.

Fields without an alias entry are probed generically:
exact key -> lower-cased key -> "Spaced Capitalized" key -> camelCase
contraction (only when the field name contains a space).
"""

__all__ = [
    "FIELD_ALIASES",
    "resolve",
    "lookup_aliases",
    "candidate_keys",
]

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "technology": ("Technology/Platform", "Technology", "technology"),
    "client": ("Client", "client"),
    "ticketType": ("Ticket Type", "TicketType", "ticketType"),
    "assignedTo": ("AssignedTo", "Assigned to", "Assigned To", "assignedTo"),
    "ticketNumber": ("Ticket Number", "ticketNumber"),
    "date": ("Assigned Date", "date"),
}

# Alias lookup ignores case and inner spaces: "Assigned to", "assignedto" -> assignedTo
_ALIAS_INDEX: dict[str, str] = {
    name.lower().replace(" ", ""): name for name in FIELD_ALIASES
}

_UPPER = re.compile(r"([A-Z])")
_SPACE_LOWER = re.compile(r" ([a-z])")


def lookup_aliases(field: str) -> tuple[str, ...] | None:
    name = _ALIAS_INDEX.get(field.lower().replace(" ", ""))
    return FIELD_ALIASES[name] if name is not None else None


def _generic_keys(field: str) -> list[str]:
    keys = [field, field.lower()]
    spaced = _UPPER.sub(r" \1", field).strip()
    keys.append(spaced[:1].upper() + spaced[1:])
    if " " in field:
        keys.append(_SPACE_LOWER.sub(lambda m: m.group(1).upper(), field))
    # keep order, drop repeats
    return list(dict.fromkeys(keys))


def candidate_keys(field: str) -> tuple[str, ...]:
    """Keys probed for ``field``, in priority order."""
    aliases = lookup_aliases(field)
    if aliases is not None:
        return aliases
    return tuple(_generic_keys(field))


def resolve(record: Mapping[str, Any], field: str, default: Any = UNKNOWN) -> Any:
    """Return the first non-blank value among the candidate keys of ``field``.

    Args:
        record: raw row or Ticket (anything with ``get``)
        field: logical field name, e.g. ``"technology"`` or ``"Ticket Type"``
        default: returned when no candidate key holds a value

    Examples:
        >>> resolve({"Technology/Platform": "AWS", "technology": "GCP"}, "technology")
        'AWS'
        >>> resolve({"Ticket Type": "Bug"}, "ticketType")
        'Bug'
        >>> resolve({}, "priority")
        'Unknown'
    """
    for key in candidate_keys(field):
        value = record.get(key)
        if not is_blank(value):
            return value
    return default
