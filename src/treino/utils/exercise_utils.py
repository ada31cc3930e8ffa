"""Utilities for reading exercises typed on the command line."""

import re

from ..models.workout import Exercise

# NAME:SETSxREPS[@WEIGHT][#NOTES], e.g. "Supino reto:4x8@60#pegada fechada"
EXERCISE_SPEC = re.compile(
    r"""
    ^(?P<name>[^:]*):
    \s*(?P<sets>-?\d+)\s*[xX]\s*(?P<reps>-?\d+)
    (?:\s*@\s*(?P<weight>-?\d+(?:[.,]\d+)?)\s*(?:kg)?)?
    (?:\s*\#(?P<notes>.*))?$
    """,
    re.VERBOSE,
)


def parse_exercise_spec(spec: str) -> Exercise:
    """Parse a compact exercise description.

    Only the shape is checked here; values such as zero sets pass through
    so the draft validation can report them.

    Raises:
        ValueError: if the text does not follow NAME:SETSxREPS[@WEIGHT][#NOTES]
    """
    match = EXERCISE_SPEC.match(spec.strip())
    if match is None:
        raise ValueError(
            f"Invalid exercise '{spec}'. Use NAME:SETSxREPS[@WEIGHT][#NOTES], e.g. 'Supino:3x10@60'"
        )

    weight = match.group("weight")
    return Exercise(
        name=match.group("name").strip(),
        sets=int(match.group("sets")),
        reps=int(match.group("reps")),
        weight=float(weight.replace(",", ".")) if weight is not None else None,
        notes=(match.group("notes") or "").strip(),
    )


def parse_number(text: str, kind: type = int) -> int | float | None:
    """Parse a number typed in a form field, accepting a decimal comma.

    Returns None for blank or unparseable input.
    """
    text = (text or "").strip().replace(",", ".")
    if not text:
        return None
    try:
        return kind(text)
    except ValueError:
        return None
