"""Plain-text rendering of ancestral trees."""

import sys
from typing import Optional, TextIO

from wikitree_api.family.person import PersonProfile
from wikitree_api.records import display_date

INDENT_PER_LEVEL = 4
HANGER = "+" + "-" * (INDENT_PER_LEVEL - 1)
EMPTY_INDENT = " " * INDENT_PER_LEVEL
NONEMPTY_INDENT = "|" + " " * (INDENT_PER_LEVEL - 1)


def _label(role: str, profile: PersonProfile) -> str:
    return (
        f"{role} - {profile.short_name} "
        f"({display_date(profile.get('BirthDate'))},{display_date(profile.get('DeathDate'))})"
    )


def _render(lines: list, going_left: bool, indent: str, role: str,
            profile: Optional[PersonProfile]) -> None:
    if profile is None:
        return

    chopped = indent[:-INDENT_PER_LEVEL]
    replaced = chopped + EMPTY_INDENT + NONEMPTY_INDENT
    if going_left:
        _render(lines, True, replaced, "F", profile.biological_father)
        lines.append(chopped + HANGER + _label(role, profile))
        _render(lines, False, indent + NONEMPTY_INDENT, "M", profile.biological_mother)
        lines.append(indent)
    else:
        lines.append(indent)
        _render(lines, True, indent + NONEMPTY_INDENT, "F", profile.biological_father)
        lines.append(chopped + HANGER + _label(role, profile))
        _render(lines, False, replaced, "M", profile.biological_mother)


def render_ancestral_tree(profile: Optional[PersonProfile]) -> list[str]:
    """
    Lay out an ancestral tree sideways.

    Each person gets one line; their father sits above them and their mother
    below, one level further to the right. Blank connector lines are dropped.

    Example for Winston Churchill with two parents::

            +---F - Randolph Churchill (1849-02-13,1895-01-24)
            |
        +---B - Winston Churchill (1874-11-30,1965-01-24)
            |
            +---M - Jennie Jerome (1854-01-09,1921-06-29)
    """
    lines: list[str] = []
    _render(lines, True, EMPTY_INDENT, "B", profile)
    return [line.rstrip() for line in lines if line.strip()]


def print_ancestral_tree(profile: Optional[PersonProfile], stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    for line in render_ancestral_tree(profile):
        print(line, file=stream)
