"""Naming-convention variants of a user-supplied resource identifier."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NameVariants:
    """The forms of one identifier that templates and file names bind to.

    Attributes:
        raw: The identifier exactly as the user typed it (``"UserOrder"``).
        lower: Unicode case-folded form (``"userorder"``).
        title: ``raw`` with its first character title-cased.
        file_slug: Stem used to build file names.  Equal to ``lower``; words
            are not separated, so ``"UserOrder"`` becomes ``"userorder"``
            rather than ``"user_order"``.
    """

    raw: str
    lower: str
    title: str
    file_slug: str


def resolve_name(raw: str) -> NameVariants:
    """Derive the naming variants of *raw*.

    ``str.casefold`` is used instead of an ASCII lower so identifiers such as
    ``"Straße"`` or ones starting with a title-case digraph (``"ǅemal"``) fold
    consistently.  Folding is idempotent: resolving ``lower`` again yields the
    same ``lower``.

    Raises:
        ValueError: If *raw* is empty.
    """
    if not raw:
        raise ValueError("identifier must not be empty")

    lower = raw.casefold()
    return NameVariants(
        raw=raw,
        lower=lower,
        title=raw[:1].title() + raw[1:],
        file_slug=lower,
    )
