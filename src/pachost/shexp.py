"""Shell expression matching for shExpMatch().

Only ``.``, ``?`` and ``*`` are translated. Every other regular
expression metacharacter in the expression keeps its regex meaning, so
"a+b" matches "aab". Scripts written against the legacy API rely on
this.
"""

from __future__ import annotations

import re


def translate(shexp: str) -> str:
    """Translate a shell expression into an anchored regular expression."""
    pattern = shexp.replace(".", "\\.")
    pattern = pattern.replace("?", ".")
    pattern = pattern.replace("*", ".*")
    return "^" + pattern + "$"


def sh_exp_match(value: str, shexp: str) -> bool:
    """Return True if the whole string matches the shell expression."""
    try:
        return re.fullmatch(translate(shexp), value) is not None
    except re.error:
        return False


__all__ = ["translate", "sh_exp_match"]
