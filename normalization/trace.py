# normalization/trace.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Derivation trace entries and pass results

"""Trace entries recorded by the rewrite passes.

Each pass returns its output formula together with an ordered tuple of trace
entries explaining how it got there. An entry is either plain text or an
equivalence between a formula before and after a rewrite. Entries only
describe the derivation; no later pass reads them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple
from syntax.ast_nodes import Formula


@dataclass(frozen=True, slots=True)
class TraceEntry:
    """One human-readable derivation step.

    Attributes:
        text: Explanation of the step
        before: Formula the rule was applied to, for equivalence entries
        after: Resulting formula, for equivalence and result entries
    """

    text: str
    before: Optional[Formula] = None
    after: Optional[Formula] = None

    @classmethod
    def note(cls, text: str) -> TraceEntry:
        return cls(text)

    @classmethod
    def equivalence(cls, text: str, before: Formula, after: Formula) -> TraceEntry:
        return cls(text, before, after)

    @classmethod
    def result(cls, text: str, after: Formula) -> TraceEntry:
        return cls(text, None, after)

    @property
    def is_equivalence(self) -> bool:
        return self.before is not None and self.after is not None

    def __str__(self) -> str:
        if self.is_equivalence:
            return rf"{self.text}: {self.before} \equiv {self.after}"
        if self.after is not None:
            return f"{self.text}: {self.after}"
        return self.text

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "before": None if self.before is None else str(self.before),
            "after": None if self.after is None else str(self.after),
        }


class PassResult(NamedTuple):
    """Output of a rewrite pass: the new formula and how it was derived."""

    formula: Formula
    trace: Tuple[TraceEntry, ...]
