# core/stage.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Stage and derivation records handed to renderers

"""Records describing a complete CNF derivation.

A Derivation is what the pipeline hands to a renderer: the parsed formula,
one Stage per pipeline step and the Horn analysis of the result. A failed
parse yields a Derivation holding a single error stage instead.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union
from syntax.ast_nodes import Formula
from syntax.exceptions import ParseError
from normalization.trace import TraceEntry
from analysis.clauses import HornReport

Step = Union[TraceEntry, str]


@dataclass(frozen=True)
class Stage:
    """One step of the derivation.

    Attributes:
        key: Stable identifier of the step, e.g. "skolemization"
        title: Title shown to the reader
        formula: Formula after the step, None for the error stage
        trace: Explanations of the step, in order
    """

    key: str
    title: str
    formula: Optional[Formula]
    trace: Tuple[Step, ...] = ()

    def messages(self) -> Tuple[str, ...]:
        return tuple(str(step) for step in self.trace)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "title": self.title,
            "formula": None if self.formula is None else str(self.formula),
            "trace": [
                step.to_dict() if isinstance(step, TraceEntry) else {"text": step}
                for step in self.trace
            ],
        }


@dataclass(frozen=True)
class Derivation:
    """Result of running the pipeline on one input.

    Attributes:
        text: The input formula text
        source: Parsed formula, None when parsing failed
        stages: Pipeline stages in order, or the single error stage
        horn: Horn analysis of the CNF, None when parsing failed
        error: The parse error, None on success
    """

    text: str
    source: Optional[Formula]
    stages: Tuple[Stage, ...]
    horn: Optional[HornReport] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def final(self) -> Optional[Formula]:
        """Formula of the last stage."""
        return self.stages[-1].formula

    def stage(self, key: str) -> Stage:
        """Return the stage with the given key.

        Raises:
            KeyError: No stage has that key
        """
        for stage in self.stages:
            if stage.key == key:
                return stage
        raise KeyError(key)

    def to_dict(self) -> dict:
        return {
            "input": self.text,
            "ok": self.ok,
            "source": None if self.source is None else str(self.source),
            "stages": [stage.to_dict() for stage in self.stages],
            "horn": None if self.horn is None else self.horn.to_dict(),
            "error": None if self.error is None else str(self.error),
        }
