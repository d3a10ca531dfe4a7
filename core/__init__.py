# core/__init__.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Core module public API for the CNF derivation pipeline

"""Pipeline driver for first-order CNF derivation.

This module sequences parsing, the six rewrite passes and the clause analysis
into a single derivation that an external renderer can display step by step.

Primary Components:
    derive: Runs the derivation, reporting parse failures as an error stage
    run_pipeline: Runs the derivation, raising ParseError on bad input
    Derivation: Parsed formula, ordered stages and Horn analysis
    Stage: Title, resulting formula and trace of one step

Example:
    >>> from core import derive
    >>> derivation = derive(r"\\forall x \\exists y P(x,y)")
    >>> str(derivation.stage("skolemization").formula)
    '\\\\forall x P(x,f1(x))'
"""

from .stage import Stage, Derivation
from .pipeline import derive, run_pipeline, PASSES

__all__ = ["Stage", "Derivation", "derive", "run_pipeline", "PASSES"]

__version__ = "1.0.0"
__description__ = "Pipeline driver for first-order CNF derivation"
