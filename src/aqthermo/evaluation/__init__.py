"""Evaluators of substance, solvent and reaction properties."""

from aqthermo.evaluation.context import DEFAULT_SOLVENT, EvaluationContext

__all__ = ["DEFAULT_SOLVENT", "EvaluationContext"]
