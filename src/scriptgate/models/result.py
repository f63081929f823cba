"""Verdict produced by evaluating an execution condition."""

from __future__ import annotations

from pydantic import BaseModel


class ConditionEvaluationResult(BaseModel):
    """Whether a test should run, and why.

    Build instances with :meth:`enabled` or :meth:`disabled`.
    """

    model_config = {"frozen": True}

    is_disabled: bool
    reason: str | None = None

    @classmethod
    def enabled(cls, reason: str | None) -> ConditionEvaluationResult:
        return cls(is_disabled=False, reason=reason)

    @classmethod
    def disabled(cls, reason: str | None) -> ConditionEvaluationResult:
        return cls(is_disabled=True, reason=reason)

    def __str__(self) -> str:
        state = "false" if self.is_disabled else "true"
        return f"ConditionEvaluationResult [enabled = {state}, reason = '{self.reason}']"
