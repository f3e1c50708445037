"""
Evaluation settings.

The policy decides what happens when an input fails validation:
STRICT raises on the first problem, LENIENT records it through the sink
and carries on wherever a best-effort default exists.
"""

from dataclasses import dataclass
from enum import Enum


class ValidationPolicy(Enum):
    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True)
class EvaluationConfig:
    """
    Attributes:
        policy: how validation failures are handled
        warn_on_unmatched: record a warning when no indicator record matches
            the requested phases (the result is then 0)
    """
    policy: ValidationPolicy = ValidationPolicy.STRICT
    warn_on_unmatched: bool = True

    @property
    def strict(self) -> bool:
        return self.policy is ValidationPolicy.STRICT


DEFAULT_CONFIG = EvaluationConfig()

CONFIGS: dict[ValidationPolicy, EvaluationConfig] = {
    ValidationPolicy.STRICT: DEFAULT_CONFIG,
    ValidationPolicy.LENIENT: EvaluationConfig(policy=ValidationPolicy.LENIENT),
}


def get_evaluation_config(policy) -> EvaluationConfig:
    """
    Get the configuration for a validation policy.

    Args:
        policy: a ValidationPolicy or its value ("strict" / "lenient")

    Raises:
        KeyError: if the policy is unknown
    """
    if isinstance(policy, str):
        try:
            policy = ValidationPolicy(policy.strip().lower())
        except ValueError:
            raise KeyError(f"Unknown policy: {policy}. Available policies: {[p.value for p in ValidationPolicy]}")
    if policy not in CONFIGS:
        raise KeyError(f"Unknown policy: {policy}. Available policies: {[p.value for p in ValidationPolicy]}")
    return CONFIGS[policy]
