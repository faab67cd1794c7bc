"""Value objects for deployment parameters."""

from dataclasses import dataclass
from enum import Enum


class PullPolicy(str, Enum):
    """Image pull policy accepted by the e2e test runner."""

    ALWAYS = "Always"
    IF_NOT_PRESENT = "IfNotPresent"
    NEVER = "Never"


@dataclass(frozen=True)
class E2EParams:
    """Fields substituted into the e2e parameters template.

    Attributes:
        org: Docker organization the e2e image is pulled from
        tag: Docker image tag
        pull_policy: Image pull policy
    """

    org: str
    tag: str
    pull_policy: PullPolicy = PullPolicy.ALWAYS

    def __post_init__(self) -> None:
        """Coerce and validate the pull policy."""
        try:
            policy = PullPolicy(self.pull_policy)
        except ValueError as e:
            allowed = ", ".join(p.value for p in PullPolicy)
            raise ValueError(
                f"Invalid pull policy '{self.pull_policy}'. Supported values: {allowed}"
            ) from e
        object.__setattr__(self, "pull_policy", policy)
