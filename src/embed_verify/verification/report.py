from dataclasses import dataclass, field

from .checks import Expectation


@dataclass
class ModelReport:
    """Outcome of verifying one model.

    ``error`` is set when encoding could not finish (model load, image
    fetch); ordering failures land in ``violations``.
    """

    model: str
    checks: list[str] = field(default_factory=list)
    violations: list[Expectation] = field(default_factory=list)
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.error is None and not self.violations
