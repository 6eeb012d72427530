from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from ..core.constants import DEFAULT_CLASSIFIER_TIMEOUT_SECONDS
from ..core.enums import ClassifierBackend
from .classifier import AnomalyClassifier, RuleBasedClassifier
from .hosted_classifier import HostedModelClassifier


@dataclass
class ClassifierFactory:
    """Factory Pattern: choose the classifier backend from settings."""

    local_tz: tzinfo
    url: Optional[str] = None
    api_key: Optional[str] = None
    timeout: float = DEFAULT_CLASSIFIER_TIMEOUT_SECONDS

    def create(self, backend: ClassifierBackend | str) -> AnomalyClassifier:
        try:
            backend = ClassifierBackend(backend)
        except ValueError:
            raise ValueError(f"Unknown classifier backend: {backend!r}")

        if backend == ClassifierBackend.HOSTED:
            return HostedModelClassifier(self.url or "", api_key=self.api_key, timeout=self.timeout)
        return RuleBasedClassifier(local_tz=self.local_tz)
