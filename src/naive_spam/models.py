"""Data models for spam classification results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Label(str, Enum):
    """The two document classes."""

    SPAM = "spam"
    HAM = "ham"


@dataclass(frozen=True)
class ClassificationResult:
    """Per-class log-scores for one document.

    The decision is strict: equal scores resolve to ham.
    """

    spam_score: float
    ham_score: float

    @property
    def is_spam(self) -> bool:
        return self.spam_score > self.ham_score

    @property
    def label(self) -> Label:
        return Label.SPAM if self.is_spam else Label.HAM

    @property
    def margin(self) -> float:
        """``spam_score - ham_score``; positive means spam."""
        return self.spam_score - self.ham_score

    def to_dict(self) -> dict:
        return {
            "label": self.label.value,
            "spam_score": round(self.spam_score, 6),
            "ham_score": round(self.ham_score, 6),
        }


@dataclass(frozen=True)
class DocumentFailure:
    """A document that was skipped because it could not be read."""

    source: str
    reason: str

    def to_dict(self) -> dict:
        return {"source": self.source, "reason": self.reason}


@dataclass
class CorpusTally:
    """Decision counts for one evaluated collection of documents.

    Attributes:
        spam_count: Documents decided spam.
        ham_count: Documents decided ham.
        failures: Documents that could not be read; never counted as
            spam or ham.
    """

    spam_count: int = 0
    ham_count: int = 0
    failures: list[DocumentFailure] = field(default_factory=list)

    @property
    def errored_count(self) -> int:
        return len(self.failures)

    @property
    def classified_count(self) -> int:
        return self.spam_count + self.ham_count

    @property
    def total(self) -> int:
        return self.classified_count + self.errored_count

    def record(self, result: ClassificationResult) -> None:
        """Count one classification decision."""
        if result.is_spam:
            self.spam_count += 1
        else:
            self.ham_count += 1

    def record_failure(self, source: str, reason: str) -> None:
        self.failures.append(DocumentFailure(source=source, reason=reason))

    def accuracy(self, expected: Label) -> float:
        """Share of classified documents that match ``expected``.

        Errored documents are left out of the denominator. Returns 0.0 when
        nothing was classified.
        """
        if self.classified_count == 0:
            return 0.0
        hits = self.spam_count if expected == Label.SPAM else self.ham_count
        return hits / self.classified_count

    def to_dict(self) -> dict:
        return {
            "spam": self.spam_count,
            "ham": self.ham_count,
            "errored": self.errored_count,
            "failures": [f.to_dict() for f in self.failures],
        }
