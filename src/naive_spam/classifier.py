"""Two-class Naive Bayes scoring in log space.

For a document, each class gets the score::

    score(c) = sum(log P(w|c)) + prior_term(P(c)) - sum(log P(w))

where ``P(w|c)`` is the word's count in the class bag divided by the class
total, ``P(c)`` is the class total divided by the combined total, and
``P(w)`` is the word's combined count divided by the combined total. Each
distinct word in the document counts once. Words whose combined count is
below the minimum word frequency contribute nothing, and a word absent from
one class contributes nothing to that class's likelihood.

The prior term adds the plain probability by default. ``prior_mode="log"``
switches it to ``log P(c)``; this changes decisions, so the default stays
``"raw"``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping, Optional

from .config import ClassifierConfig
from .exceptions import DegenerateModelError
from .models import ClassificationResult
from .vocabulary import BagOfWords, VocabularyModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordContribution:
    """Log terms contributed by one document word."""

    word: str
    spam_term: float
    ham_term: float
    evidence_term: float

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "spam": round(self.spam_term, 6),
            "ham": round(self.ham_term, 6),
            "evidence": round(self.evidence_term, 6),
        }


def prior_term(prior: float, mode: str = "raw") -> float:
    """Value added to a class score for its prior probability.

    Args:
        prior: Class prior, in ``(0, 1]``.
        mode: ``"raw"`` returns ``prior`` unchanged, ``"log"`` returns
            ``ln(prior)``.
    """
    if mode == "log":
        return math.log(prior)
    return prior


def check_model(model: VocabularyModel) -> None:
    """Raise :class:`DegenerateModelError` if either class total is zero."""
    if model.is_degenerate:
        raise DegenerateModelError(model.ham_total, model.spam_total)


class DocumentClassifier:
    """Scores documents against a trained :class:`VocabularyModel`.

    Example::

        model = VocabularyModel.build({"ham": ham_texts, "spam": spam_texts})
        classifier = DocumentClassifier(model)
        result = classifier.classify("FREE MONEY NOW")
        result.is_spam

    Args:
        model: Trained vocabulary model. Read only.
        config: Scoring options. Words are always filtered with the
            ``min_word_freq`` the model was built with, so totals and
            scoring agree; ``config.min_word_freq`` only applies to training.
    """

    def __init__(
        self,
        model: VocabularyModel,
        config: Optional[ClassifierConfig] = None,
    ) -> None:
        self._model = model
        self._config = config or ClassifierConfig()

    @property
    def model(self) -> VocabularyModel:
        return self._model

    @property
    def config(self) -> ClassifierConfig:
        return self._config

    @property
    def min_word_freq(self) -> int:
        return self._model.min_word_freq

    def classify(self, text: str) -> ClassificationResult:
        """Tokenize a document and score it.

        Raises:
            DegenerateModelError: If the model has a zero class total.
        """
        return self.score(BagOfWords.from_text(text))

    def score(self, doc_bag: Mapping[str, int]) -> ClassificationResult:
        """Compute spam and ham log-scores for a document bag.

        Args:
            doc_bag: The document's word counts. Only the set of words
                matters; repeated occurrences do not change the score.

        Returns:
            ClassificationResult with both scores.

        Raises:
            DegenerateModelError: If the model has a zero class total.
        """
        check_model(self._model)

        model = self._model
        total_count = model.total_count
        prior_ham = model.ham_total / total_count
        prior_spam = model.spam_total / total_count

        log_evidence = 0.0
        log_likelihood_spam = 0.0
        log_likelihood_ham = 0.0
        for contribution in self._contributions(doc_bag):
            log_likelihood_spam += contribution.spam_term
            log_likelihood_ham += contribution.ham_term
            log_evidence += contribution.evidence_term

        mode = self._config.prior_mode
        result = ClassificationResult(
            spam_score=log_likelihood_spam + prior_term(prior_spam, mode) - log_evidence,
            ham_score=log_likelihood_ham + prior_term(prior_ham, mode) - log_evidence,
        )
        logger.debug(
            "Scored document with %d distinct words: spam=%.6f ham=%.6f -> %s",
            len(doc_bag),
            result.spam_score,
            result.ham_score,
            result.label.value,
        )
        return result

    def explain(self, doc_bag: Mapping[str, int]) -> list[WordContribution]:
        """Per-word log terms for the words that pass the frequency filter.

        Raises:
            DegenerateModelError: If the model has a zero class total.
        """
        check_model(self._model)
        return list(self._contributions(doc_bag))

    def _contributions(self, doc_bag: Mapping[str, int]):
        model = self._model
        spam_freq = model.spam_frequencies
        ham_freq = model.ham_frequencies
        total_count = model.total_count
        min_word_freq = model.min_word_freq

        for word in doc_bag:
            spam_count = spam_freq.get(word, 0)
            ham_count = ham_freq.get(word, 0)
            total_word_freq = spam_count + ham_count

            if total_word_freq < min_word_freq:
                continue

            spam_term = math.log(spam_count / model.spam_total) if spam_count != 0 else 0.0
            ham_term = math.log(ham_count / model.ham_total) if ham_count != 0 else 0.0
            evidence_term = (
                math.log(total_word_freq / total_count) if total_word_freq != 0 else 0.0
            )
            yield WordContribution(word, spam_term, ham_term, evidence_term)
