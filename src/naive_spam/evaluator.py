"""Corpus-level evaluation: classify many documents and tally decisions."""

from __future__ import annotations

import concurrent.futures
import logging
from collections.abc import Iterable
from typing import Callable, Optional, Union

from .classifier import DocumentClassifier, check_model
from .config import ClassifierConfig
from .exceptions import DocumentReadError
from .models import ClassificationResult, CorpusTally
from .vocabulary import VocabularyModel

logger = logging.getLogger(__name__)

Document = Union[str, Callable[[], str]]

# Outcome of one document: its scores, or the read error that skipped it.
_Outcome = Union[ClassificationResult, DocumentReadError]


class CorpusEvaluator:
    """Runs a :class:`DocumentClassifier` over a collection of documents.

    Documents are given either as text or as zero-argument readers that
    return text. A reader raising :class:`DocumentReadError` is counted as
    errored and the remaining documents are still classified. A degenerate
    model fails the whole evaluation before any document is read.

    Args:
        classifier: Classifier to apply to each document.
        workers: Number of threads. Each document is scored independently
            and the tally is reduced on the calling thread.
    """

    def __init__(self, classifier: DocumentClassifier, workers: int = 1) -> None:
        self._classifier = classifier
        self._workers = max(1, workers)

    def evaluate(self, documents: Iterable[Document]) -> CorpusTally:
        """Classify every document and count spam, ham, and errored ones.

        Raises:
            DegenerateModelError: If the model has a zero class total.
        """
        check_model(self._classifier.model)

        if self._workers == 1:
            outcomes = (self._classify_one(doc, i) for i, doc in enumerate(documents))
            return self._tally(outcomes)

        with concurrent.futures.ThreadPoolExecutor(max_workers=self._workers) as executor:
            future_to_index = {
                executor.submit(self._classify_one, doc, i): i
                for i, doc in enumerate(documents)
            }
            indexed: list[tuple[int, _Outcome]] = []
            for future in concurrent.futures.as_completed(future_to_index):
                indexed.append((future_to_index[future], future.result()))

        indexed.sort(key=lambda pair: pair[0])
        return self._tally(outcome for _, outcome in indexed)

    def _classify_one(self, document: Document, index: int) -> _Outcome:
        try:
            text = document() if callable(document) else document
        except DocumentReadError as e:
            logger.warning("Skipping document #%d: %s", index, e)
            return e
        return self._classifier.classify(text)

    @staticmethod
    def _tally(outcomes: Iterable[_Outcome]) -> CorpusTally:
        tally = CorpusTally()
        for outcome in outcomes:
            if isinstance(outcome, DocumentReadError):
                tally.record_failure(outcome.source, outcome.reason)
            else:
                tally.record(outcome)
        logger.info(
            "Evaluated %d documents: spam=%d ham=%d errored=%d",
            tally.total,
            tally.spam_count,
            tally.ham_count,
            tally.errored_count,
        )
        return tally


def evaluate(
    documents: Iterable[Document],
    model: VocabularyModel,
    config: Optional[ClassifierConfig] = None,
) -> CorpusTally:
    """Classify ``documents`` against ``model`` and return the tally."""
    config = config or ClassifierConfig()
    classifier = DocumentClassifier(model, config)
    return CorpusEvaluator(classifier, workers=config.workers).evaluate(documents)
