"""Word-frequency tables and the two-class vocabulary model.

``BagOfWords`` is an additive token counter. ``VocabularyModel`` holds one
bag per class and the per-class totals used for priors and likelihoods.
Totals only include words whose count in that class's bag reaches the
minimum word frequency; rarer words are invisible to the totals.
"""

from __future__ import annotations

import concurrent.futures
import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Union

from .config import MIN_WORD_FREQ
from .models import Label
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Bag of words
# ---------------------------------------------------------------------------

class BagOfWords(Counter):
    """Token -> occurrence count. Counts only ever grow."""

    @classmethod
    def from_text(cls, text: str) -> "BagOfWords":
        """Build a fresh bag from a single document."""
        return cls().accumulate(tokenize(text))

    def accumulate(self, tokens: Iterable[str]) -> "BagOfWords":
        """Add one occurrence per token. Returns self for chaining."""
        for token in tokens:
            self[token] += 1
        return self

    def merge(self, other: Mapping[str, int]) -> "BagOfWords":
        """Add every count from ``other`` into this bag. Returns self."""
        for token, count in other.items():
            self[token] += count
        return self


def accumulate(bag: BagOfWords, tokens: Iterable[str]) -> BagOfWords:
    """Increment ``bag[token]`` for every token, in place."""
    return bag.accumulate(tokens)


def total_word_count(bag: Mapping[str, int], min_word_freq: int = MIN_WORD_FREQ) -> int:
    """Sum the counts of words that individually reach ``min_word_freq``."""
    return sum(count for count in bag.values() if count >= min_word_freq)


# ---------------------------------------------------------------------------
# Vocabulary model
# ---------------------------------------------------------------------------

DocumentsByClass = Union[
    Mapping[Union[Label, str], Iterable[str]],
    Iterable[tuple[Union[Label, str], str]],
]


def _as_label(value: Union[Label, str]) -> Label:
    try:
        return Label(value)
    except ValueError:
        raise ValueError(
            f"Unknown class label {value!r}. Known: {[label.value for label in Label]}"
        ) from None


@dataclass(frozen=True)
class VocabularyModel:
    """Class-conditional word statistics for ham and spam.

    Instances are immutable: the frequency tables are exposed as read-only
    mapping views and the totals are derived once at construction. Use
    :meth:`build` or :meth:`from_bags` rather than the constructor.

    Attributes:
        ham_frequencies: Word counts over all ham training documents.
        spam_frequencies: Word counts over all spam training documents.
        ham_total: Sum of ham counts for words at or above the threshold.
        spam_total: Sum of spam counts for words at or above the threshold.
        min_word_freq: Threshold the totals were computed with.
    """

    ham_frequencies: Mapping[str, int]
    spam_frequencies: Mapping[str, int]
    ham_total: int
    spam_total: int
    min_word_freq: int = MIN_WORD_FREQ
    _ham_bag: BagOfWords = field(default_factory=BagOfWords, repr=False, compare=False)
    _spam_bag: BagOfWords = field(default_factory=BagOfWords, repr=False, compare=False)

    @classmethod
    def from_bags(
        cls,
        ham: Mapping[str, int],
        spam: Mapping[str, int],
        min_word_freq: int = MIN_WORD_FREQ,
    ) -> "VocabularyModel":
        """Freeze two bags into a model and derive the filtered totals.

        The bags are copied, so later changes to the arguments do not leak
        into the model.
        """
        ham_bag = BagOfWords(ham)
        spam_bag = BagOfWords(spam)
        model = cls(
            ham_frequencies=MappingProxyType(ham_bag),
            spam_frequencies=MappingProxyType(spam_bag),
            ham_total=total_word_count(ham_bag, min_word_freq),
            spam_total=total_word_count(spam_bag, min_word_freq),
            min_word_freq=min_word_freq,
            _ham_bag=ham_bag,
            _spam_bag=spam_bag,
        )
        logger.info(
            "Built vocabulary model: ham_total=%d spam_total=%d vocabulary=%d (min_word_freq=%d)",
            model.ham_total,
            model.spam_total,
            model.vocabulary_size,
            min_word_freq,
        )
        return model

    @classmethod
    def build(
        cls,
        documents_by_class: DocumentsByClass,
        min_word_freq: int = MIN_WORD_FREQ,
    ) -> "VocabularyModel":
        """Accumulate labeled training documents into a model.

        Args:
            documents_by_class: Either a mapping of label to document texts,
                or an iterable of ``(label, text)`` pairs. Labels may be
                :class:`Label` members or their string values.
            min_word_freq: Threshold for the per-class totals.

        Returns:
            A new immutable model. Document order does not matter.

        Raises:
            ValueError: If a label is neither ham nor spam.
        """
        bags = {Label.HAM: BagOfWords(), Label.SPAM: BagOfWords()}

        if isinstance(documents_by_class, Mapping):
            pairs: Iterable[tuple[Union[Label, str], str]] = (
                (label, text)
                for label, texts in documents_by_class.items()
                for text in texts
            )
        else:
            pairs = documents_by_class

        for label, text in pairs:
            bags[_as_label(label)].accumulate(tokenize(text))

        return cls.from_bags(bags[Label.HAM], bags[Label.SPAM], min_word_freq)

    @property
    def total_count(self) -> int:
        return self.ham_total + self.spam_total

    @property
    def vocabulary_size(self) -> int:
        """Number of distinct words seen in either class."""
        return len(self.ham_frequencies.keys() | self.spam_frequencies.keys())

    @property
    def is_degenerate(self) -> bool:
        """True when either class has no above-threshold word counts."""
        return self.ham_total == 0 or self.spam_total == 0

    def frequencies(self, label: Union[Label, str]) -> Mapping[str, int]:
        """Read-only word counts for one class."""
        if _as_label(label) == Label.HAM:
            return self.ham_frequencies
        return self.spam_frequencies

    def most_common(self, label: Union[Label, str], top_n: int = 20) -> list[tuple[str, int]]:
        """Most frequent words of a class that reach the threshold."""
        bag = self._ham_bag if _as_label(label) == Label.HAM else self._spam_bag
        return [
            (word, count)
            for word, count in bag.most_common()
            if count >= self.min_word_freq
        ][:top_n]


# ---------------------------------------------------------------------------
# Training
# ---------------------------------------------------------------------------

TextOrReader = Union[str, Callable[[], str]]


def _resolve(document: TextOrReader) -> str:
    return document() if callable(document) else document


def _accumulate_shard(
    shard: list[tuple[Union[Label, str], TextOrReader]],
) -> dict[Label, BagOfWords]:
    bags = {Label.HAM: BagOfWords(), Label.SPAM: BagOfWords()}
    for label, document in shard:
        bags[_as_label(label)].accumulate(tokenize(_resolve(document)))
    return bags


def train_model(
    labeled_documents: Iterable[tuple[Union[Label, str], TextOrReader]],
    min_word_freq: int = MIN_WORD_FREQ,
    workers: int = 1,
) -> VocabularyModel:
    """Build a model from ``(label, document)`` pairs, optionally in threads.

    Documents may be text or zero-argument readers returning text. Each
    worker accumulates a private pair of bags over its share of the
    documents; the bags are merged afterwards, which gives the same model
    as a sequential pass.

    Raises:
        DocumentReadError: If a reader fails. Training stops; a partially
            read corpus would silently skew the model.
        ValueError: If a label is neither ham nor spam.
    """
    if workers <= 1:
        bags = _accumulate_shard(list(labeled_documents))
        return VocabularyModel.from_bags(bags[Label.HAM], bags[Label.SPAM], min_word_freq)

    shards: list[list[tuple[Union[Label, str], TextOrReader]]] = [[] for _ in range(workers)]
    for i, pair in enumerate(labeled_documents):
        shards[i % workers].append(pair)

    ham, spam = BagOfWords(), BagOfWords()
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        for bags in executor.map(_accumulate_shard, shards):
            ham.merge(bags[Label.HAM])
            spam.merge(bags[Label.SPAM])

    return VocabularyModel.from_bags(ham, spam, min_word_freq)
