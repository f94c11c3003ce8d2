"""naive-spam -- Naive Bayes spam/ham classification from word frequencies."""

__version__ = "0.1.0"

from .classifier import DocumentClassifier, WordContribution, prior_term
from .config import MIN_WORD_FREQ, ClassifierConfig
from .evaluator import CorpusEvaluator, evaluate
from .exceptions import (
    ConfigError,
    DegenerateModelError,
    DocumentReadError,
    NaiveSpamError,
)
from .models import ClassificationResult, CorpusTally, DocumentFailure, Label
from .sources import iter_directory, iter_files, iter_labeled_corpus, read_document
from .tokenizer import tokenize
from .vocabulary import (
    BagOfWords,
    VocabularyModel,
    accumulate,
    total_word_count,
    train_model,
)

__all__ = [
    # Model building
    "tokenize",
    "BagOfWords",
    "accumulate",
    "total_word_count",
    "VocabularyModel",
    "train_model",
    # Classification
    "DocumentClassifier",
    "WordContribution",
    "prior_term",
    "ClassificationResult",
    "Label",
    # Evaluation
    "CorpusEvaluator",
    "CorpusTally",
    "DocumentFailure",
    "evaluate",
    # Sources
    "read_document",
    "iter_files",
    "iter_directory",
    "iter_labeled_corpus",
    # Configuration
    "ClassifierConfig",
    "MIN_WORD_FREQ",
    # Errors
    "NaiveSpamError",
    "DegenerateModelError",
    "DocumentReadError",
    "ConfigError",
]
