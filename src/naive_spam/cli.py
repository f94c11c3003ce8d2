"""Command-line interface for naive-spam.

Provides ``evaluate``, ``classify``, and ``stats`` commands with rich
terminal output using the ``click`` and ``rich`` libraries.

Usage::

    naive-spam evaluate data/
    naive-spam evaluate data/ --train enron1 --train enron2 --test enron6
    naive-spam classify --train data/enron1 message.txt
    naive-spam stats --train data/enron1 --top 10
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import nullcontext
from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .classifier import DocumentClassifier
from .config import MIN_WORD_FREQ, PRIOR_MODES, ClassifierConfig
from .evaluator import CorpusEvaluator
from .exceptions import NaiveSpamError
from .models import CorpusTally, Label
from .sources import iter_directory, iter_labeled_corpus, read_document
from .vocabulary import BagOfWords, VocabularyModel, train_model

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_TRAIN_SHARDS = ("enron1", "enron2", "enron3", "enron4", "enron5")
DEFAULT_TEST_SHARD = "enron6"


def _configure_logging(verbosity: int) -> None:
    """Route library logging through rich, WARNING/INFO/DEBUG by verbosity."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _status(message: str, output: str):
    """Spinner for rich output; no-op when emitting JSON."""
    if output == "json":
        return nullcontext()
    return console.status(f"[bold blue]{message}", spinner="dots")


def _fail(error: Exception) -> None:
    console.print(f"[bold red]Error:[/] {error}")
    sys.exit(1)


def _train(shards: list[Path], config: ClassifierConfig) -> VocabularyModel:
    labeled = (pair for shard in shards for pair in iter_labeled_corpus(shard))
    return train_model(labeled, min_word_freq=config.min_word_freq, workers=config.workers)


@click.group()
@click.version_option(package_name="naive-spam")
@click.option("--verbose", "-v", count=True, help="Increase log verbosity (-v, -vv).")
@click.option("--min-word-freq", type=click.IntRange(min=0), default=None,
              help=f"Minimum word count for a word to influence totals and scores "
                   f"[default: $NAIVE_SPAM_MIN_WORD_FREQ or {MIN_WORD_FREQ}].")
@click.option("--prior-mode", type=click.Choice(PRIOR_MODES), default=None,
              help="Add the class prior as a plain probability or as its logarithm "
                   "[default: $NAIVE_SPAM_PRIOR_MODE or raw].")
@click.option("--workers", "-j", type=click.IntRange(min=1), default=None,
              help="Threads used for reading and classifying documents "
                   "[default: $NAIVE_SPAM_WORKERS or 1].")
@click.pass_context
def main(ctx: click.Context, verbose: int, min_word_freq: int | None,
         prior_mode: str | None, workers: int | None) -> None:
    """Naive Bayes spam/ham classifier for plain-text corpora.

    Options left unset fall back to the NAIVE_SPAM_* environment variables.
    """
    _configure_logging(verbose)
    overrides = {
        name: value
        for name, value in (
            ("min_word_freq", min_word_freq),
            ("prior_mode", prior_mode),
            ("workers", workers),
        )
        if value is not None
    }
    try:
        ctx.obj = replace(ClassifierConfig.from_env(), **overrides)
    except NaiveSpamError as e:
        _fail(e)


@main.command()
@click.argument("data_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--train", "train_shards", multiple=True, default=DEFAULT_TRAIN_SHARDS,
              show_default=True, help="Training shard under DATA_DIR (repeatable).")
@click.option("--test", "test_shard", default=DEFAULT_TEST_SHARD, show_default=True,
              help="Shard under DATA_DIR whose ham/ and spam/ are classified.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def evaluate(config: ClassifierConfig, data_dir: Path, train_shards: tuple[str, ...],
             test_shard: str, output: str) -> None:
    """Train on labeled shards, then classify a held-out shard.

    Example: naive-spam evaluate data/ --train enron1 --test enron6
    """
    try:
        with _status("Training...", output):
            model = _train([data_dir / s for s in train_shards], config)

        evaluator = CorpusEvaluator(DocumentClassifier(model, config), workers=config.workers)
        tallies: dict[Label, CorpusTally] = {}
        for label in (Label.HAM, Label.SPAM):
            with _status(f"Classifying {label.value}...", output):
                tallies[label] = evaluator.evaluate(iter_directory(data_dir / test_shard / label.value))
    except NaiveSpamError as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps({
            label.value: {**tally.to_dict(), "accuracy": round(tally.accuracy(label), 4)}
            for label, tally in tallies.items()
        }, indent=2))
        return

    table = Table(title=f"Evaluation — {test_shard}")
    table.add_column("Directory", style="cyan")
    table.add_column("Spam", justify="right")
    table.add_column("Ham", justify="right")
    table.add_column("Errored", justify="right")
    table.add_column("Accuracy", justify="right")
    for label, tally in tallies.items():
        table.add_row(
            label.value,
            str(tally.spam_count),
            str(tally.ham_count),
            f"[red]{tally.errored_count}[/]" if tally.errored_count else "0",
            f"{tally.accuracy(label):.1%}",
        )
    console.print(table)

    for tally in tallies.values():
        for failure in tally.failures:
            console.print(f"  [red]✗[/] {failure.source}: {failure.reason}")


@main.command()
@click.argument("files", nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--train", "train_shards", multiple=True, required=True,
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help="Training shard directory with ham/ and spam/ (repeatable).")
@click.option("--explain", is_flag=True, help="Show per-word score contributions.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def classify(config: ClassifierConfig, files: tuple[Path, ...],
             train_shards: tuple[Path, ...], explain: bool, output: str) -> None:
    """Classify individual files.

    Example: naive-spam classify --train data/enron1 message.txt
    """
    try:
        with _status("Training...", output):
            model = _train(list(train_shards), config)
        classifier = DocumentClassifier(model, config)

        rows = []
        for file in files:
            text = read_document(file)
            result = classifier.classify(text)
            contributions = []
            if explain:
                contributions = classifier.explain(BagOfWords.from_text(text))
            rows.append((file, result, contributions))
    except NaiveSpamError as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps([
            {
                "file": str(file),
                **result.to_dict(),
                **({"words": [c.to_dict() for c in contributions]} if explain else {}),
            }
            for file, result, contributions in rows
        ], indent=2))
        return

    table = Table(title="Classification", show_lines=explain)
    table.add_column("File", style="white")
    table.add_column("Spam score", justify="right")
    table.add_column("Ham score", justify="right")
    table.add_column("Label", justify="center")
    for file, result, _ in rows:
        style = "bold red" if result.is_spam else "bold green"
        table.add_row(
            file.name,
            f"{result.spam_score:.4f}",
            f"{result.ham_score:.4f}",
            f"[{style}]{result.label.value.upper()}[/]",
        )
    console.print(table)

    if explain:
        for file, _, contributions in rows:
            words = Table(title=f"Word contributions — {file.name}")
            words.add_column("Word", style="cyan")
            words.add_column("Spam", justify="right")
            words.add_column("Ham", justify="right")
            words.add_column("Evidence", justify="right")
            for c in contributions:
                words.add_row(c.word, f"{c.spam_term:.4f}", f"{c.ham_term:.4f}",
                              f"{c.evidence_term:.4f}")
            console.print(words)


@main.command()
@click.option("--train", "train_shards", multiple=True, required=True,
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help="Training shard directory with ham/ and spam/ (repeatable).")
@click.option("--top", type=click.IntRange(min=1), default=10, show_default=True,
              help="Number of frequent words shown per class.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def stats(config: ClassifierConfig, train_shards: tuple[Path, ...], top: int,
          output: str) -> None:
    """Show vocabulary model totals and the most frequent words per class."""
    try:
        model = _train(list(train_shards), config)
    except NaiveSpamError as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps({
            "ham_total": model.ham_total,
            "spam_total": model.spam_total,
            "vocabulary_size": model.vocabulary_size,
            "min_word_freq": model.min_word_freq,
            "top": {
                label.value: model.most_common(label, top) for label in (Label.HAM, Label.SPAM)
            },
        }, indent=2))
        return

    console.print(Panel(
        f"Ham total: [bold]{model.ham_total}[/] | "
        f"Spam total: [bold]{model.spam_total}[/] | "
        f"Vocabulary: {model.vocabulary_size} | "
        f"Min word freq: {model.min_word_freq}",
        title="📊 Vocabulary Model",
        border_style="blue",
    ))
    if model.is_degenerate:
        console.print("[bold yellow]Warning:[/] model is degenerate; classification will fail.")

    for label in (Label.HAM, Label.SPAM):
        table = Table(title=f"Top {label.value} words")
        table.add_column("#", justify="right", width=4)
        table.add_column("Word", style="cyan")
        table.add_column("Count", justify="right")
        for i, (word, count) in enumerate(model.most_common(label, top), 1):
            table.add_row(str(i), word, str(count))
        console.print(table)


if __name__ == "__main__":
    main()
