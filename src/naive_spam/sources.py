"""File-system document sources.

Training corpora follow the Enron spam corpus layout: each shard directory
holds a ``ham/`` and a ``spam/`` subdirectory with one message per file::

    data/
      enron1/
        ham/0001.1999-12-10.farmer.ham.txt
        spam/0006.2003-12-18.GP.spam.txt
      enron2/
        ...

The classifier itself never touches the file system; these helpers turn
directories into the text and reader sequences it consumes.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Callable, Union

from .exceptions import DocumentReadError
from .models import Label

logger = logging.getLogger(__name__)


def read_document(path: Union[str, Path]) -> str:
    """Read a file as text.

    Bytes that are not valid UTF-8 are replaced rather than rejected, so any
    readable file yields text.

    Raises:
        DocumentReadError: If the file cannot be opened or read.
    """
    path = Path(path)
    try:
        return path.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        raise DocumentReadError(str(path), e.strerror or str(e)) from e


def iter_files(root: Union[str, Path]) -> Iterator[Path]:
    """Yield every regular file below ``root``, recursively, in sorted order.

    Raises:
        DocumentReadError: If ``root`` is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise DocumentReadError(str(root), "not a directory")
    for path in sorted(root.rglob("*")):
        if path.is_file():
            yield path


def iter_directory(root: Union[str, Path]) -> Iterator[Callable[[], str]]:
    """Yield a lazy reader for every file below ``root``.

    Reading is deferred so that a failing file surfaces as a per-document
    :class:`DocumentReadError` during evaluation.
    """
    for path in iter_files(root):
        yield functools.partial(read_document, path)


def iter_labeled_corpus(
    shard: Union[str, Path],
) -> Iterator[tuple[Label, Callable[[], str]]]:
    """Yield ``(label, reader)`` for every file in ``shard/ham`` and ``shard/spam``.

    Raises:
        DocumentReadError: If either class directory is missing.
    """
    shard = Path(shard)
    for label in (Label.HAM, Label.SPAM):
        count = 0
        for reader in iter_directory(shard / label.value):
            count += 1
            yield label, reader
        logger.info("Loaded %d %s documents from %s", count, label.value, shard)
