"""Glob-driven document source for UTF-8 text files."""

import os
import re
from fnmatch import fnmatchcase
from pathlib import Path

from emqu.domain.entities import Document
from emqu.domain.exceptions import FileAccessError, GlobError


def validate_pattern(pattern: str) -> None:
    """Reject patterns the glob matcher would silently misread.

    Raises GlobError for an empty pattern, for ``**`` that is not a whole
    path component and for an unclosed ``[`` character class.
    """
    if not pattern:
        raise GlobError("Glob pattern is empty")
    for component in pattern.replace("\\", "/").split("/"):
        if "**" in component and component != "**":
            raise GlobError(
                f"Invalid pattern {pattern!r}: wildcards are either regular `*` or recursive `**`"
            )
    i = pattern.find("[")
    while i != -1:
        j = i + 1
        if pattern[j : j + 1] in ("!", "^"):
            j += 1
        if pattern[j : j + 1] == "]":
            j += 1
        close = pattern.find("]", j)
        if close == -1:
            raise GlobError(f"Invalid pattern {pattern!r}: unclosed character class")
        i = pattern.find("[", close + 1)


_MAGIC = re.compile(r"[*?[]")


def _split_root(pattern: str) -> tuple[Path, list[str]]:
    """Leading literal directories of pattern, and the components left to match."""
    components = pattern.replace(os.sep, "/").split("/")
    i = 0
    while i < len(components) and not _MAGIC.search(components[i]):
        i += 1
    if i == len(components):
        return Path(pattern), []
    literal = "/".join(components[:i])
    if not literal and pattern.startswith("/"):
        literal = "/"
    return Path(literal or "."), [c for c in components[i:] if c]


def _matches(names: list[str], parts: list[str]) -> bool:
    """Whether relative path names match pattern parts; ``**`` spans any depth."""
    if not parts:
        return not names
    head, rest = parts[0], parts[1:]
    if head == "**":
        return any(_matches(names[i:], rest) for i in range(len(names) + 1))
    return bool(names) and fnmatchcase(names[0], head) and _matches(names[1:], rest)


def _could_match(names: list[str], parts: list[str]) -> bool:
    """Whether a directory at names may contain matches."""
    for i, name in enumerate(names):
        if i < len(parts) and parts[i] == "**":
            return True
        if i >= len(parts) - 1:
            return False
        if not fnmatchcase(name, parts[i]):
            return False
    return True


class GlobDocumentSource:
    """Expands glob patterns to files and reads them as UTF-8 text."""

    def expand(self, pattern: str) -> list[Path]:
        """Matching regular files, sorted by path."""
        validate_pattern(pattern)
        root, parts = _split_root(pattern)
        if not parts:
            return [root] if root.is_file() else []
        if not root.is_dir():
            return []

        def _unreadable(error: OSError) -> None:
            raise GlobError(f"Cannot expand {pattern!r}: {error}") from error

        matches: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=_unreadable):
            rel = Path(dirpath).relative_to(root).parts
            dirnames[:] = [d for d in dirnames if _could_match([*rel, d], parts)]
            for name in filenames:
                if _matches([*rel, name], parts):
                    path = Path(dirpath, name)
                    if path.is_file():
                        matches.append(path)
        return sorted(matches)

    def load(self, path: Path) -> Document:
        try:
            content = path.read_bytes().decode("utf-8")
        except OSError as e:
            raise FileAccessError(f"Cannot read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise FileAccessError(f"{path} is not valid UTF-8 text: {e}") from e
        return Document(
            path=path,
            base_name=path.stem or "unknown",
            extension=path.suffix.lstrip(".") or "txt",
            content=content,
        )
