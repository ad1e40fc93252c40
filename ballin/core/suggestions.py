"""
Command Suggestions

"Did you mean" support for unknown command names, based on the
Levenshtein edit distance between the requested name and every
registered one.

Author: ballin developers
Version: 0.4.2.0
"""

from typing import Iterable, List

DEFAULT_THRESHOLD = 70.0


def edit_distance(source: str, target: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``source`` into ``target``.
    """
    if len(source) < len(target):
        return edit_distance(target, source)
    if not target:
        return len(source)

    previous_row = list(range(len(target) + 1))
    for i, source_char in enumerate(source):
        current_row = [i + 1]
        for j, target_char in enumerate(target):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (source_char != target_char)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(source: str, target: str) -> float:
    """Percentage of characters shared, normalised by the longer name."""
    size = max(len(source), len(target))
    if size == 0:
        return 0.0
    return (size - edit_distance(source, target)) / size * 100


def find_similar(
    name: str,
    candidates: Iterable[str],
    threshold: float = DEFAULT_THRESHOLD
) -> List[str]:
    """Return the candidates whose similarity to ``name`` exceeds ``threshold``."""
    return [
        candidate for candidate in candidates
        if similarity(name, candidate) > threshold
    ]


def report_missing_command(
    name: str,
    candidates: Iterable[str],
    threshold: float = DEFAULT_THRESHOLD
) -> List[str]:
    """
    Print the unknown-command message followed by any suggestions.

    Returns:
        The suggested names, in candidate order
    """
    suggestions = find_similar(name, candidates, threshold)

    if suggestions:
        print(f"the command `{name}` doesn't exist. did you mean:")
        for suggestion in suggestions:
            print(f"    - {suggestion}")
    else:
        print(f"the command `{name}` doesn't exist.")

    return suggestions
