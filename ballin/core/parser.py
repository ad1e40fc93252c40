"""
Command Line Parser

Splits an input line into pipeline segments.

Author: ballin developers
Version: 0.4.2.0
"""

from dataclasses import dataclass, field
from typing import List

PIPE = '|'


@dataclass
class ParsedCommand:
    """One pipeline segment: a command name and its literal arguments."""
    command: str
    args: List[str] = field(default_factory=list)


class CommandParser:
    """
    Parses interpreter input lines.

    Words are separated by single spaces. A word starting with ``|``
    begins a new segment; the marker is stripped from that word.

    Example:
        >>> parser = CommandParser()
        >>> parser.parse("iota 1 3 | echo numbers")
        [ParsedCommand(command='iota', args=['1', '3']), ParsedCommand(command='echo', args=['numbers'])]
    """

    def parse(self, line: str) -> List[ParsedCommand]:
        """
        Parse a line into pipeline segments.

        Args:
            line: Raw input line

        Returns:
            Segments in left-to-right order; empty for a blank line.
            A segment with no words (e.g. after a trailing ``|``) has
            an empty command name.
        """
        words = [word for word in line.rstrip('\r\n').split(' ') if word]
        if not words:
            return []

        return [self._apply_words(segment) for segment in self._split_segments(words)]

    @staticmethod
    def _split_segments(words: List[str]) -> List[List[str]]:
        """Group words into segments at every word starting with ``|``."""
        segments: List[List[str]] = [[]]

        for word in words:
            if word.startswith(PIPE):
                if segments[-1]:
                    segments.append([])
                word = word.lstrip(PIPE)
                if not word:
                    continue
            segments[-1].append(word)

        return segments

    @staticmethod
    def _apply_words(words: List[str]) -> ParsedCommand:
        """Turn a segment's words into a command."""
        if not words:
            return ParsedCommand(command="")
        return ParsedCommand(command=words[0], args=words[1:])
