"""Transcript parsing into speaker utterances."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

_SPEAKER_LINE_RE = re.compile(r"^\s*([A-Z][A-Z0-9 .'-]{0,40}):\s*(.*)$")
_STAGE_DIRECTION_RE = re.compile(r"\s*[\[(][^\]\)]*[\])]")
_MULTISPACE_RE = re.compile(r"\s{2,}")

UNKNOWN_SPEAKER = "UNKNOWN"


@dataclass(slots=True)
class Utterance:
    speaker: str
    text: str
    line_number: int


def _clean(text: str) -> str:
    return _MULTISPACE_RE.sub(" ", _STAGE_DIRECTION_RE.sub(" ", text)).strip()


def parse_utterances(text: str) -> List[Utterance]:
    """Split a transcript into one utterance per non-empty line.

    A leading ``SPEAKER:`` label sets the speaker for that line and the
    unlabelled lines that follow it.
    """

    utterances: List[Utterance] = []
    current_speaker = UNKNOWN_SPEAKER

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        stripped = raw_line.strip()
        if not stripped:
            continue

        match = _SPEAKER_LINE_RE.match(stripped)
        if match:
            current_speaker = " ".join(match.group(1).split())
            stripped = match.group(2)

        cleaned = _clean(stripped)
        if cleaned:
            utterances.append(Utterance(current_speaker, cleaned, line_number))

    return utterances
