# lotto_service/extraction/blocks.py
import re
from typing import Dict, Iterable, Optional

from .result import ABSENT, ExtractionResult, Found


def extract_labeled_blocks(
    text: Optional[str],
    labels: Iterable[str],
    section_anchor: Optional[str] = None,
    section_end: Optional[str] = None,
    fallback_suffix: Optional[str] = None,
) -> Dict[str, ExtractionResult[str]]:
    """
    Splits one section of page text into sub-blocks keyed by label.

    The section starts after ``section_anchor`` and stops at the first match
    of ``section_end``. Each label's block runs from the label to the next
    label found in the section (whatever its order), or to the section end.
    A label missing from the section maps to ABSENT without affecting the
    others.

    When the section anchor is missing, the whole text is searched instead,
    but only for labels immediately followed by ``fallback_suffix``; each
    block then also stops at the first ``section_end`` after its label.
    Without a ``fallback_suffix`` a missing anchor makes every label ABSENT.
    """
    labels = tuple(labels)
    blocks: Dict[str, ExtractionResult[str]] = {label: ABSENT for label in labels}
    if not text:
        return blocks

    section = text
    label_suffix = ""
    bounded = True
    if section_anchor is not None:
        start = re.search(section_anchor, text, re.IGNORECASE)
        if start:
            section = text[start.end():]
        elif fallback_suffix is not None:
            label_suffix = f"(?={fallback_suffix})"
            bounded = False
        else:
            return blocks
    end_pattern = rf"\b(?:{section_end})\b" if section_end is not None else None
    if bounded and end_pattern:
        end = re.search(end_pattern, section, re.IGNORECASE)
        if end:
            section = section[: end.start()]

    positions = []
    for label in labels:
        match = re.search(rf"\b{re.escape(label)}\b{label_suffix}", section, re.IGNORECASE)
        if match:
            positions.append((match.start(), match.end(), label))
    positions.sort()

    for index, (_, label_end, label) in enumerate(positions):
        stop = positions[index + 1][0] if index + 1 < len(positions) else len(section)
        block = section[label_end:stop]
        if not bounded and end_pattern:
            end = re.search(end_pattern, block, re.IGNORECASE)
            if end:
                block = block[: end.start()]
        blocks[label] = Found(block)
    return blocks
