"""
Prompt interpretation for reelprompt.

Turns a free-text description ("portrait zoom title: 'Summer Sale'") into
PromptHints. Every rule scans the whole prompt on its own; nothing is
consumed, so one phrase can feed several rules at once. For example the
`subtitle:` label also satisfies the bare `title` label, and a quoted
subtitle is taken as the title when no earlier quote exists.

Responsibilities:
- Keyword matching for position, style, animation and format
- Duration, title and subtitle extraction

Does NOT:
- Apply defaults for title, subtitle or duration (the resolver does)
- Touch the filesystem
"""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple, TypeVar

from reelprompt.domain.config import (
    Animation,
    PromptHints,
    TextPosition,
    TextStyle,
    VideoFormat,
)
from reelprompt.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")


def _words(*words: str) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(words) + r")\b", re.IGNORECASE)


# First matching rule wins; the trailing value applies when none match.
POSITION_RULES: Sequence[Tuple[re.Pattern[str], TextPosition]] = (
    (_words("top", "upper"), TextPosition.TOP),
    (_words("center", "middle"), TextPosition.CENTER),
)
STYLE_RULES: Sequence[Tuple[re.Pattern[str], TextStyle]] = (
    (_words("minimal", "clean", "simple"), TextStyle.MINIMAL),
    (_words("elegant", "fancy", "serif"), TextStyle.ELEGANT),
)
ANIMATION_RULES: Sequence[Tuple[re.Pattern[str], Animation]] = (
    (_words("slide", "sliding"), Animation.SLIDE),
    (_words("zoom", "ken burns"), Animation.ZOOM),
    (_words("no animation", "static"), Animation.NONE),
)
FORMAT_RULES: Sequence[Tuple[re.Pattern[str], VideoFormat]] = (
    (
        _words("portrait", "vertical", "story", "stories", "tiktok", "reel", "reels", "short"),
        VideoFormat.PORTRAIT,
    ),
    (_words("square", "instagram"), VideoFormat.SQUARE),
)

DURATION_PATTERN = re.compile(r"(\d+)\s*(?:seconds?|s)\b", re.IGNORECASE)
QUOTED_TITLE_PATTERN = re.compile(r"""(?:title[:\s]+)?["']([^"']+)["']""", re.IGNORECASE)
LABELED_TITLE_PATTERN = re.compile(r"title[:\s]+([^,.\n]+)", re.IGNORECASE)
SUBTITLE_PATTERN = re.compile(r"""subtitle[:\s]+["']?([^"'\n,]+)["']?""", re.IGNORECASE)


def _first_rule(
    prompt: str,
    rules: Sequence[Tuple[re.Pattern[str], T]],
    default: T,
) -> T:
    for pattern, value in rules:
        if pattern.search(prompt):
            return value
    return default


def parse_duration(prompt: str) -> Optional[int]:
    match = DURATION_PATTERN.search(prompt)
    if not match:
        return None
    seconds = int(match.group(1))
    # "0 seconds" can't be rendered; leave it to the default.
    return seconds or None


def parse_title(prompt: str) -> Optional[str]:
    match = QUOTED_TITLE_PATTERN.search(prompt) or LABELED_TITLE_PATTERN.search(prompt)
    if not match:
        return None
    return match.group(1).strip() or None


def parse_subtitle(prompt: str) -> Optional[str]:
    match = SUBTITLE_PATTERN.search(prompt)
    if not match:
        return None
    return match.group(1).strip() or None


def parse_prompt(prompt: str) -> PromptHints:
    """
    Interpret a free-text prompt.

    Position, style, animation and format always resolve because their
    rules end in a default. Title, subtitle and duration stay None when
    the prompt does not mention them.
    """
    hints = PromptHints(
        text_position=_first_rule(prompt, POSITION_RULES, TextPosition.BOTTOM),
        text_style=_first_rule(prompt, STYLE_RULES, TextStyle.BOLD),
        animation=_first_rule(prompt, ANIMATION_RULES, Animation.FADE),
        format=_first_rule(prompt, FORMAT_RULES, VideoFormat.LANDSCAPE),
        duration=parse_duration(prompt),
        title=parse_title(prompt),
        subtitle=parse_subtitle(prompt),
    )
    log.debug("Parsed prompt %r -> %s", prompt, hints)
    return hints
