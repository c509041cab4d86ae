"""Line classification rules for OCR noise removal.

Each rule is a named regular expression. Rules are grouped into ordered
tables so the cleaner can report which rule removed a line, and so each
table can be inspected and tested on its own.
"""

import re
from dataclasses import dataclass

from notedigest.utils.config import CleanerConfig

BULLET_CHARS_RE = re.compile(r"[•●▪■◦‣∙·➤▶❖]")
DASH_CHARS_RE = re.compile(r"[–—]")
WHITESPACE_RE = re.compile(r"\s+")
DIGIT_OR_QUESTION_RE = re.compile(r"[0-9?]")
CAPS_RUN_RE = re.compile(r"[A-Z]{2,}")
CAPITALIZED_WORD_RE = re.compile(r"^[A-Z][A-Za-z0-9-]*$")


@dataclass(frozen=True)
class LineRule:
    """A named pattern that classifies a single normalized line."""

    name: str
    pattern: re.Pattern[str]

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


def _alternation(terms: list[str]) -> str:
    return "|".join(terms)


@dataclass(frozen=True)
class RuleSet:
    """Ordered rule tables used by :class:`~notedigest.cleaning.cleaner.TextCleaner`.

    Attributes:
        reference_headings: Lines that open a references block.
        topic_cues: Lines that close a references block.
        reference_items: Lines that look like bibliography entries.
        headers: Institutional header noise, dropped outright.
        caps_institution: Substring match for institution names, combined
            with an all-caps run to catch banner lines.
        tail: Institutional suffix stripped from kept lines.
    """

    reference_headings: tuple[LineRule, ...]
    topic_cues: tuple[LineRule, ...]
    reference_items: tuple[LineRule, ...]
    headers: tuple[LineRule, ...]
    caps_institution: re.Pattern[str]
    tail: re.Pattern[str]

    @classmethod
    def from_config(cls, config: CleanerConfig) -> "RuleSet":
        """Compile the rule tables from cleaner configuration."""
        institutions = _alternation(config.institution_abbreviations) or r"(?!)"
        publishers = _alternation(config.publishers) or r"(?!)"
        cues = _alternation(config.topic_cues) or r"(?!)"

        return cls(
            reference_headings=(
                LineRule(
                    "reference_heading",
                    re.compile(r"^\s*(references?|bibliography)\b", re.IGNORECASE),
                ),
            ),
            topic_cues=(
                LineRule("topic_cue", re.compile(rf"\b({cues})\b", re.IGNORECASE)),
            ),
            reference_items=(
                LineRule("by_author", re.compile(r"\bby\s+[A-Z][a-z]+")),
                LineRule(
                    "publisher", re.compile(rf"\b({publishers})\b", re.IGNORECASE)
                ),
                LineRule("year", re.compile(r"\b(19|20)\d{2}\b")),
                LineRule("edition", re.compile(r"\bedition\b", re.IGNORECASE)),
            ),
            headers=(
                LineRule(
                    "institution",
                    re.compile(
                        r"\bdepartment\b|\bdept\b|\bfaculty\b"
                        r"|\binstitute\b|\buniversity\b",
                        re.IGNORECASE,
                    ),
                ),
                LineRule(
                    "institution_abbreviation",
                    re.compile(rf"\b({institutions})\b", re.IGNORECASE),
                ),
                LineRule(
                    "course_metadata",
                    re.compile(
                        r"\b(course|code|roll|student|id|name|section"
                        r"|semester|session|page|exam)\b",
                        re.IGNORECASE,
                    ),
                ),
                LineRule(
                    "department_banner",
                    re.compile(
                        r"^\s*(of\s+)?electrical( and)? (electronic|electronics)\b"
                        rf".*({institutions}|department|faculty)\b",
                        re.IGNORECASE,
                    ),
                ),
                LineRule(
                    "department_fragment",
                    re.compile(r"^\s*of\s+electrical\b", re.IGNORECASE),
                ),
            ),
            caps_institution=re.compile(institutions, re.IGNORECASE),
            tail=re.compile(
                rf"\b(Dept\.?|Department|Faculty|{institutions})\b.*$", re.IGNORECASE
            ),
        )

    def is_reference_heading(self, line: str) -> bool:
        return any(rule.matches(line) for rule in self.reference_headings)

    def is_topic_cue(self, line: str) -> bool:
        return any(rule.matches(line) for rule in self.topic_cues)

    def match_reference_item(self, line: str) -> str | None:
        """Return the name of the first bibliography rule matching ``line``."""
        for rule in self.reference_items:
            if rule.matches(line):
                return rule.name
        return None

    def match_header(self, line: str) -> str | None:
        """Return the name of the first header rule matching ``line``."""
        for rule in self.headers:
            if rule.matches(line):
                return rule.name
        return None

    def is_caps_institution(self, line: str) -> bool:
        return bool(CAPS_RUN_RE.search(line)) and bool(
            self.caps_institution.search(line)
        )

    def strip_tail(self, line: str) -> str:
        """Remove an institutional suffix such as ``"... Dept. of EEE, KUET 14"``.

        Every tail keyword is also an ``institution`` or
        ``institution_abbreviation`` header rule, and :class:`TextCleaner`
        applies the header rules first. Inside the cleaner a line carrying
        a tail is therefore dropped whole, so this only changes lines when
        called directly.
        """
        return self.tail.sub("", line).strip()


def normalize_line(line: str) -> str:
    """Replace bullet glyphs and long dashes, then collapse whitespace."""
    line = BULLET_CHARS_RE.sub("-", line)
    line = DASH_CHARS_RE.sub("-", line)
    return WHITESPACE_RE.sub(" ", line).strip()


def count_capitalized_words(line: str) -> int:
    return sum(1 for word in line.split() if CAPITALIZED_WORD_RE.match(word))
