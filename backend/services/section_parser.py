"""Resume section segmentation into a fixed section vocabulary."""

import re

from models.schemas.resume_text import SECTION_NAMES

# Section header patterns and their canonical names.
# Anything else (contact header, summary, certifications, ...) lands in "other".
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"internships?",
        r"career\s*(?:history|path)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
        r"(?:technical\s+)?(?:stack|toolkit|tooling)",
        r"(?:programming\s+)?languages",
    ],
    "projects": [
        r"(?:key|notable|selected|personal|academic)?\s*projects",
        r"portfolio",
    ],
    "other": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
        r"certific(?:ations?|ates?)",
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)",
        r"(?:interests|hobbies|references)",
    ],
}

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"^\s*(?:{combined})\s*:?\s*$", re.IGNORECASE | re.MULTILINE
    )


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into the sections of SECTION_NAMES.

    Text before the first header, and under unrecognised headers, goes to
    'other'. Repeated headers of the same section are concatenated.
    Empty sections are left out.
    """
    collected: dict[str, list[str]] = {name: [] for name in SECTION_NAMES}
    current_section = "other"
    current_lines: list[str] = []

    def flush() -> None:
        content = "\n".join(current_lines).strip()
        if content:
            collected[current_section].append(content)

    for line in text.split("\n"):
        matched_section = None
        stripped = line.strip()

        if stripped:
            for section_name, pattern in _COMPILED.items():
                if pattern.match(stripped):
                    matched_section = section_name
                    break

        if matched_section:
            flush()
            current_section = matched_section
            current_lines = []
        else:
            current_lines.append(line)

    flush()

    return {name: "\n\n".join(parts) for name, parts in collected.items() if parts}
