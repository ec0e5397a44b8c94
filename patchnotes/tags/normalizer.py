"""
Tag cleaning for Patchnotes.

Category headings in the changelogs are inconsistent: typos, renamed zones,
difficulty suffixes, headings naming two subjects at once. ``clean_tag``
turns one raw heading into zero, one or two canonical tags.
"""

from typing import List

from .rules import TagRules


class TextPrefix(str):
    """
    A cleaned tag that is not a category.

    It carries text (such as "[with weekly restarts]") that belongs in front of
    the change statement instead of in the tag path.
    """

    def __repr__(self):
        return f"TextPrefix({str.__repr__(self)})"


def split_text_prefixes(tags: List[str]):
    """
    Separate real tags from text-prefix pseudo-tags.

    Returns:
        Tuple of (tags, prefixes), each in their original order
    """
    real = [tag for tag in tags if not isinstance(tag, TextPrefix)]
    prefixes = [str(tag) for tag in tags if isinstance(tag, TextPrefix)]
    return real, prefixes


def clean_tag(raw: str, rules: TagRules) -> List[str]:
    """
    Normalize a raw category heading.

    The steps run in a fixed order and each works on the output of the
    previous one, so alias keys are already-cleaned strings.

    Args:
        raw: Heading text as found in the document
        rules: Tag rule tables

    Returns:
        Text prefixes first (as TextPrefix values), then the canonical tags
    """
    tags: List[str] = []

    t = raw.strip()
    if not t:
        return tags

    for qualifier in rules.meta_qualifiers:
        if t.lower().endswith(qualifier.lower()):
            tags.append(TextPrefix(t[len(t) - len(qualifier):]))
            t = t[:len(t) - len(qualifier)].strip()

    for typo, repaired in rules.suffix_repairs.items():
        if t.endswith(typo):
            t = t[:len(t) - len(typo)] + repaired

    for article in rules.articles:
        if t.startswith(article):
            t = t[len(article):]

    for suffix in rules.difficulty_suffixes:
        if t.endswith(suffix):
            t = t[:len(t) - len(suffix)]

    for sequence, replacement in rules.quote_replacements.items():
        t = t.replace(sequence, replacement)

    if not t:
        return tags

    replacements = rules.lookup_alias(t)
    if replacements is not None:
        return tags + [tag for tag in replacements if tag]

    for separator in rules.and_separators:
        first, found, second = t.partition(separator)
        if found:
            return tags + [part for part in (first, second) if part]

    return tags + [t]
