"""Multi-stage removal of non-content elements and text.

Stages run in a fixed order on a private copy of the element:

1. structural removal by CSS selector
2. attribute-based removal (hidden elements, ad-like class/id)
3. removal of links whose text is a call to action or ad
4. flattening to text and stripping of meta-text patterns

Image alt text is appended after the flattened text as annotations.
"""

import copy
import logging
import re
from collections.abc import Iterable

from bs4 import Tag
from soupsieve import SelectorSyntaxError

from page_extract.config import NoiseRules

logger = logging.getLogger(__name__)


def remove_structural(tree: Tag, selectors: Iterable[str]) -> Tag:
    """Decompose every element matching one of the selectors."""
    for selector in selectors:
        try:
            matches = tree.select(selector)
        except SelectorSyntaxError:
            logger.debug("Skipping invalid selector %r", selector, exc_info=True)
            continue
        for elem in matches:
            if not elem.decomposed:
                elem.decompose()
    return tree


def _class_and_id(elem: Tag) -> tuple[str, str]:
    raw_classes = elem.get("class") or []
    classes = raw_classes if isinstance(raw_classes, str) else " ".join(raw_classes)
    elem_id = elem.get("id") or ""
    if not isinstance(elem_id, str):
        elem_id = " ".join(elem_id)
    return classes.lower(), elem_id.lower()


def is_hidden(elem: Tag, hidden_style_markers: Iterable[str]) -> bool:
    """Check aria-hidden and inline style markers (not computed style)."""
    if elem.get("aria-hidden") == "true":
        return True
    style = elem.get("style") or ""
    return any(marker in style for marker in hidden_style_markers)


def remove_by_attributes(
    tree: Tag,
    ad_keywords: Iterable[str],
    hidden_style_markers: Iterable[str],
) -> Tag:
    """Decompose hidden elements and elements with ad-like class or id."""
    ad_keywords = tuple(ad_keywords)
    hidden_style_markers = tuple(hidden_style_markers)
    for elem in tree.find_all(True):
        # Descendants of an element removed earlier in this pass
        if elem.decomposed:
            continue
        if is_hidden(elem, hidden_style_markers):
            elem.decompose()
            continue
        classes, elem_id = _class_and_id(elem)
        if any(k in classes or k in elem_id for k in ad_keywords):
            elem.decompose()
    return tree


def remove_spam_links(tree: Tag, keywords: Iterable[str]) -> Tag:
    """Decompose anchors whose text contains a spam keyword."""
    keywords = tuple(keywords)
    for link in tree.find_all("a"):
        if link.decomposed:
            continue
        text = link.get_text().lower()
        if any(keyword in text for keyword in keywords):
            link.decompose()
    return tree


def flatten_text(tree: Tag, patterns: Iterable[re.Pattern[str]]) -> str:
    """Flatten the tree to text and delete every pattern match.

    Matches are replaced with nothing, so the text around them may join.
    """
    text = tree.get_text()
    for pattern in patterns:
        text = pattern.sub("", text)
    return text


def image_annotations(tree: Tag, rules: NoiseRules) -> list[str]:
    """Bracketed placeholders for meaningful image alt text, in document order."""
    annotations = []
    for img in tree.select("img[alt]"):
        alt = img.get("alt") or ""
        if not rules.image_alt_min_length < len(alt) < rules.image_alt_max_length:
            continue
        lowered = alt.lower()
        if any(word in lowered for word in rules.image_alt_stopwords):
            continue
        annotations.append(f"[{rules.image_label}: {alt}]")
    return annotations


class NoiseFilter:
    """Turn a content element into text with noise removed."""

    def __init__(self, rules: NoiseRules | None = None):
        self.rules = rules or NoiseRules()
        self.patterns = [
            re.compile(source, re.IGNORECASE) for source in self.rules.text_patterns
        ]

    def filter_to_text(self, element: Tag | None) -> str:
        """Extract filtered text from a copy of ``element``.

        The element itself, and the document it belongs to, are left as is.
        """
        if element is None:
            return ""

        tree = copy.copy(element)
        tree = remove_structural(tree, self.rules.structural_selectors)
        tree = remove_by_attributes(
            tree, self.rules.ad_keywords, self.rules.hidden_style_markers
        )
        tree = remove_spam_links(tree, self.rules.link_spam_keywords)
        text = flatten_text(tree, self.patterns)

        annotations = image_annotations(tree, self.rules)
        if annotations:
            text += "\n\n" + "\n".join(annotations)

        return text
