"""
Page summary extraction: title, metadata, text excerpt and images.
Works on any parsed document exposing the Element interface.
"""

import re
from dataclasses import dataclass
from typing import Dict, List
from urllib.parse import urlsplit

from unfurl.fetch.base import Element
from unfurl.fetch.errors import MissingElementError
from unfurl.fetch.utils import IMAGE_EXTENSIONS, file_ext, is_valid_url, url_host
from unfurl.schemas import FetchResult

EXCERPT_LENGTH = 200


@dataclass(frozen=True)
class MetaRule:
    name: str   # output field
    key: str    # meta attribute to look at
    tag: str    # expected attribute value, lower-case


# Lowest to highest priority: a later match overwrites an earlier one.
META_RULES = (
    MetaRule("description", "name", "description"),
    MetaRule("description", "property", "og:description"),
    MetaRule("description", "property", "pinterestapp:about"),
    MetaRule("image", "property", "og:image"),
    MetaRule("image", "itemprop", "image"),
    MetaRule("title", "property", "og:title"),
    MetaRule("video", "property", "og:video"),
    MetaRule("video_type", "property", "og:video:type"),
    MetaRule("video_width", "property", "og:video:width"),
    MetaRule("video_height", "property", "og:video:height"),
)


def _require(document: Element, tag: str) -> Element:
    element = document.find(tag)
    if element is None:
        raise MissingElementError(tag)
    return element


def extract_title(document: Element) -> str:
    """Text of the first <title> element."""
    return _require(document, "title").text()


def resolve_metas(document: Element) -> Dict[str, str]:
    """
    Resolve <meta> tags of the <head> into one value per field.

    Rules are applied in META_RULES order and each match overwrites the
    field, so the highest priority rule present on the page wins whatever
    the tag order. Among tags matching the same rule, the last one wins.
    Tags with an empty content are ignored.
    """
    elements = _require(document, "head").find_all("meta")

    metas: Dict[str, str] = {}
    for rule in META_RULES:
        for element in elements:
            if not element.has_attr(rule.key):
                continue
            if (element.get(rule.key) or "").lower() != rule.tag:
                continue
            content = element.get("content")
            if content:
                metas[rule.name] = content
    return metas


def extract_body(document: Element, length: int = EXCERPT_LENGTH) -> str:
    """
    Plain text excerpt of the <body>, whitespace collapsed.
    Cut at the first space found from `length` on; shorter texts, or texts
    without such a space, are returned whole.
    """
    body = _require(document, "body").plaintext().strip()
    body = re.sub(r"\s+", " ", body)

    pos = body.find(" ", length)
    if pos == -1:
        return body
    return body[:pos]


def extract_images(document: Element) -> List[str]:
    """
    Absolute image URLs of the <img> tags, in document order.
    Relative sources are skipped, query strings and fragments dropped.
    """
    images = []
    for element in document.find_all("img"):
        src = element.get("src")
        if not is_valid_url(src):
            continue

        parts = urlsplit(src)
        # Extension is matched as written: 'PNG' is not 'png'
        if file_ext(parts.path) in IMAGE_EXTENSIONS:
            images.append(f"{parts.scheme}://{url_host(parts)}{parts.path}")
    return images


def extract(document: Element, length: int = EXCERPT_LENGTH) -> FetchResult:
    """Build the full page summary. Raises MissingElementError on malformed pages."""
    title = extract_title(document)
    metas = resolve_metas(document)
    text = extract_body(document, length)
    images = extract_images(document)
    return FetchResult(title=title, text=text, images=images, metas=metas)
