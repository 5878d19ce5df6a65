import re
from typing import Any, Dict, Optional, Sequence

# ASCII word characters plus the Arabic block are kept; everything else separates words.
_SEPARATORS = re.compile(r"[^\w\u0600-\u06FF]+", re.ASCII)
_HYPHENS = re.compile(r"-+")


def slugify(text: Optional[str]) -> str:
    lowered = str(text or "").lower()
    slug = _SEPARATORS.sub("-", lowered)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def auto_developer_slug(name: Optional[str]) -> str:
    """Slug for a developer with no profile: 'Azizi Developments' -> 'auto-azizi-developments'."""
    lowered = str(name or "developer").lower()
    return "auto-" + "-".join(lowered.split(" "))


def _as_index(key) -> Optional[int]:
    text = str(key).strip()
    if text.isascii() and text.isdigit():
        return int(text)
    return None


def find_by_slug_or_index(collection: Sequence[Dict[str, Any]], key) -> Optional[Dict[str, Any]]:
    """
    Resolve a route key against a record collection:
    exact slug, then slug of the record name, then zero-based position, then the first record.
    Returns None only for an empty collection.
    """
    if not collection:
        return None
    if key is not None:
        for record in collection:
            if record.get("slug") == key:
                return record
        for record in collection:
            if slugify(record.get("name")) == key:
                return record
        index = _as_index(key)
        if index is not None and index < len(collection):
            return collection[index]
    return collection[0]


def project_route_key(project: Dict[str, Any], index: int) -> str:
    return project.get("slug") or slugify(project.get("name")) or str(index)
