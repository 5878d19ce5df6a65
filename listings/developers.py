from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple
from listings.derive import DUBAI_SOUTH, DUBAILAND, infer_zone
from listings.slugs import auto_developer_slug, slugify

# Developers are listed only for projects in these zones.
DEVELOPER_ZONES = (DUBAI_SOUTH, DUBAILAND)


def _tuple(value) -> tuple:
    return tuple(value) if isinstance(value, list) else ()


@dataclass(frozen=True)
class Developer:
    slug: str
    name: Optional[str]
    name_en: Optional[str] = None
    founded_year: Optional[Any] = None
    chairman: Optional[str] = None
    ceo: Optional[str] = None
    story: Optional[str] = None
    website: Optional[str] = None
    key_strengths: Tuple[str, ...] = ()
    projects_locations: Tuple[Dict[str, Any], ...] = ()
    projects: Tuple[str, ...] = ()

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "Developer":
        contact = raw.get("contact_info") or {}
        return cls(
            slug=raw.get("slug") or slugify(raw.get("name_en") or raw.get("name")),
            name=raw.get("name"),
            name_en=raw.get("name_en"),
            founded_year=raw.get("founded_year"),
            chairman=raw.get("chairman"),
            ceo=raw.get("ceo"),
            story=raw.get("story"),
            website=contact.get("website") if isinstance(contact, dict) else None,
            key_strengths=_tuple(raw.get("key_strengths")),
            projects_locations=tuple(p for p in _tuple(raw.get("projects_locations")) if isinstance(p, dict)),
            projects=_tuple(raw.get("projects")),
        )

    @classmethod
    def placeholder(cls, name: str) -> "Developer":
        """Stand-in for a developer named by a project but missing from the profile table."""
        return cls(slug=auto_developer_slug(name), name=name)

    def matches(self, name: str) -> bool:
        target = str(name or "").lower()
        return str(self.name or "").lower() == target or str(self.name_en or "").lower() == target


def developer_names(projects: Iterable[Dict[str, Any]]) -> List[str]:
    """Distinct developer names of zoned projects, in order of first appearance."""
    seen = []
    for project in projects:
        if infer_zone(project) not in DEVELOPER_ZONES:
            continue
        if not project.get("developer"):
            continue
        name = str(project["developer"])
        if name not in seen:
            seen.append(name)
    return seen


def resolve_developers(projects, profiles) -> Tuple[Developer, ...]:
    """One Developer per referenced name: the matching profile, else a placeholder."""
    out = []
    for name in developer_names(projects):
        match = next((p for p in profiles if p.matches(name)), None)
        out.append(match or Developer.placeholder(name))
    return tuple(out)


def developer_highlight(dev: Developer) -> str:
    if dev.key_strengths:
        return f"يتميز {dev.name_en or dev.name} بـ{dev.key_strengths[0]}"
    return "مطور نشط في دبي."
