"""
Dataset loaders.

Dubai South / Dubailand data is a JSON array mixing project records (the
ones carrying a `units` list) with auxiliary records holding `developers`,
`real_estate_terms` and a single `uae_info` object. 6th of October data is
an object with `meta` and `projects`.

Everything built here is read-only: sequences are tuples and the containers
are frozen, so a page can cache one instance for the whole process.
"""
from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from listings.derive import ProjectMetrics, project_metrics
from listings.developers import Developer, resolve_developers
from listings.formatting import PLACEHOLDER
from listings.settings import setting

logger = logging.getLogger(__name__)


def load_json(path) -> Optional[Any]:
    """Parsed JSON document, or None when the file is missing or unreadable."""
    path = Path(path)
    if not path.exists():
        logger.warning("Data file not found: %s", path)
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", path, e)
        return None


def _records(raw) -> list:
    return [r for r in raw if isinstance(r, dict)] if isinstance(raw, list) else []


def _list(value) -> tuple:
    return tuple(value) if isinstance(value, list) else ()


def active_projects(records) -> Tuple[Dict[str, Any], ...]:
    """Records with a `units` list, in source order. Anything else is skipped silently."""
    records = _records(records)
    projects = tuple(r for r in records if isinstance(r.get("units"), list))
    logger.debug("Skipped %d records without a units list", len(records) - len(projects))
    return projects


def collect_developer_profiles(records) -> Tuple[Developer, ...]:
    profiles = []
    for record in _records(records):
        for raw in _records(record.get("developers")):
            profiles.append(Developer.from_raw(raw))
    return tuple(profiles)


def collect_terms(records) -> Tuple[Dict[str, Any], ...]:
    terms = []
    for record in _records(records):
        terms.extend(_records(record.get("real_estate_terms")))
    return tuple(terms)


def find_uae_info(records) -> Dict[str, Any]:
    for record in _records(records):
        info = record.get("uae_info")
        if info and isinstance(info, dict):
            return info
    return {}


@dataclass(frozen=True)
class DubaiSouthData:
    projects: Tuple[Dict[str, Any], ...] = ()
    developers: Tuple[Developer, ...] = ()
    terms: Tuple[Dict[str, Any], ...] = ()
    uae_info: Dict[str, Any] = field(default_factory=dict)
    metrics: ProjectMetrics = ProjectMetrics()

    @property
    def emirates(self) -> tuple:
        return tuple(_records(self.uae_info.get("emirates")))

    @property
    def dubai_roads(self) -> tuple:
        return _list(self.uae_info.get("dubai_roads"))

    @property
    def highways(self) -> tuple:
        return _list(self.uae_info.get("uae_key_highways"))

    def summary(self) -> str:
        return (
            f"{len(self.projects)} projects, {len(self.developers)} developers, "
            f"{len(self.terms)} terms, {self.metrics.total_units} units"
        )


def build_dubai_south(raw) -> DubaiSouthData:
    records = _records(raw)
    projects = active_projects(records)
    data = DubaiSouthData(
        projects=projects,
        developers=resolve_developers(projects, collect_developer_profiles(records)),
        terms=collect_terms(records),
        uae_info=find_uae_info(records),
        metrics=project_metrics(projects),
    )
    logger.info("Dubai South dataset: %s", data.summary())
    return data


def load_dubai_south(path=None) -> DubaiSouthData:
    return build_dubai_south(load_json(path or setting("data", "dubai_south")))


@dataclass(frozen=True)
class OctoberData:
    projects: Tuple[Dict[str, Any], ...] = ()
    last_updated: str = PLACEHOLDER
    currency: str = "EGP"

    def summary(self) -> str:
        return f"{len(self.projects)} projects, updated {self.last_updated}, currency {self.currency}"


def build_october(raw) -> OctoberData:
    raw = raw if isinstance(raw, dict) else {}
    meta = raw.get("meta") if isinstance(raw.get("meta"), dict) else {}
    data = OctoberData(
        projects=tuple(_records(raw.get("projects"))),
        last_updated=meta.get("last_updated") or PLACEHOLDER,
        currency=meta.get("currency") or "EGP",
    )
    logger.info("6th of October dataset: %s", data.summary())
    return data


def load_october(path=None) -> OctoberData:
    return build_october(load_json(path or setting("data", "october")))
