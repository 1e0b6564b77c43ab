"""The Registry aggregate and its document form."""

import logging
from dataclasses import dataclass, field

from placefolder.errors import CorruptStateError

logger = logging.getLogger(__name__)

RECENT_LIMIT = 10


@dataclass
class Registry:
    """Projects, favorites, recent history and the last go-to path.

    The updater keeps ``favorites`` and ``recent`` free of duplicates and
    ``recent`` most-recent-first and at most RECENT_LIMIT long. A document
    edited by hand may break that until the lists are next updated. Names
    in either list may refer to projects that no longer exist.
    """

    projects: dict[str, str] = field(default_factory=dict)
    favorites: list[str] = field(default_factory=list)
    recent: list[str] = field(default_factory=list)
    goto_path: str | None = None

    def is_favorite(self, name: str) -> bool:
        return name in self.favorites

    def to_dict(self) -> dict:
        return {
            "goto_path": self.goto_path,
            "projects": dict(self.projects),
            "favorites": list(self.favorites),
            "recent": list(self.recent),
        }

    @classmethod
    def from_dict(cls, data: object) -> "Registry":
        """Build a Registry from a decoded document.

        ``favorites``, ``recent`` and ``goto_path`` are optional so that
        documents written before those fields existed still load.
        The lists are taken as written; duplicates or an overlong
        ``recent`` are left for the validator to report.

        Raises:
            CorruptStateError: If the document has the wrong shape.
        """
        if not isinstance(data, dict):
            raise CorruptStateError(
                f"registry document must be a mapping, got {type(data).__name__}"
            )
        if "projects" not in data:
            raise CorruptStateError("registry document is missing 'projects'")

        projects = data["projects"]
        if not isinstance(projects, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in projects.items()
        ):
            raise CorruptStateError("'projects' must map names to path strings")

        goto_path = data.get("goto_path")
        if goto_path is not None and not isinstance(goto_path, str):
            raise CorruptStateError("'goto_path' must be a string or null")

        favorites = _name_list(data, "favorites")
        recent = _name_list(data, "recent")

        if (
            len(set(favorites)) != len(favorites)
            or len(set(recent)) != len(recent)
            or len(recent) > RECENT_LIMIT
        ):
            logger.info("Registry lists are not normalised; 'pf validate' reports details")

        return cls(
            projects=dict(projects),
            favorites=list(favorites),
            recent=list(recent),
            goto_path=goto_path,
        )


def _name_list(data: dict, key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(n, str) for n in value):
        raise CorruptStateError(f"'{key}' must be a list of project names")
    return value
