"""Check a registry against its invariants and report stale entries."""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from placefolder.registry.model import RECENT_LIMIT, Registry


@dataclass
class ValidationResult:
    """Result of a registry validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_projects: int = 0

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [f"Registry Validation: {self.total_projects} projects checked"]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        if self.passed and not self.warnings:
            lines.append("All checks passed.")
        return "\n".join(lines)


def validate_registry(registry: Registry, check_paths: bool = True) -> ValidationResult:
    """Run full validation on a registry.

    Checks:
    - No empty project names
    - No duplicate names in favorites or recent
    - Recent list within RECENT_LIMIT
    - Favorites and recent names refer to existing projects (warning only)
    - Project paths exist on disk (warning only, if ``check_paths``)

    Args:
        registry: Loaded registry.
        check_paths: Whether to stat every project path.

    Returns:
        ValidationResult with errors and warnings.
    """
    result = ValidationResult(total_projects=len(registry.projects))

    for name, path in registry.projects.items():
        if not name:
            result.errors.append(f"project with empty name (path {path})")
        elif check_paths and not Path(path).expanduser().exists():
            result.warnings.append(f"{name}: path '{path}' does not exist")

    for list_name, names in (("favorites", registry.favorites), ("recent", registry.recent)):
        for name, count in Counter(names).items():
            if count > 1:
                result.errors.append(f"{list_name}: '{name}' appears {count} times")
        for name in dict.fromkeys(names):
            if name not in registry.projects:
                result.warnings.append(f"{list_name}: '{name}' is not a registered project")

    if len(registry.recent) > RECENT_LIMIT:
        result.errors.append(
            f"recent: {len(registry.recent)} entries exceeds limit of {RECENT_LIMIT}"
        )

    return result
