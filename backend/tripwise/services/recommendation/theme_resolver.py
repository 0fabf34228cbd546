"""Theme resolver: turns (theme, sub-theme) input into a recommendation profile.

Callers go through the resolver rather than the catalog so that input
validation and per-user overrides live in one place. Resolution is pure and
reads only the injected catalog, so it is safe to share across requests.
"""

import logging
from dataclasses import dataclass, fields, replace
from datetime import datetime, timezone

from tripwise.errors import InvalidSubThemeError, InvalidThemeError, ProfileNotFoundError, ThemeResolutionError
from tripwise.services.recommendation.profiles import (
    Bounds,
    ProfileCatalog,
    RecommendationProfile,
    load_catalog,
)
from tripwise.services.recommendation.themes import (
    SubTheme,
    Theme,
    parse_sub_theme,
    parse_theme,
    sub_theme_values,
    theme_values,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedProfile(RecommendationProfile):
    """A catalog profile copied and tagged with the request's theme selection."""
    theme: Theme | None = None
    sub_theme: SubTheme | None = None
    resolved_at: datetime | None = None

    @classmethod
    def of(
        cls, profile: RecommendationProfile, theme: Theme, sub_theme: SubTheme
    ) -> "ResolvedProfile":
        base = {f.name: getattr(profile, f.name) for f in fields(RecommendationProfile)}
        return cls(
            **base,
            theme=theme,
            sub_theme=sub_theme,
            resolved_at=datetime.now(timezone.utc),
        )

    def summary(self) -> dict:
        return {
            "theme": self.theme.value if self.theme else None,
            "sub_theme": self.sub_theme.value if self.sub_theme else None,
            "name": self.name,
            "budget_range": self.budget_range.to_dict(),
        }


class ThemeResolver:
    """Validates theme input and looks profiles up in the catalog."""

    def __init__(self, catalog: ProfileCatalog):
        self._catalog = catalog

    @property
    def catalog(self) -> ProfileCatalog:
        return self._catalog

    def resolve_profile(self, theme: str | None, sub_theme: str | None) -> ResolvedProfile:
        """Resolve a profile, failing with a distinct error per failure kind."""
        parsed_theme = parse_theme(theme)
        if parsed_theme is None:
            raise InvalidThemeError(
                f"Invalid theme: {theme}. Must be one of: {', '.join(theme_values())}"
            )

        parsed_sub = parse_sub_theme(sub_theme)
        if parsed_sub is None:
            raise InvalidSubThemeError(
                f"Invalid subTheme: {sub_theme}. Must be one of: {', '.join(sub_theme_values())}"
            )

        profile = self._catalog.get(parsed_theme, parsed_sub)
        if profile is None:
            raise ProfileNotFoundError(
                f"No profile found for combination: {parsed_theme.value} + {parsed_sub.value}"
            )

        return ResolvedProfile.of(profile, parsed_theme, parsed_sub)

    def resolve_profile_with_overrides(
        self,
        theme: str | None,
        sub_theme: str | None,
        overrides: dict | None = None,
    ) -> ResolvedProfile:
        """Resolve a profile and apply user caps.

        Supported overrides:
            budget_max  narrows the daily budget ceiling (never widens it)
        Unknown keys are ignored.
        """
        resolved = self.resolve_profile(theme, sub_theme)
        if not overrides:
            return resolved

        budget_max = overrides.get("budget_max")
        if budget_max is not None and budget_max < resolved.budget_range.max:
            new_max = max(float(budget_max), 0.0)
            new_min = min(resolved.budget_range.min, new_max)
            resolved = replace(resolved, budget_range=Bounds(min=new_min, max=new_max))
            logger.debug(f"Budget capped to {new_max} for {resolved.name}")

        return resolved

    def is_valid_combination(self, theme: str | None, sub_theme: str | None) -> bool:
        try:
            self.resolve_profile(theme, sub_theme)
            return True
        except ThemeResolutionError:
            return False

    def list_combinations(self) -> list[dict]:
        return [
            {"theme": theme.value, "sub_theme": sub.value, "name": name}
            for theme, sub, name in self._catalog.combinations()
        ]


def build_theme_resolver(catalog_path: str | None = None) -> ThemeResolver:
    return ThemeResolver(load_catalog(catalog_path))
