"""Recommendation engine: themed travel recommendations across four domains.

Modules:
    themes            Theme and sub-theme enums
    profiles          Recommendation profiles and the read-only catalog
    theme_resolver    (theme, sub-theme) input to a resolved profile
    search_context    Per-request location, dates and party sizes
    results           Typed provider records and ranked results
    config            Scoring ceilings, adjustments and result limits
    adapters          Per-domain param building and ranking
    orchestrator      Fan-out, failure isolation and aggregation

Pipeline:
    ThemeResolver → adapters.*.to_*_params → provider clients (parallel)
    → adapters.*.rank_* → RecommendationOrchestrator aggregate
"""
