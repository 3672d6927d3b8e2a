"""
navrouter - navigation-event routing for an embedded project updates view.

Intercepted web view navigations are classified by URL shape, the referenced
update is fetched asynchronously and the result is published on one of three
output channels:

- current web view url (latest value, replayed to late subscribers)
- start comments view
- start update view (paired with the session's project)
"""

from __future__ import annotations

__version__ = "1.0.0"


# Lazy imports keep `import navrouter` free of aiohttp/pydantic side effects
def __getattr__(name: str):
    if name == "NavigationCoordinator":
        from navrouter.application.coordinator import NavigationCoordinator
        return NavigationCoordinator
    if name == "UpdateFetcher":
        from navrouter.application.fetcher import UpdateFetcher
        return UpdateFetcher
    if name in ("classify_request", "NavigationRouter", "RouteKind"):
        from navrouter.application import classifier
        return getattr(classifier, name)
    if name in ("Project", "Update", "NavigationRequest", "UpdateParams", "ProjectAndUpdate"):
        from navrouter.domain import models
        return getattr(models, name)
    if name == "build_coordinator":
        from navrouter.bootstrap import build_coordinator
        return build_coordinator
    raise AttributeError(f"module 'navrouter' has no attribute '{name}'")


__all__ = [
    "__version__",
    "NavigationCoordinator",
    "UpdateFetcher",
    "classify_request",
    "NavigationRouter",
    "RouteKind",
    "Project",
    "Update",
    "NavigationRequest",
    "UpdateParams",
    "ProjectAndUpdate",
    "build_coordinator",
]
