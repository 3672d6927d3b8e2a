"""
Navigation coordinator for the project updates web view.

Three input pipelines share one write-once project:

- startup(project)            -> current_web_view_url (+ one "Viewed Updates" event)
- comments navigation request -> classify -> fetch -> start_comments_view
- update navigation request   -> classify -> fetch -> pair with project -> start_update_view

Fetches are latest-wins per channel; failures are logged and dropped so the
embedded view simply keeps showing its current page.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, Union

from loguru import logger

from navrouter.application.classifier import NavigationRouter, RouteKind, classify_request
from navrouter.application.fetcher import UpdateFetcher
from navrouter.application.ports.telemetry_port import TelemetryPort
from navrouter.core.channels import EventChannel, LatestValueChannel
from navrouter.core.errors import NavRouterError
from navrouter.core.latest import LatestWins
from navrouter.core.single_assignment import WriteOnce
from navrouter.domain.models import (
    NavigationRequest,
    Project,
    ProjectAndUpdate,
    Update,
    UpdateParams,
)

RequestLike = Union[NavigationRequest, str]


class NavigationCoordinator:
    """
    Owns every channel of one web view session.

    Input methods are synchronous; the comments and update inputs schedule
    their fetch on the running event loop. Called without one, they log and
    drop the request.
    """

    def __init__(
        self,
        fetcher: UpdateFetcher,
        telemetry: TelemetryPort,
        *,
        router: Optional[NavigationRouter] = None,
    ):
        self.fetcher = fetcher
        self.telemetry = telemetry
        self.router = router or NavigationRouter()

        self._project: WriteOnce[Project] = WriteOnce()
        self._comments_jobs: LatestWins[Update] = LatestWins("comments")
        self._update_jobs: LatestWins[ProjectAndUpdate] = LatestWins("update")
        self._closed = False

        # outputs
        self.current_web_view_url: LatestValueChannel[str] = LatestValueChannel("current_web_view_url")
        self.start_comments_view: EventChannel[Update] = EventChannel("start_comments_view")
        self.start_update_view: EventChannel[ProjectAndUpdate] = EventChannel("start_update_view")

    @property
    def project(self) -> Optional[Project]:
        return self._project.get()

    @property
    def closed(self) -> bool:
        return self._closed

    # ---- inputs ----

    def startup(self, project: Project) -> None:
        """Supply the session's project. Only the first call has any effect."""
        if self._closed:
            logger.debug("[startup] coordinator closed, project ignored")
            return
        if not self._project.set(project):
            logger.debug(f"[startup] project already cached, ignoring {project.id}")
            return

        logger.info(f"[startup] project {project.id} cached, loading {project.updates_url}")
        self.current_web_view_url.publish(project.updates_url)
        try:
            self.telemetry.record_viewed_updates_list(project)
        except Exception as e:
            logger.warning(f"[telemetry] viewed updates event failed: {e}")

    def on_page_intercepted(self, url: str) -> None:
        """A page the web view loads itself; nothing to emit."""
        logger.debug(f"[page] intercepted {url}")

    def on_comments_navigation_intercepted(self, request: RequestLike) -> None:
        params = self._params(request, "comments")
        if params is None:
            return
        self._submit(
            self._comments_jobs,
            lambda: self.fetcher.fetch(params),
            self.start_comments_view.publish,
        )

    def on_update_navigation_intercepted(self, request: RequestLike) -> None:
        params = self._params(request, "update")
        if params is None:
            return

        async def job() -> Optional[ProjectAndUpdate]:
            update = await self.fetcher.fetch(params)
            if update is None:
                return None
            if not self._project.is_set:
                logger.debug(f"[update] {update.id} waiting for project")
            project = await self._project.wait()
            return ProjectAndUpdate(project, update)

        self._submit(self._update_jobs, job, self.start_update_view.publish)

    def on_navigation_intercepted(self, url: str) -> bool:
        """
        Route any intercepted navigation.

        Returns:
            True when the coordinator took the navigation over, False when the
            web view should load the URL itself
        """
        kind = self.router.route(url)
        if kind is RouteKind.COMMENTS:
            self.on_comments_navigation_intercepted(url)
            return True
        if kind is RouteKind.UPDATE:
            self.on_update_navigation_intercepted(url)
            return True
        self.on_page_intercepted(url)
        return False

    # ---- lifecycle ----

    async def join(self) -> None:
        """
        Wait until neither fetch pipeline has work in flight.

        An update waiting for the project counts as in flight.
        """
        while self._comments_jobs.in_flight or self._update_jobs.in_flight:
            await self._comments_jobs.join()
            await self._update_jobs.join()

    async def close(self) -> None:
        """Tear down the session: cancel fetches, close channels and the update source."""
        if self._closed:
            return
        self._closed = True
        self._comments_jobs.cancel()
        self._update_jobs.cancel()
        await self._comments_jobs.join()
        await self._update_jobs.join()
        self.current_web_view_url.close()
        self.start_comments_view.close()
        self.start_update_view.close()
        try:
            await self.fetcher.close()
        except Exception as e:
            logger.warning(f"[close] update source close failed: {e}")

    async def __aenter__(self) -> "NavigationCoordinator":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ---- helpers ----

    def _submit(self, jobs: LatestWins, job: Callable[[], Awaitable[Any]], deliver: Callable[[Any], None]) -> None:
        try:
            jobs.submit(job, deliver)
        except RuntimeError as e:
            logger.warning(f"[{jobs.name}] no running event loop, request dropped: {e}")

    def _params(self, request: RequestLike, channel: str) -> Optional[UpdateParams]:
        if self._closed:
            logger.debug(f"[{channel}] coordinator closed, request ignored")
            return None
        if isinstance(request, str):
            request = NavigationRequest.from_url(request)
        try:
            return classify_request(request)
        except NavRouterError as e:
            logger.warning(f"[{channel}] dropping request {request.url}: {e}")
            return None
