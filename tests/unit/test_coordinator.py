"""
NavigationCoordinator unit tests
"""

import pytest

from navrouter.application.coordinator import NavigationCoordinator
from navrouter.application.fetcher import UpdateFetcher
from navrouter.application.telemetry import RecordingTelemetry
from navrouter.core.errors import ChannelClosedError, ResourceNotFoundError
from navrouter.domain.models import NavigationRequest, Project
from tests.test_framework import FakeUpdateSource, make_project, settle

COMMENTS_7 = "https://x/projects/42/updates/7/comments"


def update_url(update_id: str) -> str:
    return f"https://x/projects/42/updates/{update_id}"


def make_coordinator(source=None, telemetry=None):
    source = source or FakeUpdateSource()
    telemetry = telemetry or RecordingTelemetry()
    return NavigationCoordinator(UpdateFetcher(source), telemetry), source, telemetry


class TestEmbeddedView:
    """Web view url pipeline"""

    def test_startup_publishes_updates_url(self):
        coordinator, _, _ = make_coordinator()
        coordinator.startup(Project(id="42", updates_url="https://x/projects/42/updates"))

        sub = coordinator.current_web_view_url.listen()
        assert sub.get_nowait() == "https://x/projects/42/updates"

    def test_project_is_cached_once(self):
        coordinator, _, _ = make_coordinator()
        first, second = make_project("42"), make_project("43")
        sub = coordinator.current_web_view_url.listen()

        coordinator.startup(first)
        coordinator.startup(second)

        assert coordinator.project is first
        assert sub.drain() == [first.updates_url]

    def test_page_interception_emits_nothing(self):
        coordinator, _, _ = make_coordinator()
        sub = coordinator.current_web_view_url.listen()
        coordinator.on_page_intercepted("https://x/discover")
        assert sub.drain() == []


class TestTelemetry:
    """One-shot viewed updates event"""

    @pytest.mark.asyncio
    async def test_fires_once(self):
        coordinator, _, telemetry = make_coordinator()
        project = make_project()

        coordinator.startup(project)
        coordinator.startup(project)
        coordinator.on_comments_navigation_intercepted(COMMENTS_7)
        coordinator.on_update_navigation_intercepted(update_url("7"))
        await coordinator.join()

        assert telemetry.viewed == [project]

    def test_failing_telemetry_does_not_break_startup(self):
        class BrokenTelemetry:
            def record_viewed_updates_list(self, project):
                raise RuntimeError("analytics down")

        coordinator, _, _ = make_coordinator(telemetry=BrokenTelemetry())
        coordinator.startup(make_project())

        assert coordinator.current_web_view_url.value == make_project().updates_url


class TestCommentsPipeline:
    """Comments pipeline"""

    @pytest.mark.asyncio
    async def test_comments_request_emits_update(self):
        coordinator, source, _ = make_coordinator()
        coordinator.startup(make_project("42"))
        sub = coordinator.start_comments_view.listen()

        coordinator.on_comments_navigation_intercepted(
            NavigationRequest(url=COMMENTS_7, path_segments=("", "projects", "42", "updates", "7", "comments"))
        )
        await coordinator.join()

        update = sub.get_nowait()
        assert update.id == "7"
        assert source.calls == [("42", "7")]

    @pytest.mark.asyncio
    async def test_does_not_need_project(self):
        coordinator, _, _ = make_coordinator()
        sub = coordinator.start_comments_view.listen()

        coordinator.on_comments_navigation_intercepted(COMMENTS_7)
        await coordinator.join()

        assert [u.id for u in sub.drain()] == ["7"]

    @pytest.mark.asyncio
    async def test_failed_fetch_emits_nothing_and_recovers(self):
        source = FakeUpdateSource()
        source.fail("9", ResourceNotFoundError(message="gone"))
        coordinator, _, _ = make_coordinator(source=source)
        sub = coordinator.start_comments_view.listen()

        coordinator.on_comments_navigation_intercepted("https://x/projects/42/updates/9/comments")
        await coordinator.join()
        assert sub.drain() == []

        coordinator.on_comments_navigation_intercepted("https://x/projects/42/updates/10/comments")
        await coordinator.join()
        assert [u.id for u in sub.drain()] == ["10"]

    @pytest.mark.asyncio
    async def test_latest_comments_request_wins(self):
        source = FakeUpdateSource(hold=True)
        coordinator, _, _ = make_coordinator(source=source)
        sub = coordinator.start_comments_view.listen()

        coordinator.on_comments_navigation_intercepted("https://x/projects/42/updates/1/comments")
        await settle()
        coordinator.on_comments_navigation_intercepted("https://x/projects/42/updates/2/comments")
        await settle()
        source.release(1)
        source.release(0)
        await coordinator.join()

        assert [u.id for u in sub.drain()] == ["2"]


class TestUpdatePipeline:
    """Update pipeline"""

    @pytest.mark.asyncio
    async def test_pairs_update_with_project(self):
        coordinator, _, _ = make_coordinator()
        project = make_project("42")
        coordinator.startup(project)
        sub = coordinator.start_update_view.listen()

        coordinator.on_update_navigation_intercepted(update_url("7"))
        await coordinator.join()

        pair = sub.get_nowait()
        assert pair.project is project
        assert pair.update.id == "7"

    @pytest.mark.asyncio
    async def test_waits_for_project(self):
        coordinator, source, _ = make_coordinator()
        sub = coordinator.start_update_view.listen()

        coordinator.on_update_navigation_intercepted(update_url("7"))
        await settle()
        assert source.calls == [("42", "7")]
        assert sub.drain() == []

        project = make_project("42")
        coordinator.startup(project)
        await coordinator.join()

        pair = sub.get_nowait()
        assert pair.project is project
        assert pair.update.id == "7"

    @pytest.mark.asyncio
    async def test_every_pair_uses_cached_project(self):
        coordinator, _, _ = make_coordinator()
        project = make_project("42")
        coordinator.startup(project)
        sub = coordinator.start_update_view.listen()

        for update_id in ("1", "2", "3"):
            coordinator.on_update_navigation_intercepted(update_url(update_id))
            await coordinator.join()
            coordinator.startup(make_project("99"))

        pairs = sub.drain()
        assert [p.update.id for p in pairs] == ["1", "2", "3"]
        assert all(p.project is project for p in pairs)

    @pytest.mark.asyncio
    async def test_only_latest_request_is_emitted(self):
        source = FakeUpdateSource(hold=True)
        coordinator, _, _ = make_coordinator(source=source)
        coordinator.startup(make_project())
        sub = coordinator.start_update_view.listen()

        coordinator.on_update_navigation_intercepted(update_url("A"))
        await settle()
        coordinator.on_update_navigation_intercepted(update_url("B"))
        await settle()
        source.release(1)
        await coordinator.join()
        # A settles after B was delivered; its result must not show up.
        source.release(0)
        await settle()

        assert source.calls == [("42", "A"), ("42", "B")]
        assert [p.update.id for p in sub.drain()] == ["B"]

    @pytest.mark.asyncio
    async def test_channels_do_not_cancel_each_other(self):
        source = FakeUpdateSource(hold=True)
        coordinator, _, _ = make_coordinator(source=source)
        coordinator.startup(make_project())
        comments = coordinator.start_comments_view.listen()
        updates = coordinator.start_update_view.listen()

        coordinator.on_comments_navigation_intercepted("https://x/projects/42/updates/5/comments")
        await settle()
        coordinator.on_update_navigation_intercepted(update_url("6"))
        await settle()
        source.release(0)
        source.release(1)
        await coordinator.join()

        assert [u.id for u in comments.drain()] == ["5"]
        assert [p.update.id for p in updates.drain()] == ["6"]

    @pytest.mark.asyncio
    async def test_malformed_request_is_dropped(self):
        source = FakeUpdateSource(hold=True)
        coordinator, _, _ = make_coordinator(source=source)
        coordinator.startup(make_project())
        sub = coordinator.start_update_view.listen()

        coordinator.on_update_navigation_intercepted(update_url("7"))
        await settle()
        coordinator.on_update_navigation_intercepted("https://x/projects/42")
        await settle()
        source.release(0)
        await coordinator.join()

        assert source.calls == [("42", "7")]
        assert [p.update.id for p in sub.drain()] == ["7"]


class TestRouting:
    """on_navigation_intercepted"""

    @pytest.mark.asyncio
    async def test_routes_by_url_shape(self):
        coordinator, source, _ = make_coordinator()
        coordinator.startup(make_project())
        comments = coordinator.start_comments_view.listen()
        updates = coordinator.start_update_view.listen()

        assert coordinator.on_navigation_intercepted(COMMENTS_7) is True
        await coordinator.join()
        assert coordinator.on_navigation_intercepted(update_url("8")) is True
        await coordinator.join()
        assert coordinator.on_navigation_intercepted("https://x/projects/42/updates") is False

        assert [u.id for u in comments.drain()] == ["7"]
        assert [p.update.id for p in updates.drain()] == ["8"]
        assert source.calls == [("42", "7"), ("42", "8")]


class TestLifecycle:
    """close() tears every channel down"""

    @pytest.mark.asyncio
    async def test_close(self):
        source = FakeUpdateSource(hold=True)
        coordinator, _, _ = make_coordinator(source=source)
        coordinator.startup(make_project())
        sub = coordinator.start_update_view.listen()

        coordinator.on_update_navigation_intercepted(update_url("7"))
        await settle()
        await coordinator.close()

        assert coordinator.closed is True
        assert source.closed is True
        with pytest.raises(ChannelClosedError):
            await sub.get()

        coordinator.on_update_navigation_intercepted(update_url("8"))
        assert source.calls == [("42", "7")]

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        async with make_coordinator()[0] as coordinator:
            coordinator.startup(make_project())
            sub = coordinator.current_web_view_url.listen()

        assert [url async for url in sub] == [make_project().updates_url]
        late = coordinator.current_web_view_url.listen()
        with pytest.raises(ChannelClosedError):
            late.get_nowait()


class TestWithoutEventLoop:
    """Inputs called outside a running event loop"""

    def test_fetch_requests_are_dropped(self):
        coordinator, source, _ = make_coordinator()
        coordinator.startup(make_project("42"))

        coordinator.on_comments_navigation_intercepted(COMMENTS_7)
        coordinator.on_update_navigation_intercepted(update_url("8"))
        assert coordinator.on_navigation_intercepted(update_url("9")) is True

        assert source.calls == []
        assert coordinator.current_web_view_url.value == make_project("42").updates_url
