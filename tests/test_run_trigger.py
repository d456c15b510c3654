import httpx
import pytest

from jobwatch.client.errors import ProtocolError


class TestRunTrigger:
    @pytest.mark.asyncio
    async def test_summary_status(self, mock_session):
        handler = lambda request: httpx.Response(200, json={"new_jobs": 3, "today_jobs": 12})
        async with mock_session(handler) as session:
            assert await session.run_now()
        assert session.status.message == "Done. New jobs: 3, Today: 12."
        assert not session.status.is_error

    @pytest.mark.asyncio
    async def test_backend_failure_message(self, mock_session):
        handler = lambda request: httpx.Response(429, text="rate limited")
        async with mock_session(handler) as session:
            assert not await session.run_now()
        assert session.status.message == "Run failed: rate limited"
        assert session.status.is_error

    @pytest.mark.asyncio
    async def test_status_shows_running_while_in_flight(self, mock_session):
        observed = []
        holder = {}

        def handler(request):
            observed.append(holder["session"].status.message)
            return httpx.Response(200, json={"new_jobs": 0, "today_jobs": 0})

        async with mock_session(handler) as session:
            holder["session"] = session
            await session.run_now()
        assert observed == ["Running scrape..."]

    @pytest.mark.asyncio
    async def test_bad_shape_is_protocol_error(self, mock_session):
        handler = lambda request: httpx.Response(200, json={"new_jobs": 1})
        async with mock_session(handler) as session:
            with pytest.raises(ProtocolError):
                await session.run_trigger.trigger_run()
            assert not await session.run_now()
        assert session.status.message.startswith("Run failed: ")

    @pytest.mark.asyncio
    async def test_negative_counts_are_rejected(self, mock_session):
        handler = lambda request: httpx.Response(200, json={"new_jobs": -1, "today_jobs": 2})
        async with mock_session(handler) as session:
            with pytest.raises(ProtocolError):
                await session.run_trigger.trigger_run()

    @pytest.mark.asyncio
    async def test_extra_fields_are_ignored(self, mock_session):
        body = {"new_jobs": 2, "today_jobs": 5, "total_jobs": 9, "search_url": "https://example.com"}
        handler = lambda request: httpx.Response(200, json=body)
        async with mock_session(handler) as session:
            summary = await session.run_trigger.trigger_run()
        assert (summary.new_jobs, summary.today_jobs) == (2, 5)

    @pytest.mark.asyncio
    async def test_each_call_issues_a_new_command(self, mock_session):
        seen = []

        def handler(request):
            seen.append((request.method, request.url.path))
            return httpx.Response(200, json={"new_jobs": 0, "today_jobs": 0})

        async with mock_session(handler) as session:
            await session.run_now()
            await session.run_now()
        assert seen == [("POST", "/api/run"), ("POST", "/api/run")]
