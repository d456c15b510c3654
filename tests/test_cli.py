import io
import json

import httpx

from jobwatch.cli import main
from jobwatch.client.session import PageSession
from jobwatch.utils.cookies import find_cookie, format_cookie_lines, write_cookie_file

RAW = "lang=v=2&lang=en-us; li_at=AQEDAR123; ;  JSESSIONID=\"ajax:42\"; flag"


class TestCookieFormatting:
    def test_lines(self):
        assert format_cookie_lines(RAW) == [
            "lang=v=2&lang=en-us",
            "li_at=AQEDAR123",
            'JSESSIONID="ajax:42"',
            "flag",
        ]

    def test_multiline_input(self):
        assert format_cookie_lines("a=1\nb=2;\n") == ["a=1", "b=2"]

    def test_find_by_name(self):
        assert find_cookie(RAW, "li_at") == "li_at=AQEDAR123"
        assert find_cookie(RAW, "missing") is None

    def test_write_file(self, tmp_path):
        path = write_cookie_file(["a=1", "b=2"], tmp_path / "creds" / "cookies.txt")
        assert path.read_text() == "a=1\nb=2\n"


class TestCookiesCommand:
    def test_prints_lines_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(RAW))
        assert main(["cookies"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "lang=v=2&lang=en-us",
            "li_at=AQEDAR123",
            'JSESSIONID="ajax:42"',
            "flag",
        ]

    def test_session_cookie_only_to_file(self, tmp_path, capsys):
        source = tmp_path / "raw.txt"
        source.write_text(RAW)
        target = tmp_path / "cookies.txt"
        assert main(["cookies", "--input", str(source), "--output", str(target), "--name"]) == 0
        assert target.read_text() == "li_at=AQEDAR123\n"
        assert "Wrote 1 cookies" in capsys.readouterr().out

    def test_missing_cookie_fails(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("a=1"))
        assert main(["cookies", "--name", "li_at"]) == 1
        assert "li_at cookie not found" in capsys.readouterr().err


def _patch_backend(monkeypatch, handler, requests=None):
    def factory(base_url):
        def recording(request):
            if requests is not None:
                requests.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(recording), base_url=base_url)
        return PageSession(http=http)

    monkeypatch.setattr("jobwatch.cli.PageSession", factory)


class TestClientCommands:
    def test_run_prints_summary(self, monkeypatch, capsys):
        _patch_backend(monkeypatch, lambda r: httpx.Response(200, json={"new_jobs": 3, "today_jobs": 12}))
        assert main(["run"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Running scrape...", "Done. New jobs: 3, Today: 12."]

    def test_run_failure_exit_code(self, monkeypatch, capsys):
        _patch_backend(monkeypatch, lambda r: httpx.Response(429, text="rate limited"))
        assert main(["run"]) == 1
        assert "Run failed: rate limited" in capsys.readouterr().err

    def test_jobs_prints_placeholder(self, monkeypatch, capsys):
        body = {"updated_at": None, "jobs": [], "new_jobs": []}
        _patch_backend(monkeypatch, lambda r: httpx.Response(200, json=body))
        assert main(["jobs"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Updated: No runs yet • Total today: 0 • New: 0",
            "  No jobs found yet.",
        ]

    def test_config_set_keeps_unchanged_fields(self, monkeypatch, capsys):
        stored = {
            "search": {"keywords": "go", "location": "Oslo", "remote": False, "salary_min": 60000},
            "schedule": {"interval_hours": 3},
        }
        requests = []

        def handler(request):
            if request.method == "GET":
                return httpx.Response(200, json=stored)
            return httpx.Response(200, json=json.loads(request.content))

        _patch_backend(monkeypatch, handler, requests)
        assert main(["config", "set", "--remote", "--interval-hours", "nope"]) == 0
        assert capsys.readouterr().out.strip() == "Config saved."
        assert json.loads(requests[-1].content) == {
            "search": {"keywords": "go", "location": "Oslo", "remote": True, "salary_min": 60000},
            "schedule": {"interval_hours": 4},
        }
