"""Turn a browser ``document.cookie`` string into ``name=value`` lines.

The backend's credentials file wants one cookie per line. Copy the value of
``document.cookie`` from the DevTools console of a logged-in tab and feed it
to ``jobwatch cookies``.
"""
from pathlib import Path

SESSION_COOKIE = "li_at"


def format_cookie_lines(raw: str) -> list[str]:
    lines = []
    for fragment in raw.replace("\n", ";").split(";"):
        fragment = fragment.strip()
        if fragment:
            lines.append(fragment)
    return lines


def find_cookie(raw: str, name: str) -> str | None:
    for line in format_cookie_lines(raw):
        if line.split("=", 1)[0].strip() == name:
            return line
    return None


def write_cookie_file(lines: list[str], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
