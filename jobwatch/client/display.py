from dataclasses import dataclass, field
from enum import Enum

SEPARATOR = " • "


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    FAILED = "failed"


@dataclass(frozen=True)
class JobEntry:
    title: str
    meta: str
    url: str
    link_label: str = "View posting"
    is_new: bool = False


@dataclass(frozen=True)
class Placeholder:
    text: str


@dataclass
class StatusLine:
    message: str = ""
    is_error: bool = False

    def set(self, message: str, is_error: bool = False) -> None:
        self.message = message
        self.is_error = is_error


@dataclass
class JobsDisplay:
    """What the jobs panel currently shows: a meta line and a list of items."""

    meta: str = ""
    items: list[JobEntry | Placeholder] = field(default_factory=list)
    state: ViewState = ViewState.IDLE

    @property
    def job_entries(self) -> list[JobEntry]:
        return [item for item in self.items if isinstance(item, JobEntry)]

    @property
    def placeholders(self) -> list[Placeholder]:
        return [item for item in self.items if isinstance(item, Placeholder)]

    def to_text(self) -> str:
        # Items left over from an earlier render are not current.
        if self.state is ViewState.FAILED:
            return self.meta
        lines = [self.meta]
        for item in self.items:
            if isinstance(item, Placeholder):
                lines.append(f"  {item.text}")
                continue
            marker = "*" if item.is_new else "-"
            lines.append(f"{marker} {item.title}")
            lines.append(f"  {item.meta}")
            lines.append(f"  {item.link_label}: {item.url}")
        return "\n".join(lines)
