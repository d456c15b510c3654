from jobwatch.client.config_client import ConfigClient, ConfigForm
from jobwatch.client.display import JobEntry, JobsDisplay, Placeholder, StatusLine, ViewState
from jobwatch.client.errors import BackendError, ClientError, ProtocolError, TransportError
from jobwatch.client.run_trigger import RunTrigger
from jobwatch.client.session import PageSession
from jobwatch.client.snapshot_viewer import SnapshotViewer

__all__ = [
    "ConfigClient", "ConfigForm", "RunTrigger", "SnapshotViewer", "PageSession",
    "JobsDisplay", "JobEntry", "Placeholder", "StatusLine", "ViewState",
    "ClientError", "TransportError", "BackendError", "ProtocolError",
]
