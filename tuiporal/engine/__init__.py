"""Command/result engine: channels, worker loop and main loop.

``DashboardRuntime`` lives in ``tuiporal.engine.runtime`` and is not
re-exported here so the screens can import commands and results without
pulling in the runtime.
"""

from tuiporal.engine.channels import Channel, ChannelClosedError
from tuiporal.engine.event_source import TICK, Event, KeyPress, PollingEventSource, Tick
from tuiporal.engine.main_loop import MainLoop, RenderSurface, RenderSurfaceError
from tuiporal.engine.worker_loop import WorkerLoop

__all__ = [
    "TICK",
    "Channel",
    "ChannelClosedError",
    "Event",
    "KeyPress",
    "MainLoop",
    "PollingEventSource",
    "RenderSurface",
    "RenderSurfaceError",
    "Tick",
    "WorkerLoop",
]
