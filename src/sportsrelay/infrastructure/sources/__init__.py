from .browser import SharedBrowserPool
from .football import FootballScheduleSource
from .volleyball import VolleyballLiveSource

__all__ = ["FootballScheduleSource", "SharedBrowserPool", "VolleyballLiveSource"]
