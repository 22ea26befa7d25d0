"""Resource updaters."""

from callsdk.updaters.base import Updater
from callsdk.updaters.call_updater import CallUpdateParams, CallUpdater

__all__ = ["CallUpdateParams", "CallUpdater", "Updater"]
