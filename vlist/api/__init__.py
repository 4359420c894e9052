"""Public vlist API contracts."""

from vlist.api.factory import create_virtual_list, items_from_heights
from vlist.api.logging import JsonFormatter, VListLoggingConfig
from vlist.api.notifier import CallbackNotifier, FanoutNotifier, Notifier, NullNotifier

__all__ = [
    "CallbackNotifier",
    "FanoutNotifier",
    "JsonFormatter",
    "Notifier",
    "NullNotifier",
    "VListLoggingConfig",
    "create_virtual_list",
    "items_from_heights",
]
