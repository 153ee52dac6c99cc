from typing import Any
from unittest.mock import patch

from nullable.conf.get_settings import _SettingsMetadata
from nullable.conf.settings import NullableSettings


def patch_settings(**kwargs: Any) -> Any:
    """ Patch the process-wide settings with the given overrides, use it as a context manager.
    """
    settings = NullableSettings(**kwargs)
    return patch('nullable.conf.get_settings._settings_singleton', _SettingsMetadata(source=None, settings=settings))
