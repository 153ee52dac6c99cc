# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from pathlib import Path
from typing import NamedTuple, Optional, Union

from structlog import get_logger

from nullable.conf import NULLABLE_CONFIG_YAML_ENV
from nullable.conf.settings import NullableSettings
from nullable.utils.yaml import dict_from_yaml

logger = get_logger()


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: NullableSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> NullableSettings:
    """
    Returns the process-wide settings.

    Settings are read from the yaml filepath in the 'NULLABLE_CONFIG_YAML' env var the first time this is called. If
    the env var is not set the defaults are used.
    """
    global _settings_singleton

    source = os.environ.get(NULLABLE_CONFIG_YAML_ENV)

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')
        return _settings_singleton.settings

    settings = NullableSettings() if source is None else load_yaml_settings(filepath=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings


def get_settings_source() -> Optional[str]:
    """ Returns the path of the YAML file that was loaded, None when defaults are in use.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def load_yaml_settings(*, filepath: Union[Path, str]) -> NullableSettings:
    """Takes a filepath to a yaml file and returns the validated settings."""
    logger.info('loading settings', source=str(filepath))
    settings_dict = dict_from_yaml(filepath=filepath)
    return NullableSettings.model_validate(settings_dict)
