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
from typing import NamedTuple, Optional

from structlog import get_logger

from propcodec import conf
from propcodec.conf.settings import CodecSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'PROPCODEC_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodecSettings:
    """
    Returns the codec settings.

    The settings are read from the yaml filepath in the 'PROPCODEC_CONFIG_YAML' env var, or from the packaged
    default.yml if it is not set. The file is only loaded once, later calls return the same instance.
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR, conf.DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded.

    Raises if the settings were not loaded yet.
    """
    assert _settings_singleton is not None, 'settings were not loaded yet'
    return _settings_singleton.source


def load_settings(filepath: str) -> CodecSettings:
    """Load and validate settings from a yaml file, without touching the global singleton."""
    from propcodec.utils.yaml import model_from_extended_yaml
    return model_from_extended_yaml(CodecSettings, filepath=filepath, custom_root=Path(conf.__file__).parent)


def _load_settings_singleton(source: str) -> CodecSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    logger.debug('loading codec settings', source=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=load_settings(source))

    return _settings_singleton.settings


def _reset_settings_singleton() -> None:
    """Only meant to be used by tests."""
    global _settings_singleton
    _settings_singleton = None
