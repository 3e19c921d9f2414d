import os

from propcodec.conf import DEFAULT_SETTINGS_FILEPATH

os.environ['PROPCODEC_CONFIG_YAML'] = os.environ.get('PROPCODEC_TEST_CONFIG_YAML', DEFAULT_SETTINGS_FILEPATH)
