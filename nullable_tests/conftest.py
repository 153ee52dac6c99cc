import os

from nullable.conf import NULLABLE_CONFIG_YAML_ENV

# tests run with the default settings, overrides are patched where needed
os.environ.pop(NULLABLE_CONFIG_YAML_ENV, None)
