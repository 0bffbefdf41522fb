"""Common literal values used across pagesmith.

These constants keep filenames and metadata keys centralized so the loader,
renderer, and tests can import the same values without drifting. Intended for
internal use within the pagesmith package.

Examples
--------
>>> from pagesmith import _constants
>>> _constants.PARTIAL_PREFIX + "sidebar"
'_sidebar'
"""

PARTIAL_PREFIX = "_"
FRONT_MATTER_DELIMITER = "---"
DEFAULT_CONFIG_FILENAME = "site.yaml"
DEFAULT_EXTENSION = "html"
