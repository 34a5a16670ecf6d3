"""Generic helpers shared by service packages.

- Shared utilities: files, YAML, logging, CLI flags, strings, locale,
  request ids, JSON conversions, git metadata, resource copying
- Constants: paths of service metadata files
"""

# Export all public APIs from submodules
from common.shared import *
from common.constants import *
