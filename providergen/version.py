"""Tool version.

Every ``_config.json`` must carry this exact string as ``toolVersion``.
"""

VERSION = "1.9.0"
