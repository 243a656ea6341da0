"""Templates for generated logicalids configuration files."""

MINIMAL_CONFIG = """# logicalids configuration
scheme: "hashed"
renames: {}
"""

DEFAULT_CONFIG = """# logicalids configuration example
# Addressing scheme used to generate logical IDs from construct paths.
#   hashed      <human><8 hex chars of md5(path)>, top-level names kept as-is
#   passthrough path components concatenated, no hash (debugging only)
scheme: "hashed"

# Rename generated logical IDs (generated -> final). Every rename must match a
# generated ID during the run unless check_unused_renames is false.
renames: {}
#  L1L2Pipeline3A1C9F2B: "Pipeline"

# Fail when a rename was registered but never applied.
check_unused_renames: true

# Stop at the first naming error instead of reporting all of them.
fail_fast: false
"""

CONFIG_PRESETS = {
    "minimal": MINIMAL_CONFIG,
    "full": DEFAULT_CONFIG,
}
