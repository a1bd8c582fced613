"""Configuration constants for TCX Power Scaler."""

# XML namespaces
ACTIVITY_EXTENSION_NS = 'http://www.garmin.com/xmlschemas/ActivityExtension/v2'
NAMESPACES = {'ns3': ACTIVITY_EXTENSION_NS}
POWER_XPATH = '//ns3:Watts'

# File selection
FILE_PATTERN = '*.tcx'

# Backups
BACKUP_SUFFIX = '.original'

# Bytes stripped from the start of a file before parsing
# (UTF-8 BOM, ASCII whitespace and control characters)
LEADING_JUNK = b'\xef\xbb\xbf' + bytes(range(0x21)) + b'\x7f'

# Prompts
SCALE_PROMPT = 'Enter scaling factor'
CONFIRM_PROMPT = 'Power will be adjusted by {percent:g}% - is this correct?  (Y/N)'

# Legacy argument prefixes (scale:0.95 folder:"C:\Rides")
LEGACY_SCALE_PREFIX = 'scale:'
LEGACY_FOLDER_PREFIX = 'folder:'
