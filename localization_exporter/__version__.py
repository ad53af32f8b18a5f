"""Version information for localization-exporter."""

__version__ = "1.2.0"
__author__ = "Sezgin Paksoy"
__description__ = "Generate Apple .strings and .stringsdict files from POEditor exports"

# Changelog:
# 1.2.0 - Configurable exclude filters
#       - exclude accepts a regex string, a compiled pattern or a callable
#       - --no-exclude flag disables term filtering
#       - EXCLUDE_IOS filter exported alongside EXCLUDE_ANDROID
#       - Config validation reports invalid exclude patterns
#
# 1.1.0 - Added .stringsdict support
#       - Plural definitions exported as NSStringPluralRuleType entries
#       - term_plural used as dictionary key when present
#       - Literal \n sequences restored as real line breaks in plist output
#       - --no-stringsdict flag for projects without plurals
#
# 1.0.0 - First release
#       - POEditor export client (JSON export, certifi SSL context)
#       - .strings generation grouped by context path
#       - Substitutions, %s -> %@ conversion, quote escaping
#       - Processed/excluded/invalid stats in the log
#       - YAML config (.localization-export.yml)
