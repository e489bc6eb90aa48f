"""Common literal values used across blog_pages.

These constants keep storage keys, attribute names, and limits centralized so
templates, generators, the theme toggle script, and tests import the same
values without drifting. Intended for internal use within the blog_pages
package.

Examples
--------
>>> from blog_pages import _constants
>>> _constants.THEME_STORAGE_KEY
'theme'
>>> _constants.THEME_ATTRIBUTE
'data-theme'
"""

DESCRIPTION_LIMIT = 150
THEME_STORAGE_KEY = "theme"
THEME_ATTRIBUTE = "data-theme"
SECTION_INDEX = "_index.md"
FRONT_MATTER_DELIMITER = "---"
