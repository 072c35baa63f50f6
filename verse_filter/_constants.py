"""Common literal values used across verse_filter.

Class names, attribute keys, and LaTeX command names live here so renderers,
the dispatcher, and tests import the same values without drifting. Intended
for internal use within the verse_filter package.

Examples
--------
>>> from verse_filter import _constants
>>> _constants.LINENUMS_CLASS_TEMPLATE.format(side="left")
'linenums-left'
>>> _constants.VERSE_CLASS
'verse'
"""

VERSE_CLASS = "verse"

# Recognised div attributes.
ATTR_INDENT_AFTER = "indentafter"
ATTR_VINDENT = "vindent"
ATTR_TITLE = "title"
ATTR_LINE_NUMBERS = "linenumbers"
ATTR_LINE_NUM_SIDE = "linenumside"
ATTR_FIRST_LINE_NUM = "firstlinenum"
ATTR_START_NUMS_AT = "startnumsat"
VERSE_ATTRIBUTES = (
    ATTR_INDENT_AFTER,
    ATTR_VINDENT,
    ATTR_TITLE,
    ATTR_LINE_NUMBERS,
    ATTR_LINE_NUM_SIDE,
    ATTR_FIRST_LINE_NUM,
    ATTR_START_NUMS_AT,
)

SIDE_LEFT = "left"
SIDE_RIGHT = "right"

# Screen (HTML) output.
HTML_FORMAT = "html"
LINE_NUMBERED_CLASS = "line-numbered"
LINENUMS_CLASS_TEMPLATE = "linenums-{side}"
TITLE_CLASS = "verse-title"
STANZA_CLASS = "stanza"
LINE_CLASS = "verse-line"
LINE_COUNTER = "verseline"

# Print (LaTeX) output.
LATEX_FORMAT = "latex"
POEM_TITLE_COMMAND = r"\poemtitle"
VERSE_WIDTH_LENGTH = r"\versewidth"
SET_WIDTH_COMMAND = r"\settowidth"
VERSE_ENVIRONMENT = "verse"
POEM_LINES_COMMAND = r"\poemlines"
LEFT_NUMBERS_COMMAND = r"\verselinenumbersleft"
SET_LINE_NUMS_COMMAND = r"\setverselinenums"
VINDENT_LENGTH = r"\vindent"
STANZA_BREAK = r"\par\vspace{\baselineskip}"
LINE_END = "\\\\"
