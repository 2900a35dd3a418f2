"""
# Character classes and patterns of the media type grammar.

# The tables are constants; nothing in the project modifies them after import.
"""
import re

#: HTTP whitespace; stripped from the edges of types, values, and list items.
WHITESPACE = '\t\r\n '

#: Characters that may appear in a token (type, subtype, parameter name).
TOKEN = frozenset(
	'abcdefghijklmnopqrstuvwxyz'
	'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
	'0123456789'
	"!#$%&'*+-.^_`|~"
)

#: Code points permitted in an unquoted parameter value.
#: Tab is permitted along with the printable ASCII and Latin-1 Supplement ranges.
BARE_VALUE = frozenset(
	['\t'] +
	[chr(x) for x in range(0x20, 0x7F)] +
	[chr(x) for x in range(0x80, 0x100)]
)

#: Code points permitted in the interior of a quoted parameter value.
QUOTED_VALUE = BARE_VALUE

TYPE_SEPARATOR = '/'
PARAMETER_SEPARATOR = ';'
VALUE_SEPARATOR = '='
LIST_SEPARATOR = ','
QUOTE = '"'
ESCAPE = '\\'
WILDCARD = '*'

#: Accepted qvalue forms: `0`, `0.ddd`, `1`, `1.000`.
QVALUE = re.compile(r'0(?:\.[0-9]{1,3})?|1(?:\.0{1,3})?')

#: Raw Content-Type values emitted by default Apache configurations.
APACHE_DEFAULTS = frozenset([
	'text/plain',
	'text/plain; charset=ISO-8859-1',
	'text/plain; charset=iso-8859-1',
	'text/plain; charset=UTF-8',
])
