"""
# Media types carried by header fields.

# Header fields may occur multiple times and each occurrence may hold a comma separated
# list. &split normalizes both forms into a flat list of candidate media type strings,
# and &extract selects the effective `Content-Type` from such a list.

# [ Entry Points ]
# - &split
# - &extract
# - &interpret

# [ Types ]

# /HeaderSource/
	# Collaborator protocol for objects holding the header fields of a message.
"""
import typing
import logging

from . import isomorphic
from . import media
from .data import grammar as chars

logger = logging.getLogger(__name__)

content_type_field = 'Content-Type'

Values = typing.Union[str, bytes, typing.Iterable[typing.Union[str, bytes]]]

class HeaderSource(typing.Protocol):
	"""
	# Protocol for objects providing access to the fields of a message header.
	"""

	def get_header_values(self, name:str) -> typing.Sequence[typing.Union[str, bytes]]:
		"""
		# Retrieve the values of all occurrences of the field &name in header order.
		"""
		...

def _text(value, isinstance=isinstance, bytes=bytes):
	if isinstance(value, bytes):
		return isomorphic.decode(value)
	return value

def split(values:Values,
		listsep=chars.LIST_SEPARATOR, quote=chars.QUOTE, escape=chars.ESCAPE,
		strip=chars.WHITESPACE,
		isinstance=isinstance, str=str, len=len,
	) -> typing.List[str]:
	"""
	# Split the items of a list-valued header field.

	# Commas inside quoted strings do not separate items. Items are stripped of
	# surrounding whitespace and empty items are removed.

	# [ Parameters ]
	# /values/
		# A single field value or a sequence of field values. Sequences are joined
		# with `', '` before being split; octets are decoded isomorphically.
	"""
	if isinstance(values, (str, bytes)):
		string = _text(values)
	else:
		string = ', '.join([_text(x) for x in values])

	items = []
	start = 0
	pos = 0
	end = len(string)
	quoted = False

	while pos < end:
		c = string[pos]
		if quoted:
			if c == escape:
				# Skip the escaped character.
				pos += 1
			elif c == quote:
				quoted = False
		elif c == quote:
			quoted = True
		elif c == listsep:
			items.append(string[start:pos])
			start = pos + 1
		pos += 1
	items.append(string[start:])

	return [x for x in (y.strip(strip) for y in items) if x]

def extract(values:Values, charset='charset') -> typing.Optional[media.MimeType]:
	"""
	# Identify the effective media type of a `Content-Type` field.

	# The last valid, non-wildcard item wins. When consecutive valid items share an
	# essence, a `charset` parameter given by an earlier item is carried onto later
	# items that do not specify one.

	# [ Parameters ]
	# /values/
		# The field values in header order; see &split.

	# [ Returns ]
	# The selected &media.MimeType or &None when no item was valid.
	"""
	current = None
	essence = None
	carried = None

	for item in split(values):
		mt = media.parse(item)
		if mt is None:
			logger.debug("skipping invalid media type %r", item)
			continue
		if mt.essence == media.any_type.essence:
			logger.debug("skipping wildcard media type %r", item)
			continue

		own = mt.params.get(charset)
		if mt.essence != essence:
			essence = mt.essence
			carried = own
		elif own is None and carried is not None:
			mt = mt.assign(charset, carried)

		current = mt

	return current

class Interpretation(tuple):
	"""
	# The media type identified from a message header.
	"""
	__slots__ = ()

	@property
	def type(self) -> typing.Optional[media.MimeType]:
		'The extracted media type; &None if the header did not provide one.'
		return self[0]

	@property
	def apache_bug(self) -> bool:
		"""
		# Whether the last `Content-Type` value is one that misconfigured Apache servers
		# emit for arbitrary content. Sniffing consumers should not trust the type.
		"""
		return self[1]

def interpret(source:HeaderSource, response:bool=False,
		field=content_type_field,
		defaults=chars.APACHE_DEFAULTS,
	) -> Interpretation:
	"""
	# Extract the media type from the `Content-Type` fields of &source.

	# [ Parameters ]
	# /source/
		# The message header.
	# /response/
		# Whether the message is a response; the Apache default check only applies
		# to responses.
	"""
	values = [_text(x) for x in source.get_header_values(field)]

	apache_bug = bool(response and values and values[-1] in defaults)
	return Interpretation((extract(values), apache_bug))
