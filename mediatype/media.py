"""
# Media Type value and parser.

# Interfaces here work with character-strings. Header values read from the wire
# should be given to &parse_bytes so that octets above 0x7F are mapped isomorphically.

# [ Entry Points ]
# - &parse
# - &parse_bytes

# [ Override ]

# /type_from_string/
	# Construct a &MimeType instance from a media type string.
	# Equivalent to &parse, but cached.

# /type_from_bytes/
	# Construct a &MimeType instance from media type octets.
	# Equivalent to &parse_bytes, but cached.
"""
import typing
import functools

from . import grammar
from . import isomorphic
from .data import grammar as chars
from .data import groups

class Error(Exception):
	"""
	# Base class for media type errors.
	"""

class InvalidArgument(Error, ValueError):
	"""
	# A caller supplied value was not usable by the operation.

	# [ Properties ]
	# /subject/
		# The rejected value.
	# /reason/
		# Identifier for the kind of violation:
		# `'syntax'`, `'pattern'`, `'parameter'`, or `'value'`.
	"""

	descriptions = {
		'syntax': "not a valid media type",
		'pattern': "wildcard media types are not permitted",
		'parameter': "not a valid parameter name",
		'value': "parameter value contains characters that cannot be represented",
	}

	def __init__(self, subject, reason):
		self.subject = subject
		self.reason = reason
		super().__init__(subject, reason)

	def __str__(self):
		return "%r: %s" %(self.subject, self.descriptions.get(self.reason, self.reason))

class MimeType(tuple):
	"""
	# The type, subtype, parameters triple describing a media type.

	# Instances are immutable. The parameters are stored as a tuple of name-value pairs in
	# the order that they were first encountered; names are unique and lowercase.
	# Operations that change parameters return new instances.
	"""
	__slots__ = ()

	def __str__(self, serialize=grammar.serialize_value):
		return self.essence + ''.join([
			';' + k + '=' + serialize(v)
			for k, v in self[2]
		])

	def __bytes__(self):
		return isomorphic.encode(str(self))

	def __repr__(self):
		return "%s.parse(%r)" %(__name__, str(self))

	@property
	def type(self) -> str:
		'Major type: text, application, image, \\*'
		return self[0]

	@property
	def subtype(self) -> str:
		'Subtype: plain, xml, svg+xml, \\*'
		return self[1]

	@property
	def parameters(self) -> typing.Tuple[typing.Tuple[str, str], ...]:
		'The name-value pairs of the type.'
		return self[2]

	@property
	def params(self) -> typing.Dict[str, str]:
		'A new ordered &dict of the parameters.'
		return dict(self[2])

	@property
	def essence(self) -> str:
		'The type and subtype without parameters.'
		return self[0] + chars.TYPE_SEPARATOR + self[1]

	@property
	def pattern(self) -> bool:
		'Whether the type or the subtype is a wildcard.'
		return chars.WILDCARD in (self[0], self[1])

	@property
	def suffix(self) -> typing.Optional[str]:
		"The structured syntax suffix following the last '+' of the subtype."
		index = self[1].rfind('+')
		if index == -1:
			return None
		return self[1][index+1:]

	def assign(self, name:str, value:str):
		"""
		# Return a new &MimeType with the parameter &name set to &value.

		# An existing parameter keeps its position; a new parameter is appended.
		"""
		if not grammar.token(name):
			raise InvalidArgument(name, 'parameter')
		if not all(c in chars.QUOTED_VALUE for c in value):
			raise InvalidArgument(value, 'value')

		name = name.lower()
		params = dict(self[2])
		params[name] = value
		return self.__class__((self[0], self[1], tuple(params.items())))

	def strip(self, *names):
		"""
		# Return a new &MimeType without the parameters identified by &names.
		"""
		return self.__class__((self[0], self[1], tuple([
			x for x in self[2] if x[0] not in names
		])))

	def sorted(self):
		"""
		# Return a new &MimeType with the parameters ordered by name.
		"""
		return self.__class__((self[0], self[1], tuple(sorted(self[2]))))

	# Classification

	@property
	def is_archive(self) -> bool:
		return self.essence in groups.archive

	@property
	def is_audio_video(self) -> bool:
		return self[0] in groups.audio_video_types or self.essence in groups.audio_video

	@property
	def is_font(self) -> bool:
		return self[0] in groups.font_types or self.essence in groups.font

	@property
	def is_html(self) -> bool:
		return self.essence in groups.html

	@property
	def is_image(self) -> bool:
		return self[0] in groups.image_types

	@property
	def is_javascript(self) -> bool:
		return self.essence in groups.javascript

	@property
	def is_json(self) -> bool:
		return self[1].endswith(groups.json_suffix) or self.essence in groups.json

	@property
	def is_xml(self) -> bool:
		return self[1].endswith(groups.xml_suffix) or self.essence in groups.xml

	@property
	def is_zip_based(self) -> bool:
		return self[1].endswith(groups.zip_suffix) or self.essence in groups.zip_based

	@property
	def is_scriptable(self) -> bool:
		"""
		# Whether content of this type may execute script when rendered.
		# HTML, XML, and PDF.
		"""
		return self.essence in groups.scriptable or self.is_html or self.is_xml

def parse(string:str, Type=MimeType, tuple=tuple) -> typing.Optional[MimeType]:
	"""
	# Parse a media type string.

	# The type and subtype are folded to lowercase; parameters are filtered and
	# deduplicated by &grammar.parameters.

	# [ Returns ]
	# The &MimeType or &None if &string does not contain a valid media type.
	"""
	fields = grammar.split(string)
	if fields is None:
		return None

	cotype, subtype, area = fields
	return Type((cotype.lower(), subtype.lower(), tuple(grammar.parameters(area).items())))

def parse_bytes(data:bytes) -> typing.Optional[MimeType]:
	"""
	# Parse media type octets as received from a header field.
	"""
	return parse(isomorphic.decode(data))

any_type = parse('*/*')

# Cached constructors.
type_from_string = functools.lru_cache(32)(parse)
type_from_bytes = functools.lru_cache(32)(parse_bytes)
