"""
# Content negotiation using `Accept` header fields.

# The remote preferences are parsed into a &Preferences mapping of normalized media
# range strings to quality values. Locally supported types are then evaluated in order
# of preference and the type with the highest quality is selected.

# [ Entry Points ]
# - &negotiate
# - &select

# [ Data ]

# /any_range/
	# &Preferences accepting every media type with full quality. Used when a message
	# does not include an `Accept` field.
"""
import typing
import logging

from . import media
from . import headers
from .data import grammar as chars

logger = logging.getLogger(__name__)

accept_field = 'Accept'

def quality(string:str, pattern=chars.QVALUE, float=float) -> typing.Optional[float]:
	"""
	# Interpret a qvalue.

	# [ Returns ]
	# The numeric value or &None when &string is not a valid qvalue.
	"""
	if pattern.fullmatch(string) is None:
		return None
	return float(string)

def normalize(mt:media.MimeType, default=1.0, key='q') -> typing.Tuple[media.MimeType, float]:
	"""
	# Remove the quality parameter from &mt and order the remaining parameters.

	# [ Returns ]
	# The normalized type and the quality; &default when the parameter
	# is absent or invalid.
	"""
	q = None
	for name, value in mt.parameters:
		if name == key:
			q = quality(value)
			break

	if q is None:
		q = default

	return mt.strip(key).sorted(), q

def candidates(mt:media.MimeType, wildcard=chars.WILDCARD, typsep=chars.TYPE_SEPARATOR) -> typing.List[str]:
	"""
	# The media range strings that would match the normalized &mt, most specific first.
	"""
	essence = mt.essence
	cotype = mt.type + typsep + wildcard
	anytype = wildcard + typsep + wildcard

	if not mt.parameters:
		return [essence, cotype, anytype]

	p = str(mt)[len(essence):]
	return [
		essence + p, essence,
		cotype + p, cotype,
		anytype + p, anytype,
	]

class Preferences(dict):
	"""
	# Media ranges of an `Accept` field mapped to their quality.

	# Keys are the normalized range strings: the `q` parameter is removed and the
	# remaining parameters are ordered by name.
	"""
	__slots__ = ()

	@classmethod
	def from_headers(Class, values:headers.Values):
		"""
		# Instantiate from one or more `Accept` field values.

		# Invalid items are ignored. When the same range occurs more than once, the
		# quality of the last occurrence is used.
		"""
		prefs = Class()

		for item in headers.split(values):
			mt = media.parse(item)
			if mt is None:
				logger.debug("ignoring invalid media range %r", item)
				continue

			mt, q = normalize(mt)
			prefs[str(mt)] = q

		return prefs

	def quality(self, mt:media.MimeType) -> typing.Optional[float]:
		"""
		# The quality assigned to the most specific range matching &mt.

		# [ Returns ]
		# &None when no range matches.
		"""
		for key in candidates(normalize(mt)[0]):
			if key in self:
				return self[key]
		return None

	def query(self, *local_types:str) -> typing.Optional[str]:
		"""
		# Select the preferred type from &local_types.

		# The type with the highest quality is selected; when qualities are equal, the
		# earlier type is selected. Types with a quality of zero are not acceptable.

		# [ Parameters ]
		# /local_types/
			# Media type strings supported locally; most preferred first.
			# Wildcards are not permitted.

		# [ Returns ]
		# The selected string exactly as given, or &None if none were acceptable.

		# [ Exceptions ]
		# /&media.InvalidArgument/
			# A local type was not a valid media type or contained a wildcard.
		"""
		current = None
		threshold = 0.0

		for string in local_types:
			mt = media.parse(string)
			if mt is None:
				raise media.InvalidArgument(string, 'syntax')
			if mt.pattern:
				raise media.InvalidArgument(string, 'pattern')

			q = self.quality(mt)
			if q is not None and q > threshold:
				current = string
				threshold = q

		logger.debug("selected %r with quality %r", current, threshold)
		return current

def negotiate(local_types:typing.Sequence[str], accept:headers.Values) -> typing.Optional[str]:
	"""
	# Select the best type from &local_types according to the `Accept` field values &accept.

	# Equivalent to `Preferences.from_headers(accept).query(*local_types)`.
	"""
	return Preferences.from_headers(accept).query(*local_types)

any_range = Preferences({str(media.any_type): 1.0})

def select(source:headers.HeaderSource, local_types:typing.Sequence[str],
		field=accept_field,
	) -> typing.Optional[str]:
	"""
	# Negotiate using the `Accept` fields of &source.

	# When &source has no `Accept` field, every type is acceptable and the first
	# local type is selected.
	"""
	values = source.get_header_values(field)
	if not values:
		return any_range.query(*local_types)

	return negotiate(local_types, values)
