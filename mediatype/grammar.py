"""
# Scanners for the productions of the media type grammar.

# The functions here work exclusively with character-strings; header octets must be
# decoded with &.isomorphic.decode before being given to them.

# The scanners are tolerant in the same places that HTTP implementations are:
# unterminated quoted values extend to the end of the string, characters following
# the closing quote of a value are ignored, and malformed parameters are skipped
# rather than failing the entire type.

# [ Entry Points ]
# - &split
# - &parameters
# - &serialize_value
"""
import typing
from .data import grammar as chars

def token(string:str, table=chars.TOKEN, all=all) -> bool:
	"""
	# Whether &string is a non-empty HTTP token.
	"""
	return bool(string) and all(c in table for c in string)

def bare_value(string:str, table=chars.BARE_VALUE, strip=chars.WHITESPACE, all=all) -> str:
	"""
	# Validate an unquoted parameter value.

	# [ Returns ]
	# The value without trailing whitespace, or an empty string if it is not valid.
	"""
	string = string.rstrip(strip)
	if all(c in table for c in string):
		return string
	return ''

def quoted_value(string:str, start:int,
		quote=chars.QUOTE, escape=chars.ESCAPE,
		table=chars.QUOTED_VALUE,
		len=len,
	) -> typing.Tuple[typing.Optional[str], int]:
	"""
	# Scan the quoted value starting at the opening quote located at &start.

	# Backslash escapes are removed; a backslash at the end of the string is kept.
	# A missing closing quote is tolerated and the value extends to the end of &string.

	# [ Returns ]
	# A pair holding the unescaped value and the position following the closing quote.
	# The value is &None when a character outside of &table was present.
	"""
	end = len(string)
	pos = start + 1
	valid = True
	buf = []

	while pos < end:
		c = string[pos]
		if c == escape:
			if pos + 1 < end:
				c = string[pos+1]
				pos += 2
			else:
				pos += 1
		elif c == quote:
			pos += 1
			break
		else:
			pos += 1

		if c not in table:
			valid = False
		buf.append(c)

	if not valid:
		return None, pos
	return ''.join(buf), pos

def split(string:str,
		typsep=chars.TYPE_SEPARATOR, optsep=chars.PARAMETER_SEPARATOR,
		strip=chars.WHITESPACE,
	) -> typing.Optional[typing.Tuple[str, str, str]]:
	"""
	# Separate the type, subtype, and parameter area of a media type string.

	# Surrounding whitespace is removed, and the subtype is stripped of trailing
	# whitespace. Neither the type nor the subtype are folded.

	# [ Returns ]
	# A triple, `(type, subtype, parameters)`, or &None if the structure is not present
	# or either the type or the subtype is not a token. The parameter area includes the
	# leading separator and is empty when there are no parameters.
	"""
	string = string.lstrip(strip)

	index = string.find(typsep)
	if index < 1:
		return None

	cotype = string[:index]
	remainder = string[index+1:]

	index = remainder.find(optsep)
	if index == -1:
		subtype = remainder
		area = ''
	else:
		subtype = remainder[:index]
		area = remainder[index:]

	subtype = subtype.rstrip(strip)
	if not token(cotype) or not token(subtype):
		return None

	return cotype, subtype, area

def parameters(area:str,
		optsep=chars.PARAMETER_SEPARATOR, valsep=chars.VALUE_SEPARATOR,
		quote=chars.QUOTE,
		leading=chars.PARAMETER_SEPARATOR + chars.WHITESPACE,
		len=len,
	) -> typing.Dict[str, str]:
	"""
	# Scan the parameter area of a media type into an ordered mapping.

	# Names are folded to lowercase. The first valid occurrence of a name is retained and
	# subsequent occurrences are ignored. Parameters with invalid names, with invalid or
	# empty unquoted values, or without values at all, are skipped.

	# [ Parameters ]
	# /area/
		# The portion of the media type string following the subtype.
	"""
	out = {}
	end = len(area)
	pos = 0

	while pos < end:
		# Delimiters and whitespace preceding the name.
		while pos < end and area[pos] in leading:
			pos += 1
		if pos >= end:
			break

		# Name extends to the value separator or the next parameter.
		stop = area.find(optsep, pos)
		if stop == -1:
			stop = end
		eq = area.find(valsep, pos, stop)
		if eq == -1:
			name = area[pos:stop]
			pos = stop
			value = None
		else:
			name = area[pos:eq]
			pos = eq + 1

			if pos < end and area[pos] == quote:
				value, pos = quoted_value(area, pos)
				# Discard anything between the closing quote and the next parameter.
				stop = area.find(optsep, pos)
				pos = end if stop == -1 else stop
			else:
				# Empty unquoted values are not values.
				value = bare_value(area[pos:stop]) or None
				pos = stop

		if value is None or not token(name):
			continue

		name = name.lower()
		if name not in out:
			out[name] = value

	return out

def serialize_value(value:str, escape=chars.ESCAPE, quote=chars.QUOTE) -> str:
	"""
	# Format a parameter value; quoted and escaped unless it is a token.
	"""
	if token(value):
		return value

	value = value.replace(escape, escape + escape).replace(quote, escape + quote)
	return quote + value + quote
