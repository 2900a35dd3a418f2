"""
# Isomorphic mapping between octets and the first 256 code points.

# Header values are octets; the grammar is expressed in terms of characters.
# Each octet is mapped to the code point of the same numeric value, so no octet
# sequence is rejected and the mapping can be reversed without loss.

# [ Entry Points ]
# - &decode
# - &encode
"""
codec = 'latin-1'

def decode(data:bytes, str=str) -> str:
	"""
	# Map each octet of &data to the code point of the same value.
	"""
	return str(data, codec)

def encode(string:str) -> bytes:
	"""
	# Map each code point of &string to the octet of the same value.

	# [ Returns ]
	# The octets or &None when &string contains a code point above U+00FF.
	"""
	try:
		return string.encode(codec)
	except UnicodeEncodeError:
		return None
