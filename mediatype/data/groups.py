"""
# Media type classification tables.

# Essences listed here are matched exactly; rules that depend on the
# type or on a subtype suffix are implemented by &..media.MimeType.
"""

archive = frozenset([
	'application/zip',
	'application/x-gzip',
	'application/x-rar-compressed',
])

audio_video_types = frozenset(['audio', 'video'])
audio_video = frozenset([
	'application/ogg',
])

font_types = frozenset(['font'])
font = frozenset([
	'application/font-cff',
	'application/font-off',
	'application/font-sfnt',
	'application/font-ttf',
	'application/font-woff',
	'application/vnd.ms-fontobject',
	'application/vnd.ms-opentype',
])

html = frozenset(['text/html'])

image_types = frozenset(['image'])

javascript = frozenset([
	'application/ecmascript',
	'application/javascript',
	'application/x-ecmascript',
	'application/x-javascript',
	'text/ecmascript',
	'text/javascript',
	'text/javascript1.0',
	'text/javascript1.1',
	'text/javascript1.2',
	'text/javascript1.3',
	'text/javascript1.4',
	'text/javascript1.5',
	'text/jscript',
	'text/livescript',
	'text/x-ecmascript',
	'text/x-javascript',
])

json = frozenset([
	'application/json',
	'text/json',
])
json_suffix = '+json'

xml = frozenset([
	'application/xml',
	'text/xml',
])
xml_suffix = '+xml'

zip_based = frozenset([
	'application/zip',
])
zip_suffix = '+zip'

#: Essences that are scriptable in addition to the HTML and XML groups.
scriptable = frozenset([
	'application/pdf',
])
