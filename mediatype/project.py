__factor_type__ = 'project'
identity = 'http://fault.io/python/mediatype'
name = 'mediatype'
abstract = 'Internet media type parsing, extraction, and content negotiation'
icon = '🏷'

fork = 'darpa'
versioning = 'continuous'
status = 'flux'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))
