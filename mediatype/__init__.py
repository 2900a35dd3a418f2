"""
# mediatype is a Python project for interpreting Internet media types. It parses and
# normalizes `Content-Type` style strings, classifies the resulting types, extracts the
# effective type from a set of header fields, and negotiates content using `Accept`
# fields. It does not perform any communication or message parsing; header values are
# provided by the application.

# [ Media Types ]
# ---------------

# &.media.parse and &.media.parse_bytes construct &.media.MimeType instances.
# Strings that are not valid media types produce &None rather than exceptions.
# The canonical form of a type is produced by &str.

# [ Header Fields ]
# -----------------

# &.headers.extract selects the effective type from the `Content-Type` fields
# of a message; &.negotiation.negotiate selects a locally supported type
# using the `Accept` fields.
"""
