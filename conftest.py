"""
# pytest integration for contention style tests.

# Test functions take a single `test` parameter and express their checks as
# contentions:

#!syntax/python
	def test_feature(test):
		test/featurelib.functionality() == expectation
		item in test/container
		test/ValueError ^ (lambda: featurelib.failure())
"""
import builtins
import operator
import functools

import pytest

class Absurdity(AssertionError):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__le__': '<=',
		'__ge__': '>=',
		'__lt__': '<',
		'__gt__': '>',
		'__contains__': 'contains',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(str(self))

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Assertion operand produced by `test/subject`.

	# The comparison operators are passed on to the underlying object and raise
	# &Absurdity when the comparison is false. `//` inverts the contention.
	"""
	__slots__ = ('object', 'storage', 'inverse')

	def __init__(self, object, inverse=False):
		self.object = object
		self.inverse = inverse

	_override = {
		'__mod__': ('is', lambda x, y: x is y)
	}

	for k, v in operator.__dict__.items():
		if k.startswith('__get') or k.startswith('__set') or k.startswith('__del'):
			continue
		if k in ('__eq__', '__ne__', '__lt__', '__le__', '__gt__', '__ge__', '__contains__', '__mod__'):
			if k in _override:
				opname, v = _override[k]
			else:
				opname = k

			def check(self, ob, opname=opname, operator=v):
				x, y = self.object, ob
				if self.inverse:
					if operator(x, y): raise Absurdity(opname, x, y, inverse=True)
				else:
					if not operator(x, y): raise Absurdity(opname, x, y, inverse=False)
				return True
			locals()[k] = check
	del k, v, opname, check

	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		x = self.object
		y = self.storage = val
		if not isinstance(y, x): raise Absurdity("isinstance", x, y)
		return True # !!! Inhibiting raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called::

		#!syntax/python
			test/Exception ^ (lambda: subject())
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Test(object):
	"""
	# Contention factory given to test functions.
	"""
	__slots__ = ('identifier',)

	Absurdity = Absurdity
	Contention = Contention

	def __init__(self, identifier):
		self.identifier = identifier

	def __truediv__(self, object):
		return self.Contention(object)

	def __rtruediv__(self, object):
		return self.Contention(object)

	def __floordiv__(self, object):
		return self.Contention(object, True)

	def __rfloordiv__(self, object):
		return self.Contention(object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture
def test(request):
	return Test(request.node.name)
