from typing import Self
from abc import ABC, abstractmethod
from typing import Optional, ClassVar, Iterator, Iterable, Sequence, TypeVar
import bisect
import collections
import functools
import itertools
import logging
import math
import re

logger = logging.getLogger(__name__)

T = TypeVar('T')

def circular_pairwise(x: Iterable[T]) -> Iterator[tuple[T, T]]:
	''' like pairwise, but with a trailing (last, first) entry '''
	x = iter(x)
	start = next(x)
	e1 = start
	for e2 in x:
		yield (e1, e2)
		e1 = e2
	yield (e1, start)

__all__ = [
	'GroupError', 'KindError', 'SubgroupError', 'NotNormalError', 'ClosureError',
	'Element', 'Group',
	'ModularInt', 'CyclicGroup',
	'Permutation', 'SymmetricGroup',
	'Dihedral', 'DihedralGroup',
	'Coset', 'FactorGroup',
]


# ERRORS
# ------

class GroupError(Exception):
	''' base class for the errors raised by this module '''

class KindError(GroupError, TypeError):
	''' an element of the wrong kind reached a group (or another element) '''

class SubgroupError(GroupError, ValueError):
	''' a sequence passed as a subgroup isn't a subgroup of the group '''

class NotNormalError(SubgroupError):
	''' the subgroup isn't normal, so its cosets don't form a group '''

class ClosureError(GroupError, RuntimeError):
	'''
	repeated application of the group operation didn't reach the identity
	within the group's order. this can only happen if the operation or the
	equality of the group is inconsistent (i.e. floating point round-off).
	'''


# ELEMENT
# -------

class Element(ABC):
	'''
	Base class for group elements.

	An element doesn't know which group it belongs to: the operation, the
	inverse and (for some kinds) equality are provided by `Group`. Elements
	only carry their order, which is filled in by the owning group.

	The comparison operators look at the order *alone*, so they are meant for
	grouping and sorting; different elements of the same order are neither
	less nor greater than each other. Use `equals()` (or `==`) to tell
	elements apart.
	'''

	order: int = 0
	''' smallest positive k such that x^k is the identity, or 0 if not computed yet '''

	@abstractmethod
	def equals(self, other: 'Element') -> bool:
		'''
		kind-specific equality. implementations must raise KindError when
		`other` is of an incompatible kind, never return False for it.
		'''

	def _check_kind(self, other: 'Element'):
		if not isinstance(other, type(self)):
			raise KindError(f'cannot compare {type(self).__name__} with {type(other).__name__}')

	def __eq__(self, other):
		if not isinstance(other, type(self)):
			return NotImplemented
		return self.equals(other)

	def __lt__(self, other: 'Element'):
		if not isinstance(other, Element):
			return NotImplemented
		return self.order < other.order

	def __le__(self, other: 'Element'):
		if not isinstance(other, Element):
			return NotImplemented
		return self.order <= other.order

	def __gt__(self, other: 'Element'):
		if not isinstance(other, Element):
			return NotImplemented
		return self.order > other.order

	def __ge__(self, other: 'Element'):
		if not isinstance(other, Element):
			return NotImplemented
		return self.order >= other.order


# GROUP
# -----

class Group(ABC):
	'''
	Base class for finite groups given by an explicit list of members.

	Subclasses define the element kind they accept (ELEMENT), the core
	operations (`_operate`, `_inverse`), the cardinality and, optionally,
	their own canonical insertion policy (`add_in_order`). Everything else
	(element orders, cyclic subgroups, normality...) is computed generically
	on top of those.

	The member sequence is owned by the group: no duplicates, in the
	canonical order of the group. Accessors never hand out the internal list.
	'''

	ELEMENT: ClassVar[type[Element]]
	''' element kind accepted by this group (must be defined by child) '''

	n: int
	''' parameter (dimension) of the group '''

	_members: list[Element]
	_identity: Element
	_by_order: Optional[dict[int, list[Element]]]

	def __init__(self, n: int):
		if not isinstance(n, int) or n < 1:
			raise ValueError(f'group parameter must be a positive integer, not {n!r}')
		self.n = n
		self._members = []
		self._by_order = None

	# description

	@property
	@abstractmethod
	def group_order(self) -> int:
		''' number of elements of the group (known before the members are enumerated) '''

	@property
	@abstractmethod
	def name(self) -> str:
		''' short name of the group, like Z4 or S3 '''

	def __repr__(self):
		return f'{type(self).__name__}({self.n})'

	# members

	@property
	def identity(self) -> Element:
		return self._identity

	@property
	def members(self) -> list[Element]:
		''' copy of the member sequence, in canonical order '''
		return list(self._members)

	def __len__(self) -> int:
		return len(self._members)

	def __iter__(self) -> Iterator[Element]:
		return iter(tuple(self._members))

	def __getitem__(self, index: int) -> Element:
		return self._members[index]

	def __contains__(self, x: Element) -> bool:
		return self.contains(self._members, x)

	# core group operations

	@abstractmethod
	def _operate(self, a: Element, b: Element) -> Element:
		'''
		the group operation

		internal method; users should use `operate()` instead,
		which validates the kind of both operands. '''

	@abstractmethod
	def _inverse(self, a: Element) -> Element:
		'''
		inverse element

		internal method; users should use `inverse()` instead. '''

	def _check(self, *elements: Element):
		''' raises KindError unless every element is of this group's kind '''
		for x in elements:
			if not isinstance(x, self.ELEMENT):
				raise KindError(f'{self.name} operates on {self.ELEMENT.__name__} elements, not {type(x).__name__}')

	def operate(self, a: Element, b: Element) -> Element:
		'''
		the group operation. the result is again a member of the group; the
		operation is assumed (not checked) to be associative.
		'''
		self._check(a, b)
		return self._operate(a, b)

	def inverse(self, a: Element) -> Element:
		''' returns the element `b` such that `operate(a, b)` is the identity '''
		self._check(a)
		return self._inverse(a)

	def equals(self, a: Element, b: Element) -> bool:
		'''
		equality of two elements of this group. the default implementation
		delegates to the elements; groups whose elements need context to be
		compared (see CyclicGroup) override it.
		'''
		self._check(a, b)
		return a.equals(b)

	def chain_operate(self, seq: Iterable[Element]) -> Element:
		'''
		operates a sequence of elements left to right, so the last one acts
		first. an empty sequence gives the identity.
		'''
		return functools.reduce(self.operate, seq, self._identity)

	# generic algorithms

	def element_order(self, e: Element) -> int:
		'''
		computes the order of `e` by operating it with itself until the
		identity is reached. raises ClosureError if that doesn't happen within
		`group_order` steps (which means the group is broken, see ClosureError).
		'''
		so_far, order = e, 1
		while not self.equals(so_far, self._identity):
			if order >= self.group_order:
				raise ClosureError(f'{e!r} did not reach the identity of {self.name} after {order} steps')
			so_far = self.operate(so_far, e)
			order += 1
		return order

	def generate_subgroup(self, seed: Element) -> list[Element]:
		'''
		returns the cyclic subgroup generated by `seed`, in the canonical
		order of the group. the returned elements are the group's own members.
		'''
		self._check(seed)
		subgroup: list[Element] = []
		current = seed
		for _ in range(self.group_order):
			if not self.contains(subgroup, current):
				self.add_in_order(subgroup, self.canonical(current))
			if self.equals(current, self._identity):
				return subgroup
			current = self.operate(current, seed)
		raise ClosureError(f'the subgroup generated by {seed!r} did not close within {self.name}')

	def is_subgroup(self, seq: Sequence[Element]) -> bool:
		'''
		whether `seq` is a subgroup: distinct members of the group, including
		the identity, closed under operation and inverse.
		'''
		if not seq or not self.contains(seq, self._identity):
			return False
		if not all(self.contains(self._members, x) and self.find_index(seq, x) == i for i, x in enumerate(seq)):
			return False
		return all(self.contains(seq, self.operate(a, b)) for a in seq for b in seq) and \
			all(self.contains(seq, self.inverse(a)) for a in seq)

	def is_normal(self, subgroup: Sequence[Element]) -> bool:
		''' whether `subgroup` is closed under conjugation by every member of the group '''
		for g in self._members:
			g_inv = self.inverse(g)
			for h in subgroup:
				if not self.contains(subgroup, self.operate(self.operate(g, h), g_inv)):
					return False
		return True

	def subgroup_equals(self, a: Sequence[Element], b: Sequence[Element]) -> bool:
		''' whether two subgroups (or any element sequences) hold the same elements '''
		return len(a) == len(b) and all(self.contains(a, x) for x in b)

	def canonical(self, e: Element) -> Element:
		''' returns the member of the group equal to `e`, which has its order set '''
		index = self.find_index(self._members, e)
		if index < 0:
			raise ValueError(f'{e!r} is not a member of {self.name}')
		member = self._members[index]
		if not member.order:
			member.order = self.element_order(member)
		return member

	# order index

	def store_elements_by_order(self):
		'''
		builds the order -> members index (once). orders of members that
		weren't computed at construction are computed here.
		'''
		if self._by_order is not None:
			return
		by_order: dict[int, list[Element]] = {}
		for x in self._members:
			if not x.order:
				x.order = self.element_order(x)
			by_order.setdefault(x.order, []).append(x)
		self._by_order = by_order

	def elements_by_order(self, k: int) -> list[Element]:
		''' members of order `k`, in canonical order (empty if there are none) '''
		self.store_elements_by_order()
		assert self._by_order is not None
		return list(self._by_order.get(k, ()))

	@property
	def all_orders(self) -> list[int]:
		''' the distinct orders of the members, ascending '''
		self.store_elements_by_order()
		assert self._by_order is not None
		return sorted(self._by_order)

	# sequences of elements

	def add_in_order(self, seq: list[Element], e: Element) -> list[Element]:
		'''
		inserts `e` into `seq` at its canonical position, and returns `seq`.

		every sequence of elements built incrementally (members, subgroups,
		cosets) goes through this method. the default policy sorts by element
		order, and elements of equal order keep their discovery order. it
		assumes `seq` was built by this same method.
		'''
		self._check(e)
		if not e.order:
			e.order = self.element_order(e)
		seq.insert(bisect.bisect_right(seq, e.order, key=lambda x: x.order), e)
		return seq

	def find_index(self, seq: Sequence[Element], e: Element) -> int:
		''' index of `e` in `seq` according to `equals()`, or -1 '''
		for i, x in enumerate(seq):
			if self.equals(x, e):
				return i
		return -1

	def contains(self, seq: Sequence[Element], e: Element) -> bool:
		return self.find_index(seq, e) >= 0


# CYCLIC GROUP
# ------------

class ModularInt(Element):
	'''
	an integer standing for its residue class. the modulus belongs to the
	group, so two of these can only be compared through `CyclicGroup.equals`.
	'''

	value: int

	def __init__(self, value: int):
		if not isinstance(value, int):
			raise TypeError(f'object {value!r} is not an int')
		self.value = value

	def equals(self, other: Element) -> bool:
		self._check_kind(other)
		raise NotImplementedError('modular integers carry no modulus, compare them through their CyclicGroup')

	def __repr__(self):
		return f'ModularInt({self.value})'

class CyclicGroup(Group):
	''' integers modulo n under addition (Z_n) '''

	ELEMENT = ModularInt

	def __init__(self, n: int):
		super().__init__(n)
		self._identity = ModularInt(0)
		for i in range(n):
			x = self._identity if i == 0 else ModularInt(i)
			x.order = self.element_order(x)
			self.add_in_order(self._members, x)
		logger.debug('built %s', self.name)

	@property
	def group_order(self) -> int:
		return self.n

	@property
	def name(self) -> str:
		return f'Z{self.n}'

	def residue(self, a: ModularInt) -> ModularInt:
		''' least nonnegative residue of `a`, the primary representative of its class '''
		self._check(a)
		return ModularInt(a.value % self.n)

	# group operations

	def _operate(self, a: ModularInt, b: ModularInt) -> ModularInt:
		return ModularInt((a.value + b.value) % self.n)

	def _inverse(self, a: ModularInt) -> ModularInt:
		r = self.residue(a).value
		return ModularInt(self.n - r) if r else self._identity

	def equals(self, a: ModularInt, b: ModularInt) -> bool:
		self._check(a, b)
		return a.value % self.n == b.value % self.n

	def add_in_order(self, seq: list[ModularInt], e: ModularInt) -> list[ModularInt]:
		''' orders by least nonnegative residue '''
		self._check(e)
		seq.insert(bisect.bisect_right(seq, e.value % self.n, key=lambda x: x.value % self.n), e)
		return seq


# SYMMETRIC GROUP
# ---------------

class Permutation(Element):
	'''
	bijection of {1, ..., n}, stored as the tuple of images `(p(1), ..., p(n))`
	so that `p(i)` is at index `i - 1`.
	'''

	_images: tuple[int, ...]

	def __init__(self, images: Iterable[int]):
		images = tuple(images)
		if sorted(images) != list(range(1, len(images) + 1)):
			raise ValueError(f'{images!r} is not a bijection of 1..{len(images)}')
		self._images = images

	@classmethod
	def from_cycles(cls, n: int, *cycles: Iterable[int]) -> Self:
		''' construct a permutation of {1, ..., n} from disjoint cycles (fixed points may be omitted) '''
		result = list(range(1, n + 1))
		for cycle in cycles:
			for i, j in circular_pairwise(cycle):
				assert 1 <= i <= n and result[i - 1] == i, f'{i} is out of range or in two cycles'
				result[i - 1] = j
		return cls(result)

	@property
	def images(self) -> tuple[int, ...]:
		return self._images

	@property
	def size(self) -> int:
		return len(self._images)

	def __call__(self, i: int) -> int:
		''' interprets this permutation as a function on {1, ..., n} '''
		assert isinstance(i, int) and 1 <= i <= self.size
		return self._images[i - 1]

	def equals(self, other: Element) -> bool:
		self._check_kind(other)
		return self._images == other._images

	def __hash__(self):
		return hash(self._images)

	def __repr__(self):
		return f'Permutation({self._images!r})'

	def is_identity(self) -> bool:
		return all(i == j for i, j in enumerate(self._images, 1))

	# cycles

	def non_fixed(self) -> list[int]:
		''' points moved by this permutation, ascending '''
		return [i for i, j in enumerate(self._images, 1) if i != j]

	def full_cycle(self, start: int) -> list[int]:
		''' the cycle through `start`, beginning with it '''
		cycle, cursor = [], start
		while True:
			cycle.append(cursor)
			cursor = self(cursor)
			if cursor == start:
				return cycle

	def cycles(self) -> list[list[int]]:
		''' disjoint cycles of length > 1, each beginning with its minimal point '''
		seen: set[int] = set()
		result = []
		for i in self.non_fixed():
			if i not in seen:
				cycle = self.full_cycle(i)
				seen.update(cycle)
				result.append(cycle)
		return result

class SymmetricGroup(Group):
	'''
	symmetric group of the permutations of {1, ..., n} (S_n)

	the implemented operation follows usual left action notation, meaning
	`operate(a, b)` is the composition `a ∘ b` of their associated
	functions (b is performed first, then a).

	members are sorted by element order, and by lexicographic order of their
	images among the same element order. from ORDERED_LIMIT points on, that
	ordering (and computing every element order) is skipped and members are
	kept in plain lexicographic order, identity first. the group has n!
	elements, so in practice anything past 9 or 10 points won't fit in memory.
	'''

	ELEMENT = Permutation

	ORDERED_LIMIT: ClassVar[int] = 7
	''' number of points from which members aren't ordered at construction '''

	def __init__(self, n: int):
		super().__init__(n)
		orderings = itertools.permutations(range(1, n + 1))
		self._identity = Permutation(next(orderings))
		self._identity.order = 1
		self._members.append(self._identity)
		if n >= self.ORDERED_LIMIT:
			logger.warning('%s has %d elements: members are left unordered, with orders not computed',
				self.name, self.group_order)
			self._members.extend(map(Permutation, orderings))
		else:
			for images in orderings:
				self.add_in_order(self._members, Permutation(images))
		logger.debug('built %s', self.name)

	@property
	def group_order(self) -> int:
		return math.factorial(self.n)

	@property
	def name(self) -> str:
		return f'S{self.n}'

	def _check(self, *elements: Element):
		super()._check(*elements)
		for x in elements:
			if x.size != self.n:
				raise KindError(f'{self.name} operates on permutations of {self.n} points, not {x.size}')

	def transposition(self, a: int, b: int) -> Permutation:
		''' the permutation swapping points `a` and `b` '''
		return Permutation.from_cycles(self.n, [a, b]) if a != b else self._identity

	# group operations

	def _operate(self, a: Permutation, b: Permutation) -> Permutation:
		return Permutation(a.images[j - 1] for j in b.images)

	def _inverse(self, a: Permutation) -> Permutation:
		if self.equals(a, self._identity):
			return self._identity
		if self.equals(self._operate(a, a), self._identity):
			return a
		return self.chain_operate(reversed(self.decompose(a)))

	def decompose(self, p: Permutation) -> list[Permutation]:
		'''
		decomposes `p` into a list of (not necessarily disjoint) two-cycles
		whose composition, in list order, is `p` again.

		first a starting point ("origin") is chosen for every cycle of `p`,
		then each cycle is walked from its origin. if we walked from a single
		point, permutations like (1 4 3)(2 6) would lose the second cycle; so
		we need both 1 and 2 as origins (leaving the fixed point 5 alone) to
		get (2 6)(1 3)(1 4). the identity decomposes into itself.
		'''
		self._check(p)
		if self.equals(p, self._identity):
			return [self._identity]

		origins = [cycle[0] for cycle in p.cycles()]
		traversed = set(origins)
		decomposition: collections.deque[Permutation] = collections.deque()
		for origin in origins:
			current = p(origin)
			while current not in traversed:
				traversed.add(current)
				decomposition.appendleft(self.transposition(origin, current))
				current = p(current)
		return list(decomposition)


# DIHEDRAL GROUP
# --------------

class Dihedral(Element):
	'''
	symmetry of a regular polygon: a rotation by `degree` degrees, or a
	reflection over the axis at `degree` degrees.

	rotations are taken modulo 360 and reflection axes modulo 180. equality
	is an epsilon-equality: two elements of the same kind are equal when their
	angles agree, modulo the above, within `tolerance` degrees. this absorbs
	the floating point round-off of the group operation when n doesn't
	divide 360 (D_7, for instance), which would otherwise keep element orders
	from ever reaching the identity.
	'''

	ROTATION: ClassVar[str] = 'rotation'
	REFLECTION: ClassVar[str] = 'reflection'

	TOLERANCE: ClassVar[float] = 1e-6
	''' default tolerance, in degrees '''

	kind: str
	degree: float
	tolerance: float

	def __init__(self, kind: str, degree: float, tolerance: Optional[float] = None):
		kind = kind.lower()
		if kind not in (self.ROTATION, self.REFLECTION):
			raise ValueError(f'{kind!r} is not a dihedral kind, expected {self.ROTATION!r} or {self.REFLECTION!r}')
		self.kind = kind
		self.degree = float(degree)
		self.tolerance = type(self).TOLERANCE if tolerance is None else tolerance

	def is_rotation(self) -> bool:
		return self.kind == self.ROTATION

	def is_reflection(self) -> bool:
		return self.kind == self.REFLECTION

	@property
	def modulus(self) -> float:
		return 360.0 if self.is_rotation() else 180.0

	@property
	def angle(self) -> float:
		''' degree reduced to [0, modulus); values within tolerance of the modulus become 0 '''
		angle = self.degree % self.modulus
		return 0.0 if self.modulus - angle <= self.tolerance else angle

	def equals(self, other: Element) -> bool:
		self._check_kind(other)
		if self.kind != other.kind:
			return False
		diff = abs(self.degree - other.degree) % self.modulus
		return min(diff, self.modulus - diff) <= max(self.tolerance, other.tolerance)

	def __repr__(self):
		return f'Dihedral({self.kind!r}, {self.degree!r})'

class DihedralGroup(Group):
	'''
	symmetries of the regular n-gon (D_n, with 2n elements): n rotations by
	multiples of 360/n degrees and n reflections over axes at multiples of
	180/n degrees.

	`operate(a, b)` performs b first, then a.
	'''

	ELEMENT = Dihedral

	FULL_ROTATION: ClassVar[float] = 360.0
	HALF_ROTATION: ClassVar[float] = 180.0

	def __init__(self, n: int):
		super().__init__(n)
		self._identity = Dihedral(Dihedral.ROTATION, 0.0)
		for i in range(n):
			x = self._identity if i == 0 else Dihedral(Dihedral.ROTATION, i * self.FULL_ROTATION / n)
			x.order = self.element_order(x)
			self.add_in_order(self._members, x)
		for i in range(n):
			x = Dihedral(Dihedral.REFLECTION, i * self.HALF_ROTATION / n)
			x.order = self.element_order(x)
			self.add_in_order(self._members, x)
		logger.debug('built %s', self.name)

	@property
	def group_order(self) -> int:
		return 2 * self.n

	@property
	def name(self) -> str:
		return f'D{self.n}'

	def rotation(self, k: int) -> Dihedral:
		''' the member rotating by k * 360/n degrees '''
		if not 0 <= k < self.n:
			raise IndexError(f'rotation index {k} out of range')
		return self._members[k]

	def reflection(self, k: int) -> Dihedral:
		''' the member reflecting over the axis at k * 180/n degrees '''
		if not 0 <= k < self.n:
			raise IndexError(f'reflection index {k} out of range')
		return self._members[self.n + k]

	# group operations

	def _operate(self, a: Dihedral, b: Dihedral) -> Dihedral:
		FULL, HALF = self.FULL_ROTATION, self.HALF_ROTATION
		if b.is_rotation():
			if a.is_rotation():
				return Dihedral(Dihedral.ROTATION, (a.degree + b.degree) % FULL, a.tolerance)
			return Dihedral(Dihedral.REFLECTION, ((2 * a.degree - b.degree) / 2) % HALF, a.tolerance)
		if a.is_rotation():
			return Dihedral(Dihedral.REFLECTION, ((2 * b.degree + a.degree) / 2) % HALF, a.tolerance)
		return Dihedral(Dihedral.ROTATION, (2 * a.degree - 2 * b.degree) % FULL, a.tolerance)

	def _inverse(self, a: Dihedral) -> Dihedral:
		if a.is_reflection():
			return a
		return Dihedral(Dihedral.ROTATION, (self.FULL_ROTATION - a.degree) % self.FULL_ROTATION, a.tolerance)

	def add_in_order(self, seq: list[Dihedral], e: Dihedral) -> list[Dihedral]:
		'''
		rotations go before reflections, and each segment is sorted by angle.
		angles that don't exactly match an existing slot (when n doesn't
		divide 360) are still placed correctly, since ties are decided with
		the elements' tolerance.
		'''
		self._check(e)
		index = 0
		while index < len(seq) and self._goes_before(seq[index], e):
			index += 1
		seq.insert(index, e)
		return seq

	@staticmethod
	def _goes_before(x: Dihedral, e: Dihedral) -> bool:
		if x.kind != e.kind:
			return x.is_rotation()
		return x.angle <= e.angle + max(x.tolerance, e.tolerance)


# COSETS & FACTOR GROUP
# ---------------------

class Coset(Element):
	'''
	left coset `r H` of a subgroup H of a context group G, with primary
	representative r.

	the members are computed once, at construction, by operating the
	representative with every element of H and inserting the products with
	the canonical rule of G. cosets are immutable.

	two cosets are equal when they hold the same members. membership is
	tested through the context group, since some element kinds can't be
	compared without it.
	'''

	def __init__(self, group: Group, subgroup: Sequence[Element], representative: Element):
		self._group = group
		self._subgroup = list(subgroup)
		self._representative = representative
		members: list[Element] = []
		for h in self._subgroup:
			group.add_in_order(members, group.canonical(group.operate(representative, h)))
		self._members = members

	@property
	def group(self) -> Group:
		''' the context group '''
		return self._group

	@property
	def subgroup(self) -> list[Element]:
		return list(self._subgroup)

	@property
	def representative(self) -> Element:
		return self._representative

	@property
	def members(self) -> list[Element]:
		''' copy of the members, in the canonical order of the context group '''
		return list(self._members)

	def __len__(self) -> int:
		return len(self._members)

	def __iter__(self) -> Iterator[Element]:
		return iter(tuple(self._members))

	def equals(self, other: Element) -> bool:
		self._check_kind(other)
		if other._group is not self._group:
			raise KindError(f'cannot compare cosets of {self._group.name} and {other._group.name}')
		return len(self._members) == len(other._members) and \
			all(self._group.contains(self._members, x) for x in other._members)

	def __repr__(self):
		return f'Coset({self._representative!r})'

class FactorGroup(Group):
	'''
	factor (quotient) group G/N of a group G by a normal subgroup N

	the members are the distinct cosets of N, discovered in the member order
	of G (so the identity coset N comes first). the operation multiplies
	representatives in G, which is only well defined because N is normal:
	construction fails with NotNormalError otherwise.

	the parameter `n` is the number of cosets, |G| / |N|.
	'''

	ELEMENT = Coset

	group: Group
	''' the parent group G '''

	def __init__(self, group: Group, subgroup: Sequence[Element]):
		subgroup = list(subgroup)
		group._check(*subgroup)
		if not group.is_subgroup(subgroup):
			raise SubgroupError(f'{subgroup!r} is not a subgroup of {group.name}')
		if not group.is_normal(subgroup):
			raise NotNormalError(f'{subgroup!r} is not a normal subgroup of {group.name}')
		super().__init__(group.group_order // len(subgroup))
		self.group = group
		self._subgroup = subgroup

		self._identity = Coset(group, subgroup, group.identity)
		self._identity.order = 1
		self._members.append(self._identity)
		for g in group:
			coset = Coset(group, subgroup, g)
			if not self.contains(self._members, coset):
				self._members.append(coset)
		assert len(self._members) == self.n, 'cosets of a normal subgroup must partition the group'
		for coset in self._members:
			if not coset.order:
				coset.order = self.element_order(coset)
		logger.debug('built %s with %d cosets of %d elements', self.name, self.n, len(subgroup))

	@property
	def group_order(self) -> int:
		return self.n

	@property
	def name(self) -> str:
		''' parent name over the order of the normal subgroup, like S3/N3 '''
		return f'{self.group.name}/N{len(self._subgroup)}'

	@property
	def subgroup(self) -> list[Element]:
		return list(self._subgroup)

	def __repr__(self):
		return f'FactorGroup({self.group!r}, {self._subgroup!r})'

	def _check(self, *elements: Element):
		super()._check(*elements)
		for x in elements:
			if x.group is not self.group:
				raise KindError(f'{self.name} operates on cosets of {self.group.name}, not of {x.group.name}')

	def coset(self, representative: Element) -> Coset:
		''' the coset of the normal subgroup represented by `representative` '''
		return Coset(self.group, self._subgroup, representative)

	# group operations

	def _operate(self, a: Coset, b: Coset) -> Coset:
		return self.coset(self.group.operate(a.representative, b.representative))

	def _inverse(self, a: Coset) -> Coset:
		return self.coset(self.group.inverse(a.representative))


# AUTOMAGICAL GROUP CREATION
# --------------------------

PREFIXES: dict[str, type[Group]] = {
	'Z': CyclicGroup,
	'S': SymmetricGroup,
	'D': DihedralGroup,
}

def __getattr__(name: str) -> Group:
	''' builds (and caches) groups by name, so that `groupzoo.S3` is the symmetric group on 3 points '''
	if (m := re.fullmatch(r'(\D+)(\d+)', name)) and (t := PREFIXES.get(m.group(1))) != None:
		group = t(int(m.group(2)))
		globals()[name] = group
		return group
	raise AttributeError(f'module {__name__!r} has no attribute {name!r}')
