import logging
import math

import pytest

import groupzoo
from groupzoo import *

def verify_group(G: Group):
	G.store_elements_by_order()
	assert len(G) == G.group_order
	assert G[0] is G.identity and G.identity.order == 1
	for i, a in enumerate(G):
		assert G.find_index(G.members, a) == i, 'members must be distinct'
		assert G.equals(G.operate(a, G.inverse(a)), G.identity)
		assert G.equals(G.operate(G.inverse(a), a), G.identity)
		assert G.equals(G.operate(a, G.identity), a)
		assert G.equals(G.operate(G.identity, a), a)

		order = G.element_order(a)
		assert a.order == order
		assert G.group_order % order == 0
		assert G.equals(G.chain_operate([a] * order), G.identity)

		subgroup = G.generate_subgroup(a)
		assert len(subgroup) == order
		assert G.contains(subgroup, a) and G.contains(subgroup, G.identity)
		assert G.is_subgroup(subgroup)
		assert all(G.contains(subgroup, G.inverse(x)) for x in subgroup)
	assert sum(len(G.elements_by_order(k)) for k in G.all_orders) == len(G)

def verify_partition(F: FactorGroup):
	for g in F.group:
		assert sum(F.group.contains(coset.members, g) for coset in F) == 1
	assert all(len(coset) == len(F.subgroup) for coset in F)

GROUPS = {
	'Z1': lambda: CyclicGroup(1),
	'Z4': lambda: CyclicGroup(4),
	'Z12': lambda: CyclicGroup(12),
	'S1': lambda: SymmetricGroup(1),
	'S3': lambda: SymmetricGroup(3),
	'S4': lambda: SymmetricGroup(4),
	'D1': lambda: DihedralGroup(1),
	'D4': lambda: DihedralGroup(4),
	'D6': lambda: DihedralGroup(6),
	'D7': lambda: DihedralGroup(7),
}

@pytest.mark.parametrize('name', GROUPS)
def test_group_laws(name):
	G = GROUPS[name]()
	assert G.name == name
	verify_group(G)


# cyclic groups

def test_cyclic():
	Z4 = CyclicGroup(4)
	assert [x.value for x in Z4] == [0, 1, 2, 3]
	assert Z4.operate(ModularInt(3), ModularInt(2)).value == 1
	assert Z4.inverse(ModularInt(1)).value == 3
	assert Z4.inverse(ModularInt(0)) is Z4.identity
	assert Z4.inverse(ModularInt(6)).value == 2
	assert Z4.residue(ModularInt(-1)).value == 3
	assert Z4.equals(ModularInt(3), ModularInt(7))
	assert not Z4.equals(ModularInt(2), ModularInt(3))

	assert [x.value for x in Z4.generate_subgroup(ModularInt(3))] == [0, 1, 2, 3]
	assert [x.value for x in Z4.generate_subgroup(ModularInt(2))] == [0, 2]
	assert Z4.subgroup_equals(Z4.generate_subgroup(ModularInt(3)), Z4.generate_subgroup(ModularInt(1)))
	assert not Z4.subgroup_equals(Z4.generate_subgroup(ModularInt(3)), Z4.generate_subgroup(ModularInt(2)))
	assert Z4.is_normal(Z4.generate_subgroup(ModularInt(3)))

	assert Z4.find_index(Z4.members, ModularInt(5)) == 1
	assert Z4.find_index(Z4.generate_subgroup(ModularInt(2)), ModularInt(5)) == -1

def test_cyclic_orders():
	Z12 = CyclicGroup(12)
	for x in Z12:
		assert x.order == 12 // math.gcd(12, x.value)
	assert Z12.all_orders == [1, 2, 3, 4, 6, 12]
	assert [x.value for x in Z12.elements_by_order(12)] == [1, 5, 7, 11]

def test_cyclic_insertion():
	Z5 = CyclicGroup(5)
	seq = []
	for value in [3, 9, 0, 6]:
		Z5.add_in_order(seq, ModularInt(value))
	assert [x.value for x in seq] == [0, 6, 3, 9]

def test_modular_int_needs_group():
	with pytest.raises(NotImplementedError):
		ModularInt(1).equals(ModularInt(1))
	with pytest.raises(KindError):
		ModularInt(1).equals(Permutation((1,)))


# symmetric groups

def test_symmetric_members():
	S3 = SymmetricGroup(3)
	assert [x.images for x in S3] == [(1,2,3), (1,3,2), (2,1,3), (3,2,1), (2,3,1), (3,1,2)]
	assert [x.order for x in S3] == [1, 2, 2, 2, 3, 3]
	assert len(SymmetricGroup(5)) == 120

def test_symmetric_operate():
	S4 = SymmetricGroup(4)
	r = Permutation((4, 2, 1, 3))
	q = Permutation((2, 1, 3, 4))
	assert r.cycles() == [[1, 4, 3]]
	assert S4.operate(r, q) == Permutation.from_cycles(4, [1, 2, 4, 3])
	assert S4.operate(q, r) == Permutation.from_cycles(4, [1, 4, 3, 2])
	assert S4.element_order(r) == 3
	assert len(S4.generate_subgroup(r)) == 3

def test_decompose():
	S4 = SymmetricGroup(4)
	r = Permutation.from_cycles(4, [1, 4, 3])
	assert S4.decompose(r) == [S4.transposition(1, 3), S4.transposition(1, 4)]
	assert S4.chain_operate(S4.decompose(r)) == r

	shift = Permutation((2, 3, 4, 1))
	assert S4.decompose(shift) == [S4.transposition(1, 4), S4.transposition(1, 3), S4.transposition(1, 2)]

	swaps = Permutation((4, 3, 2, 1))
	assert S4.decompose(swaps) == [S4.transposition(2, 3), S4.transposition(1, 4)]
	assert S4.decompose(S4.identity) == [S4.identity]

	S6 = SymmetricGroup(6)
	p = Permutation.from_cycles(6, [1, 4, 3], [2, 6])
	assert S6.decompose(p) == [S6.transposition(2, 6), S6.transposition(1, 3), S6.transposition(1, 4)]
	assert S6.chain_operate(S6.decompose(p)) == p

def test_decompose_round_trip():
	S5 = SymmetricGroup(5)
	for p in S5:
		assert S5.chain_operate(S5.decompose(p)) == p
		assert S5.chain_operate(reversed(S5.decompose(p))) == S5.inverse(p)

def test_symmetric_inverse():
	S4 = SymmetricGroup(4)
	q = S4.transposition(1, 2)
	assert S4.inverse(q) is q
	assert S4.inverse(S4.identity) is S4.identity
	assert S4.inverse(Permutation.from_cycles(4, [1, 4, 3])) == Permutation.from_cycles(4, [1, 3, 4])
	assert S4.inverse(Permutation((2, 3, 4, 1))) == Permutation((4, 1, 2, 3))

def test_permutation():
	p = Permutation.from_cycles(5, [1, 3], [2, 5, 4])
	assert p.images == (3, 5, 1, 2, 4)
	assert p(2) == 5
	assert p.non_fixed() == [1, 2, 3, 4, 5]
	assert p.full_cycle(4) == [4, 2, 5]
	assert p.cycles() == [[1, 3], [2, 5, 4]]
	assert not p.is_identity() and Permutation((1, 2)).is_identity()
	assert hash(p) == hash(Permutation((3, 5, 1, 2, 4)))
	with pytest.raises(ValueError):
		Permutation((1, 1, 2))
	with pytest.raises(ValueError):
		Permutation((0, 1))

def test_symmetric_unordered(caplog):
	class Unordered(SymmetricGroup):
		ORDERED_LIMIT = 3

	with caplog.at_level(logging.WARNING, logger='groupzoo'):
		S4 = Unordered(4)
	assert 'unordered' in caplog.text
	assert S4[1].images == (1, 2, 4, 3)
	assert [x.images for x in S4] == sorted(x.images for x in S4)
	assert S4[1].order == 0
	assert len(S4.elements_by_order(2)) == 9
	assert S4.all_orders == [1, 2, 3, 4]
	verify_group(S4)

def test_symmetric_kind():
	S4 = SymmetricGroup(4)
	with pytest.raises(KindError):
		S4.operate(S4.identity, Permutation((2, 1, 3)))
	with pytest.raises(KindError):
		S4.inverse(ModularInt(1))
	with pytest.raises(TypeError):
		S4.operate(S4.identity, Dihedral('rotation', 0))


# dihedral groups

def test_dihedral():
	D4 = DihedralGroup(4)
	assert [(x.kind, x.degree) for x in D4] == [
		('rotation', 0), ('rotation', 90), ('rotation', 180), ('rotation', 270),
		('reflection', 0), ('reflection', 45), ('reflection', 90), ('reflection', 135),
	]
	assert [x.order for x in D4] == [1, 4, 2, 4, 2, 2, 2, 2]

	R = lambda degree: Dihedral('rotation', degree)
	F = lambda degree: Dihedral('reflection', degree)
	assert D4.operate(D4.rotation(1), D4.rotation(2)) == R(270)
	assert D4.operate(R(180), R(270)) == R(90)
	assert D4.operate(F(45), F(90)) == R(270)
	assert D4.operate(F(135), F(90)) == R(90)
	assert D4.operate(D4.reflection(0), D4.reflection(2)) == R(180)
	assert D4.operate(F(0), F(0)) == R(0)
	assert D4.operate(F(90), R(0)) == F(90)
	assert D4.operate(F(45), R(270)) == F(90)
	assert D4.operate(R(270), F(45)) == F(0)
	assert D4.operate(F(0), R(90)) == F(135)
	assert D4.operate(R(90), F(0)) == F(45)

	assert D4.inverse(R(270)) == R(90)
	assert D4.inverse(R(0)) == R(0)
	assert D4.inverse(F(45)) == F(45)

def test_dihedral_subgroups():
	D4 = DihedralGroup(4)
	assert D4.generate_subgroup(D4.rotation(0)) == [D4.identity]
	assert D4.generate_subgroup(D4.rotation(3)) == [D4.rotation(k) for k in range(4)]
	assert D4.generate_subgroup(D4.rotation(2)) == [D4.rotation(0), D4.rotation(2)]
	assert D4.generate_subgroup(D4.reflection(3)) == [D4.identity, D4.reflection(3)]
	assert D4.is_normal(D4.generate_subgroup(D4.rotation(1)))
	assert D4.is_normal(D4.generate_subgroup(D4.rotation(2)))
	assert not D4.is_normal(D4.generate_subgroup(D4.reflection(3)))
	assert D4.is_normal(D4.members)

def test_dihedral_equality():
	assert Dihedral('rotation', 450) == Dihedral('rotation', -270)
	assert Dihedral('rotation', 359.9999999) == Dihedral('rotation', 0)
	assert Dihedral('reflection', 180) == Dihedral('reflection', 0)
	assert Dihedral('Rotation', 90) == Dihedral('rotation', 90)
	assert Dihedral('rotation', 90) != Dihedral('reflection', 90)
	assert Dihedral('rotation', 90) != Dihedral('rotation', 91)
	assert Dihedral('rotation', 90, tolerance=1.5) == Dihedral('rotation', 91)
	with pytest.raises(KindError):
		Dihedral('rotation', 0).equals(Permutation((1,)))
	with pytest.raises(ValueError):
		Dihedral('cat', 180)

def test_dihedral_heptagon():
	D7 = DihedralGroup(7)
	assert D7.all_orders == [1, 2, 7]
	assert len(D7.elements_by_order(7)) == 6
	assert len(D7.elements_by_order(2)) == 7
	subgroup = D7.generate_subgroup(D7[2])
	assert [x.angle for x in subgroup] == pytest.approx([k * 360 / 7 for k in range(7)])

	e = D7.operate(D7.rotation(3), D7.rotation(5))
	assert e == D7.rotation(1)
	seq = [D7.rotation(0), D7.rotation(2), D7.reflection(0)]
	D7.add_in_order(seq, e)
	assert seq[1] is e

def test_dihedral_insertion():
	D4 = DihedralGroup(4)
	seq = []
	D4.add_in_order(seq, D4.reflection(3))
	D4.add_in_order(seq, D4.reflection(1))
	D4.add_in_order(seq, D4.identity)
	assert seq == [D4.identity, D4.reflection(1), D4.reflection(3)]

	seq = [D4.rotation(0), D4.rotation(1), D4.rotation(2)]
	nearly = Dihedral('rotation', 90 + 1e-9)
	D4.add_in_order(seq, nearly)
	assert seq[2] is nearly

	with pytest.raises(IndexError):
		D4.rotation(4)


# cosets & factor groups

def test_factor_group_s3():
	S3 = SymmetricGroup(3)
	c = Permutation((3, 1, 2))
	H = S3.generate_subgroup(c)
	assert len(H) == 3 and S3.is_normal(H)

	F = FactorGroup(S3, H)
	assert len(F) == 2 and F.n == 2
	assert F.name == 'S3/N3'
	assert all(len(coset) == 3 for coset in F)
	verify_partition(F)
	verify_group(F)
	assert [coset.order for coset in F] == [1, 2]

	assert Coset(S3, H, c) == F.identity
	assert F.coset(S3.transposition(1, 2)) == F[1]

def test_factor_group_representatives():
	S4 = SymmetricGroup(4)
	V4 = [S4.identity] + [Permutation.from_cycles(4, *cycles) for cycles in (
		([1, 2], [3, 4]), ([1, 3], [2, 4]), ([1, 4], [2, 3]),
	)]
	F = FactorGroup(S4, V4)
	assert len(F) == 6
	assert F.all_orders == [1, 2, 3]
	verify_partition(F)

	# the operation doesn't depend on the chosen representatives
	for a in F:
		for b in F:
			product = F.operate(a, b)
			for x in a:
				for y in b:
					assert F.coset(S4.operate(x, y)) == product

def test_factor_group_cyclic():
	Z12 = CyclicGroup(12)
	F = FactorGroup(Z12, Z12.generate_subgroup(ModularInt(4)))
	assert len(F) == 4
	assert [coset.order for coset in F] == [1, 4, 2, 4]
	assert [[x.value for x in coset] for coset in F] == [[0, 4, 8], [1, 5, 9], [2, 6, 10], [3, 7, 11]]
	verify_partition(F)
	verify_group(F)

def test_factor_group_dihedral():
	D4 = DihedralGroup(4)
	F = FactorGroup(D4, D4.generate_subgroup(D4.rotation(2)))
	assert len(F) == 4
	assert F.all_orders == [1, 2]
	verify_partition(F)
	verify_group(F)
	assert len(FactorGroup(D4, D4.generate_subgroup(D4.rotation(1)))) == 2

def test_factor_group_rejects():
	S3 = SymmetricGroup(3)
	with pytest.raises(NotNormalError):
		FactorGroup(S3, S3.generate_subgroup(S3.transposition(1, 2)))
	with pytest.raises(SubgroupError):
		FactorGroup(S3, [S3.identity, Permutation((2, 3, 1))])
	with pytest.raises(SubgroupError):
		FactorGroup(S3, [S3.identity, S3.identity])
	with pytest.raises(KindError):
		FactorGroup(S3, [ModularInt(0)])
	assert issubclass(NotNormalError, SubgroupError) and issubclass(SubgroupError, ValueError)

def test_coset_kind():
	S3, D3 = SymmetricGroup(3), DihedralGroup(3)
	F = FactorGroup(S3, S3.generate_subgroup(Permutation((3, 1, 2))))
	G = FactorGroup(D3, D3.generate_subgroup(D3.rotation(1)))
	with pytest.raises(KindError):
		F.identity.equals(G.identity)
	with pytest.raises(KindError):
		F.operate(F.identity, G.identity)


# general behavior

def test_defensive_copies():
	S3 = SymmetricGroup(3)
	members = S3.members
	members.clear()
	assert len(S3) == 6 and len(S3.members) == 6

	by_order = S3.elements_by_order(2)
	by_order.pop()
	assert len(S3.elements_by_order(2)) == 3

	H = S3.generate_subgroup(Permutation((3, 1, 2)))
	coset = Coset(S3, H, S3.transposition(1, 2))
	coset.members.clear()
	coset.subgroup.clear()
	assert len(coset) == 3 and len(coset.subgroup) == 3

def test_element_comparison():
	S3 = SymmetricGroup(3)
	a, b, c = S3[1], S3[2], S3[4]
	assert a.order == b.order == 2 and c.order == 3
	assert a < c and c > a and a <= c and c >= a
	assert not (a < b) and not (a > b) and a <= b and a >= b
	assert a != b
	assert sorted([c, S3.identity, a], key=lambda x: x.order) == [S3.identity, a, c]

def test_membership():
	D4 = DihedralGroup(4)
	assert Dihedral('reflection', 225) in D4
	assert Dihedral('rotation', 120) not in D4
	with pytest.raises(ValueError):
		D4.canonical(Dihedral('rotation', 120))
	with pytest.raises(KindError):
		ModularInt(0) in D4

def test_closure_error():
	class Broken(CyclicGroup):
		def _operate(self, a, b):
			return ModularInt(a.value + b.value)
		def equals(self, a, b):
			return a.value == b.value

	with pytest.raises(ClosureError):
		Broken(3)

def test_invalid_parameter():
	with pytest.raises(ValueError):
		CyclicGroup(0)
	with pytest.raises(ValueError):
		DihedralGroup(-2)

def test_automagic():
	assert isinstance(groupzoo.Z4, CyclicGroup) and groupzoo.Z4.n == 4
	assert groupzoo.Z4 is groupzoo.Z4
	assert len(groupzoo.S3) == 6
	assert groupzoo.D5.name == 'D5'
	with pytest.raises(AttributeError):
		groupzoo.X4
