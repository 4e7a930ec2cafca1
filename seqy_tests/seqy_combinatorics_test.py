import math
import suite
from seqy import S, from_iterator, from_range, combinations, cartesian_product, lines, cycle

# --- setup ---
test = suite.test
assert_that = suite.assert_that

# --- test data & helpers ---
five = ['a', 'b', 'c', 'd', 'e']
box_ids = 'abcde\nfghij\nklmno\npqrst\nfguij\naxcye\nwvxyz'


# --- combinations tests ---

@test("combinations of 5 choose 3 yields 10 index-increasing subsets in lexicographic order")
def test_combinations_count_and_order():
    indexed = combinations(range(5), 3).to.list()
    assert_that(len(indexed) == math.comb(5, 3) == 10, "should yield C(5,3) = 10 subsets")
    assert_that(len(set(indexed)) == 10, "subsets should be distinct")
    assert_that(all(a < b < c for a, b, c in indexed), "indices should be strictly increasing")
    assert_that(indexed == sorted(indexed), "subsets should come out in lexicographic order")
    assert_that(indexed[0] == (0, 1, 2) and indexed[-1] == (2, 3, 4), "first and last subsets")


@test("combinations keep the original element order inside each subset")
def test_combinations_elements():
    pairs = S(five).comb.combinations(2).to.list()
    assert_that(pairs[:4] == [('a', 'b'), ('a', 'c'), ('a', 'd'), ('a', 'e')], "pairs with 'a' come first")
    assert_that(pairs[-1] == ('d', 'e'), "last pair")


@test("combinations edge cases for k")
def test_combinations_edges():
    assert_that(combinations(five, 0).to.list() == [()], "k=0 yields exactly one empty tuple")
    assert_that(combinations(five, 6).to.list() == [], "k>n yields nothing")
    assert_that(combinations(five, -1).to.list() == [], "k<0 yields nothing")
    assert_that(combinations([], 0).to.list() == [()], "empty input with k=0 still yields the empty tuple")
    assert_that(combinations(five, 5).to.list() == [tuple(five)], "k=n yields the whole sequence once")


@test("combinations read a single-use source once")
def test_combinations_single_use_source():
    pairs = combinations(lines(box_ids), 2)
    assert_that(not pairs.restartable, "combinations over a single-use source are single-use")
    first_match = pairs.where(
        lambda pair: sum(x != y for x, y in zip(*pair)) == 1
    ).to.first()
    assert_that(first_match == ('fghij', 'fguij'), "ids differing by one character")


@test("binomial coefficient agrees with math.comb")
def test_binomial_coefficient():
    assert_that(S(five).comb.binomial_coefficient(3) == 10, "5 choose 3")
    assert_that(S(five).comb.binomial_coefficient(-1) == 0, "negative k gives 0")
    assert_that(S(five).comb.binomial_coefficient(9) == 0, "k > n gives 0")


# --- cartesian product tests ---

@test("cartesian product over zero sequences yields one empty tuple")
def test_cartesian_identity():
    assert_that(cartesian_product().to.list() == [()], "identity case")


@test("cartesian product over one sequence yields singletons")
def test_cartesian_single():
    assert_that(cartesian_product('xyz').to.list() == [('x',), ('y',), ('z',)], "m singletons")


@test("cartesian product varies the rightmost sequence fastest")
def test_cartesian_odometer():
    result = cartesian_product([0, 1], 'ab', [True, False]).to.list()
    assert_that(len(result) == 8, "2 * 2 * 2 tuples")
    assert_that(result[:3] == [(0, 'a', True), (0, 'a', False), (0, 'b', True)], "odometer order")
    assert_that(result[-1] == (1, 'b', False), "last tuple")
    assert_that(S([0, 1]).comb.cartesian_product('ab', [True, False]).to.list() == result,
                "the accessor agrees with the factory")


@test("cartesian product materializes single-use tails but streams the head")
def test_cartesian_single_use_tail():
    result = cartesian_product([1, 2], iter('ab')).to.list()
    assert_that(result == [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')], "a raw iterator tail is replayed")
    endless = cartesian_product(cycle(lambda: [1, 2]), 'xy').take(5).to.list()
    assert_that(endless == [(1, 'x'), (1, 'y'), (2, 'x'), (2, 'y'), (1, 'x')], "an infinite head is fine")


@test("cartesian product with an empty input is empty")
def test_cartesian_empty_input():
    assert_that(cartesian_product([1, 2], []).to.list() == [], "empty tail")
    assert_that(cartesian_product([], [1, 2]).to.list() == [], "empty head")
    assert_that(from_range(0, 3).comb.cartesian_product(from_range(0, 0)).to.count() == 0, "empty range")


if __name__ == "__main__":
    suite.main(title="seqy combinatorics test suite")
