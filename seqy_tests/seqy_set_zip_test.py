import suite
from faker import Faker
from seqy import S, from_iterator, from_factory, unique, zip_all, cycle, split

# --- setup ---
test = suite.test
assert_that = suite.assert_that

Faker.seed(2018)
fake = Faker()

# --- test data & helpers ---
generated_words = fake.words(nb=40)

def counting(values, log):
    """generator that records each value as it is pulled"""
    for value in values:
        log.append(value)
        yield value

def closable(values, closed):
    """generator that records when it is closed"""
    try:
        yield from values
    finally:
        closed.append(True)


# --- distinct() / unique() tests ---

@test("distinct by key keeps the first element per key in order")
def test_distinct_by_length():
    result = S(['aa', 'ab', 'b']).set.distinct(len).to.list()
    assert_that(result == ['aa', 'b'], "dedup by length should keep 'aa' then 'b'")


@test("unique without a key keeps first appearances")
def test_unique_identity():
    assert_that(unique([3, 1, 3, 2, 1]).to.list() == [3, 1, 2], "should drop later duplicates")
    assert_that(unique([]).to.list() == [], "empty input stays empty")


@test("distinct preserves the order of generated words")
def test_distinct_generated_words():
    expected = list(dict.fromkeys(generated_words))
    assert_that(S(generated_words).set.distinct().to.list() == expected, "order of first appearance is kept")
    by_initial = S(generated_words).set.distinct(lambda word: word[0]).to.list()
    initials = [word[0] for word in by_initial]
    assert_that(len(initials) == len(set(initials)), "one word per initial")
    assert_that(by_initial == [w for i, w in enumerate(generated_words)
                               if w[0] not in {x[0] for x in generated_words[:i]}],
                "each kept word is the first with its initial")


@test("distinct is lazy and works on infinite input")
def test_distinct_lazy():
    pulled = []
    firsts = unique(counting([1, 1, 2, 3, 3, 3], pulled)).take(2).to.list()
    assert_that(firsts == [1, 2], "first two distinct values")
    assert_that(pulled == [1, 1, 2], "no element beyond the second distinct one is pulled")

    endless = cycle(lambda: [1, 2, 3]).set.distinct().take(3).to.list()
    assert_that(endless == [1, 2, 3], "take bounds a dedup over an infinite cycle")


# --- zip tests ---

@test("zipping lengths 2 and 3 yields exactly 2 tuples")
def test_zip_shortest_wins():
    result = zip_all([1, 2], ['a', 'b', 'c']).to.list()
    assert_that(result == [(1, 'a'), (2, 'b')], "the shorter input decides the length")


@test("zip handles any number of inputs")
def test_zip_n_ary():
    result = S('abc').zip.zip([1, 2, 3], [True, False, True]).to.list()
    assert_that(result == [('a', 1, True), ('b', 2, False), ('c', 3, True)], "three-way zip")
    assert_that(zip_all().to.list() == [], "zero inputs yield nothing")
    assert_that(zip_all([1, 2]).to.list() == [(1,), (2,)], "one input yields singletons")


@test("zip pulls one element per input per step")
def test_zip_pull_counts():
    left, right = [], []
    result = zip_all(counting([1, 2, 3], left), counting(['x'], right)).to.list()
    assert_that(result == [(1, 'x')], "stops at the single right element")
    assert_that(left == [1, 2], "left is pulled once more to discover the right is exhausted")
    assert_that(right == ['x'], "right is never over-pulled")


@test("zip closes every input when it stops")
def test_zip_closes_inputs():
    closed = []
    zip_all(closable([1, 2, 3], closed), closable([1], closed)).to.list()
    assert_that(closed == [True, True], "both inputs are closed on exhaustion")

    closed = []
    S(closable(range(100), closed)).zip.zip(cycle(lambda: 'ab')).take(3).to.list()
    assert_that(closed == [True], "an early stop closes the finite input too")


@test("zip restartability follows its inputs")
def test_zip_restartability():
    assert_that(zip_all([1], 'a').restartable, "lists and strings can be replayed")
    assert_that(not zip_all([1], iter('a')).restartable, "a raw iterator makes the zip single-use")
    assert_that(not zip_all(split('a,b', ','), [1, 2]).restartable, "single-use sequences are detected")


@test("zip_with combines pairs with a selector")
def test_zip_with():
    common = S('abcde').zip.zip_with('abXde', lambda a, b: a if a == b else None).where(lambda c: c).to.list()
    assert_that(''.join(common) == 'abde', "only the matching characters are kept")


@test("zip over generated words and their lengths")
def test_zip_generated():
    lengths = from_factory(lambda: (len(word) for word in generated_words))
    pairs = S(generated_words).zip.zip(lengths).to.list()
    assert_that(len(pairs) == len(generated_words), "equal lengths zip completely")
    assert_that(all(len(word) == length for word, length in pairs), "pairs line up")


if __name__ == "__main__":
    suite.main(title="seqy set and zip test suite")
