"""Property-based tests for the Result laws."""

import anyio
from hypothesis import given
from hypothesis import strategies as st

from fallible import Ok, combine_all, first_success, partition, settle_all
from tests.strategies import binders, int_functions, integers, result_lists, results


def identity(x):
    return x


class TestFunctorLaws:
    """map() preserves identity and composition."""

    @given(results)
    def test_identity(self, r):
        assert r.map(identity) == r

    @given(results, int_functions, int_functions)
    def test_composition(self, r, f, g):
        assert r.map(f).map(g) == r.map(lambda x: g(f(x)))


class TestMonadLaws:
    """and_then() obeys left and right identity and associativity."""

    @given(integers, binders)
    def test_left_identity(self, x, f):
        assert Ok(x).and_then(f) == f(x)

    @given(results)
    def test_right_identity(self, r):
        assert r.and_then(Ok) == r

    @given(results, binders, binders)
    def test_associativity(self, r, f, g):
        assert r.and_then(f).and_then(g) == r.and_then(lambda x: f(x).and_then(g))


class TestCollectionLaws:
    """Aggregation invariants that hold for any input."""

    @given(result_lists)
    def test_partition_totality_and_order(self, rs):
        oks, errs = partition(rs)
        assert len(oks) + len(errs) == len(rs)
        assert oks == [r.value for r in rs if r.is_ok()]
        assert errs == [r.error for r in rs if r.is_err()]

    @given(result_lists)
    def test_combine_all_matches_first_err(self, rs):
        first_err = next((r for r in rs if r.is_err()), None)
        expected = first_err if first_err is not None else Ok([r.value for r in rs])
        assert combine_all(rs) == expected

    @given(result_lists)
    def test_first_success_matches_first_ok(self, rs):
        first_ok = next((r for r in rs if r.is_ok()), None)
        if first_ok is not None:
            assert first_success(rs) == first_ok
        else:
            assert first_success(rs).error == [r.error for r in rs]

    @given(result_lists)
    def test_settle_all_never_fails(self, rs):
        settled = settle_all(rs)
        assert settled.is_ok()
        assert len(settled.unwrap()) == len(rs)


class TestAsyncParity:
    """The async mirror agrees with the sync operations for pure functions."""

    @given(results, int_functions)
    def test_map_async_parity(self, r, f):
        async def lifted(x):
            return f(x)

        assert anyio.run(r.map_async, lifted) == r.map(f)

    @given(results, binders)
    def test_and_then_async_parity(self, r, f):
        async def lifted(x):
            return f(x)

        assert anyio.run(r.and_then_async, lifted) == r.and_then(f)

    @given(results, st.text(max_size=10))
    def test_or_else_async_parity(self, r, suffix):
        def recover(e):
            return Ok(e + suffix)

        async def lifted(e):
            return recover(e)

        assert anyio.run(r.or_else_async, lifted) == r.or_else(recover)
