"""
Tests for solve(), solve_text() and solve_design().

Tests the complete pipeline: text parsing, design construction, backend
elimination, and the tagged SystemSolution.
"""

import warnings

import numpy as np
import pytest

from pylinsys.core.exceptions import (
    InconsistentSystemError,
    ParseError,
    UnderdeterminedSystemError,
    ValidationError,
)
from pylinsys.linsys import SystemDesign, SystemSolution, solve, solve_design, solve_text
from pylinsys.linsys.backends import CPUGaussBackend


class TestScenarios:
    """Worked examples with known outcomes."""

    def test_two_by_two(self):
        result = solve_text([["1", "1", "3"], ["1", "-1", "1"]])
        assert result.ok
        np.testing.assert_allclose(result.values, [2.0, 1.0])
        assert result.formatted == ("2", "1")

    def test_dependent_rows_underdetermined(self):
        result = solve_text([["2", "4", "10"], ["1", "2", "5"]])
        assert result.status == "underdetermined"
        assert isinstance(result.error, UnderdeterminedSystemError)
        assert result.reason == "underdetermined system (infinitely many solutions)"
        assert result.values is None
        assert result.free_variables == (1,)

    def test_parallel_equations_inconsistent(self):
        result = solve_text([["1", "1", "1"], ["1", "1", "2"]])
        assert result.status == "inconsistent"
        assert isinstance(result.error, InconsistentSystemError)
        assert result.reason == "inconsistent system (no solution)"

    def test_fractional_solution(self):
        result = solve_text([["2", "1"]])
        assert result.ok
        assert result.values[0] == 0.5
        assert result.formatted == ("1/2",)

    def test_fraction_coefficient(self):
        result = solve_text([["1/2", "1"]])
        assert result.formatted == ("2",)

    def test_invalid_coefficient_text(self):
        result = solve_text([["abc", "1"]])
        assert result.status == "invalid_input"
        assert isinstance(result.error, ParseError)
        assert result.reason == "invalid coefficient text: abc"
        assert result.rank is None
        assert result.timing is None
        assert result.info["method"] == "validation"

    def test_invalid_constant_text(self):
        result = solve_text([["1", "1/0"]])
        assert result.reason == "invalid constant text: 1/0"

    def test_first_invalid_cell_reported(self):
        result = solve_text([["1", "2", "ok?"], ["bad", "1", "1"]])
        assert result.reason == "invalid constant text: ok?"
        assert len(result.info["invalid_cells"]) == 2

    @pytest.mark.parametrize("cell", ["1" * 5000, "1" + "0" * 400])
    def test_oversized_number_is_invalid_input(self, cell):
        result = solve_text([[cell, "1"]])
        assert result.status == "invalid_input"
        assert isinstance(result.error, ParseError)
        assert result.reason == f"invalid coefficient text: {cell}"

    def test_oversized_constant_is_invalid_input(self):
        result = solve_text([["1", "9" * 400]])
        assert result.status == "invalid_input"
        assert result.reason.startswith("invalid constant text: 999")

    def test_blank_cells_are_zero(self):
        result = solve_text([["1", "", "4"], ["", "2", "3"]])
        assert result.formatted == ("4", "3/2")


class TestOutcomes:

    def test_zero_row_with_constant_always_inconsistent(self):
        result = solve([[1, 0], [0, 1], [0, 0]], [1, 2, 3])
        assert result.status == "inconsistent"
        assert result.inconsistent_rows

    def test_inconsistent_reported_before_underdetermined(self):
        result = solve([[1, 1, 1], [1, 1, 1]], [1, 2])
        assert result.status == "inconsistent"

    def test_fewer_equations_than_variables(self):
        result = solve([[1, 2, 3]], [6])
        assert result.status == "underdetermined"
        assert result.error.rank == 1
        assert result.free_variables == (1, 2)

    def test_rank_deficient_square(self, rank_deficient_system):
        A, b = rank_deficient_system
        result = solve(A, b)
        assert result.status == "underdetermined"
        assert result.rank == 3

    def test_zero_solution_is_not_free(self):
        result = solve([[1, 1], [1, -1]], [2, 2])
        assert result.ok
        assert result.formatted == ("2", "0")

    def test_all_zero_solution(self):
        result = solve([[3, 1], [1, 2]], [0, 0])
        assert result.ok
        np.testing.assert_allclose(result.values, [0.0, 0.0])

    def test_overdetermined_consistent(self):
        result = solve([[1, 0], [0, 1], [1, 1]], [1, 2, 3])
        assert result.ok
        np.testing.assert_allclose(result.values, [1.0, 2.0])
        assert result.info["redundant_rows"] == [2]

    def test_needs_row_swap(self):
        result = solve([[0, 1], [1, 0]], [3, 4])
        assert result.ok
        np.testing.assert_allclose(result.values, [4.0, 3.0])
        assert result.info["row_swaps"] == [[0, 1]]

    def test_all_blank_grid(self):
        result = solve_design(SystemDesign.reshape(2, 2))
        assert result.status == "underdetermined"
        assert result.rank == 0


class TestProperties:

    def test_solution_satisfies_original_equations(self, well_conditioned_system):
        A, b, x_true = well_conditioned_system
        result = solve(A, b)
        assert result.ok
        assert np.max(np.abs(A @ result.values - b)) <= 1e-9
        np.testing.assert_allclose(result.values, x_true, rtol=1e-9, atol=1e-9)
        assert result.info["max_residual"] <= 1e-9

    def test_random_systems_satisfy_equations(self, rng):
        for n in range(1, 8):
            A = rng.standard_normal((n, n)) + n * np.eye(n)
            b = rng.standard_normal(n)
            result = solve(A, b)
            assert result.ok
            assert np.max(np.abs(A @ result.values - b)) <= 1e-9

    def test_repeat_solves_identical(self, rng):
        A = rng.standard_normal((5, 5))
        b = rng.standard_normal(5)
        first = solve(A, b)
        second = solve(A, b)
        assert first.info["pivot_columns"] == second.info["pivot_columns"]
        assert first.info["row_swaps"] == second.info["row_swaps"]
        np.testing.assert_array_equal(first.values, second.values)

    def test_caller_arrays_untouched(self):
        A = np.array([[0.0, 2.0], [1.0, 1.0]])
        b = np.array([2.0, 3.0])
        A_before, b_before = A.copy(), b.copy()
        solve(A, b)
        np.testing.assert_array_equal(A, A_before)
        np.testing.assert_array_equal(b, b_before)


class TestSolution:

    def test_type(self):
        assert isinstance(solve([[1]], [1]), SystemSolution)

    def test_raise_for_status_success_returns_self(self):
        result = solve([[1]], [1])
        assert result.raise_for_status() is result

    def test_raise_for_status_parse_error(self):
        with pytest.raises(ParseError, match="abc"):
            solve_text([["abc", "1"]]).raise_for_status()

    def test_raise_for_status_inconsistent(self):
        with pytest.raises(InconsistentSystemError):
            solve([[0]], [1]).raise_for_status()

    def test_raise_for_status_underdetermined(self):
        with pytest.raises(UnderdeterminedSystemError):
            solve([[0]], [0]).raise_for_status()

    def test_exact_text(self):
        result = solve([[1, 0], [0, 1]], [1234.5, 3])
        assert result.formatted == ("2,469/2", "3")
        assert result.exact == ("2469/2", "3")

    def test_custom_format(self):
        result = solve([[1]], [1234567])
        assert result.format(separator=" ") == ("1 234 567",)

    def test_failure_has_no_formatted(self):
        result = solve([[0]], [1])
        assert result.formatted is None
        assert result.exact is None
        assert result.format() is None

    def test_timing_and_backend(self):
        result = solve([[1, 1], [1, -1]], [3, 1])
        assert result.backend_name == "cpu_gauss"
        assert result.timing["total_seconds"] >= 0
        assert "elimination" in result.timing
        assert result.warnings == ()

    def test_to_dict(self):
        d = solve([[2]], [1]).to_dict()
        assert d == {
            "status": "solved",
            "values": [0.5],
            "formatted": ["1/2"],
            "reason": None,
            "rank": 1,
        }

    def test_summary_success(self):
        text = solve_text([["1", "1", "3"], ["1", "-1", "1"]]).summary()
        assert "Status: solved" in text
        assert "x1 =" in text
        assert "Backend: cpu_gauss" in text

    def test_summary_failure(self):
        text = solve_text([["2", "4", "10"], ["1", "2", "5"]]).summary()
        assert "underdetermined system" in text
        assert "Free variables: x2" in text

    def test_repr(self):
        assert "status='solved'" in repr(solve([[1]], [1]))


class TestBackendSelection:

    @pytest.mark.parametrize("backend", ["auto", "cpu", "cpu_gauss"])
    def test_known_backends(self, backend):
        assert solve([[1]], [2], backend=backend).ok

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            solve([[1]], [2], backend="gpu")

    def test_non_positive_tolerance(self):
        with pytest.raises(ValidationError, match="tolerance"):
            solve([[1]], [2], tolerance=0.0)

    def test_solve_design_rejects_other_types(self):
        with pytest.raises(ValidationError, match="SystemDesign"):
            solve_design([[1, 2]])

    def test_loose_tolerance_drops_small_pivot(self):
        result = solve([[1e-6]], [1e-6], tolerance=1e-5)
        assert result.status == "underdetermined"

    def test_backend_protocol(self):
        from pylinsys.core.protocols import Backend
        assert isinstance(CPUGaussBackend(), Backend)

    def test_residual_warning(self):
        backend = CPUGaussBackend(verify_tolerance=-1.0)
        design = SystemDesign.from_arrays([[1.0]], [1.0])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = backend.solve(design)
        assert result.has_warning("residual")
        assert any(issubclass(w.category, RuntimeWarning) for w in caught)
