"""
Tests for the flat parameter surface used by external trainers.

Covers all_parameters_owned / all_parameters_slices / from_parameters and
the round-trip contract between them.
"""

import pytest
import torch

from lobenet import ConfigurationError, Lobe, ShapeMismatchError


@pytest.mark.unit
class TestParameterRoundTrip:
    """from_parameters(get_dims(), all_parameters_owned()) rebuilds the lobe."""

    def test_round_trip_preserves_parameters(self, random_lobe):
        rebuilt = Lobe.from_parameters(random_lobe.get_dims(), random_lobe.all_parameters_owned())

        assert torch.equal(rebuilt.thresholds, random_lobe.thresholds)
        assert torch.equal(rebuilt.weights, random_lobe.weights)
        assert torch.equal(rebuilt.strengths, random_lobe.strengths)
        assert rebuilt.falloff == random_lobe.falloff

    def test_round_trip_ignores_activation_history(self, random_lobe):
        """Values are never part of the vector and always start at zero."""
        for _ in range(5):
            random_lobe.apply_input(torch.rand(random_lobe.breadth, dtype=torch.float64))
            random_lobe.tick(0.1)

        rebuilt = Lobe.from_parameters(random_lobe.get_dims(), random_lobe.all_parameters_owned())

        assert torch.count_nonzero(rebuilt.values) == 0
        assert torch.equal(rebuilt.all_parameters_owned(), random_lobe.all_parameters_owned())

    def test_vector_order(self):
        """Order is thresholds, weights, strengths, falloff."""
        breadth, width = 2, 1
        params = torch.arange(breadth * width * 5 + 1, dtype=torch.float64)
        lobe = Lobe.from_parameters((width, breadth), params)

        assert lobe.thresholds.tolist() == [0.0, 1.0]
        assert lobe.weights.tolist() == [2.0, 3.0, 4.0, 5.0, 6.0, 7.0]
        assert lobe.strengths.tolist() == [8.0, 9.0]
        assert lobe.falloff == 10.0

    def test_accepts_plain_list(self):
        lobe = Lobe.from_parameters((1, 1), [0.0, 0.0, 1.0, 0.0, 1.0, 0.25])
        assert lobe.falloff == 0.25
        assert lobe.values.dtype == torch.float64

    def test_owned_is_a_copy(self, random_lobe):
        owned = random_lobe.all_parameters_owned()
        owned.zero_()

        assert torch.count_nonzero(random_lobe.thresholds) > 0
        assert random_lobe.falloff == pytest.approx(0.1)

    def test_owned_length(self, inert_lobe, breadth, width):
        assert inert_lobe.all_parameters_owned().numel() == breadth * width * 5 + 1


@pytest.mark.unit
class TestParameterSlices:
    """Slices are live, disjoint views for in-place training."""

    def test_slices_write_through(self, inert_lobe):
        slices = inert_lobe.all_parameters_slices()
        slices.weights.fill_(0.5)
        slices.thresholds.fill_(1.0)
        slices.strengths.fill_(2.0)
        slices.falloff.fill_(0.3)

        assert torch.all(inert_lobe.weights == 0.5)
        assert torch.all(inert_lobe.thresholds == 1.0)
        assert torch.all(inert_lobe.strengths == 2.0)
        assert inert_lobe.falloff == pytest.approx(0.3)

    def test_slice_order_and_sizes(self, inert_lobe, breadth, width):
        weights, thresholds, strengths, falloff = inert_lobe.all_parameters_slices()
        area = breadth * width

        assert weights.numel() == 3 * area
        assert thresholds.numel() == area
        assert strengths.numel() == area
        assert falloff.numel() == 1

    def test_slices_are_disjoint(self, inert_lobe):
        slices = inert_lobe.all_parameters_slices()
        slices.thresholds.fill_(9.0)

        assert torch.count_nonzero(slices.weights) == 0
        assert torch.count_nonzero(slices.strengths) == 0
        assert slices.falloff.item() == 0.0

    def test_slices_affect_tick(self):
        """Configuring through slices drives the scenario lobe."""
        lobe = Lobe.new(1, 1, 0.0)
        slices = lobe.all_parameters_slices()
        slices.weights.copy_(torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64))
        slices.strengths.fill_(1.0)

        lobe.apply_input([5.0])
        lobe.tick(1.0)

        assert lobe.get_output().tolist() == [5.0]


@pytest.mark.unit
class TestParameterValidation:
    """Reconstruction fails loudly on malformed vectors."""

    @pytest.mark.parametrize("delta", [-1, 1])
    def test_wrong_length_rejected(self, breadth, width, delta):
        expected = breadth * width * 5 + 1
        params = torch.zeros(expected + delta, dtype=torch.float64)

        with pytest.raises(ShapeMismatchError) as excinfo:
            Lobe.from_parameters((width, breadth), params)

        assert excinfo.value.expected == expected
        assert excinfo.value.actual == expected + delta

    def test_two_dimensional_rejected(self):
        """A matrix with the right element count is still rejected."""
        with pytest.raises(ShapeMismatchError):
            Lobe.from_parameters((1, 1), torch.zeros(2, 3, dtype=torch.float64))

    def test_shape_error_is_value_error(self):
        with pytest.raises(ValueError):
            Lobe.from_parameters((1, 1), [0.0])

    def test_non_finite_falloff_rejected(self):
        with pytest.raises(ConfigurationError):
            Lobe.from_parameters((1, 1), [0.0, 0.0, 0.0, 0.0, 0.0, float("nan")])

    def test_zero_dims_rejected(self):
        with pytest.raises(ConfigurationError):
            Lobe.from_parameters((0, 3), [0.0])

    def test_owned_is_flat_tensor(self, random_lobe):
        owned = random_lobe.all_parameters_owned()

        assert isinstance(owned, torch.Tensor)
        assert owned.dim() == 1
        assert owned.dtype == random_lobe.dtype
