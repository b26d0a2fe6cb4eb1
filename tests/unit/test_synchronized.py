"""
Tests for per-lobe locking and concurrent ticking of independent lobes.
"""

import threading

import pytest
import torch

from lobenet import Lobe, LobeError, SynchronizedUnit, tick_all


class FailingUnit:
    """Minimal NeuralUnit whose tick always fails."""

    def input_size(self):
        return 1

    def apply_input(self, inputs):
        pass

    def tick(self, duration):
        raise RuntimeError("tick failed")

    def get_output(self):
        return torch.zeros(1)

    def reward(self, amount):
        pass


def make_lobes(n, breadth=4, width=3):
    lobes = []
    for i in range(n):
        params = torch.rand(breadth * width * 5 + 1, dtype=torch.float64)
        params[-1] = 0.05 * i
        lobes.append(Lobe.from_parameters((width, breadth), params))
    return lobes


@pytest.mark.unit
class TestSynchronizedUnit:

    def test_delegates_calls(self, single_link_lobe):
        guarded = SynchronizedUnit(single_link_lobe)
        guarded.apply_input([5.0])
        guarded.tick(1.0)

        assert guarded.input_size() == 1
        assert guarded.get_output().tolist() == [5.0]

    def test_rejects_non_units(self):
        with pytest.raises(LobeError):
            SynchronizedUnit(object())

    def test_locked_yields_unit(self, inert_lobe):
        guarded = SynchronizedUnit(inert_lobe)
        with guarded.locked() as lobe:
            assert lobe is inert_lobe
            # Re-entrant: calls through the wrapper still work while held
            guarded.tick(0.1)

    def test_lock_blocks_other_threads(self, inert_lobe):
        guarded = SynchronizedUnit(inert_lobe)
        ticked = threading.Event()

        def worker():
            guarded.tick(0.1)
            ticked.set()

        with guarded.locked():
            thread = threading.Thread(target=worker)
            thread.start()
            assert not ticked.wait(timeout=0.1)

        thread.join(timeout=5)
        assert ticked.is_set()

    def test_concurrent_inputs_all_land(self, inert_lobe, breadth):
        guarded = SynchronizedUnit(inert_lobe)
        threads = [
            threading.Thread(target=guarded.apply_input, args=([1.0] * breadth,))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert inert_lobe.value_column(0).tolist() == [8.0] * breadth


@pytest.mark.unit
class TestTickAll:

    def test_matches_sequential_ticks(self):
        parallel = make_lobes(4)
        sequential = [Lobe.from_parameters(l.get_dims(), l.all_parameters_owned()) for l in parallel]

        for step in range(5):
            stimulus = torch.rand(4, dtype=torch.float64)
            for a, b in zip(parallel, sequential):
                a.apply_input(stimulus)
                b.apply_input(stimulus)
            tick_all(parallel, 0.1, max_workers=4)
            for lobe in sequential:
                lobe.tick(0.1)

        for a, b in zip(parallel, sequential):
            assert torch.equal(a.values, b.values)

    def test_accepts_guarded_units(self, single_link_lobe):
        guarded = SynchronizedUnit(single_link_lobe)
        single_link_lobe.apply_input([3.0])
        tick_all([guarded], 1.0)

        assert single_link_lobe.get_output().tolist() == [3.0]

    def test_rejects_duplicate_units(self, inert_lobe):
        with pytest.raises(LobeError, match="more than once"):
            tick_all([inert_lobe, SynchronizedUnit(inert_lobe)], 0.1)

    def test_empty_sequence(self):
        tick_all([], 0.1)

    def test_worker_error_propagates(self, inert_lobe):
        with pytest.raises(RuntimeError, match="tick failed"):
            tick_all([inert_lobe, FailingUnit()], 0.1)

    def test_accepts_tuple_of_mixed_blocks(self, single_link_lobe):
        other = Lobe.new(2, 1, falloff=0.0)
        single_link_lobe.apply_input([3.0])
        tick_all((single_link_lobe, SynchronizedUnit(other)), 1.0)

        assert single_link_lobe.get_output().tolist() == [3.0]
        assert torch.count_nonzero(other.values) == 0
