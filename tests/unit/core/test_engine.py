"""
Tests for sparkyrng.core.engine

Verify stepping, seeding protocol, discard, state export/import and
equality of the xoshiro256** engine.
"""

import copy
import pickle

import numpy as np
import pytest

import sparkyrng.core.engine as engine_module
from sparkyrng.core.engine import Xoshiro256StarStarEngine, RandomEngine, seed_words
from sparkyrng.core.exceptions import SeedError, ValidationError
from sparkyrng.core.mixer import splitmix64
from sparkyrng.core.types import DEFAULT_SEED, INITIAL_STATE, ZERO_STATE_FALLBACK


class TestStep:
    """Raw stepping from a hand-set state."""
    
    def test_reference_vector(self):
        # Published xoshiro256** outputs for state (1, 2, 3, 4)
        e = Xoshiro256StarStarEngine()
        e.set_state((1, 2, 3, 4))
        
        assert [e() for _ in range(5)] == [
            11520,
            0,
            1509978240,
            1215971899390074240,
            1216172134540287360,
        ]
    
    def test_state_after_steps(self):
        e = Xoshiro256StarStarEngine()
        e.set_state((1, 2, 3, 4))
        e.discard(5)
        
        assert e.state == (
            9250551998855381762,
            105553519575810,
            9228034086416548613,
            4611932360672346753,
        )
    
    def test_outputs_are_64_bit(self, rng):
        for _ in range(1000):
            assert 0 <= rng() <= Xoshiro256StarStarEngine.max()


class TestSeeding:
    """Seeding protocol."""
    
    def test_default_seed_state(self):
        e = Xoshiro256StarStarEngine()
        assert e.state == (
            10107447022604280768,
            10511751129599088021,
            11300423423419227461,
            13409911763858732685,
        )
    
    def test_default_seed_value(self):
        assert Xoshiro256StarStarEngine.default_seed == DEFAULT_SEED == 18914
        assert Xoshiro256StarStarEngine() == Xoshiro256StarStarEngine(18914)
    
    def test_seed_zero(self):
        e = Xoshiro256StarStarEngine(0)
        assert e.state == (
            16329596076727742501,
            2870885578388434411,
            10762463485411362888,
            7051698511537704495,
        )
        assert [e() for _ in range(3)] == [
            8018241473623960315,
            12342852325436836232,
            14767249342040630440,
        ]
    
    def test_seed_12345(self):
        e = Xoshiro256StarStarEngine(12345)
        assert e.state == (
            0x506931C4F5BD0674,
            0x45CFB0EA6C047C53,
            0xAA7ADD49B90EE688,
            0xDB91DC9E36DB351B,
        )
    
    def test_scalar_equals_one_element_sequence(self):
        assert Xoshiro256StarStarEngine([DEFAULT_SEED]) == Xoshiro256StarStarEngine()
        assert Xoshiro256StarStarEngine((7,)) == Xoshiro256StarStarEngine(7)
    
    def test_sequence_seed(self):
        e = Xoshiro256StarStarEngine([1, 2, 3])
        assert [e() for _ in range(5)] == [
            13524517838016486916,
            14746933680960980847,
            1888700104283810349,
            1860169651294787481,
            7852704396172408264,
        ]
    
    def test_sequence_order_ignored(self):
        assert Xoshiro256StarStarEngine([1, 2, 3]) == Xoshiro256StarStarEngine([3, 2, 1])
    
    def test_sequence_repeats_count(self):
        assert Xoshiro256StarStarEngine([1, 1, 2]) != Xoshiro256StarStarEngine([1, 2])
    
    def test_generator_sequence_accepted(self):
        e = Xoshiro256StarStarEngine(x for x in [1, 2, 3])
        assert e == Xoshiro256StarStarEngine([1, 2, 3])
    
    def test_numpy_sequence_accepted(self):
        e = Xoshiro256StarStarEngine(np.array([1, 2, 3], dtype=np.uint64))
        assert e == Xoshiro256StarStarEngine([1, 2, 3])
    
    def test_empty_sequence(self):
        e = Xoshiro256StarStarEngine([])
        assert e.state == (
            8429306141137033707,
            18287477391080771128,
            18023768310828461197,
            4324090831832642769,
        )
    
    def test_negative_seed_wraps(self):
        assert Xoshiro256StarStarEngine(-1) == Xoshiro256StarStarEngine(2 ** 64 - 1)
    
    def test_reseed_resets_stream(self, rng):
        first = rng()
        rng.discard(10)
        rng.seed()
        assert rng() == first
    
    def test_reseed_with_sequence(self):
        e = Xoshiro256StarStarEngine(99)
        e.seed([1, 2, 3])
        assert e == Xoshiro256StarStarEngine([1, 2, 3])
    
    @pytest.mark.parametrize("seed", [0, 1, 2 ** 64 - 1, [0], [0, 0, 0], []])
    def test_state_never_all_zero(self, seed):
        assert any(Xoshiro256StarStarEngine(seed).state)


class TestSeedValidation:
    
    def test_rejects_float(self):
        with pytest.raises(SeedError):
            Xoshiro256StarStarEngine(1.5)
    
    def test_rejects_bool(self):
        with pytest.raises(SeedError):
            Xoshiro256StarStarEngine(True)
    
    def test_rejects_non_int_element(self):
        with pytest.raises(SeedError, match=r"seed\[1\]"):
            Xoshiro256StarStarEngine([1, "2"])
    
    def test_rejects_oversized(self):
        with pytest.raises(SeedError):
            Xoshiro256StarStarEngine(2 ** 64)
    
    def test_seed_words_normalizes(self):
        assert seed_words(5) == [5]
        assert seed_words([-1, 3]) == [2 ** 64 - 1, 3]


class TestZeroStateFallback:
    """All-zero state after mixing gets word 1 patched."""
    
    def test_fallback_applied(self, monkeypatch):
        # Pick starting constants that cancel seed 0's mixer outputs
        acc = 0
        outputs = []
        for _ in range(4):
            acc, out = splitmix64(acc)
            outputs.append(out)
        cancelling = tuple((-m) & (2 ** 64 - 1) for m in outputs)
        monkeypatch.setattr(engine_module, "INITIAL_STATE", cancelling)
        
        e = Xoshiro256StarStarEngine(0)
        
        expected = Xoshiro256StarStarEngine()
        expected.set_state((0, ZERO_STATE_FALLBACK, 0, 0))
        expected.discard(256)
        assert e == expected
        assert [e() for _ in range(3)] == [
            2162815594878930038,
            79098514275471179,
            5049147978547711380,
        ]
    
    def test_initial_state_constants(self):
        assert INITIAL_STATE == (
            0x5FAF84EE2AA04CFF,
            0xB3A2EF3524D89987,
            0x5A82B68EF098F79D,
            0x5D7AA03298486D6E,
        )
        assert ZERO_STATE_FALLBACK == 0x1615CA18E55EE70C


class TestDiscard:
    
    @pytest.mark.parametrize("n", [0, 1, 17, 256, 1000])
    def test_discard_equals_draws(self, n):
        a = Xoshiro256StarStarEngine(31337)
        b = Xoshiro256StarStarEngine(31337)
        
        a.discard(n)
        for _ in range(n):
            b()
        
        assert a.state == b.state
    
    def test_discard_1000_then_draw(self):
        e = Xoshiro256StarStarEngine()
        e.discard(1000)
        assert e() == 16213869909098749992
    
    def test_negative_discard_rejected(self):
        with pytest.raises(ValidationError):
            Xoshiro256StarStarEngine().discard(-1)


class TestStateExportImport:
    
    def test_state_is_tuple(self, rng):
        assert isinstance(rng.state, tuple)
        assert len(rng.state) == 4
    
    def test_resume_continuation(self):
        a = Xoshiro256StarStarEngine(2024)
        a.discard(50)
        saved = a.state
        expected = [a() for _ in range(100)]
        
        b = Xoshiro256StarStarEngine(1)
        b.set_state(saved)
        assert [b() for _ in range(100)] == expected
    
    def test_set_state_list(self):
        e = Xoshiro256StarStarEngine()
        e.set_state([1, 2, 3, 4])
        assert e.state == (1, 2, 3, 4)
    
    def test_set_state_rejects_zero(self):
        with pytest.raises(ValidationError):
            Xoshiro256StarStarEngine().set_state((0, 0, 0, 0))
    
    def test_set_state_rejects_bad_word(self):
        e = Xoshiro256StarStarEngine()
        before = e.state
        with pytest.raises(ValidationError):
            e.set_state((1, 2, 3, -4))
        assert e.state == before


class TestEqualityAndCopy:
    
    def test_equal_when_same_seed(self):
        assert Xoshiro256StarStarEngine(5) == Xoshiro256StarStarEngine(5)
    
    def test_unequal_after_draw(self):
        a = Xoshiro256StarStarEngine(5)
        b = Xoshiro256StarStarEngine(5)
        a()
        assert a != b
        b()
        assert a == b
    
    def test_not_equal_to_other_types(self):
        assert Xoshiro256StarStarEngine() != (1, 2, 3, 4)
    
    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Xoshiro256StarStarEngine())
    
    def test_copy_is_independent(self):
        a = Xoshiro256StarStarEngine(9)
        b = a.copy()
        assert a == b
        a()
        assert a != b
    
    def test_copy_module(self):
        a = Xoshiro256StarStarEngine(9)
        assert copy.copy(a) == a
        assert copy.deepcopy(a) == a
        assert copy.copy(a) is not a
    
    def test_pickle_roundtrip(self):
        a = Xoshiro256StarStarEngine(9)
        a.discard(3)
        b = pickle.loads(pickle.dumps(a))
        assert b == a
        assert [b() for _ in range(5)] == [a() for _ in range(5)]
    
    def test_repr_contains_state(self):
        e = Xoshiro256StarStarEngine()
        e.set_state((1, 2, 3, 4))
        assert "0x0000000000000004" in repr(e)


class TestRange:
    
    def test_min_max(self):
        assert Xoshiro256StarStarEngine.min() == 0
        assert Xoshiro256StarStarEngine.max() == 2 ** 64 - 1
    
    def test_alias(self):
        assert RandomEngine is Xoshiro256StarStarEngine
