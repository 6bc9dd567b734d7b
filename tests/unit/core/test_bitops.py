"""
Tests for sparkyrng.core.bitops
"""

from sparkyrng.core.bitops import U64_MASK, rotl64, mul_wide


class TestRotl64:
    
    def test_top_bit_wraps(self):
        assert rotl64(1 << 63, 1) == 1
    
    def test_stays_in_64_bits(self):
        assert rotl64(U64_MASK, 45) == U64_MASK
    
    def test_known_rotation(self):
        assert rotl64(0x0123456789ABCDEF, 8) == 0x23456789ABCDEF01
    
    def test_inverse(self):
        x = 0xDEADBEEFCAFEBABE
        assert rotl64(rotl64(x, 7), 57) == x


class TestMulWide:
    
    def test_small(self):
        assert mul_wide(3, 5) == (0, 15)
    
    def test_max_squared(self):
        # (2^64 - 1)^2 = 2^128 - 2^65 + 1
        assert mul_wide(U64_MASK, U64_MASK) == (U64_MASK - 1, 1)
    
    def test_power_of_two(self):
        assert mul_wide(1 << 63, 4) == (2, 0)
