import pytest
from pixelcanvas.rng import LCGRandom, create_rng, int32, lcg_next, string_hash, utf16_units

def test_int32_wraparound():
    assert int32(0x7FFFFFFF) == 2147483647
    assert int32(0x80000000) == -2147483648
    assert int32(0xFFFFFFFF) == -1
    assert int32(0x100000005) == 5

def test_hash_known_values():
    # Regression constants
    assert string_hash("") == 0
    assert string_hash("a") == 97
    assert string_hash("abc") == 96354
    assert string_hash("test-seed-123") == 76766287
    assert string_hash("test-seed-123-top") == 1748474169
    assert string_hash("test-seed-123-main") == 1632097707
    assert string_hash("hello world") == 1794106052
    assert string_hash("The quick brown fox jumps over the lazy dog") == 609428141

def test_hash_counts_utf16_code_units():
    # The palette emoji is outside the BMP: it hashes as a surrogate pair
    assert list(utf16_units("\U0001F3A8")) == [0xD83C, 0xDFA8]
    assert string_hash("café \U0001F3A8") == 548523339

def test_hash_is_bounded_and_sensitive():
    seeds = ["x" * n for n in range(1, 40)] + ["seed-%d" % i for i in range(200)]
    for s in seeds:
        h = string_hash(s)
        assert 0 <= h <= 2**31
    assert string_hash("seed-a") != string_hash("seed-b")
    assert string_hash("abc") != string_hash("abd")
    assert string_hash("abc") != string_hash("bbc")

def test_hash_rejects_non_str():
    with pytest.raises(TypeError):
        string_hash(123)

def test_lcg_first_outputs():
    rng = create_rng(0)
    assert rng() == 0.23606797284446657
    assert rng() == 0.278566908556968
    assert rng() == 0.8195337599609047
    assert rng() == 0.6678668977692723

def test_lcg_from_main_seed():
    rng = create_rng(string_hash("test-seed-123-main"))
    assert [rng(), rng(), rng()] == [0.6637257966212928, 0.4176890302915126, 0.06921395286917686]

def test_same_seed_same_stream():
    a, b = create_rng(76766287), create_rng(76766287)
    xs = [a() for _ in range(500)]
    ys = [b() for _ in range(500)]
    assert xs == ys
    assert all(0.0 <= v < 1.0 for v in xs)

def test_lcg_state_object():
    r = LCGRandom(7)
    assert r.next32() == lcg_next(7) == 7 * 1664525 + 1013904223
    assert 0 <= r.state < 2**32
