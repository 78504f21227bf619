import pytest

from bulbit.textures import CheckerTexture, ConstantTexture, Texture, TexturePool


def test_texture_is_abstract():
    with pytest.raises(TypeError):
        Texture()


def test_constant_texture_ignores_uv():
    t = ConstantTexture(2.5)
    assert t.evaluate((0.3, 0.7)) == 2.5
    assert t.evaluate((0.9, 0.1)) == 2.5


def test_checker_alternates_cells():
    a = ConstantTexture("a")
    b = ConstantTexture("b")
    t = CheckerTexture(a, b, 10)
    assert t.resolution == (10.0, 10.0)
    assert t.evaluate((0.05, 0.05)) == "b"
    assert t.evaluate((0.15, 0.05)) == "a"
    assert t.evaluate((0.15, 0.15)) == "b"


def test_checker_with_rectangular_resolution():
    t = CheckerTexture(ConstantTexture(1.0), ConstantTexture(0.0), (2, 4))
    assert t.evaluate((0.25, 0.3)) == 1.0
    assert t.evaluate((0.25, 0.1)) == 0.0


def test_pool_shares_equal_constants():
    pool = TexturePool()
    first = pool.create_constant(0.5)
    assert pool.create_constant(0.5) is first
    assert pool.create_constant(0.6) is not first
    assert len(pool) == 2


def test_pool_normalizes_spectrum_values():
    pool = TexturePool()
    t = pool.create_constant([0.1, 0.2, 0.3])
    assert pool.create_constant((0.1, 0.2, 0.3)) is t
    assert t.evaluate((0.0, 0.0)) == (0.1, 0.2, 0.3)


def test_pool_shares_checkers():
    pool = TexturePool()
    a = pool.create_constant(0.75)
    b = pool.create_constant(0.3)
    c1 = pool.create_checker(a, b, 20)
    assert pool.create_checker(a, b, (20, 20)) is c1
    assert pool.create_checker(b, a, 20) is not c1


def test_clear_forgets_textures():
    pool = TexturePool()
    first = pool.create_constant(1.0)
    pool.clear()
    assert len(pool) == 0
    assert pool.create_constant(1.0) is not first