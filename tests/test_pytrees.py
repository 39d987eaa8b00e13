import jax
import jax.numpy as jnp

from fracx import Fraction


def test_fraction_has_no_leaves():
    """A Fraction is static pytree metadata, not a pair of traced integers"""
    assert jax.tree.leaves(Fraction(1, 2)) == []
    leaves = jax.tree.leaves({"scale": Fraction(3, 4), "x": jnp.ones(2)})
    assert len(leaves) == 1


def test_tree_map_keeps_fraction():
    tree = (Fraction(1, 3), jnp.arange(3.0))
    result = jax.tree.map(lambda x: x * 2, tree)
    assert isinstance(result[0], Fraction)
    assert result[0] == Fraction(1, 3)
    assert jnp.allclose(result[1], jnp.array([0.0, 2.0, 4.0]))


def test_flatten_unflatten():
    f = Fraction(-6, 4)
    leaves, treedef = jax.tree.flatten(f)
    restored = jax.tree.unflatten(treedef, leaves)
    assert isinstance(restored, Fraction)
    assert tuple(restored) == (-3, 2)


def test_fraction_passes_through_jit():
    @jax.jit
    def scale(x, f: Fraction):
        return x * f.to_double(), f.reciprocal()

    value, inverse = scale(jnp.array([2.0, 4.0]), Fraction(1, 4))
    assert jnp.allclose(value, jnp.array([0.5, 1.0]))
    assert isinstance(inverse, Fraction)
    assert inverse == Fraction(4)
