from option_lattice.utils.decorators.timing import timeit

__all__ = ["timeit"]
