"""
Console walkthrough of the payoff model: one contract of each nested kind
plus the plain European quotes.

Run: python docs/examples/price_examples.py
"""

import logging

from option_lattice.common.logging_config import setup_logging
from option_lattice.pricing_models.contracts import (
    CompoundCall,
    EuropeanCall,
    EuropeanPut,
    ExtendibleCall,
    ReloadableCall,
)
from option_lattice.utils.decorators.timing import timeit

logger = logging.getLogger("price_examples")


@timeit
def run_examples():
    extendible = ExtendibleCall(73, 0.25, 0.25, 0.02)
    logger.info("Extendible Call: %.6f", extendible.lattice_value(75, 1000))

    european_call = EuropeanCall(1470.37, 0.5, 0.12, 0.02)
    logger.info("European Call: %.6f", european_call.analytic_value(1400))

    european_put = EuropeanPut(63.75, 1, 0.2, 0.04)
    logger.info("European Put: %.6f", european_put.analytic_value(75))

    compound = CompoundCall(2.5, 3.0 / 12, 0.25, 0.01)
    logger.info("Compound Call: %.6f", compound.lattice_value(80, 30))

    reloadable = ReloadableCall(110, 2, 0.32, 0.0195)
    logger.info("Reloadable Call (spot 100): %.6f", reloadable.lattice_value(100, 200))


if __name__ == "__main__":
    setup_logging()
    run_examples()
