from option_lattice.pricing_models.binomial_tree import BinomialTree, VanillaTerms, lattice_value
from option_lattice.pricing_models.black_scholes import black_scholes, knock_out_terminal, normal_cdf
from option_lattice.pricing_models.contracts import (
    CONTRACT_TYPES,
    AmericanCall,
    AmericanPut,
    CompoundCall,
    Contract,
    EuropeanCall,
    EuropeanPut,
    ExtendibleCall,
    KnockOutCall,
    KnockOutPut,
    ReloadableCall,
    create_contract,
)

__all__ = [
    "black_scholes",
    "knock_out_terminal",
    "normal_cdf",
    "BinomialTree",
    "VanillaTerms",
    "lattice_value",
    "Contract",
    "EuropeanCall",
    "EuropeanPut",
    "AmericanCall",
    "AmericanPut",
    "KnockOutCall",
    "KnockOutPut",
    "CompoundCall",
    "ReloadableCall",
    "ExtendibleCall",
    "CONTRACT_TYPES",
    "create_contract",
]
