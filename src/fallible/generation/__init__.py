from fallible.generation.strategies import optional_functions, optionals, result_functions, results

__all__ = [
    "optionals",
    "results",
    "optional_functions",
    "result_functions",
]
