"""util package.

This package provides helpers written once against the FieldGadget capability.

Modules:
    - utility_functions: Contains division, exponentiation and summation of field gadgets.
"""
