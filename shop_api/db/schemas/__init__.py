# Largest value a 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1
