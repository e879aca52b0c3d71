# protocol_constants.py

DEFAULT_ITERATIONS = 16  # Miller-Rabin rounds, false positive rate <= 4^-16 per candidate
RSA_PUBLIC_EXPONENT = 65537
