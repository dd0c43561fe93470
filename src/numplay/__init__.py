"""numplay: Fibonacci-style sequence terms and a number guessing game."""

__version__ = "0.1.0"
