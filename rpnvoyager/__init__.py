"""A terminal RPN calculator modelled on the Voyager-series pocket calculators."""

__version__ = "0.9.16"