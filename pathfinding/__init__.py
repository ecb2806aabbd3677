"""Search, maximum-flow, strong-component and cycle-detection algorithms for implicit graphs."""

__version__ = "4.3.0"