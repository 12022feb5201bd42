"""EcoMap Hawaiʻi: layered map of threatened plants, habitat and human land use."""

__version__ = "0.1.0"
