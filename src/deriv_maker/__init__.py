"""Quote ladder decision core for a derivatives market maker."""

__version__ = "0.1.0"
