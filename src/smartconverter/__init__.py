"""SmartConverter: convert one value across temperature, length, weight and speed units."""

__version__ = "1.0.0"
