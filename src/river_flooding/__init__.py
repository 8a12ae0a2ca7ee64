"""River Flooding Digital Twin: hydrological impact model for the Godavari at Nashik."""

__version__ = "0.1.0"
