"""placefolder — bookmark project folders by name."""

__version__ = "0.1.0"
