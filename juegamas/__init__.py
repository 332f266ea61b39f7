"""JuegaMás - núcleo de reservas e incidencias del marketplace de recintos deportivos."""

__version__ = "0.1.0"
