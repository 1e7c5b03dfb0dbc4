"""relicscan: relic/artifact scan core for Genshin Impact and Honkai: Star Rail."""

__version__ = "0.3.0"
