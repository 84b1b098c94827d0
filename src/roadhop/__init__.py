"""ROADHOP - endless lane-crossing arcade game."""

__version__ = "0.1.0"
