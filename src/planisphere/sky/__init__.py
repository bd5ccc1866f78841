from .observed import ObservedSky

__all__ = ["ObservedSky"]
