"""Application use cases."""
from .track_losses import TrackLossesUseCase

__all__ = ['TrackLossesUseCase']
