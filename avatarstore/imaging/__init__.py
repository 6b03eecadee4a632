"""Image normalization applied to avatars before they are stored."""

from avatarstore.imaging.resize import Passthrough, Resized, resize, resize_outcome

__all__ = ["Passthrough", "Resized", "resize", "resize_outcome"]
