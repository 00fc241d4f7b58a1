"""Media library -- public URL resolution for stored image and icon paths."""

from showcase_api.lib.media.urls import asset_url

__all__ = ["asset_url"]
