"""Backend fetcher for the tracking API."""

from .service import UpstreamFetcher, UpstreamResponse

__all__ = ["UpstreamFetcher", "UpstreamResponse"]
