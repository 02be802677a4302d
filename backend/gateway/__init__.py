"""Trip Gateway: allowlisting, privacy-redacting cache for a trip tracker."""

__version__ = "0.1.0"
