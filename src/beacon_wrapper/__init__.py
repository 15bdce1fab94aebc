"""
Beacon API wrapper that emulates blob pruning.

Sits in front of a beacon node and forwards the endpoints used by blob
archivers. Blob sidecar requests for slots older than the retention window
get an empty list, as a pruning production node would answer.
"""

__version__ = "0.1.0"
