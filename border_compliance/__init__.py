"""
Border Compliance - checkpoint decision engine

Decides whether a cargo shipment may cross a border checkpoint from three
independent trust domains (driver identity, vehicle certification, cargo
manifest) and anchors a tamper-evident compliance proof on a ledger.

Layers:
- domain: pure aggregation, evaluation and override state machine
- application: ports and orchestration services
- infrastructure: HTTP/ledger adapters, stubs, observability
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
