"""Panel state and logic for a read-only OPC-UA diagnostic and monitoring tool.

Covers status-code texts, watchlist rows, trend series, error notifications,
node properties, the address-space tree, connection, crawler and certificate panels.
"""

__version__ = "0.1.0"